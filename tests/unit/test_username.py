import pytest

from gym_crm.errors.profile_errors import UsernameGenerationError
from gym_crm.utils.username import generate_username


def test_free_base_username():
    tried = []

    def exists(candidate):
        tried.append(candidate)
        return False

    assert generate_username("John", "Doe", exists) == "John.Doe"
    assert tried == ["John.Doe"]


def test_serial_suffix_on_collision():
    taken = {"John.Doe", "John.Doe1"}

    assert generate_username("John", "Doe", lambda c: c in taken) == "John.Doe2"


def test_names_are_stripped():
    assert generate_username(" John ", "Doe ", lambda c: False) == "John.Doe"


def test_exhausted_attempts_raise():
    with pytest.raises(UsernameGenerationError):
        generate_username("John", "Doe", lambda c: True, max_attempts=3)
