import re
from datetime import date

NAME_PATTERN = re.compile(r'^[a-zA-Zа-яА-ЯёЁ\s-]+$')


def validate_name(v: str) -> str:
    if not v.strip():
        raise ValueError('Field cannot be empty')
    if not NAME_PATTERN.match(v):
        raise ValueError('Name can only contain letters, spaces, and hyphens')
    return v.strip()


def validate_birth_date(v: date | None) -> date | None:
    if v is not None and v > date.today():
        raise ValueError('Date of birth cannot be in the future')
    return v


def reject_null(v):
    # explicit null on a NOT NULL column; leaving the field out is the way to keep it
    if v is None:
        raise ValueError('Field cannot be null')
    return v
