import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gym_crm.core import security
from gym_crm.crud import trainee as trainee_crud
from gym_crm.errors.profile_errors import (
    PasswordMismatchError,
    TraineeNotFoundError,
    UsernameAlreadyExistsError,
    WeakPasswordError,
)
from gym_crm.models import Trainee
from gym_crm.schemas.trainee import TraineeCreate, TraineeUpdate
from gym_crm.utils.db_errors import is_unique_violation
from gym_crm.utils.username import generate_username

logger = logging.getLogger(__name__)


class TraineeService:
    """
    Сервис для работы с учениками (trainees).
    Использует CRUD операции для выполнения бизнес-логики.
    """

    def __init__(self, db: Session):
        self.db = db

    def _username_exists(self, username: str) -> bool:
        return trainee_crud.exists_by_username(self.db, username)

    def _persist_new(self, trainee: Trainee) -> Trainee:
        # the unique constraint is the real guard, the pre-check only saves a round trip
        try:
            return trainee_crud.save(self.db, trainee)
        except IntegrityError as e:
            if not is_unique_violation(e, "username"):
                raise
            logger.warning(f"Unique constraint rejected trainee {trainee.username}")
            raise UsernameAlreadyExistsError(trainee.username) from e

    def register(
        self,
        first_name: str,
        last_name: str,
        password: str,
        address: Optional[str] = None,
        date_of_birth: Optional[date] = None,
    ) -> Trainee:
        """
        Registers a new trainee: generates a unique username, hashes the password and persists.

        Raises:
            ValidationError: invalid names or date of birth
            UsernameGenerationError: no free username could be generated
        """
        data = TraineeCreate(
            first_name=first_name,
            last_name=last_name,
            password=password,
            address=address,
            date_of_birth=date_of_birth,
        )
        username = generate_username(data.first_name, data.last_name, self._username_exists)

        trainee = Trainee(
            first_name=data.first_name,
            last_name=data.last_name,
            username=username,
            password=security.hash_password(data.password),
            address=data.address,
            date_of_birth=data.date_of_birth,
            is_active=True,
        )
        logger.info(f"Registering trainee {username}")
        return self._persist_new(trainee)

    def save(self, trainee: Trainee) -> Trainee:
        """
        Persists a pre-built trainee. The password is stored as given.
        """
        if not trainee.username:
            trainee.username = generate_username(trainee.first_name, trainee.last_name, self._username_exists)
        elif self._username_exists(trainee.username):
            logger.warning(f"Trainee with username {trainee.username} already exists")
            raise UsernameAlreadyExistsError(trainee.username)

        return self._persist_new(trainee)

    def get_by_id(self, trainee_id: int) -> Optional[Trainee]:
        return trainee_crud.get_by_id(self.db, trainee_id)

    def get_by_username(self, username: str) -> Optional[Trainee]:
        return trainee_crud.get_by_username(self.db, username)

    def get_all(self) -> List[Trainee]:
        return trainee_crud.get_all(self.db)

    def delete_by_username(self, username: str) -> None:
        """
        Deletes a trainee by username. Deleting an unknown username is a no-op.
        """
        if not trainee_crud.exists_by_username(self.db, username):
            logger.warning(f"Trainee with username {username} not found, nothing to delete")
            return

        trainee = trainee_crud.get_by_username(self.db, username)
        trainee_crud.delete(self.db, trainee)
        logger.info(f"Trainee {username} deleted")

    def delete(self, trainee: Trainee) -> None:
        # No existence check here, unlike delete_by_username
        trainee_crud.delete(self.db, trainee)

    def update(self, trainee: Trainee) -> Trainee:
        if not trainee_crud.exists_by_id(self.db, trainee.id):
            logger.warning(f"Trainee with id {trainee.id} not found, update skipped")
            raise TraineeNotFoundError(f"Trainee with id {trainee.id} not found")
        return trainee_crud.update(self.db, trainee)

    def update_profile(self, username: str, trainee_data: TraineeUpdate) -> Trainee:
        trainee = trainee_crud.get_by_username(self.db, username)
        if not trainee:
            raise TraineeNotFoundError(f"Trainee {username} not found")

        for field, value in trainee_data.model_dump(exclude_unset=True).items():
            setattr(trainee, field, value)
        return self.update(trainee)

    def activate(self, trainee: Trainee) -> None:
        """Marks the trainee active in memory only; persist with `update` if needed."""
        trainee.is_active = True

    def deactivate(self, trainee: Trainee) -> None:
        """Marks the trainee inactive in memory only; persist with `update` if needed."""
        trainee.is_active = False

    def set_active(self, username: str, is_active: bool) -> Trainee:
        """
        Persisted variant of activate/deactivate.
        """
        trainee = trainee_crud.get_by_username(self.db, username)
        if not trainee:
            raise TraineeNotFoundError(f"Trainee {username} not found")

        if is_active:
            self.activate(trainee)
        else:
            self.deactivate(trainee)
        logger.info(f"Trainee {username} is_active set to {is_active}")
        return self.update(trainee)

    def change_password(self, trainee: Trainee, old_password: str, new_password: str) -> None:
        """
        Changes the trainee password after checking the policy and the old password.

        Raises:
            WeakPasswordError: the new password does not satisfy the policy
            PasswordMismatchError: the old password does not match the stored one
            TraineeNotFoundError: the trainee is not persisted
        """
        if not security.verify(new_password):
            raise WeakPasswordError("New password does not satisfy the password policy")
        if not security.password_matches(old_password, trainee.password):
            logger.warning(f"Old password mismatch for trainee {trainee.username}")
            raise PasswordMismatchError("Old password is incorrect")

        trainee.password = security.hash_password(new_password)
        self.update(trainee)
        logger.info(f"Password changed for trainee {trainee.username}")

    def authenticate(self, username: str, password: str) -> bool:
        trainee = trainee_crud.get_by_username(self.db, username)
        if not trainee or not trainee.is_active:
            return False
        return security.password_matches(password, trainee.password)
