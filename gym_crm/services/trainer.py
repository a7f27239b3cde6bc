import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from gym_crm.core import security
from gym_crm.crud import trainer as trainer_crud
from gym_crm.errors.profile_errors import (
    PasswordMismatchError,
    TrainerNotFoundError,
    UsernameAlreadyExistsError,
    WeakPasswordError,
)
from gym_crm.models import Trainer, TrainingType
from gym_crm.schemas.trainer import TrainerCreate, TrainerUpdate
from gym_crm.utils.db_errors import is_unique_violation
from gym_crm.utils.username import generate_username

logger = logging.getLogger(__name__)


class TrainerService:
    """
    Сервис для работы с тренерами.
    Тренеры не удаляются, только деактивируются.
    """

    def __init__(self, db: Session):
        self.db = db

    def _username_exists(self, username: str) -> bool:
        return trainer_crud.exists_by_username(self.db, username)

    def _persist_new(self, trainer: Trainer) -> Trainer:
        try:
            return trainer_crud.save(self.db, trainer)
        except IntegrityError as e:
            if not is_unique_violation(e, "username"):
                raise
            logger.warning(f"Unique constraint rejected trainer {trainer.username}")
            raise UsernameAlreadyExistsError(trainer.username) from e

    def register(
        self,
        first_name: str,
        last_name: str,
        password: str,
        specialization: TrainingType,
    ) -> Trainer:
        data = TrainerCreate(
            first_name=first_name,
            last_name=last_name,
            password=password,
            specialization=specialization,
        )
        username = generate_username(data.first_name, data.last_name, self._username_exists)

        trainer = Trainer(
            first_name=data.first_name,
            last_name=data.last_name,
            username=username,
            password=security.hash_password(data.password),
            specialization=data.specialization,
            is_active=True,
        )
        logger.info(f"Registering trainer {username}")
        return self._persist_new(trainer)

    def save(self, trainer: Trainer) -> Trainer:
        if not trainer.username:
            trainer.username = generate_username(trainer.first_name, trainer.last_name, self._username_exists)
        elif self._username_exists(trainer.username):
            logger.warning(f"Trainer with username {trainer.username} already exists")
            raise UsernameAlreadyExistsError(trainer.username)

        return self._persist_new(trainer)

    def get_by_id(self, trainer_id: int) -> Optional[Trainer]:
        return trainer_crud.get_by_id(self.db, trainer_id)

    def get_by_username(self, username: str) -> Optional[Trainer]:
        return trainer_crud.get_by_username(self.db, username)

    def get_all(self) -> List[Trainer]:
        return trainer_crud.get_all(self.db)

    def get_not_assigned_to_trainee(self, trainee_username: str) -> List[Trainer]:
        return trainer_crud.get_not_assigned_to_trainee(self.db, trainee_username)

    def update(self, trainer: Trainer) -> Trainer:
        if not trainer_crud.exists_by_id(self.db, trainer.id):
            logger.warning(f"Trainer with id {trainer.id} not found, update skipped")
            raise TrainerNotFoundError(f"Trainer with id {trainer.id} not found")
        return trainer_crud.update(self.db, trainer)

    def update_profile(self, username: str, trainer_data: TrainerUpdate) -> Trainer:
        trainer = trainer_crud.get_by_username(self.db, username)
        if not trainer:
            raise TrainerNotFoundError(f"Trainer {username} not found")

        for field, value in trainer_data.model_dump(exclude_unset=True).items():
            setattr(trainer, field, value)
        return self.update(trainer)

    def activate(self, trainer: Trainer) -> None:
        trainer.is_active = True

    def deactivate(self, trainer: Trainer) -> None:
        trainer.is_active = False

    def set_active(self, username: str, is_active: bool) -> Trainer:
        trainer = trainer_crud.get_by_username(self.db, username)
        if not trainer:
            raise TrainerNotFoundError(f"Trainer {username} not found")

        if is_active:
            self.activate(trainer)
        else:
            self.deactivate(trainer)
        logger.info(f"Trainer {username} is_active set to {is_active}")
        return self.update(trainer)

    def change_password(self, trainer: Trainer, old_password: str, new_password: str) -> None:
        if not security.verify(new_password):
            raise WeakPasswordError("New password does not satisfy the password policy")
        if not security.password_matches(old_password, trainer.password):
            logger.warning(f"Old password mismatch for trainer {trainer.username}")
            raise PasswordMismatchError("Old password is incorrect")

        trainer.password = security.hash_password(new_password)
        self.update(trainer)
        logger.info(f"Password changed for trainer {trainer.username}")

    def authenticate(self, username: str, password: str) -> bool:
        trainer = trainer_crud.get_by_username(self.db, username)
        if not trainer or not trainer.is_active:
            return False
        return security.password_matches(password, trainer.password)
