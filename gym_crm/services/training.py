import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from gym_crm.crud import trainee as trainee_crud
from gym_crm.crud import trainer as trainer_crud
from gym_crm.crud import training as training_crud
from gym_crm.errors.profile_errors import (
    InactiveProfileError,
    TraineeNotFoundError,
    TrainerNotFoundError,
)
from gym_crm.errors.training_errors import TrainingNotFoundError
from gym_crm.models import Training
from gym_crm.schemas.training import TrainingCreate, TrainingSearch

logger = logging.getLogger(__name__)


class TrainingService:
    """
    Сервис для работы с тренировками.
    Тренировки после создания не изменяются и не удаляются.
    """

    def __init__(self, db: Session):
        self.db = db

    def add_training(self, training_data: TrainingCreate) -> Training:
        """
        Schedules a training between an existing trainee and trainer.

        Raises:
            TraineeNotFoundError / TrainerNotFoundError: unknown participant
            InactiveProfileError: a participant is deactivated
        """
        trainee = trainee_crud.get_by_username(self.db, training_data.trainee_username)
        if not trainee:
            raise TraineeNotFoundError(f"Trainee {training_data.trainee_username} not found")
        trainer = trainer_crud.get_by_username(self.db, training_data.trainer_username)
        if not trainer:
            raise TrainerNotFoundError(f"Trainer {training_data.trainer_username} not found")

        if not trainee.is_active:
            raise InactiveProfileError(f"Trainee {trainee.username} is inactive")
        if not trainer.is_active:
            raise InactiveProfileError(f"Trainer {trainer.username} is inactive")

        training = Training(
            trainee=trainee,
            trainer=trainer,
            training_name=training_data.training_name,
            training_type=training_data.training_type,
            training_date=training_data.training_date,
            duration=training_data.duration,
        )
        logger.info(f"Scheduling training {training.training_name} for {trainee.username} with {trainer.username}")
        return training_crud.save(self.db, training)

    def get_by_id(self, training_id: int) -> Optional[Training]:
        return training_crud.get_by_id(self.db, training_id)

    def get_training(self, training_id: int) -> Training:
        training = training_crud.get_by_id(self.db, training_id)
        if not training:
            raise TrainingNotFoundError(f"Training with id {training_id} not found")
        return training

    def get_all(self) -> List[Training]:
        return training_crud.get_all(self.db)

    def exists_by_id(self, training_id: int) -> bool:
        return training_crud.exists_by_id(self.db, training_id)

    def get_trainee_trainings(self, search: TrainingSearch) -> List[Training]:
        return training_crud.get_trainings_by_trainee_username_and_date_range(
            self.db,
            search.trainee_username,
            search.date_from,
            search.date_to,
            search.trainer_username,
            search.training_type,
        )

    def get_trainer_trainings(self, search: TrainingSearch) -> List[Training]:
        return training_crud.get_trainings_by_trainer_username_and_date_range(
            self.db,
            search.trainer_username,
            search.date_from,
            search.date_to,
            search.trainee_username,
            search.training_type,
        )
