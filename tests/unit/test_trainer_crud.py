from datetime import datetime

from sqlalchemy.orm import Session

from gym_crm.crud import trainer as crud
from gym_crm.models import Trainee, Trainer, TrainingType


class TestTrainerCRUD:
    """Тесты для CRUD операций с тренерами"""

    def test_get_by_username(self, db_session: Session, test_trainer: Trainer):
        assert crud.get_by_username(db_session, "Anna.Smith") is test_trainer
        assert crud.get_by_username(db_session, "Nobody") is None

    def test_exists(self, db_session: Session, test_trainer: Trainer):
        assert crud.exists_by_id(db_session, test_trainer.id)
        assert crud.exists_by_username(db_session, "Anna.Smith")
        assert not crud.exists_by_username(db_session, "Anna.Smith1")

    def test_update_specialization(self, db_session: Session, test_trainer: Trainer):
        test_trainer.specialization = TrainingType.RESISTANCE

        crud.update(db_session, test_trainer)

        db_session.expire_all()
        assert crud.get_by_id(db_session, test_trainer.id).specialization == TrainingType.RESISTANCE

    def test_get_not_assigned_to_trainee(
        self, db_session: Session, test_trainee: Trainee, test_trainer: Trainer, make_training
    ):
        free_trainer = crud.save(db_session, Trainer(
            first_name="Bob",
            last_name="Stone",
            username="Bob.Stone",
            password="hashed",
            specialization=TrainingType.FITNESS,
        ))
        crud.save(db_session, Trainer(
            first_name="Carl",
            last_name="Inactive",
            username="Carl.Inactive",
            password="hashed",
            specialization=TrainingType.FITNESS,
            is_active=False,
        ))
        make_training(datetime(2026, 4, 1, 10, 0))

        result = crud.get_not_assigned_to_trainee(db_session, "John.Doe")

        assert [t.username for t in result] == [free_trainer.username]

    def test_get_not_assigned_to_unknown_trainee_lists_all_active(self, db_session: Session, test_trainer: Trainer):
        result = crud.get_not_assigned_to_trainee(db_session, "Nobody")

        assert result == [test_trainer]
