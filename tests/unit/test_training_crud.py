from datetime import date, datetime, timedelta

import pytest
from sqlalchemy.orm import Session

from gym_crm.crud import training as crud
from gym_crm.models import Trainee, Trainer, Training, TrainingType


class TestTrainingCRUD:
    """Тесты для CRUD операций с тренировками"""

    def test_day_range(self):
        start, end = crud.day_range(date(2026, 3, 1), date(2026, 3, 5))

        assert start == datetime(2026, 3, 1, 0, 0, 0)
        assert end == datetime(2026, 3, 6, 0, 0, 0)

    def test_get_by_id_not_found(self, db_session: Session):
        assert crud.get_by_id(db_session, 99999) is None

    def test_save_assigns_id(self, db_session: Session, test_trainee: Trainee, test_trainer: Trainer):
        training = Training(
            trainee=test_trainee,
            trainer=test_trainer,
            training_name="Evening stretching",
            training_type=TrainingType.STRETCHING,
            training_date=datetime(2026, 5, 4, 18, 30),
            duration=45,
        )

        saved = crud.save(db_session, training)

        assert saved is training
        assert saved.id is not None
        fetched = crud.get_by_id(db_session, saved.id)
        assert fetched.training_name == "Evening stretching"
        assert fetched.trainee.username == test_trainee.username
        assert fetched.trainer.username == test_trainer.username

    def test_exists_by_id(self, db_session: Session, make_training):
        training = make_training(datetime(2026, 5, 4, 10, 0))

        assert crud.exists_by_id(db_session, training.id)
        assert not crud.exists_by_id(db_session, training.id + 1000)

    def test_get_all(self, db_session: Session, make_training):
        first = make_training(datetime(2026, 5, 4, 10, 0))
        second = make_training(datetime(2026, 5, 5, 10, 0))

        ids = {t.id for t in crud.get_all(db_session)}

        assert ids == {first.id, second.id}

    def test_single_day_range_includes_whole_day_only(self, db_session: Session, make_training):
        day = datetime(2026, 5, 10)
        at_midnight = make_training(day)
        at_noon = make_training(day + timedelta(hours=12))
        last_second = make_training(day + timedelta(hours=23, minutes=59, seconds=59))
        last_half_second = make_training(day + timedelta(hours=23, minutes=59, seconds=59, milliseconds=500))
        make_training(day - timedelta(seconds=1))
        make_training(day + timedelta(days=1))

        result = crud.get_trainings_by_trainee_username_and_date_range(
            db_session, "John.Doe", day.date(), day.date(), "Anna.Smith", TrainingType.YOGA
        )

        assert {t.id for t in result} == {at_midnight.id, at_noon.id, last_second.id, last_half_second.id}

    def test_trainee_query_filters_trainer_and_type(self, db_session: Session, make_training):
        other_trainer = Trainer(
            first_name="Bob",
            last_name="Stone",
            username="Bob.Stone",
            password="hashed",
            specialization=TrainingType.YOGA,
        )
        db_session.add(other_trainer)
        matching = make_training(datetime(2026, 6, 2, 9, 0))
        make_training(datetime(2026, 6, 2, 10, 0), training_type=TrainingType.ZUMBA)
        make_training(datetime(2026, 6, 2, 11, 0), trainer=other_trainer)

        result = crud.get_trainings_by_trainee_username_and_date_range(
            db_session, "John.Doe", date(2026, 6, 1), date(2026, 6, 30), "Anna.Smith", TrainingType.YOGA
        )

        assert [t.id for t in result] == [matching.id]

    def test_trainer_query_filters_trainee(self, db_session: Session, make_training):
        other_trainee = Trainee(
            first_name="Mary",
            last_name="Jane",
            username="Mary.Jane",
            password="hashed",
        )
        db_session.add(other_trainee)
        matching = make_training(datetime(2026, 7, 15, 8, 0))
        make_training(datetime(2026, 7, 15, 9, 0), trainee=other_trainee)

        result = crud.get_trainings_by_trainer_username_and_date_range(
            db_session, "Anna.Smith", date(2026, 7, 15), date(2026, 7, 15), "John.Doe", TrainingType.YOGA
        )

        assert [t.id for t in result] == [matching.id]

    @pytest.mark.parametrize("trainee_username", ["Unknown.User", ""])
    def test_unknown_trainee_returns_empty(self, db_session: Session, make_training, trainee_username):
        make_training(datetime(2026, 7, 15, 8, 0))

        result = crud.get_trainings_by_trainee_username_and_date_range(
            db_session, trainee_username, date(2026, 7, 1), date(2026, 7, 31), "Anna.Smith", TrainingType.YOGA
        )

        assert result == []
