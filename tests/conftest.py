import os

# must be set before gym_crm.config / gym_crm.database are imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ["TESTING"] = "true"

from datetime import date, datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from gym_crm.database import init_db
from gym_crm.models import Trainee, Trainer, Training, TrainingType


@pytest.fixture(scope="function")
def db_session():
    """
    Одна сессия SQLite в памяти на каждый тест.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        engine.dispose()


@pytest.fixture
def test_trainee(db_session: Session) -> Trainee:
    trainee = Trainee(
        first_name="John",
        last_name="Doe",
        username="John.Doe",
        password="hashed-password",
        address="123 Street",
        date_of_birth=date(1990, 1, 1),
        is_active=True,
    )
    db_session.add(trainee)
    db_session.flush()
    return trainee


@pytest.fixture
def test_trainer(db_session: Session) -> Trainer:
    trainer = Trainer(
        first_name="Anna",
        last_name="Smith",
        username="Anna.Smith",
        password="hashed-password",
        specialization=TrainingType.YOGA,
        is_active=True,
    )
    db_session.add(trainer)
    db_session.flush()
    return trainer


@pytest.fixture
def make_training(db_session: Session, test_trainee: Trainee, test_trainer: Trainer):
    """
    Фабрика тренировок для тестов запросов по диапазону дат.
    """
    def _make(training_date: datetime, training_type: TrainingType = TrainingType.YOGA, trainee=None, trainer=None):
        training = Training(
            trainee=trainee or test_trainee,
            trainer=trainer or test_trainer,
            training_name="Morning session",
            training_type=training_type,
            training_date=training_date,
            duration=60,
        )
        db_session.add(training)
        db_session.flush()
        return training

    return _make
