import logging
from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

from sqlalchemy import exists
from sqlalchemy.orm import Session

from gym_crm.database import transactional
from gym_crm.models import Trainee, Trainer, Training, TrainingType

logger = logging.getLogger(__name__)

DAY_START = time(0, 0, 0)


def day_range(date_from: date, date_to: date) -> Tuple[datetime, datetime]:
    """
    Turns an inclusive day range into [date_from 00:00:00, date_to + 1 day 00:00:00).
    The upper bound is exclusive, so any time of day on date_to matches.
    """
    return datetime.combine(date_from, DAY_START), datetime.combine(date_to + timedelta(days=1), DAY_START)


def get_by_id(db: Session, training_id: int) -> Optional[Training]:
    logger.info("Getting a training by id")
    return db.get(Training, training_id)


def get_all(db: Session) -> List[Training]:
    # Порядок не гарантирован
    logger.info("Getting a list of all trainings in the DB")
    return db.query(Training).all()


def save(db: Session, training: Training) -> Training:
    logger.info("Trying to save a training to the DB")
    with transactional(db):
        db.add(training)
    return training


def exists_by_id(db: Session, training_id: int) -> bool:
    logger.info("Checking if training exists by id")
    return db.query(exists().where(Training.id == training_id)).scalar()


def get_trainings_by_trainee_username_and_date_range(
    db: Session,
    trainee_username: str,
    date_from: date,
    date_to: date,
    trainer_username: str,
    training_type: TrainingType,
) -> List[Training]:
    """
    Trainings of a trainee with a given trainer and type, inside the inclusive day range.
    """
    logger.info("Trying to get trainings by criteria from DB")
    start, end = day_range(date_from, date_to)

    return (
        db.query(Training)
        .join(Training.trainee)
        .join(Training.trainer)
        .filter(
            Trainee.username == trainee_username,
            Training.training_date >= start,
            Training.training_date < end,
            Trainer.username == trainer_username,
            Training.training_type == training_type,
        )
        .all()
    )


def get_trainings_by_trainer_username_and_date_range(
    db: Session,
    trainer_username: str,
    date_from: date,
    date_to: date,
    trainee_username: str,
    training_type: TrainingType,
) -> List[Training]:
    """
    Trainings of a trainer with a given trainee and type, inside the inclusive day range.
    """
    logger.info("Trying to get trainings by criteria from DB")
    start, end = day_range(date_from, date_to)

    return (
        db.query(Training)
        .join(Training.trainer)
        .join(Training.trainee)
        .filter(
            Trainer.username == trainer_username,
            Training.training_date >= start,
            Training.training_date < end,
            Trainee.username == trainee_username,
            Training.training_type == training_type,
        )
        .all()
    )
