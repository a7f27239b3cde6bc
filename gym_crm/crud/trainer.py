import logging
from typing import List, Optional

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from gym_crm.database import transactional
from gym_crm.models import Trainee, Trainer, Training

logger = logging.getLogger(__name__)


def get_by_id(db: Session, trainer_id: int) -> Optional[Trainer]:
    logger.info("Getting a trainer by id")
    return db.get(Trainer, trainer_id)


def get_by_username(db: Session, username: str) -> Optional[Trainer]:
    logger.info("Getting a trainer by username")
    return db.query(Trainer).filter(Trainer.username == username).first()


def get_all(db: Session) -> List[Trainer]:
    logger.info("Getting a list of all trainers in the DB")
    return db.query(Trainer).all()


def save(db: Session, trainer: Trainer) -> Trainer:
    logger.info("Trying to save a trainer to the DB")
    with transactional(db):
        db.add(trainer)
    return trainer


def update(db: Session, trainer: Trainer) -> Trainer:
    logger.info("Trying to update a trainer in the DB")
    with transactional(db):
        merged = db.merge(trainer)
    return merged


def exists_by_id(db: Session, trainer_id: int) -> bool:
    logger.info("Checking if trainer exists by id")
    return db.query(exists().where(Trainer.id == trainer_id)).scalar()


def exists_by_username(db: Session, username: str) -> bool:
    logger.info("Checking if trainer exists by username")
    return db.query(exists().where(Trainer.username == username)).scalar()


def get_not_assigned_to_trainee(db: Session, trainee_username: str) -> List[Trainer]:
    """
    Active trainers that have no training with the given trainee yet.
    """
    logger.info("Getting trainers not assigned to a trainee")
    assigned = (
        select(Training.trainer_id)
        .join(Training.trainee)
        .where(Trainee.username == trainee_username, Training.trainer_id.isnot(None))
    )
    return (
        db.query(Trainer)
        .filter(Trainer.is_active == True, Trainer.id.notin_(assigned))
        .order_by(Trainer.last_name, Trainer.first_name)
        .all()
    )
