import logging
from typing import List, Optional

from sqlalchemy import exists
from sqlalchemy.orm import Session

from gym_crm.database import transactional
from gym_crm.models import Trainee

logger = logging.getLogger(__name__)


def get_by_id(db: Session, trainee_id: int) -> Optional[Trainee]:
    logger.info("Getting a trainee by id")
    return db.get(Trainee, trainee_id)


def get_by_username(db: Session, username: str) -> Optional[Trainee]:
    logger.info("Getting a trainee by username")
    return db.query(Trainee).filter(Trainee.username == username).first()


def get_all(db: Session) -> List[Trainee]:
    logger.info("Getting a list of all trainees in the DB")
    return db.query(Trainee).all()


def save(db: Session, trainee: Trainee) -> Trainee:
    logger.info("Trying to save a trainee to the DB")
    with transactional(db):
        db.add(trainee)
    return trainee


def update(db: Session, trainee: Trainee) -> Trainee:
    """
    Merges the (possibly detached) trainee into the session and persists it.
    Returns the session-bound instance.
    """
    logger.info("Trying to update a trainee in the DB")
    with transactional(db):
        merged = db.merge(trainee)
    return merged


def delete(db: Session, trainee: Trainee) -> None:
    logger.info("Trying to delete a trainee from the DB")
    with transactional(db):
        db.delete(db.merge(trainee))


def exists_by_id(db: Session, trainee_id: int) -> bool:
    logger.info("Checking if trainee exists by id")
    return db.query(exists().where(Trainee.id == trainee_id)).scalar()


def exists_by_username(db: Session, username: str) -> bool:
    logger.info("Checking if trainee exists by username")
    return db.query(exists().where(Trainee.username == username)).scalar()
