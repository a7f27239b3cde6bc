import logging
import os
import sqlite3
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from gym_crm.config import config

logger = logging.getLogger(__name__)


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE rules unless foreign keys are switched on per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(config.SQLALCHEMY_DATABASE_URI)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


@contextmanager
def transactional(db: Session):
    """
    Unit-of-work boundary for mutating gateway calls.

    Commits on success and rolls back on any error. With TESTING=true it only
    flushes, so the test fixture keeps control of the outer transaction.
    """
    flush_only = os.getenv("TESTING", "false").lower() == "true"

    try:
        yield db
        if flush_only:
            db.flush()
        else:
            db.commit()
    except Exception:
        db.rollback()
        raise


def init_db(bind=None) -> None:
    """Create all tables known to the metadata. Alembic owns the schema in production."""
    # models must be imported so their tables are registered on Base.metadata
    import gym_crm.models  # noqa: F401

    target = bind if bind is not None else engine
    logger.info("Creating tables on %s", target.url)
    Base.metadata.create_all(bind=target)
