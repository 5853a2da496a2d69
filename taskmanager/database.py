import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

from taskmanager.config import DATABASE_URL, STORE_TIMEOUT_SECONDS
from taskmanager.errors import StoreError

logger = logging.getLogger(__name__)

# Only apply sqlite-specific connect_args when using sqlite
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False, "timeout": STORE_TIMEOUT_SECONDS}
else:
    connect_args = {}

# pool_timeout bounds how long a request waits for a connection
engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True,
    pool_timeout=STORE_TIMEOUT_SECONDS,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def store_errors(db, action: str):
    """Turn any SQLAlchemy failure inside the block into a StoreError.

    The session is rolled back so it can be closed cleanly by ``get_db``.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Store failure while trying to %s: %s", action, exc)
        try:
            db.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed after store failure")
        raise StoreError(f"Could not {action}: store unavailable") from exc
