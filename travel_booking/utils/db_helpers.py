"""
Database Helper Utilities

Provides:
- Unit of work (commit on success, rollback on any error)
- Detection of unique-constraint violations raised by the store
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

# SQLSTATE for unique_violation
PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """
    Tell a unique-constraint failure apart from other integrity errors
    (NOT NULL, foreign keys).

    PostgreSQL drivers expose the SQLSTATE; SQLite and others only give a message.
    """
    orig = getattr(error, "orig", None)
    sqlstate = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if sqlstate:
        return sqlstate == PG_UNIQUE_VIOLATION

    message = str(orig if orig is not None else error).lower()
    return "unique constraint" in message or "duplicate" in message


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Run a block of reads and writes as one transaction.

    Commits when the block finishes, rolls back and re-raises on any error
    so no partial state is left behind.

    Example:
        with unit_of_work(db):
            validator.validate(customer)
            repository.create(customer)
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.debug("Rolling back unit of work")
        db.rollback()
        raise
