"""
Data access shared by every entity repository.

Each repository wraps one SQLAlchemy ``Session`` (one per request) and never
commits: the service owning the unit of work does.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import UniquenessConflictError
from ..utils.db_helpers import is_unique_violation

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Repository(ABC, Generic[T]):
    model: Type[T]
    conflict_error: Type[UniquenessConflictError]

    def __init__(self, db: Session):
        self.db = db

    def default_order(self) -> list:
        return [self.model.id]

    def find_all_ordered(self) -> List[T]:
        return self.db.query(self.model).order_by(*self.default_order()).all()

    def find_by_id(self, id: int) -> Optional[T]:
        if id is None:
            return None
        return self.db.get(self.model, id)

    @abstractmethod
    def find_by_natural_key(self, *key) -> Optional[T]:
        """Look a record up by the components of its natural key"""
        raise NotImplementedError

    def _find_all_by(self, column, value) -> List[T]:
        return self.db.query(self.model).filter(column == value).all()

    def create(self, entity: T) -> T:
        """Persist a new entity; the database assigns its id."""
        logger.info(f"{self.model.__name__}Repository.create() - Creating {entity!r}")
        self.db.add(entity)
        self._flush()
        return entity

    def update(self, entity: T) -> T:
        """
        Replace the stored record with the same id.

        Uses ``Session.merge``, so an id with no stored row is inserted
        instead of failing.
        """
        logger.info(f"{self.model.__name__}Repository.update() - Updating {entity!r}")
        merged = self.db.merge(entity)
        self._flush()
        return merged

    def delete(self, entity: T) -> T:
        logger.info(f"{self.model.__name__}Repository.delete() - Deleting {entity!r}")
        if entity.id is None:
            logger.info(f"{self.model.__name__}Repository.delete() - No ID was found so can't Delete.")
            return entity

        # A detached entity has to be attached to this session before it can be removed
        self.db.delete(self.db.merge(entity))
        self._flush()
        return entity

    def _flush(self) -> None:
        try:
            self.db.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                logger.warning(f"Unique constraint rejected {self.model.__name__} write: {e.orig}")
                raise self.conflict_error() from e
            raise
