"""
Entity services: the entry points the HTTP routers call.

A service owns the unit of work for writes. Validation, the uniqueness
pre-check and the write all happen inside one transaction, so a failure at any
step leaves nothing behind.
"""

from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from sqlalchemy.orm import Session

from ..utils.db_helpers import unit_of_work
from ..utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


def intersect_by_natural_key(first: Iterable[T], second: Iterable[T]) -> List[T]:
    """
    Keep the records of ``first`` whose natural key also appears in ``second``.

    The two lists come from separate queries; records are matched by natural
    key, not by id, and the order of ``first`` is preserved.
    """
    keys = {record.natural_key for record in second}
    return [record for record in first if record.natural_key in keys]


def filter_by_two(
    find_all: Callable[[], List[T]],
    find_by_first: Callable[[object], List[T]],
    find_by_second: Callable[[object], List[T]],
    first=None,
    second=None,
) -> List[T]:
    """
    Apply zero, one or two optional filters.

    With both filters each one is queried on its own and the results are
    intersected.
    """
    if first is None and second is None:
        return find_all()
    if second is None:
        return find_by_first(first)
    if first is None:
        return find_by_second(second)
    return intersect_by_natural_key(find_by_first(first), find_by_second(second))


class EntityService(Generic[T]):
    entity_type: str = "entity"

    def __init__(self, db: Session, repository, validator):
        self.db = db
        self.repository = repository
        self.validator = validator

    def find_all_ordered(self) -> List[T]:
        return self.repository.find_all_ordered()

    def find_by_id(self, id: int) -> Optional[T]:
        return self.repository.find_by_id(id)

    def create(self, entity: T) -> T:
        """
        Validate and persist a new entity.

        Raises:
            ConstraintViolationError: a field rule failed
            UniquenessConflictError: the natural key is taken
        """
        logger.info(f"{type(self).__name__}.create() - Creating {entity!r}")
        with unit_of_work(self.db):
            self.validator.validate(entity)
            created = self._insert(entity)
        logger.entity_created(self.entity_type, created.id)
        return created

    def update(self, entity: T) -> T:
        """
        Validate and store a full replacement of an existing entity.

        The uniqueness check ignores the entity's own record, so keeping the
        same natural key is fine.
        """
        logger.info(f"{type(self).__name__}.update() - Updating {entity!r}")
        with unit_of_work(self.db):
            self.validator.validate(entity)
            updated = self.repository.update(entity)
        logger.entity_updated(self.entity_type, updated.id)
        return updated

    def delete(self, entity: T) -> Optional[T]:
        logger.info(f"delete() - Deleting {entity!r}")
        if entity.id is None:
            logger.info("delete() - No ID was found so can't Delete.")
            return None

        entity_id = entity.id
        with unit_of_work(self.db):
            deleted = self.repository.delete(entity)
        logger.entity_deleted(self.entity_type, entity_id)
        return deleted

    def _insert(self, entity: T) -> T:
        return self.repository.create(entity)
