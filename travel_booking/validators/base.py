from typing import List, Type

from pydantic import BaseModel

from ..exceptions import ConstraintViolationError, UniquenessConflictError, Violation
from .field_rules import check_field_rules
from .uniqueness import UniquenessChecker


class EntityValidator:
    """
    Validation for one entity type, run before any write.

    1. field rules (all of them, reported together)
    2. cross-field rules, only once every field is valid
    3. natural-key uniqueness, excluding the entity's own id
    """

    rules: Type[BaseModel]
    conflict_error: Type[UniquenessConflictError]

    def __init__(self, repository):
        self.repository = repository
        self.uniqueness = UniquenessChecker(
            find_by_key=repository.find_by_natural_key,
            find_by_id=repository.find_by_id,
        )

    def validate(self, entity) -> None:
        violations = check_field_rules(self.rules, entity)
        if violations:
            raise ConstraintViolationError(violations)

        violations = self.check_cross_field_rules(entity)
        if violations:
            raise ConstraintViolationError(violations)

        if self.uniqueness.exists_conflict(entity.natural_key, entity.id):
            raise self.conflict_error()

    def check_cross_field_rules(self, entity) -> List[Violation]:
        return []
