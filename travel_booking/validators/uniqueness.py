"""
Natural-key uniqueness pre-check.

This is a read-then-compare check with no locking: two concurrent writers can
both pass it. The unique constraints on the tables are what actually keep the
data consistent; the repositories turn a constraint failure into the same
``UniquenessConflictError`` this check produces, so callers see one error kind.
"""

import logging
from typing import Any, Callable, Optional, Sequence

logger = logging.getLogger(__name__)


class UniquenessChecker:
    """
    Decide whether a natural key is already taken by a *different* record.

    Args:
        find_by_key: looks a record up by the natural key components, returns None when absent
        find_by_id: looks a record up by surrogate id, returns None when absent
    """

    def __init__(
        self,
        find_by_key: Callable[..., Optional[Any]],
        find_by_id: Callable[[int], Optional[Any]],
    ):
        self.find_by_key = find_by_key
        self.find_by_id = find_by_id

    def exists_conflict(self, key: Sequence[Any], exclude_id: Optional[int] = None) -> bool:
        """
        True when another stored record already uses ``key``.

        ``exclude_id`` is the id of the record being updated (None on create).
        When the stored record with that id still carries the same key, the
        match is the record itself and is not a conflict. Compound keys compare
        every component.
        """
        key = tuple(key)
        existing = self.find_by_key(*key)
        if existing is None:
            return False

        if exclude_id is not None:
            own = self.find_by_id(exclude_id)
            if own is not None and tuple(own.natural_key) == key:
                return False

        logger.debug(f"Natural key {key} already used by id={existing.id}")
        return True
