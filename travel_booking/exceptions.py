"""
Error taxonomy for the booking service.

The core raises these; the HTTP layer (see ``main.py``) maps each kind to a
status code and a ``{"detail": ..., "reasons": {...}}`` payload.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Violation:
    """One failed field rule"""
    field: str
    message: str


class BookingServiceError(Exception):
    """Base class for every error the service raises on purpose"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    @property
    def reasons(self) -> Dict[str, str]:
        return {}


class ConstraintViolationError(BookingServiceError):
    """One or more field rules failed. Carries every violation, never just the first."""

    def __init__(self, violations: List[Violation], message: str = "Bad Request"):
        super().__init__(message)
        self.violations = list(violations)

    @property
    def reasons(self) -> Dict[str, str]:
        reasons: Dict[str, str] = {}
        for violation in self.violations:
            if violation.field in reasons:
                reasons[violation.field] = f"{reasons[violation.field]}; {violation.message}"
            else:
                reasons[violation.field] = violation.message
        return reasons


class UniquenessConflictError(BookingServiceError):
    """A natural key collides with a different stored record"""

    field = "id"
    default_message = "That value is already used by another record"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def reasons(self) -> Dict[str, str]:
        return {self.field: self.message}


class UniqueEmailError(UniquenessConflictError):
    field = "email"
    default_message = "That email is already used, please use a unique email"


class UniqueFlightNumberError(UniquenessConflictError):
    field = "flight number"
    default_message = "That flight number is already used, please use a unique number"


class UniqueBookingError(UniquenessConflictError):
    field = "booking"
    default_message = "A booking for that flight on that order date already exists"


class UniqueTravelAgentBookingError(UniquenessConflictError):
    field = "travel agent booking"
    default_message = "A travel agent booking for that flight on that order date already exists"


class ReferenceNotFoundError(BookingServiceError):
    """A booking points at a Customer or Flight that does not exist"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    @property
    def reasons(self) -> Dict[str, str]:
        return {self.field: self.message}


class NotFoundError(BookingServiceError):
    """No stored record for the requested id or natural key"""


class IdMismatchError(BookingServiceError):
    """The id in an update body differs from the id in the path"""

    @property
    def reasons(self) -> Dict[str, str]:
        return {"id": self.message}
