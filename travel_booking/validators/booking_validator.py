from ..exceptions import UniqueBookingError
from .base import EntityValidator
from .field_rules import BookingRules


class BookingValidator(EntityValidator):
    """Field rules for a booking; one booking per flight per order date."""

    rules = BookingRules
    conflict_error = UniqueBookingError
