from ..exceptions import UniqueTravelAgentBookingError
from .base import EntityValidator
from .field_rules import TravelAgentBookingRules


class TravelAgentBookingValidator(EntityValidator):
    """Same contract as ``BookingValidator`` with taxi and hotel ids required too."""

    rules = TravelAgentBookingRules
    conflict_error = UniqueTravelAgentBookingError
