from typing import List

from ..exceptions import UniqueFlightNumberError, Violation
from .base import EntityValidator
from .field_rules import FlightRules

SAME_AIRPORT_MESSAGE = "The destination must be different from the departure"


class FlightValidator(EntityValidator):
    """Field rules for a flight, departure != destination, unique flight number."""

    rules = FlightRules
    conflict_error = UniqueFlightNumberError

    def check_cross_field_rules(self, flight) -> List[Violation]:
        if flight.departure == flight.destination:
            return [Violation(field="destination", message=SAME_AIRPORT_MESSAGE)]
        return []
