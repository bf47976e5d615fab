from typing import List, Optional

from ..exceptions import UniqueFlightNumberError
from ..models.flight import Flight
from .base import Repository


class FlightRepository(Repository[Flight]):
    model = Flight
    conflict_error = UniqueFlightNumberError

    def default_order(self) -> list:
        return [Flight.flight_number.asc()]

    def find_by_flight_number(self, flight_number: str) -> Optional[Flight]:
        return self.db.query(Flight).filter(Flight.flight_number == flight_number).first()

    def find_by_natural_key(self, flight_number: str) -> Optional[Flight]:
        return self.find_by_flight_number(flight_number)

    def find_all_by_departure(self, departure: str) -> List[Flight]:
        return self._find_all_by(Flight.departure, departure)

    def find_all_by_destination(self, destination: str) -> List[Flight]:
        return self._find_all_by(Flight.destination, destination)
