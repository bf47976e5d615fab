from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.flight import Flight
from ..repositories.flight_repository import FlightRepository
from ..validators.flight_validator import FlightValidator
from .base import EntityService, filter_by_two


class FlightService(EntityService[Flight]):
    entity_type = "flight"

    def find_by_flight_number(self, flight_number: str) -> Optional[Flight]:
        return self.repository.find_by_flight_number(flight_number)

    def find_all_by_departure(self, departure: str) -> List[Flight]:
        return self.repository.find_all_by_departure(departure)

    def find_all_by_destination(self, destination: str) -> List[Flight]:
        return self.repository.find_all_by_destination(destination)

    def search(self, departure: Optional[str] = None, destination: Optional[str] = None) -> List[Flight]:
        return filter_by_two(
            self.find_all_ordered,
            self.find_all_by_departure,
            self.find_all_by_destination,
            departure,
            destination,
        )


def build_flight_service(db: Session) -> FlightService:
    repository = FlightRepository(db)
    return FlightService(db, repository, FlightValidator(repository))


def get_flight_service(db: Session = Depends(get_db)) -> FlightService:
    """FastAPI dependency"""
    return build_flight_service(db)
