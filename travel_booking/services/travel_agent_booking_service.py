from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..repositories.customer_repository import CustomerRepository
from ..repositories.travel_agent_booking_repository import TravelAgentBookingRepository
from ..validators.travel_agent_booking_validator import TravelAgentBookingValidator
from .booking_service import CustomerOwnedService


class TravelAgentBookingService(CustomerOwnedService):
    entity_type = "travel_agent_booking"


def build_travel_agent_booking_service(db: Session) -> TravelAgentBookingService:
    repository = TravelAgentBookingRepository(db)
    return TravelAgentBookingService(
        db, repository, TravelAgentBookingValidator(repository), CustomerRepository(db)
    )


def get_travel_agent_booking_service(db: Session = Depends(get_db)) -> TravelAgentBookingService:
    """FastAPI dependency"""
    return build_travel_agent_booking_service(db)
