# Validators package
from .uniqueness import UniquenessChecker
from .customer_validator import CustomerValidator
from .flight_validator import FlightValidator
from .booking_validator import BookingValidator
from .travel_agent_booking_validator import TravelAgentBookingValidator

__all__ = [
    "UniquenessChecker",
    "CustomerValidator", "FlightValidator", "BookingValidator", "TravelAgentBookingValidator",
]
