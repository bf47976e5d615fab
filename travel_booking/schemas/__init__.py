# Schemas package
from .customer import CustomerCreate, CustomerUpdate, CustomerResponse
from .flight import FlightCreate, FlightUpdate, FlightResponse
from .booking import BookingCreate, BookingUpdate, BookingResponse
from .travel_agent_booking import (
    TravelAgentBookingCreate, TravelAgentBookingUpdate, TravelAgentBookingResponse
)

__all__ = [
    "CustomerCreate", "CustomerUpdate", "CustomerResponse",
    "FlightCreate", "FlightUpdate", "FlightResponse",
    "BookingCreate", "BookingUpdate", "BookingResponse",
    "TravelAgentBookingCreate", "TravelAgentBookingUpdate", "TravelAgentBookingResponse",
]
