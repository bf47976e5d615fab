# Repositories package
from .customer_repository import CustomerRepository
from .flight_repository import FlightRepository
from .booking_repository import BookingRepository
from .travel_agent_booking_repository import TravelAgentBookingRepository

__all__ = [
    "CustomerRepository", "FlightRepository", "BookingRepository", "TravelAgentBookingRepository",
]
