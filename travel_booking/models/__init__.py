# Models package
from .customer import Customer
from .flight import Flight
from .booking import Booking
from .travel_agent_booking import TravelAgentBooking

__all__ = ["Customer", "Flight", "Booking", "TravelAgentBooking"]
