# Services package
from .customer_service import CustomerService, build_customer_service, get_customer_service
from .flight_service import FlightService, build_flight_service, get_flight_service
from .booking_service import BookingService, build_booking_service, get_booking_service
from .travel_agent_booking_service import (
    TravelAgentBookingService,
    build_travel_agent_booking_service,
    get_travel_agent_booking_service,
)

__all__ = [
    "CustomerService", "build_customer_service", "get_customer_service",
    "FlightService", "build_flight_service", "get_flight_service",
    "BookingService", "build_booking_service", "get_booking_service",
    "TravelAgentBookingService", "build_travel_agent_booking_service", "get_travel_agent_booking_service",
]
