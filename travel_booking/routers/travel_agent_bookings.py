from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from typing import List, Optional
from datetime import date
import logging

from ..exceptions import IdMismatchError, NotFoundError
from ..schemas.travel_agent_booking import (
    TravelAgentBookingCreate, TravelAgentBookingUpdate, TravelAgentBookingResponse
)
from ..services.customer_service import CustomerService, get_customer_service
from ..services.flight_service import FlightService, get_flight_service
from ..services.travel_agent_booking_service import (
    TravelAgentBookingService, get_travel_agent_booking_service
)
from ..utils.rate_limiter import limiter, RATE_LIMITS
from .bookings import check_references

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/travel-agent-bookings", tags=["Travel Agent Bookings"])


@router.get("", response_model=List[TravelAgentBookingResponse], include_in_schema=False)
@router.get("/", response_model=List[TravelAgentBookingResponse])
def get_all_travel_agent_bookings(
    flight_id: Optional[int] = Query(None, description="Only bookings on this flight"),
    order_date: Optional[date] = Query(None, description="Only bookings on this date (YYYY-MM-DD)"),
    service: TravelAgentBookingService = Depends(get_travel_agent_booking_service)
):
    return service.search(flight_id=flight_id, order_date=order_date)


@router.get("/customer/{customer_id}", response_model=List[TravelAgentBookingResponse])
def get_travel_agent_bookings_by_customer(
    customer_id: int,
    service: TravelAgentBookingService = Depends(get_travel_agent_booking_service)
):
    return service.find_all_by_customer_id(customer_id)


@router.get("/flight/{flight_id}/date/{order_date}", response_model=TravelAgentBookingResponse)
def get_travel_agent_booking_by_flight_and_date(
    flight_id: int,
    order_date: date,
    service: TravelAgentBookingService = Depends(get_travel_agent_booking_service)
):
    booking = service.find_by_flight_and_order_date(flight_id, order_date)
    if booking is None:
        raise NotFoundError(f"No TravelAgentBooking for flight {flight_id} on {order_date} was found!")
    return booking


@router.get("/{booking_id}", response_model=TravelAgentBookingResponse)
def get_travel_agent_booking(
    booking_id: int,
    service: TravelAgentBookingService = Depends(get_travel_agent_booking_service)
):
    booking = service.find_by_id(booking_id)
    if booking is None:
        raise NotFoundError(f"No TravelAgentBooking with the id {booking_id} was found!")
    return booking


@router.post("", response_model=TravelAgentBookingResponse, include_in_schema=False, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TravelAgentBookingResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["create"])
def create_travel_agent_booking(
    request: Request,
    booking_data: TravelAgentBookingCreate,
    service: TravelAgentBookingService = Depends(get_travel_agent_booking_service),
    customers: CustomerService = Depends(get_customer_service),
    flights: FlightService = Depends(get_flight_service)
):
    # Taxi and hotel ids are checked by their own services, not here
    check_references(booking_data.customer_id, booking_data.flight_id, customers, flights)

    booking = service.create(booking_data.to_entity())
    logger.info(f"createTravelAgentBooking completed. Booking = {booking!r}")
    return booking


@router.put("/{booking_id}", response_model=TravelAgentBookingResponse)
@limiter.limit(RATE_LIMITS["update"])
def update_travel_agent_booking(
    request: Request,
    booking_id: int,
    booking_data: TravelAgentBookingUpdate,
    service: TravelAgentBookingService = Depends(get_travel_agent_booking_service)
):
    if booking_data.id is None:
        raise HTTPException(status_code=400, detail="Invalid TravelAgentBooking supplied in request body")

    if booking_data.id != booking_id:
        raise IdMismatchError(
            "The TravelAgentBooking ID in the request body must match that of the TravelAgentBooking being updated"
        )

    if service.find_by_id(booking_id) is None:
        raise NotFoundError(f"No TravelAgentBooking with the id {booking_id} was found!")

    booking = service.update(booking_data.to_entity(id=booking_id))
    logger.info(f"updateTravelAgentBooking completed. Booking = {booking!r}")
    return booking


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RATE_LIMITS["delete"])
def delete_travel_agent_booking(
    request: Request,
    booking_id: int,
    service: TravelAgentBookingService = Depends(get_travel_agent_booking_service)
):
    booking = service.find_by_id(booking_id)
    if booking is None:
        raise NotFoundError(f"No TravelAgentBooking with the id {booking_id} was found!")

    service.delete(booking)
    logger.info(f"deleteTravelAgentBooking completed. id = {booking_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
