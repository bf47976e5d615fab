from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from typing import List, Optional
from datetime import date
import logging

from ..exceptions import IdMismatchError, NotFoundError, ReferenceNotFoundError
from ..schemas.booking import BookingCreate, BookingUpdate, BookingResponse
from ..services.booking_service import BookingService, get_booking_service
from ..services.customer_service import CustomerService, get_customer_service
from ..services.flight_service import FlightService, get_flight_service
from ..utils.rate_limiter import limiter, RATE_LIMITS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


def check_references(
    customer_id: Optional[int],
    flight_id: Optional[int],
    customers: CustomerService,
    flights: FlightService,
) -> None:
    """Customer and Flight must exist before a booking can point at them"""
    if customer_id is not None and customers.find_by_id(customer_id) is None:
        raise ReferenceNotFoundError("customer_id", f"No customer with the id {customer_id} was found")
    if flight_id is not None and flights.find_by_id(flight_id) is None:
        raise ReferenceNotFoundError("flight_id", f"No flight with the id {flight_id} was found")


@router.get("", response_model=List[BookingResponse], include_in_schema=False)
@router.get("/", response_model=List[BookingResponse])
def get_all_bookings(
    flight_id: Optional[int] = Query(None, description="Only bookings on this flight"),
    order_date: Optional[date] = Query(None, description="Only bookings on this date (YYYY-MM-DD)"),
    service: BookingService = Depends(get_booking_service)
):
    """All bookings ordered by flight id, optionally filtered by flight and/or order date."""
    return service.search(flight_id=flight_id, order_date=order_date)


@router.get("/customer/{customer_id}", response_model=List[BookingResponse])
def get_bookings_by_customer(
    customer_id: int,
    service: BookingService = Depends(get_booking_service)
):
    return service.find_all_by_customer_id(customer_id)


@router.get("/flight/{flight_id}/date/{order_date}", response_model=BookingResponse)
def get_booking_by_flight_and_date(
    flight_id: int,
    order_date: date,
    service: BookingService = Depends(get_booking_service)
):
    booking = service.find_by_flight_and_order_date(flight_id, order_date)
    if booking is None:
        raise NotFoundError(f"No Booking for flight {flight_id} on {order_date} was found!")
    return booking


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service)
):
    booking = service.find_by_id(booking_id)
    if booking is None:
        raise NotFoundError(f"No Booking with the id {booking_id} was found!")
    return booking


@router.post("", response_model=BookingResponse, include_in_schema=False, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["create"])
def create_booking(
    request: Request,
    booking_data: BookingCreate,
    service: BookingService = Depends(get_booking_service),
    customers: CustomerService = Depends(get_customer_service),
    flights: FlightService = Depends(get_flight_service)
):
    check_references(booking_data.customer_id, booking_data.flight_id, customers, flights)

    booking = service.create(booking_data.to_entity())
    logger.info(f"createBooking completed. Booking = {booking!r}")
    return booking


@router.put("/{booking_id}", response_model=BookingResponse)
@limiter.limit(RATE_LIMITS["update"])
def update_booking(
    request: Request,
    booking_id: int,
    booking_data: BookingUpdate,
    service: BookingService = Depends(get_booking_service)
):
    if booking_data.id is None:
        raise HTTPException(status_code=400, detail="Invalid Booking supplied in request body")

    if booking_data.id != booking_id:
        raise IdMismatchError("The Booking ID in the request body must match that of the Booking being updated")

    if service.find_by_id(booking_id) is None:
        raise NotFoundError(f"No Booking with the id {booking_id} was found!")

    booking = service.update(booking_data.to_entity(id=booking_id))
    logger.info(f"updateBooking completed. Booking = {booking!r}")
    return booking


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RATE_LIMITS["delete"])
def delete_booking(
    request: Request,
    booking_id: int,
    service: BookingService = Depends(get_booking_service)
):
    booking = service.find_by_id(booking_id)
    if booking is None:
        raise NotFoundError(f"No Booking with the id {booking_id} was found!")

    service.delete(booking)
    logger.info(f"deleteBooking completed. id = {booking_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
