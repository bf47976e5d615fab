from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from typing import List, Optional
import logging

from ..exceptions import IdMismatchError, NotFoundError
from ..schemas.flight import FlightCreate, FlightUpdate, FlightResponse
from ..services.flight_service import FlightService, get_flight_service
from ..utils.rate_limiter import limiter, RATE_LIMITS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/flights", tags=["Flights"])


@router.get("", response_model=List[FlightResponse], include_in_schema=False)
@router.get("/", response_model=List[FlightResponse])
def get_all_flights(
    departure: Optional[str] = Query(None, description="Only flights leaving from this airport"),
    destination: Optional[str] = Query(None, description="Only flights going to this airport"),
    service: FlightService = Depends(get_flight_service)
):
    """All flights ordered by flight number, optionally filtered by departure and/or destination."""
    return service.search(departure=departure, destination=destination)


@router.get("/flightnumber/{flight_number}", response_model=FlightResponse)
def get_flight_by_flight_number(
    flight_number: str,
    service: FlightService = Depends(get_flight_service)
):
    flight = service.find_by_flight_number(flight_number)
    if flight is None:
        raise NotFoundError(f"No Flight with the flight number {flight_number} was found!")
    return flight


@router.get("/{flight_id}", response_model=FlightResponse)
def get_flight(
    flight_id: int,
    service: FlightService = Depends(get_flight_service)
):
    flight = service.find_by_id(flight_id)
    if flight is None:
        raise NotFoundError(f"No Flight with the id {flight_id} was found!")
    return flight


@router.post("", response_model=FlightResponse, include_in_schema=False, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=FlightResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_LIMITS["create"])
def create_flight(
    request: Request,
    flight_data: FlightCreate,
    service: FlightService = Depends(get_flight_service)
):
    flight = service.create(flight_data.to_entity())
    logger.info(f"createFlight completed. Flight = {flight!r}")
    return flight


@router.put("/{flight_id}", response_model=FlightResponse)
@limiter.limit(RATE_LIMITS["update"])
def update_flight(
    request: Request,
    flight_id: int,
    flight_data: FlightUpdate,
    service: FlightService = Depends(get_flight_service)
):
    if flight_data.id is None:
        raise HTTPException(status_code=400, detail="Invalid Flight supplied in request body")

    if flight_data.id != flight_id:
        raise IdMismatchError("The Flight ID in the request body must match that of the Flight being updated")

    if service.find_by_id(flight_id) is None:
        raise NotFoundError(f"No Flight with the id {flight_id} was found!")

    flight = service.update(flight_data.to_entity(id=flight_id))
    logger.info(f"updateFlight completed. Flight = {flight!r}")
    return flight


@router.delete("/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RATE_LIMITS["delete"])
def delete_flight(
    request: Request,
    flight_id: int,
    service: FlightService = Depends(get_flight_service)
):
    flight = service.find_by_id(flight_id)
    if flight is None:
        raise NotFoundError(f"No Flight with the id {flight_id} was found!")

    service.delete(flight)
    logger.info(f"deleteFlight completed. id = {flight_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
