"""
Flight endpoints.

These routes expose the CRUD and search API for flights under
``/api/flights``.  Handlers translate service results into HTTP status
codes: a missing record becomes 404, a rejected create becomes 400 via
the ``FlightValidationError`` handler registered in ``main``.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from flighthub_api.app.schemas.flight import Flight, FlightCreate, FlightUpdate, parse_timestamp_filter
from flighthub_api.app.services.flight_service import FlightService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_flight_service(request: Request) -> FlightService:
    """Return the service instance built by ``create_app``."""
    return request.app.state.flight_service


@router.get("", response_model=List[Flight])
async def list_flights(service: FlightService = Depends(get_flight_service)) -> List[Flight]:
    """Return all flights."""
    flights = await service.get_all()
    logger.info("Returning %d flights", len(flights))
    return flights


@router.get("/search", response_model=List[Flight])
async def search_flights(
    airline: Optional[str] = Query(None),
    departure_airport: Optional[str] = Query(None, alias="departureAirport"),
    arrival_airport: Optional[str] = Query(None, alias="arrivalAirport"),
    departure_from: Optional[str] = Query(None, alias="departureFrom"),
    departure_to: Optional[str] = Query(None, alias="departureTo"),
    service: FlightService = Depends(get_flight_service),
) -> List[Flight]:
    """Search flights.

    Every supplied parameter must match.  Airline and airports are exact,
    case-sensitive matches; ``departureFrom``/``departureTo`` bound the
    departure time inclusively.  Blank parameters are ignored; a
    non-blank timestamp that cannot be parsed gives HTTP 400.
    """
    try:
        lower = parse_timestamp_filter(departure_from)
        upper = parse_timestamp_filter(departure_to)
    except ValidationError as exc:
        logger.warning("Invalid departure window: from=%r to=%r", departure_from, departure_to)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=jsonable_encoder(exc.errors()))
    flights = await service.search(
        airline=airline,
        departure_airport=departure_airport,
        arrival_airport=arrival_airport,
        departure_from=lower,
        departure_to=upper,
    )
    logger.info(
        "Search query: airline=%s, departureAirport=%s, arrivalAirport=%s, "
        "departureFrom=%s, departureTo=%s. Returned %d results.",
        airline,
        departure_airport,
        arrival_airport,
        departure_from,
        departure_to,
        len(flights),
    )
    return flights


@router.get("/{flight_id}", response_model=Flight)
async def get_flight(flight_id: int, service: FlightService = Depends(get_flight_service)) -> Flight:
    """Retrieve a single flight by ID.  Returns HTTP 404 if not found."""
    flight = await service.get_by_id(flight_id)
    if flight is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight not found")
    logger.info("Flight with id %s retrieved", flight_id)
    return flight


@router.post("", response_model=Flight, status_code=status.HTTP_201_CREATED)
async def create_flight(
    flight_in: FlightCreate,
    request: Request,
    response: Response,
    service: FlightService = Depends(get_flight_service),
) -> Flight:
    """Create a new flight.

    The response carries a ``Location`` header pointing at the new
    record.  A flight arriving before it departs is rejected with 400.
    """
    flight = await service.create(flight_in)
    response.headers["Location"] = str(request.url_for("get_flight", flight_id=flight.id))
    logger.info("Created flight with id %s", flight.id)
    return flight


@router.put("/{flight_id}", response_model=Flight)
async def update_flight(
    flight_id: int,
    flight_in: FlightUpdate,
    service: FlightService = Depends(get_flight_service),
) -> Flight:
    """Replace an existing flight.

    The record replaced is the one named by ``id`` in the body.
    """
    flight = await service.update(flight_id, flight_in)
    if flight is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight not found")
    logger.info("Updated flight with id %s", flight.id)
    return flight


@router.delete("/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flight(flight_id: int, service: FlightService = Depends(get_flight_service)) -> None:
    """Delete a flight.  Returns HTTP 404 if not found."""
    deleted = await service.delete(flight_id)
    if not deleted:
        logger.warning("Flight with id %s not found for deletion", flight_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Flight not found")
    logger.info("Deleted flight with id %s", flight_id)
    return None
