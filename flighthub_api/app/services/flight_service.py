"""
Business logic for flights.

``FlightService`` applies the rules the repository must not know about:
it rejects flights that arrive before they depart and composes the
search filters.  Every other operation is delegated unchanged.  The
service never caches records; each call reads through to the
repository.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..core.errors import FlightValidationError
from ..repositories.flight_repository import AbstractFlightRepository
from ..schemas.flight import Flight, FlightBase, as_utc

logger = logging.getLogger(__name__)

FlightPredicate = Callable[[Flight], bool]


def _given(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


class FlightService:
    """Service for managing flights."""

    def __init__(self, repository: AbstractFlightRepository) -> None:
        self.repository = repository

    async def get_all(self) -> List[Flight]:
        return await self.repository.get_all()

    async def get_by_id(self, flight_id: int) -> Optional[Flight]:
        flight = await self.repository.get_by_id(flight_id)
        if flight is None:
            logger.warning("Flight with id %s not found", flight_id)
        return flight

    async def create(self, flight: FlightBase) -> Flight:
        """Validate and store a new flight.

        Raises
        ------
        FlightValidationError
            If ``arrival_time`` is earlier than ``departure_time``.  Nothing
            is stored in that case.
        """
        if flight.arrival_time < flight.departure_time:
            logger.warning(
                "Rejected flight %s: arrival %s before departure %s",
                flight.flight_number,
                flight.arrival_time.isoformat(),
                flight.departure_time.isoformat(),
            )
            raise FlightValidationError(
                "ArrivalTime must be greater than or equal to DepartureTime.",
                field="arrivalTime",
            )
        created = await self.repository.add(Flight.model_validate(flight.model_dump()))
        logger.info("Created flight %s with id %s", created.flight_number, created.id)
        return created

    async def update(self, flight_id: int, flight: Flight) -> Optional[Flight]:
        """Replace a flight.

        The record replaced is the one named by ``flight.id``; ``flight_id``
        from the route is not compared with it.  Arrival/departure order is
        not re-validated here.
        """
        updated = await self.repository.update(flight)
        if updated is None:
            logger.warning("Flight with id %s not found for update", flight.id)
        return updated

    async def delete(self, flight_id: int) -> bool:
        return await self.repository.delete(flight_id)

    async def search(
        self,
        airline: Optional[str] = None,
        departure_airport: Optional[str] = None,
        arrival_airport: Optional[str] = None,
        departure_from: Optional[datetime] = None,
        departure_to: Optional[datetime] = None,
    ) -> List[Flight]:
        """Return flights matching every supplied filter.

        - ``airline``, ``departure_airport`` and ``arrival_airport`` are
          case-sensitive exact matches on the whole field.
        - ``departure_from`` / ``departure_to`` bound ``departure_time``
          inclusively.
        - ``None`` or blank arguments are ignored; with no filters every
          flight is returned.
        """
        predicates: List[FlightPredicate] = []
        if _given(airline):
            predicates.append(lambda f: f.airline == airline)
        if _given(departure_airport):
            predicates.append(lambda f: f.departure_airport == departure_airport)
        if _given(arrival_airport):
            predicates.append(lambda f: f.arrival_airport == arrival_airport)
        if departure_from is not None:
            lower = as_utc(departure_from)
            predicates.append(lambda f: f.departure_time >= lower)
        if departure_to is not None:
            upper = as_utc(departure_to)
            predicates.append(lambda f: f.departure_time <= upper)

        flights = await self.repository.get_all()
        for predicate in predicates:
            flights = [f for f in flights if predicate(f)]
        return flights
