"""
Data access for flights.

``AbstractFlightRepository`` is the interface the service layer depends
on.  ``FlightRepository`` implements it on top of the in-memory store;
a database-backed implementation can be substituted without changing
``FlightService``.  The repository holds no logic of its own.
"""

from __future__ import annotations

import abc
from typing import List, Optional

from ..core.store import InMemoryFlightStore
from ..schemas.flight import Flight


class AbstractFlightRepository(abc.ABC):
    """Storage operations for flight records."""

    @abc.abstractmethod
    async def get_all(self) -> List[Flight]:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_by_id(self, flight_id: int) -> Optional[Flight]:
        raise NotImplementedError

    @abc.abstractmethod
    async def add(self, flight: Flight) -> Flight:
        """Persist a new flight and return it with its assigned id."""
        raise NotImplementedError

    @abc.abstractmethod
    async def update(self, flight: Flight) -> Optional[Flight]:
        """Replace the flight with ``flight.id``; ``None`` if it does not exist."""
        raise NotImplementedError

    @abc.abstractmethod
    async def delete(self, flight_id: int) -> bool:
        raise NotImplementedError


class FlightRepository(AbstractFlightRepository):
    """Repository backed by an :class:`InMemoryFlightStore`."""

    def __init__(self, store: InMemoryFlightStore) -> None:
        self.store = store

    async def get_all(self) -> List[Flight]:
        return self.store.get_all()

    async def get_by_id(self, flight_id: int) -> Optional[Flight]:
        return self.store.get_by_id(flight_id)

    async def add(self, flight: Flight) -> Flight:
        return self.store.add(flight)

    async def update(self, flight: Flight) -> Optional[Flight]:
        return self.store.update(flight)

    async def delete(self, flight_id: int) -> bool:
        return self.store.delete(flight_id)
