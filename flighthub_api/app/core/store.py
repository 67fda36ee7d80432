"""
In-memory storage for flight records.

``InMemoryFlightStore`` keeps every flight in a dictionary keyed by
id for the lifetime of the process.  Nothing is written to disk; the
store starts empty and is populated by the seeder (``core.seed``) and
by API calls.  One store instance is created by ``create_app`` and
passed to the repository, so there is no module-level state.

All operations take a single lock for their whole duration and return
copies, so callers can never mutate stored records behind the store's
back.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from ..schemas.flight import Flight


class InMemoryFlightStore:
    """Thread-safe id -> Flight map."""

    def __init__(self) -> None:
        self._flights: Dict[int, Flight] = {}
        self._lock = threading.Lock()
        self._last_id = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._flights)

    def is_empty(self) -> bool:
        return len(self) == 0

    def get_all(self) -> List[Flight]:
        """Return a snapshot of all flights in insertion order."""
        with self._lock:
            return [flight.model_copy() for flight in self._flights.values()]

    def get_by_id(self, flight_id: int) -> Optional[Flight]:
        with self._lock:
            flight = self._flights.get(flight_id)
            return flight.model_copy() if flight is not None else None

    def add(self, flight: Flight) -> Flight:
        """Store ``flight`` and return the stored copy.

        A new id is assigned when ``flight.id`` is 0.  A non-zero id
        (seed data) is kept as given.
        """
        with self._lock:
            stored = Flight.model_validate(flight.model_dump())
            if not stored.id:
                stored = stored.model_copy(update={"id": self._last_id + 1})
            self._last_id = max(self._last_id, stored.id)
            self._flights[stored.id] = stored
            return stored.model_copy()

    def update(self, flight: Flight) -> Optional[Flight]:
        """Replace the record with ``flight.id``; ``None`` if there is none."""
        with self._lock:
            if flight.id not in self._flights:
                return None
            stored = Flight.model_validate(flight.model_dump())
            self._flights[stored.id] = stored
            return stored.model_copy()

    def delete(self, flight_id: int) -> bool:
        with self._lock:
            return self._flights.pop(flight_id, None) is not None
