"""
Populate the flight store from a CSV file.

The seed file has a header row followed by one flight per line with
the columns::

    id, flightNumber, airline, departureAirport, arrivalAirport,
    departureTime, arrivalTime, status

Seeding runs once on application startup and is skipped when the store
already holds records or the file does not exist.  Short or malformed
rows are skipped so that one bad line does not prevent the API from
starting.
"""

import csv
import logging
import os
from datetime import datetime
from typing import List, Optional

from pydantic import ValidationError

from ..schemas.flight import Flight
from .store import InMemoryFlightStore

logger = logging.getLogger(__name__)

SEED_COLUMNS = 8


def parse_row(columns: List[str]) -> Optional[Flight]:
    """Build a flight from one CSV row, or ``None`` if the row is unusable."""
    if len(columns) < SEED_COLUMNS:
        return None
    columns = [c.strip() for c in columns]
    try:
        return Flight(
            id=int(columns[0]),
            flight_number=columns[1],
            airline=columns[2],
            departure_airport=columns[3],
            arrival_airport=columns[4],
            departure_time=datetime.fromisoformat(columns[5]),
            arrival_time=datetime.fromisoformat(columns[6]),
            status=columns[7],
        )
    except (ValueError, ValidationError):
        return None


def seed_from_csv(store: InMemoryFlightStore, csv_path: str) -> int:
    """Load flights from ``csv_path`` into ``store``.

    Returns the number of flights added.  Ids are taken literally from
    the file.
    """
    if not store.is_empty():
        logger.info("Flight store already populated, skipping seed")
        return 0
    if not os.path.isfile(csv_path):
        logger.info("Seed file %s not found, starting with an empty store", csv_path)
        return 0

    added = 0
    with open(csv_path, "r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        for line_no, columns in enumerate(reader, start=2):
            if not any(c.strip() for c in columns):
                continue
            flight = parse_row(columns)
            if flight is None:
                logger.debug("Skipping malformed seed row %d in %s", line_no, csv_path)
                continue
            store.add(flight)
            added += 1
    logger.info("Seeded %d flights from %s", added, csv_path)
    return added
