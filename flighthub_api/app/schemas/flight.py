"""
Pydantic models for flight data.

These schemas define the structure of flight records exchanged via the
API and held by the in-memory store.  ``FlightBase`` contains the
shared fields; ``FlightCreate`` is the request body for creation and
``Flight`` is a stored record carrying its ``id``.

Python attributes are snake_case while the JSON wire format uses
camelCase (``flightNumber``, ``departureTime`` ...).  Both spellings are
accepted on input.  Timestamps are normalised to UTC: a timestamp
without an offset is taken to already be in UTC.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel


class FlightStatus(str, Enum):
    """Possible statuses of a flight, serialized by name."""

    SCHEDULED = "Scheduled"
    DELAYED = "Delayed"
    CANCELLED = "Cancelled"
    IN_AIR = "InAir"
    LANDED = "Landed"


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


_timestamp = TypeAdapter(datetime)


def parse_timestamp_filter(value: Optional[str]) -> Optional[datetime]:
    """Parse an optional query-string timestamp.

    Missing or blank values mean "no filter" and give ``None``.  Other
    text must be an ISO-8601 timestamp; pydantic's ``ValidationError``
    is raised otherwise.
    """
    if value is None or not value.strip():
        return None
    return as_utc(_timestamp.validate_python(value.strip()))


class FlightBase(BaseModel):
    flight_number: str = Field(..., min_length=1, examples=["FH100"])
    airline: str = Field(..., min_length=1, examples=["TestAir"])
    departure_airport: str = Field(..., min_length=1, examples=["WLG"])
    arrival_airport: str = Field(..., min_length=1, examples=["AKL"])
    departure_time: datetime = Field(..., examples=["2025-11-26T09:00:00Z"])
    arrival_time: datetime = Field(..., examples=["2025-11-26T10:00:00Z"])
    status: FlightStatus = Field(FlightStatus.SCHEDULED, examples=["Scheduled"])

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_validator("flight_number", "airline", "departure_airport", "arrival_airport")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("departure_time", "arrival_time")
    @classmethod
    def normalise_timezone(cls, v: datetime) -> datetime:
        return as_utc(v)


class FlightCreate(FlightBase):
    """Schema for creating a flight.  The id is assigned by the store."""
    pass


class Flight(FlightBase):
    """A flight record.

    ``id`` is ``0`` until the record has been added to a store.  Two
    flights are equal when their ids are equal, regardless of the other
    fields, mirroring identity in the store.
    """

    id: int = Field(0, ge=0, examples=[1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flight):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class FlightUpdate(Flight):
    """Schema for replacing a flight.

    All mutable fields are replaced.  The record updated is the one
    named by ``id`` in the body; a missing id means no record matches.
    """
    pass
