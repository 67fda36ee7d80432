"""
Domain exceptions raised by the service layer.

The API layer registers handlers for these in ``main.create_app`` and
translates them into HTTP responses, so services never need to import
FastAPI.
"""


class FlightValidationError(ValueError):
    """A flight violates a business rule (e.g. arrival before departure)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
