"""FlightHub API client.

A thin wrapper around the FlightHub REST API using the ``requests``
library.  The client exposes one method per endpoint:

* :meth:`list_flights` – return every flight.
* :meth:`get_flight` – fetch a single flight by id.
* :meth:`create_flight` – create a flight; the server assigns the id.
* :meth:`update_flight` – replace an existing flight.
* :meth:`delete_flight` – remove a flight.
* :meth:`search_flights` – filter by airline, airports and departure window.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary with
keys ``status_code`` and ``message``.  The client never raises for HTTP
or connection errors, which keeps calling code (scripts, bots) simple.

Flight payloads are plain dictionaries in the API's wire format, e.g.::

    {
        "flightNumber": "FH100",
        "airline": "TestAir",
        "departureAirport": "WLG",
        "arrivalAirport": "AKL",
        "departureTime": "2025-11-26T09:00:00Z",
        "arrivalTime": "2025-11-26T10:00:00Z",
        "status": "Scheduled",
    }
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

FLIGHTS_PATH = "/api/flights"

Error = Dict[str, Any]


class FlightHubAPI:
    """Client for interacting with the FlightHub API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/flights``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and ``error``
            is ``None``.  On failure ``data`` is ``None`` and ``error``
            describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = str(err_json.get("detail") or err_json.get("message") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Flight operations
    # ------------------------------------------------------------------
    def list_flights(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all flights."""
        data, error = self._request("GET", FLIGHTS_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_flight(self, flight_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single flight.  A missing flight yields a 404 error."""
        return self._request("GET", f"{FLIGHTS_PATH}/{flight_id}")

    def create_flight(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a flight and return it with the assigned ``id``."""
        return self._request("POST", FLIGHTS_PATH, json_body=payload)

    def update_flight(self, flight_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a flight.

        The server updates the record named by ``id`` in the body, so the
        payload's ``id`` defaults to ``flight_id`` when absent.
        """
        body = dict(payload)
        body.setdefault("id", flight_id)
        return self._request("PUT", f"{FLIGHTS_PATH}/{flight_id}", json_body=body)

    def delete_flight(self, flight_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a flight.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"{FLIGHTS_PATH}/{flight_id}")
        if error:
            return False, error
        return True, None

    def search_flights(
        self,
        *,
        airline: Optional[str] = None,
        departure_airport: Optional[str] = None,
        arrival_airport: Optional[str] = None,
        departure_from: Optional[datetime | str] = None,
        departure_to: Optional[datetime | str] = None,
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Search flights.  Only the filters that are given are sent."""
        params = {
            "airline": airline,
            "departureAirport": departure_airport,
            "arrivalAirport": arrival_airport,
            "departureFrom": _format_time(departure_from),
            "departureTo": _format_time(departure_to),
        }
        params = {k: v for k, v in params.items() if v is not None}
        data, error = self._request("GET", f"{FLIGHTS_PATH}/search", params=params)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None


def _format_time(value: Optional[datetime | str]) -> Optional[str]:
    if isinstance(value, datetime):
        return value.isoformat()
    return value
