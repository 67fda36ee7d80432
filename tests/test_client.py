import json
from datetime import datetime, timezone
from unittest import mock

import requests

from flighthub_client import FlightHubAPI


def make_response(status_code=200, json_data=None, text=""):
    response = requests.Response()
    response.status_code = status_code
    if json_data is not None:
        response._content = json.dumps(json_data).encode("utf-8")
    else:
        response._content = text.encode("utf-8")
    response.url = "http://api.test"
    return response


def make_client(*responses):
    session = mock.Mock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return FlightHubAPI(base_url="http://api.test/", session=session), session


def test_list_flights():
    client, session = make_client(make_response(json_data=[{"id": 1}, {"id": 2}]))

    flights, error = client.list_flights()

    assert error is None
    assert [f["id"] for f in flights] == [1, 2]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://api.test/api/flights"


def test_get_flight_not_found_returns_error():
    client, _ = make_client(make_response(404, json_data={"detail": "Flight not found"}))

    flight, error = client.get_flight(9)

    assert flight is None
    assert error == {"status_code": 404, "message": "Flight not found"}


def test_create_flight_posts_payload():
    created = {"id": 3, "flightNumber": "FH300"}
    client, session = make_client(make_response(201, json_data=created))

    flight, error = client.create_flight({"flightNumber": "FH300"})

    assert error is None
    assert flight == created
    assert session.request.call_args.kwargs["json"] == {"flightNumber": "FH300"}


def test_update_flight_defaults_body_id():
    client, session = make_client(make_response(json_data={"id": 4}))

    client.update_flight(4, {"airline": "NewAir"})

    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["url"].endswith("/api/flights/4")
    assert kwargs["json"] == {"airline": "NewAir", "id": 4}


def test_delete_flight():
    client, _ = make_client(make_response(204), make_response(404, json_data={"detail": "Flight not found"}))

    assert client.delete_flight(1) == (True, None)
    deleted, error = client.delete_flight(1)
    assert deleted is False
    assert error["status_code"] == 404


def test_search_flights_sends_only_given_filters():
    client, session = make_client(make_response(json_data=[]))

    flights, error = client.search_flights(
        airline="TestAir",
        departure_from=datetime(2025, 11, 25, tzinfo=timezone.utc),
    )

    assert (flights, error) == ([], None)
    assert session.request.call_args.kwargs["params"] == {
        "airline": "TestAir",
        "departureFrom": "2025-11-25T00:00:00+00:00",
    }


def test_connection_error_is_reported():
    session = mock.Mock(spec=requests.Session)
    session.request.side_effect = requests.ConnectionError("refused")
    client = FlightHubAPI(base_url="http://api.test", session=session)

    flights, error = client.list_flights()

    assert flights == []
    assert error == {"status_code": None, "message": "refused"}


def test_rate_limited_response():
    client, _ = make_client(make_response(429, json_data={"detail": "Too many requests"}))

    _, error = client.list_flights()

    assert error == {"status_code": 429, "message": "Too many requests"}
