from flighthub_api.app.core.store import InMemoryFlightStore
from flighthub_api.app.schemas.flight import FlightStatus
from tests.conftest import make_flight


def test_scenario_seeded_single_flight():
    store = InMemoryFlightStore()
    store.add(make_flight(id=1))

    assert len(store.get_all()) == 1
    assert store.get_by_id(1).flight_number == "FH100"
    assert store.get_by_id(2) is None
    assert store.delete(1) is True
    assert store.get_all() == []


def test_add_assigns_id_when_unset(store):
    first = store.add(make_flight())
    second = store.add(make_flight(flight_number="FH101"))

    assert first.id > 0
    assert second.id > first.id
    assert store.get_by_id(second.id).flight_number == "FH101"


def test_add_keeps_explicit_id_and_continues_after_it(store):
    store.add(make_flight(id=7))
    created = store.add(make_flight(flight_number="FH200"))

    assert store.get_by_id(7) is not None
    assert created.id == 8


def test_get_all_returns_insertion_order(store):
    for number in ("A1", "B2", "C3"):
        store.add(make_flight(flight_number=number))

    assert [f.flight_number for f in store.get_all()] == ["A1", "B2", "C3"]


def test_returned_records_are_copies(store):
    created = store.add(make_flight())
    created.airline = "Changed"
    snapshot = store.get_all()
    snapshot[0].airline = "AlsoChanged"

    assert store.get_by_id(created.id).airline == "TestAir"


def test_update_replaces_all_fields(store):
    created = store.add(make_flight())
    replacement = make_flight(
        id=created.id,
        flight_number="NEW1",
        airline="NewAir",
        status=FlightStatus.DELAYED,
    )

    updated = store.update(replacement)

    assert updated is not None
    assert updated.flight_number == "NEW1"
    stored = store.get_by_id(created.id)
    assert stored.airline == "NewAir"
    assert stored.status is FlightStatus.DELAYED


def test_update_missing_id_does_not_create(store):
    assert store.update(make_flight(id=42)) is None
    assert store.is_empty()


def test_delete_is_false_for_missing_id(store):
    store.add(make_flight(id=1))

    assert store.delete(99) is False
    assert len(store) == 1


def test_delete_twice(store):
    created = store.add(make_flight())

    assert store.delete(created.id) is True
    assert store.delete(created.id) is False
    assert store.get_by_id(created.id) is None
