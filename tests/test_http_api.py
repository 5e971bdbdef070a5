"""
HTTP tests for the booking-form, match-request and instant-booking routers.
Each test gets its own store and navigator through dependency overrides.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from spacehive.application.use_cases.booking_form import BookingFormUseCase
from spacehive.application.use_cases.booking_wizard import BookingFormWizard
from spacehive.application.use_cases.instant_booking import InstantBookingUseCase
from spacehive.application.use_cases.match_request import MatchRequestUseCase
from spacehive.infrastructure.catalog.mock_catalog import MockVenueCatalog
from spacehive.infrastructure.navigation.recording_navigator import RecordingNavigator
from spacehive.infrastructure.store.memory_store import MemorySessionStore
from spacehive.infrastructure.timers.debouncer import TimerDebouncer
from spacehive.main import app
from spacehive.wiring import dependencies

FORM = "/api/v1/booking-form"


@pytest.fixture
def client():
    store = MemorySessionStore()
    navigator = RecordingNavigator()
    catalog = MockVenueCatalog()
    booking_form = BookingFormUseCase(BookingFormWizard(), store, navigator)
    match_request = MatchRequestUseCase(store, navigator)
    instant_booking = InstantBookingUseCase(catalog, store, navigator, TimerDebouncer(delay_seconds=10))

    app.dependency_overrides[dependencies.get_booking_form_use_case] = lambda: booking_form
    app.dependency_overrides[dependencies.get_match_request_use_case] = lambda: match_request
    app.dependency_overrides[dependencies.get_instant_booking_use_case] = lambda: instant_booking
    app.dependency_overrides[dependencies.get_venue_catalog] = lambda: catalog
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _open(client: TestClient, flow: str = "instant_book") -> str:
    response = client.post(f"{FORM}/sessions", json={"flow": flow})
    assert response.status_code == 201
    return response.json()["session_id"]


def _complete_form(client: TestClient, session_id: str) -> dict:
    base = f"{FORM}/sessions/{session_id}"
    client.put(f"{base}/sections/location", json={"value": "Downtown, Calgary"})
    client.post(f"{base}/sections/location/complete")
    client.put(
        f"{base}/sections/date_time",
        json={
            "date": "2025-07-04",
            "time": {"start": {"hour": 6, "period": "PM"}, "end": {"hour": 10, "period": "PM"}},
        },
    )
    client.post(f"{base}/sections/date_time/complete")
    client.post(f"{base}/guests/adults/increment")
    client.post(f"{base}/guests/children/increment")
    client.post(f"{base}/sections/guests/complete")
    client.post(f"{base}/budget", json={"min": 20, "max": 100})
    return client.post(f"{base}/sections/budget/complete").json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_location_suggestions(client):
    response = client.get(f"{FORM}/location-suggestions")
    assert response.json() == ["Inglewood, Calgary", "Downtown, Calgary"]


def test_open_session_shows_initial_form(client):
    response = client.post(f"{FORM}/sessions", json={"flow": "instant_book"})
    data = response.json()

    assert data["active_section"] == "location"
    assert data["completed_sections"] == []
    assert data["submit_label"] == "Save"
    assert [s["mode"] for s in data["sections"]] == [
        "active",
        "untouched_collapsed",
        "untouched_collapsed",
        "untouched_collapsed",
    ]


def test_full_form_then_submit(client):
    session_id = _open(client)
    view = _complete_form(client, session_id)

    assert [s["summary"] for s in view["sections"]] == [
        "Downtown, Calgary",
        "Jul 4, 6-10PM",
        "2 Adults, 1 Child",
        "$20 - 100 per hour",
    ]
    assert view["submit_label"] == "Search"

    handoff = client.post(f"{FORM}/sessions/{session_id}/submit").json()
    assert handoff["screen"] == "instant_booking"
    assert handoff["payload"]["form_data"]["date_time"]["date"] == "2025-07-04"

    assert client.get(f"{FORM}/sessions/{session_id}").status_code == 404


def test_submit_incomplete_form_conflicts(client):
    session_id = _open(client)
    assert client.post(f"{FORM}/sessions/{session_id}/submit").status_code == 409


def test_invalid_section_value(client):
    session_id = _open(client)
    response = client.put(f"{FORM}/sessions/{session_id}/sections/guests", json={"adults": -1})
    assert response.status_code == 422


def test_unknown_session(client):
    assert client.get(f"{FORM}/sessions/nope").status_code == 404
    assert client.post(f"{FORM}/sessions/nope/sections/guests/complete").status_code == 404
    assert client.delete(f"{FORM}/sessions/nope").status_code == 404


def test_clear_and_close(client):
    session_id = _open(client)
    base = f"{FORM}/sessions/{session_id}"
    client.post(f"{base}/guests/infants/increment")
    client.post(f"{base}/sections/guests/complete")

    view = client.post(f"{base}/sections/guests/clear").json()
    assert view["completed_sections"] == []
    guests = next(s for s in view["sections"] if s["section"] == "guests")
    assert guests["value"] == {"adults": 1, "children": 0, "infants": 0}

    assert client.delete(base).status_code == 204


def test_handoff_payload_feeds_instant_booking(client):
    session_id = _open(client)
    _complete_form(client, session_id)
    form_data = client.post(f"{FORM}/sessions/{session_id}/submit").json()["payload"]["form_data"]

    venues = client.post("/api/v1/instant-booking/search", json={"form_data": form_data}).json()
    assert [v["price"] for v in venues] == [22, 25, 30]

    quote = client.post(
        "/api/v1/instant-booking/quote",
        json={"venue_id": 1, "form_data": form_data, "extra_services": ["photographer"]},
    ).json()
    assert quote["hours"] == 4
    assert quote["total_price"] == 120 + 200
    assert quote["action_label"] == "Skip"


def test_map_region_centers_on_calgary(client):
    region = client.get("/api/v1/instant-booking/map-region").json()
    assert region["latitude"] == pytest.approx(51.0447)
    assert region["latitude_delta"] == pytest.approx(0.05)


def test_instant_booking_errors(client):
    assert client.get("/api/v1/instant-booking/venues/99").status_code == 404
    response = client.post(
        "/api/v1/instant-booking/quote",
        json={"venue_id": 1, "extra_services": ["fireworks"]},
    )
    assert response.status_code == 400


def test_checkout(client):
    response = client.post(
        "/api/v1/instant-booking/checkout",
        json={"venue_id": 3, "event_type": "Workshop", "extra_services": ["string_lights"]},
    )
    data = response.json()
    assert data["screen"] == "instant_booking_payment"
    assert data["payload"]["total_price"] == 22 * 4 + 15


def test_match_request_flow(client):
    created = client.post("/api/v1/match-requests", json={})
    assert created.status_code == 201
    request_id = created.json()["request_id"]
    base = f"/api/v1/match-requests/{request_id}"

    assert client.post(f"{base}/next").status_code == 409

    client.patch(base, json={"event_type": "Pop-up", "vibe": "bold-colorful", "flexibility": "not-flexible"})
    client.post(f"{base}/features/Parking")
    for _ in range(7):
        view = client.post(f"{base}/next").json()

    assert view["step_name"] == "review"
    assert view["button_text"] == "Send Request"
    assert view["review"]["preferences"]["Features"] == "Parking"

    sent = client.post(f"{base}/send").json()
    assert sent["sent"] is True
    assert client.patch(base, json={"vibe": "nope"}).status_code == 400


def test_guests_need_at_least_one_adult(client):
    session_id = _open(client)
    response = client.put(f"{FORM}/sessions/{session_id}/sections/guests", json={"adults": 0})
    assert response.status_code == 422

    guests = next(s for s in client.get(f"{FORM}/sessions/{session_id}").json()["sections"] if s["section"] == "guests")
    assert guests["value"]["adults"] == 1


def test_budget_never_exceeds_ceiling(client):
    session_id = _open(client)
    base = f"{FORM}/sessions/{session_id}"

    view = client.put(f"{base}/sections/budget", json={"min": 0, "max": 500}).json()
    budget = next(s for s in view["sections"] if s["section"] == "budget")
    assert budget["value"] == {"min": 0, "max": 200}

    view = client.post(f"{base}/budget", json={"min": 10}).json()
    budget = next(s for s in view["sections"] if s["section"] == "budget")
    assert budget["value"] == {"min": 10, "max": 200}


def test_map_session_selection(client):
    created = client.post("/api/v1/instant-booking/sessions", json={})
    assert created.status_code == 201
    session = created.json()
    assert session["selected_venue_id"] is None
    assert [v["id"] for v in session["venues"]] == [3, 2, 1]
    base = f"/api/v1/instant-booking/sessions/{session['session_id']}"

    assert client.post(f"{base}/markers/1").status_code == 202
    client.post(f"{base}/markers/2")
    assert client.post(f"{base}/settle").json()["selected_venue_id"] == 2

    assert client.post(f"{base}/cards/3").json()["selected_venue_id"] == 3
    assert client.post(f"{base}/cards/99").status_code == 404

    other = client.post("/api/v1/instant-booking/sessions", json={}).json()
    assert other["selected_venue_id"] is None

    assert client.delete(base).status_code == 204
    assert client.get(base).status_code == 404


def test_instant_booking_switches_to_match_request(client):
    response = client.post("/api/v1/instant-booking/match-request", json={})
    data = response.json()
    assert data["screen"] == "match_request"
    assert data["payload"]["form_data"]["guests"] == {"adults": 1, "children": 0, "infants": 0}
