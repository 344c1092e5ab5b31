"""
HTTP endpoint tests.

Uses the `client` fixture: the app's plan store is replaced with a fresh
InMemoryPlanStore and the pantry runs on an in-memory SQLite session.
"""

from core.utils.helpers import date_key
from domain.enums import MealSlot
from test_fixtures import SUNDAY, ai_item, ai_plan, planned


# =============================================================================
# HEALTH
# =============================================================================


def test_health_check(client):
    resp = client.get("/health-check")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["plan_store"] == "memory"
    assert "X-Request-ID" in resp.headers


# =============================================================================
# PLANS
# =============================================================================


def test_distribute_then_read_day(client):
    plan = ai_plan(Sun=[ai_item("Oats"), ai_item("Chicken & Rice")])

    resp = client.post("/plans/distribute", json={"week_start": "2024-01-07", "plan": plan})
    assert resp.status_code == 204

    day = client.get("/plans/2024-01-07").json()
    assert day["date"] == "2024-01-07"
    assert [i["name"] for i in day["meals"]["breakfast"]] == ["Oats"]
    assert [i["name"] for i in day["meals"]["lunch"]] == ["Chicken & Rice"]
    assert day["meals"]["dinner"] == [] and day["meals"]["snack"] == []


def test_distribute_accepts_generator_envelope(client):
    body = {"week_start": "2024-01-07", "plan": {"weeklyPlan": ai_plan(Sat=[ai_item("Pizza")])}}

    assert client.post("/plans/distribute", json=body).status_code == 204
    assert client.get("/plans/2024-01-13").json()["meals"]["breakfast"][0]["name"] == "Pizza"


def test_distribute_malformed_plan_is_rejected(client, plan_store):
    plan = {"meals": [{"day": "Sun", "items": [{"name": "No numbers"}]}]}

    resp = client.post("/plans/distribute", json={"week_start": "2024-01-07", "plan": plan})

    assert resp.status_code == 422
    body = resp.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert plan_store.dates() == []


def test_add_and_remove_item(client):
    resp = client.post("/plans/2024-01-08/dinner/items", json={"name": "Soup", "grams": 350})
    assert resp.status_code == 201
    item = resp.json()
    assert item["id"] and item["source"] == "custom"

    resp = client.delete(f"/plans/2024-01-08/dinner/items/{item['id']}")
    assert resp.status_code == 200
    assert client.get("/plans/2024-01-08").json()["meals"]["dinner"] == []


def test_remove_unknown_item_returns_404(client):
    resp = client.delete("/plans/2024-01-08/lunch/items/missing")

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "HTTP_404"


def test_unknown_slot_is_rejected(client):
    resp = client.post("/plans/2024-01-08/brunch/items", json={"name": "Waffles"})

    assert resp.status_code == 422


def test_week_view_starts_on_requested_day(client):
    resp = client.get("/plans/week", params={"day": "2024-01-10", "week_starts_on": 0})

    assert resp.status_code == 200
    days = list(resp.json())
    assert days[0] == "2024-01-07"
    assert len(days) == 7


# =============================================================================
# GROCERY
# =============================================================================


def _seed(plan_store):
    plan_store.append_to_meal_slot(
        date_key(SUNDAY), MealSlot.LUNCH, planned("Chicken & Rice", [("Chicken breast", 300), ("Rice", 900)])
    )
    plan_store.append_to_meal_slot(date_key(SUNDAY), MealSlot.DINNER, planned("Takeout"))


def test_grocery_list(client, plan_store):
    _seed(plan_store)

    body = client.get("/grocery", params={"start": "2024-01-07", "days": 2}).json()

    assert body["items"] == [
        {"name": "Chicken breast", "grams": 300, "count": 1},
        {"name": "Rice", "grams": 900, "count": 1},
    ]
    assert body["missing"] == ["2024-01-07: Takeout"]


def test_grocery_rejects_zero_days(client):
    resp = client.get("/grocery", params={"start": "2024-01-07", "days": 0})

    assert resp.status_code == 422


def test_reconcile_against_stored_pantry(client):
    client.post("/pantry", json={"name": "Rice", "grams": 200})

    body = client.post("/grocery/reconcile", json={"items": [{"name": "rice", "grams": 300}]}).json()

    assert body["have"] == [{"name": "rice", "grams": 200, "count": None}]
    assert body["need"] == [{"name": "rice", "grams": 100, "count": None}]


def test_cost_estimate(client):
    items = [{"name": "Chicken breast", "grams": 300}, {"name": "Basmati rice", "grams": 900}]

    resp = client.post("/grocery/cost", json={"items": items})

    assert resp.json() == {"estimated_cost": 4.5}


def test_report_and_text_export(client, plan_store):
    _seed(plan_store)
    client.post("/pantry", json={"name": "Rice", "grams": 900})

    report = client.get("/grocery/report", params={"start": "2024-01-07"}).json()
    assert report["days"] == 7
    assert [i["name"] for i in report["need"]] == ["Chicken breast"]
    assert report["estimated_cost"] == 2.7

    text = client.get("/grocery/report.txt", params={"start": "2024-01-07", "use_pantry": False})
    assert text.headers["content-type"].startswith("text/plain")
    assert "• Rice: 900 g" in text.text
    assert text.text.endswith("Estimated cost: $4.50")


# =============================================================================
# PANTRY
# =============================================================================


def test_pantry_crud(client):
    created = client.post("/pantry", json={"name": "Oats", "grams": 1000})
    assert created.status_code == 201
    item_id = created.json()["id"]

    patched = client.patch(f"/pantry/{item_id}", json={"grams": 400})
    assert patched.status_code == 200
    assert patched.json()["grams"] == 400
    assert patched.json()["name"] == "Oats"

    assert [p["id"] for p in client.get("/pantry").json()] == [item_id]

    assert client.delete(f"/pantry/{item_id}").status_code == 200
    assert client.get("/pantry").json() == []


def test_patch_unknown_pantry_item(client):
    resp = client.patch("/pantry/nope", json={"grams": 1})

    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


def test_pantry_rejects_negative_grams(client):
    resp = client.post("/pantry", json={"name": "Rice", "grams": -5})

    assert resp.status_code == 422


# =============================================================================
# ERROR ENVELOPES
# =============================================================================


def test_store_failure_returns_500_envelope(plan_store):
    from unittest.mock import Mock
    from fastapi.testclient import TestClient
    from main import app
    from api.dependencies import get_plan_store

    broken = Mock(wraps=plan_store, spec=plan_store)
    broken.get_day_plan.side_effect = ConnectionError("store offline")
    app.dependency_overrides[get_plan_store] = lambda: broken
    try:
        resp = TestClient(app, raise_server_exceptions=False).get("/plans/2024-01-07")
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"


def test_service_errors_map_to_their_status():
    from app.exceptions import NotFoundError, ServiceValidationError

    bad = ServiceValidationError("days must be positive", code="INVALID_RANGE")
    missing = NotFoundError("Pantry item x not found")

    assert (bad.http_status, bad.to_dict()) == (400, {"code": "INVALID_RANGE", "message": "days must be positive"})
    assert (missing.http_status, missing.code) == (404, "NOT_FOUND")


def test_error_envelopes_carry_request_id(plan_store):
    from unittest.mock import Mock
    from fastapi.testclient import TestClient
    from main import app
    from api.dependencies import get_plan_store

    broken = Mock(wraps=plan_store, spec=plan_store)
    broken.get_day_plan.side_effect = ConnectionError("store offline")
    app.dependency_overrides[get_plan_store] = lambda: broken
    try:
        resp = TestClient(app, raise_server_exceptions=False).get(
            "/plans/2024-01-07", headers={"X-Request-ID": "req-500"}
        )
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.headers["X-Request-ID"] == "req-500"


def test_not_found_envelope_echoes_request_id(client):
    resp = client.patch("/pantry/nope", json={"grams": 1}, headers={"X-Request-ID": "req-404"})

    assert resp.status_code == 404
    assert resp.headers["X-Request-ID"] == "req-404"


def test_distribute_rejects_nan_in_raw_json(client, plan_store):
    body = (
        '{"week_start": "2024-01-07", "plan": {"meals": [{"day": "Tue", "items": '
        '[{"name": "Soup", "calories": NaN, "protein": 1, "carbs": 1, "fat": 1}]}]}}'
    )

    resp = client.post("/plans/distribute", content=body, headers={"Content-Type": "application/json"})

    assert resp.status_code == 422
    assert plan_store.dates() == []
