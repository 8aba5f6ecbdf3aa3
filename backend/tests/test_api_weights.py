from sqlalchemy.exc import SQLAlchemyError

import trackfit.db as db_module
from trackfit.db import get_db
from trackfit.main import app


class BrokenSession:
    """Session stand-in whose every query fails."""

    def query(self, *args, **kwargs):
        raise SQLAlchemyError("connection reset")

    def add(self, obj):
        pass

    def commit(self):
        raise SQLAlchemyError("connection reset")

    def rollback(self):
        self.rolled_back = True


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert "message" in r.json()


def test_create_and_list_weight(client):
    cr = client.post("/api/weights", json={"date": "2025-05-01", "weight": 95.4})
    assert cr.status_code == 201, cr.text
    assert cr.json() == {"message": "Weight saved successfully"}

    lr = client.get("/api/weights")
    assert lr.status_code == 200
    assert {"date": "2025-05-01", "weight": 95.4} in lr.json()


def test_integer_weight_is_a_number(client):
    cr = client.post("/api/weights", json={"date": "2025-05-02", "weight": 95})
    assert cr.status_code == 201, cr.text
    assert client.get("/api/weights").json() == [{"date": "2025-05-02", "weight": 95.0}]


def test_list_is_newest_first(client):
    for day, kg in [("2025-05-01", 95.0), ("2025-06-01", 92.0), ("2025-04-25", 97.0)]:
        client.post("/api/weights", json={"date": day, "weight": kg})

    dates = [row["date"] for row in client.get("/api/weights").json()]
    assert dates == ["2025-06-01", "2025-05-01", "2025-04-25"]


def test_same_day_latest_insert_listed_first(client):
    client.post("/api/weights", json={"date": "2025-05-01", "weight": 95.0})
    client.post("/api/weights", json={"date": "2025-05-01", "weight": 94.6})

    rows = client.get("/api/weights").json()
    assert [r["weight"] for r in rows] == [94.6, 95.0]


def test_non_numeric_weight_rejected(client):
    r = client.post("/api/weights", json={"date": "2025-05-01", "weight": "abc"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_numeric_string_and_bool_weight_rejected(client):
    assert client.post("/api/weights", json={"date": "2025-05-01", "weight": "85"}).status_code == 400
    assert client.post("/api/weights", json={"date": "2025-05-01", "weight": True}).status_code == 400


def test_non_string_date_rejected(client):
    r = client.post("/api/weights", json={"date": 20250501, "weight": 90.0})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid data format"}


def test_unparseable_date_rejected(client):
    r = client.post("/api/weights", json={"date": "May 1st", "weight": 90.0})
    assert r.status_code == 400


def test_malformed_json_rejected(client):
    r = client.post(
        "/api/weights",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert "error" in r.json()


def test_rejected_payload_is_not_stored(client):
    client.post("/api/weights", json={"date": "2025-05-01", "weight": "abc"})
    assert client.get("/api/weights").json() == []


def test_series_merges_records_with_target(client):
    client.post("/api/weights", json={"date": "2025-06-09", "weight": 90.4})
    client.post("/api/weights", json={"date": "2025-08-10", "weight": 79.5})

    r = client.get("/api/weights/series")
    assert r.status_code == 200
    points = r.json()
    dates = [p["date"] for p in points]
    assert dates == sorted(dates)
    assert len(points) == 101

    by_date = {p["date"]: p for p in points}
    assert by_date["2025-04-21"] == {"date": "2025-04-21", "weight": None, "target": 98.0}
    assert by_date["2025-06-09"] == {"date": "2025-06-09", "weight": 90.4, "target": 89.1}
    assert by_date["2025-08-10"] == {"date": "2025-08-10", "weight": 79.5, "target": None}


def test_missing_database_url_is_reported(client, monkeypatch):
    monkeypatch.setattr(db_module, "engine", None)

    r = client.get("/api/weights")
    assert r.status_code == 500
    assert r.json() == {"error": "Database connection failed"}

    r = client.post("/api/weights", json={"date": "2025-05-01", "weight": 90.0})
    assert r.status_code == 500
    assert r.json() == {"error": "Database connection failed"}


def test_storage_failure_on_list(client):
    app.dependency_overrides[get_db] = lambda: BrokenSession()

    r = client.get("/api/weights")
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch weight history"}


def test_storage_failure_on_save_rolls_back(client):
    session = BrokenSession()
    app.dependency_overrides[get_db] = lambda: session

    r = client.post("/api/weights", json={"date": "2025-05-01", "weight": 90.0})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to save weight"}
    assert session.rolled_back is True


def test_weight_is_stored_as_submitted(client):
    cr = client.post("/api/weights", json={"date": "2025-05-01", "weight": 89.456})
    assert cr.status_code == 201, cr.text
    assert client.get("/api/weights").json() == [{"date": "2025-05-01", "weight": 89.456}]


def test_nan_and_infinity_weight_rejected(client):
    for raw in ("NaN", "Infinity", "-Infinity"):
        r = client.post(
            "/api/weights",
            content='{"date": "2025-05-01", "weight": %s}' % raw,
            headers={"Content-Type": "application/json"},
        )
        assert r.status_code == 400, raw
        assert r.json() == {"error": "Invalid data format"}

    assert client.get("/api/weights").json() == []
    assert client.get("/api/weights/series").status_code == 200
