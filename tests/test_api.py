import pytest

from src.shift_tracker.shift_tracker.main import create_app
from tests.fakes import in_memory_container


@pytest.fixture
def client():
    app = create_app(container=in_memory_container(), settings_module="config.testing")
    return app.test_client()


def _register(client, email, role="employee", rate=None):
    body = {"name": email.split("@")[0].title(), "email": email, "password": "secret1", "role": role}
    if rate is not None:
        body["hourlyRate"] = rate
    return client.post("/api/auth/register", json=body)


def test_health_without_database(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_protected_routes_need_login(client):
    resp = client.get("/api/shifts")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_employees_cannot_read_reports(client):
    _register(client, "ana@example.com")

    assert client.get("/api/reports/daily?date=2026-03-14").status_code == 403


def test_login_and_me(client):
    _register(client, "boss@example.com", role="manager")
    client.post("/api/auth/logout")

    assert client.post("/api/auth/login", json={"email": "boss@example.com", "password": "bad"}).status_code == 401
    assert client.post("/api/auth/login", json={"email": "boss@example.com", "password": "secret1"}).status_code == 200
    assert client.get("/api/auth/me").get_json()["role"] == "manager"


def test_manager_creates_and_lists_shifts(client):
    _register(client, "boss@example.com", role="manager")

    created = client.post(
        "/api/shifts",
        json={"employee": "Ana", "role": "Server", "date": "2026-03-14", "startTime": "22:00", "endTime": "02:00"},
    )
    assert created.status_code == 201
    assert created.get_json()["durationHours"] == 4.0

    bad = client.post(
        "/api/shifts",
        json={"employee": "Ana", "role": "Server", "date": "2026-03-14", "startTime": "9x:00", "endTime": "17:00"},
    )
    assert bad.status_code == 400

    listed = client.get("/api/shifts?start=2026-03-01&end=2026-03-31").get_json()
    assert [s["startTime"] for s in listed] == ["22:00"]


def test_punch_flow_and_conflicts(client):
    _register(client, "ana@example.com", rate=20)

    resp = client.post("/api/punches/clock-in", json={})
    assert resp.status_code == 201
    assert resp.get_json()["state"] == "PUNCHED_IN"

    assert client.post("/api/punches/clock-in", json={}).status_code == 409
    assert client.post("/api/punches/break-end", json={}).status_code == 409

    assert client.post("/api/punches/break-start", json={}).get_json()["punch"]["state"] == "ON_BREAK"
    assert client.post("/api/punches/clock-out", json={}).get_json()["punch"]["state"] == "PUNCHED_OUT"
    assert client.post("/api/punches/clock-out", json={}).status_code == 409


def test_employee_cannot_punch_for_someone_else(client):
    _register(client, "ana@example.com")

    assert client.post("/api/punches/clock-in", json={"employeeId": 999}).status_code == 403


def test_daily_report_json_and_csv(client):
    _register(client, "boss@example.com", role="manager")
    employee_id = client.post("/api/employees", json={"name": "Ben", "hourlyRate": 20}).get_json()["id"]

    client.post("/api/punches/clock-in", json={"employeeId": employee_id, "time": "2026-03-14T09:00:00"})
    client.post("/api/punches/clock-out", json={"employeeId": employee_id})
    assert client.post("/api/tips", json={"amount": 90, "date": "2026-03-14"}).status_code == 201
    assert client.post("/api/tips", json={"amount": 0, "date": "2026-03-14"}).status_code == 400

    report = client.get("/api/reports/daily?date=2026-03-14").get_json()
    assert report["totalTips"] == 90
    assert [row["name"] for row in report["perEmployee"]] == ["Ben"]
    assert report["perEmployee"][0]["tipShare"] == 90

    csv_resp = client.get("/api/reports/daily.csv?date=2026-03-14")
    assert csv_resp.mimetype == "text/csv"
    lines = csv_resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "date,employee_id,name,role,hourly_rate,hours_worked,wages,tip_share"
    assert lines[-1].startswith("2026-03-14,,TOTAL,")


def test_report_needs_a_date(client):
    _register(client, "boss@example.com", role="manager")

    resp = client.get("/api/reports/daily")

    assert resp.status_code == 400
    assert "date required" in resp.get_json()["message"]


def test_weekly_report_and_overview(client):
    _register(client, "boss@example.com", role="manager")

    weekly = client.get("/api/reports/weekly?date=2026-03-14").get_json()
    assert weekly["startDate"] == "2026-03-08"
    assert weekly["totalRevenue"] is None

    overview = client.get("/api/reports/overview").get_json()
    assert set(overview) == {"daily", "weekly"}


def test_only_managers_set_a_clock_in_time(client):
    _register(client, "ana@example.com")

    resp = client.post("/api/punches/clock-in", json={"time": "2026-03-14T06:00:00"})

    assert resp.status_code == 403
    assert client.get("/api/punches").get_json() == []
