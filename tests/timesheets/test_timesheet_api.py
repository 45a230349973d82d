from timesheet_engine.core.constants import DAY_ORDER

from conftest import standard_day


def _week_payload(**days):
    return {
        "userId": 5,
        "weekStartDate": "2025-03-10",
        "days": {name: (days.get(name) or {"didNotWork": True}) for name in DAY_ORDER},
    }


def test_calculate_returns_totals_and_day_hours(client):
    payload = _week_payload(
        monday=standard_day().to_dict(),
        tuesday={"timeIn": "08:00", "timeOut": "21:00"},
    )
    resp = client.post("/api/timesheets/calculate", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["totals"] == {"regular": 16.0, "overtime": 4.0, "doubleTime": 1.0, "total": 21.0, "daysWorked": 2}
    assert body["timesheet"]["days"]["tuesday"]["totalDoubleTimeHours"] == 1.0


def test_calculate_rejects_unknown_day(client):
    resp = client.post("/api/timesheets/calculate", json={"days": {"someday": {}}})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_calculate_rejects_non_object_body(client):
    resp = client.post("/api/timesheets/calculate", data="[]", content_type="application/json")
    assert resp.status_code == 400


def test_validate_reports_day_errors(client):
    payload = _week_payload(monday={"timeIn": "08:00"})
    body = client.post("/api/timesheets/validate", json=payload).get_json()

    assert body["valid"] is False
    assert body["errors"]["monday"] == ["Time out is required if time in is provided"]
    assert body["reasonRequired"]["tuesday"] is True
    assert body["reasonRequired"]["saturday"] is False


def test_certify_requires_reasons(client):
    payload = _week_payload(**{name: standard_day().to_dict() for name in DAY_ORDER[:4]})
    resp = client.post("/api/timesheets/certify", json=payload)

    assert resp.status_code == 400
    assert "friday" in resp.get_json()["errors"]

    payload["days"]["friday"]["reasons"] = "Holiday"
    resp = client.post("/api/timesheets/certify", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["timesheet"]["certified"] is True
    assert body["timesheet"]["status"] == "certified"


def test_submit(client):
    payload = _week_payload(**{name: standard_day().to_dict() for name in DAY_ORDER[:5]})
    resp = client.post("/api/timesheets/submit", json=payload)

    assert resp.status_code == 200
    assert resp.get_json()["timesheet"]["status"] == "submitted"


def test_classify_day_with_explicit_flags(client):
    resp = client.post(
        "/api/days/classify",
        json={"day": {"timeIn": "08:00", "timeOut": "18:00"}, "isSeventhConsecutiveDay": True},
    )

    body = resp.get_json()
    assert body["hours"] == {"regular": 0.0, "overtime": 8.0, "doubleTime": 2.0, "totalWorked": 10.0}


def test_classify_day_weekend_from_day_name(client):
    resp = client.post(
        "/api/days/classify",
        json={"day": {"timeIn": "09:00", "timeOut": "12:00"}, "dayName": "Saturday"},
    )

    body = resp.get_json()
    assert body["hours"]["overtime"] == 3.0
    assert body["validation"] == {"valid": True, "errors": []}


def test_week_template(client):
    resp = client.get("/api/weeks/2025-03-12/template?user_id=9")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["timesheet"]["weekStartDate"] == "2025-03-10"
    assert body["timesheet"]["userId"] == 9
    assert body["totals"]["regular"] == 40.0
    assert body["outOfTownHours"] == 0.0


def test_week_template_bad_date(client):
    assert client.get("/api/weeks/12-03-2025/template").status_code == 400


def test_calculate_rejects_non_numeric_user_id(client):
    resp = client.post("/api/timesheets/calculate", json={"userId": "abc", "days": {}})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid userId: abc"


def test_calculate_rejects_non_object_day(client):
    resp = client.post("/api/timesheets/calculate", json={"days": {"monday": 5}})

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_classify_day_string_false_flag_is_false(client):
    resp = client.post(
        "/api/days/classify",
        json={
            "day": {"timeIn": "08:00", "timeOut": "18:00"},
            "dayName": "saturday",
            "isWeekend": "false",
            "isSeventhConsecutiveDay": "0",
        },
    )

    body = resp.get_json()
    assert body["hours"] == {"regular": 8.0, "overtime": 2.0, "doubleTime": 0.0, "totalWorked": 10.0}
