"""API tests for /api/analytics, /api/venues and /api/injury-locations."""

import datetime

TODAY = datetime.date(2026, 1, 28)  # Wednesday


def _days_ago(n: int) -> datetime.date:
    return TODAY - datetime.timedelta(days=n)


def _analytics(client):
    response = client.get("/api/analytics", params={"today": TODAY.isoformat()})
    assert response.status_code == 200
    return response.json()


def test_empty_log(client):
    data = _analytics(client)
    assert data["sessionsThisWeek"] == 0
    assert data["hardSessionsLast7Days"] == 0
    assert data["daysSinceLastRestDay"] == 0
    assert data["painFlagsLast30Days"] == []
    assert len(data["weeklySessionCounts"]) == 8
    assert data["weeklySessionCounts"][7] == {"weekStart": "2026-01-26", "count": 0}
    assert data["weeklySessionCounts"][0]["weekStart"] == "2025-12-08"
    assert all(entry["average"] is None for entry in data["performanceTrend"])
    assert all(entry["average"] is None for entry in data["productivityTrend"])


def test_worked_example(client, session_payload):
    client.post("/api/sessions", json=session_payload(date=datetime.date(2026, 1, 26)))
    client.post("/api/sessions", json=session_payload(date=datetime.date(2026, 1, 27)))
    client.post("/api/sessions", json=session_payload(date=datetime.date(2026, 1, 23)))

    weekly = _analytics(client)["weeklySessionCounts"]
    assert weekly[7] == {"weekStart": "2026-01-26", "count": 2}
    assert weekly[6] == {"weekStart": "2026-01-19", "count": 1}
    assert weekly[5]["count"] == 0


def test_sessions_this_week_counts_rows(client, session_payload):
    for _ in range(2):
        client.post("/api/sessions", json=session_payload(date=datetime.date(2026, 1, 26)))
    client.post("/api/sessions", json=session_payload(date=datetime.date(2026, 2, 1)))  # Sunday
    client.post("/api/sessions", json=session_payload(date=datetime.date(2026, 1, 25)))  # last week

    data = _analytics(client)
    assert data["sessionsThisWeek"] == 3
    assert data["weeklySessionCounts"][7]["count"] == 2


def test_hard_sessions_last_7_days(client, session_payload):
    client.post("/api/sessions", json=session_payload(date=TODAY, intensity="hard"))
    client.post("/api/sessions", json=session_payload(date=_days_ago(6), intensity="hard"))
    client.post("/api/sessions", json=session_payload(date=_days_ago(7), intensity="hard"))
    client.post("/api/sessions", json=session_payload(date=_days_ago(1), intensity="moderate"))
    assert _analytics(client)["hardSessionsLast7Days"] == 2


def test_days_since_last_rest_day(client, session_payload):
    for n in (0, 1, 2, 4):
        client.post("/api/sessions", json=session_payload(date=_days_ago(n)))
    assert _analytics(client)["daysSinceLastRestDay"] == 3


def test_rest_day_today(client, session_payload):
    for n in (1, 2):
        client.post("/api/sessions", json=session_payload(date=_days_ago(n)))
    assert _analytics(client)["daysSinceLastRestDay"] == 0


def test_pain_flags_count_each_session_once(client, session_payload):
    client.post("/api/sessions", json=session_payload(
        date=TODAY, injuries=[{"location": "finger"}, {"location": "finger", "note": "other hand"}],
    ))
    client.post("/api/sessions", json=session_payload(date=_days_ago(29), injuries=[{"location": "finger"}]))
    client.post("/api/sessions", json=session_payload(date=_days_ago(3), injuries=[{"location": "elbow"}]))
    client.post("/api/sessions", json=session_payload(date=_days_ago(30), injuries=[{"location": "knee"}]))

    assert _analytics(client)["painFlagsLast30Days"] == [
        {"location": "elbow", "count": 1},
        {"location": "finger", "count": 2},
    ]


def test_trends(client, session_payload):
    client.post("/api/sessions", json=session_payload(date=TODAY, performance="weak", productivity="high"))
    client.post("/api/sessions", json=session_payload(date=_days_ago(1), performance="strong", productivity="high"))
    client.post("/api/sessions", json=session_payload(date=_days_ago(7), performance="strong", productivity="low"))

    data = _analytics(client)
    assert data["performanceTrend"][7] == {"weekStart": "2026-01-26", "average": 2.0}
    assert data["performanceTrend"][6]["average"] == 3.0
    assert data["performanceTrend"][5]["average"] is None
    assert data["productivityTrend"][7]["average"] == 3.0
    assert data["productivityTrend"][6]["average"] == 1.0


def test_today_defaults_to_current_date(client):
    data = client.get("/api/analytics").json()
    monday = datetime.date.today() - datetime.timedelta(days=datetime.date.today().weekday())
    assert data["weeklySessionCounts"][7]["weekStart"] == monday.isoformat()


def test_venues_sorted_distinct(client, session_payload):
    for venue in ("The Arch", "Arco", None, "Arco"):
        client.post("/api/sessions", json=session_payload(venue=venue))
    assert client.get("/api/venues").json() == ["Arco", "The Arch"]


def test_injury_locations_sorted_distinct(client, session_payload):
    client.post("/api/sessions", json=session_payload(injuries=[{"location": "wrist"}, {"location": "finger"}]))
    client.post("/api/sessions", json=session_payload(injuries=[{"location": "finger"}]))
    assert client.get("/api/injury-locations").json() == ["finger", "wrist"]
