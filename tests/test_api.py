from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import app

POSITIONS = ("PG", "SG", "SF", "PF", "C")


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("FRANCHISE_AI_ADMIN_TOKEN", raising=False)
    monkeypatch.delenv("FRANCHISE_AI_DEFAULT_DIFFICULTY", raising=False)
    return TestClient(app)


def _players(abbr, ratings, **extra):
    return [
        {
            "id": f"{abbr.lower()}{i}",
            "firstName": "Player",
            "lastName": str(i),
            "teamAbbreviation": abbr,
            "position": POSITIONS[i % 5],
            "age": 27,
            "overallRating": r,
            "contractSalary": 5_000_000,
            "contractYearsRemaining": 2,
            **extra,
        }
        for i, r in enumerate(ratings)
    ]


def _team(abbr, players):
    return {"id": abbr, "abbreviation": abbr, "city": "City", "name": abbr, "roster": [p["id"] for p in players]}


@pytest.fixture
def snapshot():
    home = _players("AAA", [82] * 10)
    away = _players("BBB", [70] * 10)
    return {
        "players": home + away,
        "teams": [_team("AAA", home), _team("BBB", away)],
        "standings": {
            "east": [{"teamId": "AAA", "wins": 11, "losses": 9}],
            "west": [{"teamId": "BBB", "wins": 15, "losses": 15}],
        },
    }


def test_health_and_deadline(client):
    body = client.get("/").json()
    assert body["ok"] is True
    assert body["default_difficulty"] == "pro"

    deadline = client.get("/api/ai/trade/deadline/2025").json()
    assert deadline["deadline"] == {"month": 1, "day": 6, "year": 2026}


def test_direction_endpoint(client, snapshot):
    res = client.post("/api/ai/direction", json={**snapshot, "team_ids": ["AAA"]})
    assert res.status_code == 200
    team = res.json()["teams"]["AAA"]
    assert team["direction"] == "win_now"
    assert team["trade_interest"] == "medium"
    assert team["record_weight"] == pytest.approx(0.5)


def test_unknown_team_is_a_bad_payload(client, snapshot):
    res = client.post("/api/ai/direction", json={**snapshot, "team_ids": ["ZZZ"]})
    assert res.status_code == 400
    body = res.json()
    assert body["ok"] is False
    assert body["error"]["code"] == "BAD_PAYLOAD"


def test_bad_date_is_a_bad_payload(client, snapshot):
    res = client.post(
        "/api/ai/trade/proposals",
        json={**snapshot, "user_team_id": "BBB", "current_date": "not-a-date", "season_year": 2025},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "BAD_PAYLOAD"


def test_trade_evaluation_endpoint(client, snapshot):
    res = client.post(
        "/api/ai/trade/evaluate",
        json={
            **snapshot,
            "team_id": "AAA",
            "ai_gives": [{"type": "player", "playerId": "aaa9"}],
            "ai_receives": [{"type": "player", "playerId": "bbb0"}],
            "difficulty": "rookie",
        },
    )
    assert res.status_code == 200
    evaluation = res.json()["evaluation"]
    assert evaluation["decision"] in ("accept", "reject")
    assert set(evaluation["value_analysis"]) >= {"receiving", "giving", "net", "threshold"}


def test_expire_endpoint(client):
    proposal = {
        "id": "p1",
        "proposing_team_id": "AAA",
        "status": "pending",
        "proposal": {"aiGives": [{"type": "player", "playerId": "a"}], "aiReceives": [{"type": "pick", "pickId": "k"}]},
        "created_at": "2025-11-20",
        "expires_at": "2025-11-23",
    }
    body = client.post("/api/ai/trade/expire", json={"current_date": "2025-11-26", "proposals": [proposal]}).json()
    assert [p["id"] for p in body["expired"]] == ["p1"]
    assert body["proposals"][0]["status"] == "expired"
    assert body["proposals"][0]["resolved_at"] == "2025-11-26"


def test_lineup_select_endpoint(client):
    roster = _players("AAA", [80, 78, 76, 75, 82, 60, 60])
    body = client.post("/api/ai/lineup/select", json={"roster": roster, "seed": 1}).json()
    assert body["starters"] == ["aaa0", "aaa1", "aaa2", "aaa3", "aaa4"]
    assert body["sub_strategy"] in ("staggered", "platoon")


def test_lineup_injury_endpoint(client):
    roster = _players("AAA", [80, 78, 76, 75, 82, 70])
    roster[4]["isInjured"] = True
    roster[5]["position"] = "C"
    body = client.post(
        "/api/ai/lineup/refresh",
        json={"roster": roster, "current_starters": ["aaa0", "aaa1", "aaa2", "aaa3", "aaa4"], "injured_player_id": "aaa4"},
    ).json()
    assert body["changed"] is True
    assert body["starters"][4] == "aaa5"


def test_contracts_offseason_endpoint(client, snapshot):
    free_agent = {"id": "fa1", "teamAbbreviation": "FA", "position": "C", "overallRating": 72, "age": 25}
    payload = {**snapshot, "players": snapshot["players"] + [free_agent], "season_year": 2025, "user_team_id": "BBB"}
    res = client.post("/api/ai/contracts/offseason", json=payload)
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert {"cuts", "extensions", "signings", "updated_players"} <= set(body)


def test_admin_token_guards_post_routes(monkeypatch, snapshot):
    monkeypatch.setenv("FRANCHISE_AI_ADMIN_TOKEN", "s3cret")
    client = TestClient(app)

    assert client.post("/api/ai/direction", json=snapshot).status_code == 401
    ok = client.post("/api/ai/direction", json=snapshot, headers={"X-Admin-Token": "s3cret"})
    assert ok.status_code == 200
    assert client.get("/").status_code == 200
