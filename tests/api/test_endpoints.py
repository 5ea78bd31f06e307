"""
HTTP endpoint integration tests for puzzle-times-api.

These tests verify that FastAPI endpoints:
- Return correct HTTP status codes
- Validate input at the boundary
- Return the aggregation engine's output as JSON

Uses FastAPI TestClient for in-memory HTTP testing.
"""
import pytest
from fastapi.testclient import TestClient


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def seeded_scores(db_session, sample_players):
    """Three days of scores for Tim and Alex."""
    from app.repositories import ScoreRepository

    tim, alex = sample_players
    repo = ScoreRepository(db_session)
    data = [
        (tim, "2025-01-01", {"ZIP": 60, "MINI_SUDOKU": 90, "QUEENS": 120}),
        (alex, "2025-01-01", {"ZIP": 50, "MINI_SUDOKU": 90, "QUEENS": 130}),
        (tim, "2025-01-02", {"ZIP": 70, "QUEENS": 100}),
        (alex, "2025-01-02", {"ZIP": 80, "MINI_SUDOKU": 60, "QUEENS": 90}),
        (alex, "2025-01-03", {"ZIP": 40}),
    ]
    for player, date, times in data:
        for game, secs in times.items():
            repo.upsert(player.id, date, game, secs)
    db_session.commit()
    return sample_players


# =============================================================================
# ROOT & HEALTH ENDPOINTS
# =============================================================================

class TestRootAndHealthEndpoints:
    """Test root and health check endpoints."""

    def test_root_endpoint(self, test_client: TestClient):
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert "endpoints" in data
        assert data["games"] == {"ZIP": "Zip", "MINI_SUDOKU": "Mini Sudoku", "QUEENS": "Queens"}

    def test_health_endpoint(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_health_endpoint(self, test_client: TestClient, sample_players):
        response = test_client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["components"]["database"]["status"] == "connected"
        assert data["components"]["database"]["counts"]["players"] == 2

    def test_correlation_id_echoed(self, test_client: TestClient):
        response = test_client.get("/health", headers={"X-Correlation-ID": "abc-123"})

        assert response.headers["X-Correlation-ID"] == "abc-123"

    async def test_health_async(self, async_client):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert "X-Correlation-ID" in response.headers


# =============================================================================
# PLAYERS
# =============================================================================

class TestPlayersEndpoints:
    """Test the player directory."""

    def test_list_sorted_by_name(self, test_client: TestClient, sample_players):
        response = test_client.get("/api/v1/players")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Alex", "Tim"]

    def test_create_player(self, test_client: TestClient):
        response = test_client.post("/api/v1/players", json={"name": "  Sam  "})

        assert response.status_code == 201
        assert response.json()["name"] == "Sam"

    def test_create_blank_name_rejected(self, test_client: TestClient):
        response = test_client.post("/api/v1/players", json={"name": "   "})

        assert response.status_code == 400

    def test_create_duplicate_name_ignores_case(self, test_client: TestClient, sample_players):
        response = test_client.post("/api/v1/players", json={"name": "alex"})

        assert response.status_code == 409

    def test_rename_player(self, test_client: TestClient, sample_players):
        tim = sample_players[0]
        response = test_client.put("/api/v1/players", json={"id": tim.id, "name": "Timothy"})

        assert response.status_code == 200
        assert response.json()["name"] == "Timothy"

    def test_rename_to_own_name_with_new_case(self, test_client: TestClient, sample_players):
        tim = sample_players[0]
        response = test_client.put("/api/v1/players", json={"id": tim.id, "name": "TIM"})

        assert response.status_code == 200

    def test_rename_to_taken_name(self, test_client: TestClient, sample_players):
        tim = sample_players[0]
        response = test_client.put("/api/v1/players", json={"id": tim.id, "name": "Alex"})

        assert response.status_code == 409

    def test_rename_missing_fields(self, test_client: TestClient):
        response = test_client.put("/api/v1/players", json={"name": "Sam"})

        assert response.status_code == 400

    def test_rename_unknown_player(self, test_client: TestClient):
        response = test_client.put("/api/v1/players", json={"id": 999, "name": "Sam"})

        assert response.status_code == 404

    def test_delete_player_without_scores(self, test_client: TestClient, sample_players):
        alex = sample_players[1]
        response = test_client.delete(f"/api/v1/players?id={alex.id}")

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        assert [p["name"] for p in test_client.get("/api/v1/players").json()] == ["Tim"]

    def test_delete_player_with_scores_requires_flag(self, test_client: TestClient, seeded_scores):
        tim = seeded_scores[0]

        response = test_client.delete(f"/api/v1/players?id={tim.id}")
        assert response.status_code == 409

        response = test_client.delete(f"/api/v1/players?id={tim.id}&delete_scores=true")
        assert response.status_code == 200

        scores = test_client.get("/api/v1/scores?date=2025-01-01").json()
        assert {s["player_name"] for s in scores} == {"Alex"}

    @pytest.mark.parametrize("query", ["", "?id=abc", "?id=0"])
    def test_delete_invalid_id(self, test_client: TestClient, query):
        response = test_client.delete(f"/api/v1/players{query}")

        assert response.status_code == 400

    def test_delete_unknown_player(self, test_client: TestClient):
        response = test_client.delete("/api/v1/players?id=999")

        assert response.status_code == 404


# =============================================================================
# SCORES
# =============================================================================

class TestScoresEndpoints:
    """Test daily time entry."""

    def test_save_and_read_back(self, test_client: TestClient, sample_players):
        tim = sample_players[0]
        response = test_client.post("/api/v1/scores", json={
            "player_id": tim.id,
            "date": "2025-01-05",
            "times": {"ZIP": "1:05", "MINI_SUDOKU": "95", "QUEENS": "0:02:10"},
        })

        assert response.status_code == 200
        saved = {s["game"]: s for s in response.json()["scores"]}
        assert saved["ZIP"]["time_secs"] == 65
        assert saved["MINI_SUDOKU"]["time_secs"] == 95
        assert saved["QUEENS"]["time_secs"] == 130
        assert saved["ZIP"]["display"] == "01:05"

        day = test_client.get("/api/v1/scores?date=2025-01-05").json()
        assert len(day) == 3
        assert all(s["player_name"] == "Tim" for s in day)

    def test_resubmit_updates_and_blank_clears(self, test_client: TestClient, sample_players):
        tim = sample_players[0]
        test_client.post("/api/v1/scores", json={
            "player_id": tim.id,
            "date": "2025-01-05",
            "times": {"ZIP": "60", "MINI_SUDOKU": "70", "QUEENS": "80"},
        })
        response = test_client.post("/api/v1/scores", json={
            "player_id": tim.id,
            "date": "2025-01-05",
            "times": {"ZIP": "50", "MINI_SUDOKU": "", "QUEENS": "80"},
        })

        saved = {s["game"]: s["time_secs"] for s in response.json()["scores"]}
        assert saved == {"ZIP": 50, "QUEENS": 80}

    def test_invalid_time_writes_nothing(self, test_client: TestClient, sample_players):
        tim = sample_players[0]
        response = test_client.post("/api/v1/scores", json={
            "player_id": tim.id,
            "date": "2025-01-05",
            "times": {"ZIP": "60", "MINI_SUDOKU": "1:75"},
        })

        assert response.status_code == 400
        assert "MINI_SUDOKU" in response.json()["detail"]
        assert test_client.get("/api/v1/scores?date=2025-01-05").json() == []

    @pytest.mark.parametrize("text", ["9" * 5000, "99999999999999999999", "86401", "25:00:00"])
    def test_oversized_time_rejected(self, test_client: TestClient, sample_players, text):
        response = test_client.post("/api/v1/scores", json={
            "player_id": sample_players[0].id,
            "date": "2025-01-05",
            "times": {"ZIP": text},
        })

        assert response.status_code == 400
        assert "ZIP" in response.json()["detail"]
        assert test_client.get("/api/v1/scores?date=2025-01-05").json() == []

    def test_one_day_is_the_longest_time(self, test_client: TestClient, sample_players):
        response = test_client.post("/api/v1/scores", json={
            "player_id": sample_players[0].id,
            "date": "2025-01-05",
            "times": {"QUEENS": "24:00:00"},
        })

        assert response.status_code == 200
        assert response.json()["scores"][0]["display"] == "24:00:00"

    def test_numeric_times_accepted(self, test_client: TestClient, sample_players):
        tim = sample_players[0]
        response = test_client.post("/api/v1/scores", json={
            "player_id": tim.id,
            "date": "2025-01-05",
            "times": {"ZIP": 42},
        })

        assert response.status_code == 200
        assert response.json()["scores"][0]["time_secs"] == 42

    def test_unknown_player(self, test_client: TestClient):
        response = test_client.post("/api/v1/scores", json={
            "player_id": 999,
            "date": "2025-01-05",
            "times": {"ZIP": "60"},
        })

        assert response.status_code == 404

    def test_missing_player_id(self, test_client: TestClient):
        response = test_client.post("/api/v1/scores", json={"date": "2025-01-05", "times": {}})

        assert response.status_code == 400

    def test_invalid_date_on_save(self, test_client: TestClient, sample_players):
        response = test_client.post("/api/v1/scores", json={
            "player_id": sample_players[0].id,
            "date": "05/01/2025",
            "times": {"ZIP": "60"},
        })

        assert response.status_code == 400

    def test_invalid_date_on_read(self, test_client: TestClient):
        response = test_client.get("/api/v1/scores?date=2025-1-5")

        assert response.status_code == 400

    def test_read_defaults_to_today(self, test_client: TestClient):
        response = test_client.get("/api/v1/scores")

        assert response.status_code == 200
        assert response.json() == []


# =============================================================================
# HISTORY, STATS, SCOREBOARD
# =============================================================================

class TestHistoryEndpoint:
    """Test the daily view over a date range."""

    def test_range_newest_first(self, test_client: TestClient, seeded_scores):
        response = test_client.get("/api/v1/history?date_from=2025-01-01&date_to=2025-01-02")

        assert response.status_code == 200
        data = response.json()
        assert [d["date"] for d in data] == ["2025-01-02", "2025-01-01"]

        alex, tim = data[0]["players"]
        assert alex["player_name"] == "Alex"
        assert alex["overall"] == 230
        assert tim["overall"] is None
        assert tim["games"] == {"ZIP": 70, "QUEENS": 100}

    @pytest.mark.parametrize("query", [
        "",
        "?date_from=2025-01-01",
        "?date_from=2025-01-01&date_to=tomorrow",
    ])
    def test_requires_both_dates(self, test_client: TestClient, query):
        response = test_client.get(f"/api/v1/history{query}")

        assert response.status_code == 400


class TestStatsEndpoint:
    """Test statistics over all scores."""

    def test_stats(self, test_client: TestClient, seeded_scores):
        response = test_client.get("/api/v1/stats")

        assert response.status_code == 200
        data = response.json()
        assert [d["date"] for d in data["daily"]] == ["2025-01-01", "2025-01-02", "2025-01-03"]

        alex, tim = data["players"]
        assert alex["player_name"] == "Alex"
        assert alex["games"]["ZIP"]["days_played"] == 3
        assert alex["games"]["ZIP"]["best"] == 40
        assert alex["overall"]["complete_days"] == 2
        assert alex["wins"]["games"]["ZIP"] == 2
        assert alex["wins"]["games"]["MINI_SUDOKU"] == 2
        assert alex["wins"]["overall"] == 2
        assert tim["wins"]["games"]["ZIP"] == 1
        assert tim["wins"]["games"]["MINI_SUDOKU"] == 1
        assert tim["wins"]["overall"] == 1

    def test_stats_empty(self, test_client: TestClient):
        response = test_client.get("/api/v1/stats")

        assert response.status_code == 200
        assert response.json() == {"players": [], "daily": []}


class TestScoreboardEndpoint:
    """Test the head-to-head scoreboard."""

    def test_scoreboard(self, test_client: TestClient, seeded_scores):
        tim, alex = seeded_scores
        response = test_client.get(f"/api/v1/scoreboard?player_a={alex.id}&player_b={tim.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["player_a"] == {"id": alex.id, "name": "Alex"}

        first = data["daily"][0]
        assert first["games"]["ZIP"]["winner"] == "A"
        assert first["games"]["MINI_SUDOKU"]["winner"] == "TIE"
        assert first["games"]["QUEENS"]["winner"] == "B"
        assert first["day_points"] == {"a": 2, "b": 2}

        last = data["daily"][-1]
        assert last["date"] == "2025-01-03"
        assert last["games"]["ZIP"]["winner"] is None
        assert data["totals"]["overall"] == last["running_total"]

    @pytest.mark.parametrize("query", [
        "",
        "?player_a=1",
        "?player_a=1&player_b=1",
        "?player_a=abc&player_b=1",
        "?player_a=1&player_b=-2",
        "?player_a=1.5&player_b=2",
    ])
    def test_invalid_pair(self, test_client: TestClient, sample_players, query):
        response = test_client.get(f"/api/v1/scoreboard{query}")

        assert response.status_code == 400

    def test_unknown_player(self, test_client: TestClient, sample_players):
        response = test_client.get(f"/api/v1/scoreboard?player_a={sample_players[0].id}&player_b=999")

        assert response.status_code == 404
