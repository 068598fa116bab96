"""
API tests for the Hunter System endpoints.

Every repository, AI service and the auth dependency are replaced with
fakes through ``app.dependency_overrides``.
"""

import pytest

from api import deps
from application.exceptions import PersistenceError
from backend.services.quest_generator import FALLBACK_QUEST_TITLE, QuestGenerator
from backend.settings import Settings
from tests.fakes import FakeChatResponder, FakeTextGenerator, UnavailableHunterRepository
from tests.fakes.conftest import TEST_USER_ID, build_fake_app, reset_overrides


@pytest.fixture
def harness():
    h = build_fake_app(first_name="Jin")
    yield h
    reset_overrides(h.app)


@pytest.mark.integration
class TestProfileEndpoints:
    def test_auth_user_returns_derived_progression(self):
        h = build_fake_app(xp=1600)
        data = h.client.get("/api/auth/user").json()["data"]
        assert data["id"] == TEST_USER_ID
        assert data["level"] == 5
        assert data["rank"] == "D-Rank Trainee"

    def test_auth_user_created_on_first_sign_in(self):
        h = build_fake_app(seed_hunter=False)
        response = h.client.get("/api/auth/user")
        assert response.status_code == 200
        assert response.json()["data"]["level"] == 1
        assert h.hunters.get(TEST_USER_ID) is not None

    def test_onboarding_generates_quests(self, harness):
        response = harness.client.patch(
            "/api/profile",
            json={"first_name": "Jin", "body_fat_percentage": 18, "onboarding_completed": True},
        )
        assert response.status_code == 200
        assert response.json()["data"]["fat_level"] == "Average"
        assert len(harness.quests.list(TEST_USER_ID)) == 5

    def test_class_below_level_ten_is_400(self, harness):
        response = harness.client.patch("/api/profile", json={"character_class": "Assassin"})
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_invalid_shape_is_422(self, harness):
        response = harness.client.patch("/api/profile", json={"last_name": "Woo"})
        assert response.status_code == 422

    def test_avatar_only(self, harness):
        response = harness.client.patch("/api/profile", json={"profile_image_url": "https://x.io/a.png"})
        assert response.status_code == 200
        assert response.json()["data"]["profile_image_url"] == "https://x.io/a.png"


@pytest.mark.integration
class TestWorkoutEndpoints:
    def test_log_workout(self, harness):
        response = harness.client.post("/api/workouts", json={"total_volume": 2500, "duration": 65})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["analysis"]["xp_gained"] == 75
        assert data["analysis"]["progressive_overload"] is True
        assert data["analysis"]["stat_delta"]["strength"] == 1
        assert data["hunter"]["xp"] == 75
        assert data["workout"]["total_volume"] == 2500

    def test_list_workouts(self, harness):
        harness.client.post("/api/workouts", json={"total_volume": 100})
        harness.client.post("/api/workouts", json={"total_volume": 200})
        data = harness.client.get("/api/workouts?limit=1").json()["data"]
        assert len(data) == 1

    def test_store_failure_is_503_and_nothing_applied(self, harness):
        harness.workouts.fail_next_create = True
        response = harness.client.post("/api/workouts", json={"total_volume": 2500})
        assert response.status_code == 503
        assert harness.hunters.get(TEST_USER_ID).xp == 0
        assert harness.workouts.get_all() == []

    def test_invalid_payload(self, harness):
        response = harness.client.post("/api/workouts", json={"duration": -5})
        assert response.status_code == 422

    def test_limit_bounds(self, harness):
        assert harness.client.get("/api/workouts?limit=0").status_code == 422
        assert harness.client.get("/api/workouts?limit=101").status_code == 422


@pytest.mark.integration
class TestQuestEndpoints:
    def test_generate_and_complete(self, harness):
        created = harness.client.post("/api/quests/daily").json()["data"]
        assert len(created) == 3
        quest_id = created[0]["id"]

        first = harness.client.patch(f"/api/quests/{quest_id}/complete")
        assert first.status_code == 200
        assert first.json()["data"]["xp_awarded"] == 100
        assert first.json()["data"]["hunter"]["xp"] == 100
        assert first.json()["data"]["leveled_up"] is True

        second = harness.client.patch(f"/api/quests/{quest_id}/complete")
        assert second.status_code == 409
        assert harness.hunters.get(TEST_USER_ID).xp == 100

    def test_failed_award_can_be_retried(self, harness):
        quest_id = harness.client.post("/api/quests/daily").json()["data"][0]["id"]
        harness.hunters.fail_with = PersistenceError("connection reset")

        failed = harness.client.patch(f"/api/quests/{quest_id}/complete")
        assert failed.status_code == 503
        assert harness.quests.get_row(quest_id)["completed"] is False

        harness.hunters.fail_with = None
        retried = harness.client.patch(f"/api/quests/{quest_id}/complete")
        assert retried.status_code == 200
        assert harness.hunters.get(TEST_USER_ID).xp == 100

    def test_failed_regeneration_keeps_current_quests(self, harness):
        before = harness.client.post("/api/quests/daily").json()["data"]
        harness.quests.fail_next_replace = True

        assert harness.client.post("/api/quests/daily").status_code == 503
        after = harness.client.get("/api/quests?type=daily").json()["data"]
        assert {q["id"] for q in after} == {q["id"] for q in before}

    def test_weekly_count_from_settings(self):
        settings = Settings(environment="test", weekly_quest_count=4, _env_file=None)
        h = build_fake_app(settings=settings)
        assert len(h.client.post("/api/quests/weekly").json()["data"]) == 4

    def test_generator_failure_returns_fallback(self):
        generator = QuestGenerator(FakeTextGenerator(["not json"]), environment="test")
        h = build_fake_app(proposer=generator)

        response = h.client.post("/api/quests/daily")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [q["title"] for q in data] == [FALLBACK_QUEST_TITLE]
        assert data[0]["xp_reward"] == 50

    def test_filter_by_type(self, harness):
        harness.client.post("/api/quests/daily")
        harness.client.post("/api/quests/weekly")
        data = harness.client.get("/api/quests?type=weekly").json()["data"]
        assert {q["type"] for q in data} == {"weekly"}

    def test_unknown_type_is_422(self, harness):
        assert harness.client.get("/api/quests?type=monthly").status_code == 422

    def test_unknown_quest_is_409(self, harness):
        assert harness.client.patch("/api/quests/999/complete").status_code == 409


@pytest.mark.integration
class TestSystemEndpoints:
    def test_chat_and_history(self, harness):
        response = harness.client.post("/api/system/chat", json={"message": "Status report"})
        assert response.json()["data"] == {"response": "Acknowledged, Hunter."}

        history = harness.client.get("/api/system/messages").json()["data"]
        assert [m["role"] for m in history] == ["assistant", "user"]
        assert harness.hunters.get(TEST_USER_ID).wisdom == 11

    def test_provider_down(self):
        h = build_fake_app(responder=FakeChatResponder(error=TimeoutError()))
        response = h.client.post("/api/system/chat", json={"message": "Hello"})
        assert response.status_code == 200
        assert "temporarily unavailable" in response.json()["data"]["response"]
        assert h.messages.get_all() == []

    def test_empty_message_is_422(self, harness):
        assert harness.client.post("/api/system/chat", json={"message": "  "}).status_code == 422


@pytest.mark.integration
class TestMealsLeaderboardStats:
    def test_meals(self, harness):
        response = harness.client.post(
            "/api/meals", json={"title": "Oats", "calories": 400, "date": "2024-03-15T08:00:00Z"},
        )
        assert response.status_code == 201
        assert harness.hunters.get(TEST_USER_ID).discipline == 11

        assert len(harness.client.get("/api/meals?date=2024-03-15").json()["data"]) == 1
        assert harness.client.get("/api/meals?date=2024-03-16").json()["data"] == []

    def test_leaderboard_orders_by_xp(self, harness):
        harness.hunters.seed([{"id": "rival", "xp": 5000, "email": "rival@example.com"}])
        data = harness.client.get("/api/leaderboard").json()["data"]
        assert [e["id"] for e in data] == ["rival", TEST_USER_ID]
        assert "email" not in data[0]
        assert data[0]["level"] == 8

    def test_stats(self, harness):
        harness.client.post("/api/workouts", json={"total_volume": 2500, "duration": 65})
        data = harness.client.get("/api/stats").json()["data"]
        assert data["xp"] == 75
        assert data["next_level_xp"] == 100
        assert data["xp_to_next_level"] == 25
        assert data["progress"]["total_workouts"] == 1
        assert data["progress"]["current_streak"] == 1

    def test_intensity(self, harness):
        harness.client.post("/api/workouts", json={"total_volume": 300})
        data = harness.client.get("/api/stats/intensity").json()["data"]
        assert len(data) == 1
        assert data[0]["total_volume"] == 300
        assert data[0]["week"].count("-W") == 1

    def test_unknown_hunter_is_404(self):
        h = build_fake_app(seed_hunter=False)
        assert h.client.get("/api/stats").status_code == 404


@pytest.mark.integration
class TestAuthAndAvailability:
    def test_missing_credentials_is_401(self):
        h = build_fake_app(authenticated=False)
        assert h.client.get("/api/stats").status_code == 401

    def test_api_key_with_user(self):
        settings = Settings(environment="test", api_keys="sk_test", _env_file=None)
        h = build_fake_app(authenticated=False, settings=settings)
        response = h.client.get("/api/stats", headers={"X-API-Key": f"sk_test:{TEST_USER_ID}"})
        assert response.status_code == 200

    def test_store_unavailable_is_503(self):
        h = build_fake_app()
        h.app.dependency_overrides[deps.get_hunter_repo] = lambda: UnavailableHunterRepository()
        response = h.client.get("/api/auth/user")
        assert response.status_code == 503
        assert response.json() == {
            "success": False,
            "message": "Database temporarily unavailable. Please try again.",
        }

    def test_health_config_hides_secrets(self):
        settings = Settings(environment="test", groq_api_key="gsk_secret", _env_file=None)
        h = build_fake_app(settings=settings)
        body = h.client.get("/health/config").json()
        assert body["llm_configured"] is True
        assert "gsk_secret" not in str(body)
