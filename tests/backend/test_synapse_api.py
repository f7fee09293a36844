"""
API tests for the Synapse router.
"""

from backend.app.dependencies import get_synapse_service
from synapse.exceptions import ComputationCancelled, RepositoryError

BASE = "/api/v1/synapse"


class FailingService:
    """Service double whose every operation hits a repository failure."""

    def submit_onboarding(self, *args, **kwargs):
        raise RepositoryError("replace_skills")

    def compute_profile(self, user_id):
        raise RepositoryError("list_skills")

    def compute_matches(self, user_id):
        raise RepositoryError("list_all_others_with_skills")

    async def compute_explore_feed(self, user_id, cancel_event=None):
        raise RepositoryError("list_open_projects")


class CancelledService:
    """Service double whose explore computation is cancelled."""

    async def compute_explore_feed(self, user_id, cancel_event=None):
        raise ComputationCancelled("compute_explore_feed")


class TestAuthentication:
    """Requests without an authenticated user are rejected."""

    def test_matches_requires_user(self, test_app_client):
        response = test_app_client.get(f"{BASE}/matches")

        assert response.status_code == 401
        assert response.json() == {"detail": "Not authenticated", "status_code": 401}
        assert response.headers["WWW-Authenticate"] == "Bearer"


class TestOnboardingEndpoint:
    """Tests for POST /synapse/onboarding."""

    def test_submit_and_read_back(self, login_as, five_members):
        client = login_as(five_members["A"])

        response = client.post(
            f"{BASE}/onboarding",
            json={
                "teach_skills": [" Go", "go", "SQL"],
                "learn_skills": ["Rust"],
                "bio": "Backend person",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Synapse profile updated"}

        profile = client.get(f"{BASE}/profile").json()
        assert profile == {"bio": "Backend person", "teach": ["go", "sql"], "learn": ["rust"]}

    def test_accepts_camel_case_fields(self, login_as, five_members):
        client = login_as(five_members["C"])

        response = client.post(
            f"{BASE}/onboarding",
            json={"teachSkills": ["Kotlin"], "learnSkills": []},
        )

        assert response.status_code == 200
        assert client.get(f"{BASE}/profile").json()["teach"] == ["kotlin"]

    def test_invalid_payload(self, login_as, five_members):
        client = login_as(five_members["A"])

        response = client.post(f"{BASE}/onboarding", json={"teach_skills": "python"})

        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"

    def test_repository_failure(self, login_as, five_members):
        client = login_as(five_members["A"])
        client.app.dependency_overrides[get_synapse_service] = FailingService

        response = client.post(f"{BASE}/onboarding", json={"teach_skills": ["go"]})

        client.app.dependency_overrides.pop(get_synapse_service, None)
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to update profile"


class TestProfileEndpoint:
    """Tests for GET /synapse/profile."""

    def test_profile(self, login_as, five_members):
        response = login_as(five_members["A"]).get(f"{BASE}/profile")

        assert response.status_code == 200
        assert response.json() == {"bio": "I am A", "teach": ["python"], "learn": ["react"]}

    def test_repository_failure(self, login_as, five_members):
        client = login_as(five_members["A"])
        client.app.dependency_overrides[get_synapse_service] = FailingService

        response = client.get(f"{BASE}/profile")

        client.app.dependency_overrides.pop(get_synapse_service, None)
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to fetch profile"


class TestMatchesEndpoint:
    """Tests for GET /synapse/matches."""

    def test_ranked_matches(self, login_as, five_members):
        response = login_as(five_members["A"]).get(f"{BASE}/matches")

        assert response.status_code == 200
        body = response.json()
        assert [(m["user_id"], m["score"]) for m in body] == [
            (five_members["B"], 60),
            (five_members["C"], 23),
            (five_members["D"], 12),
        ]
        assert body[0]["badges"] == ["Perfect Match"]
        assert body[1]["reasons"] == ["Can teach you react"]
        assert body[2]["reasons"] == ["Wants to learn python from you"]

    def test_repository_failure_is_generic(self, login_as, five_members):
        client = login_as(five_members["A"])
        client.app.dependency_overrides[get_synapse_service] = FailingService

        response = client.get(f"{BASE}/matches")

        client.app.dependency_overrides.pop(get_synapse_service, None)
        assert response.status_code == 500
        assert response.json() == {"detail": "Matchmaking failed", "status_code": 500}
        assert "list_all_others_with_skills" not in response.text


class TestExploreEndpoint:
    """Tests for GET /synapse/explore."""

    def test_feed(self, login_as, explore_content):
        response = login_as(explore_content["A"]).get(f"{BASE}/explore")

        assert response.status_code == 200
        body = response.json()
        assert [(item["type"], item["score"]) for item in body] == [
            ("user", 120),
            ("project", 80),
            ("user", 55),
            ("user", 55),
            ("article", 35),
            ("article", 35),
        ]
        assert body[1]["subtitle"] == "Project Opportunity"

    def test_empty_feed_without_skills(self, login_as, explore_content, make_member):
        response = login_as(make_member("F")).get(f"{BASE}/explore")

        assert response.status_code == 200
        assert response.json() == []

    def test_repository_failure(self, login_as, five_members):
        client = login_as(five_members["A"])
        client.app.dependency_overrides[get_synapse_service] = FailingService

        response = client.get(f"{BASE}/explore")

        client.app.dependency_overrides.pop(get_synapse_service, None)
        assert response.status_code == 500
        assert response.json()["detail"] == "Explore failed"

    def test_cancelled_computation(self, login_as, five_members):
        client = login_as(five_members["A"])
        client.app.dependency_overrides[get_synapse_service] = CancelledService

        response = client.get(f"{BASE}/explore")

        client.app.dependency_overrides.pop(get_synapse_service, None)
        assert response.status_code == 503
        assert response.json() == {"detail": "Explore cancelled", "status_code": 503}


class TestHealth:
    """Tests for health probes."""

    def test_liveness(self, test_app_client):
        assert test_app_client.get("/health").json() == {"status": "ok"}

    def test_readiness(self, test_app_client):
        response = test_app_client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True}
