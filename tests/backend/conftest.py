import os
import sys
from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from backend.app.dependencies import get_current_user_id  # noqa: E402
from backend.app.main import create_app  # noqa: E402


@pytest.fixture
def test_app_client(test_db) -> Iterator[TestClient]:
    """Client for an app bound to the per-test SQLite database."""
    app = create_app()

    with TestClient(app) as client:
        yield client


@pytest.fixture
def login_as(test_app_client) -> Iterator[Callable[[int], TestClient]]:
    """Authenticate subsequent requests as the given user id."""

    def _login(user_id: int) -> TestClient:
        test_app_client.app.dependency_overrides[get_current_user_id] = lambda: user_id
        return test_app_client

    yield _login

    test_app_client.app.dependency_overrides.pop(get_current_user_id, None)
