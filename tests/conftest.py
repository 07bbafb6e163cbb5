"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app
from app.services.scoring import get_rng
from tests.helpers import FixedRandom


@pytest.fixture(autouse=True)
def no_grading_delay(monkeypatch):
    monkeypatch.setattr(settings, "GRADING_DELAY_SECONDS", 0)


@pytest.fixture(autouse=True)
def clear_toasts():
    yield
    app.state.toasts.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def fixed_rng():
    rng = FixedRandom()
    app.dependency_overrides[get_rng] = lambda: rng
    yield rng
    app.dependency_overrides.pop(get_rng, None)
