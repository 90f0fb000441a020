"""
Pytest configuration and fixtures for the test suite.
"""

import pytest
from fastapi.testclient import TestClient

from backend.app.core.config import Settings
from backend.app.main import app
from backend.app.services.generator import IdeaGenerator, get_generator


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests requiring API keys"
    )


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="run integration tests (requires API keys)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --integration flag is used."""
    if config.getoption("--integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def _make_settings(**overrides) -> Settings:
    """Settings that ignore the real environment's API keys and .env file."""
    values = {"ANTHROPIC_API_KEY": None, "OPENAI_API_KEY": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def no_key_settings():
    return _make_settings()


@pytest.fixture
def client_factory():
    """Build a TestClient whose /api/generate uses the given generator."""

    def _make(generator: IdeaGenerator) -> TestClient:
        app.dependency_overrides[get_generator] = lambda: generator
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory, no_key_settings):
    return client_factory(IdeaGenerator(no_key_settings))


@pytest.fixture
def make_settings():
    return _make_settings
