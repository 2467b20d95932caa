"""Shared fixtures: a fresh app (and store) per test."""
import pytest
from fastapi.testclient import TestClient

from recipes_app.api import create_app
from recipes_app.core.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(APP_NAME="Recipes API (test)", SEED_SAMPLE_DATA=True)


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    # entering the context runs the lifespan, which seeds the store
    with TestClient(app) as c:
        yield c
