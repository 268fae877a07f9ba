from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from backend.app import create_app
from backend.core.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(APP_NAME="finance-projection-test", LOG_LEVEL="WARNING", GOAL_MAX_MONTHS=600)


@pytest.fixture()
def app(settings: Settings) -> Flask:
    return create_app(settings)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
