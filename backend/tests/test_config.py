import pytest
from pydantic import ValidationError

from backend.app import create_app
from backend.core.config import Settings


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("APP_NAME", "projection-staging")
    monkeypatch.setenv("GOAL_MAX_MONTHS", "120")
    monkeypatch.setenv("CORS_ORIGINS", '["https://finance.example.com"]')

    settings = Settings()

    assert settings.APP_NAME == "projection-staging"
    assert settings.GOAL_MAX_MONTHS == 120
    assert settings.CORS_ORIGINS == ["https://finance.example.com"]


def test_goal_cap_comes_from_settings():
    app = create_app(Settings(GOAL_MAX_MONTHS=12, LOG_LEVEL="WARNING"))
    with app.test_client() as client:
        resp = client.post(
            "/api/investments/goal",
            json={"goalAmount": 1_000_000, "initialAmount": 0, "monthlyContribution": 10, "interestRate": 0},
        )

    body = resp.get_json()
    assert body["reached"] is False
    assert body["monthsToReach"] == 12


def test_goal_cap_setting_is_bounded():
    with pytest.raises(ValidationError):
        Settings(GOAL_MAX_MONTHS=1201)
    with pytest.raises(ValidationError):
        Settings(GOAL_MAX_MONTHS=0)
