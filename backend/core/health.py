"""Health-check payload."""

from backend.core.config import Settings
from backend.schemas.health import HealthResponse


def get_health(settings: Settings) -> HealthResponse:
    """Report the service as up under its configured name."""
    return HealthResponse(status="ok", service=settings.APP_NAME)
