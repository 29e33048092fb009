"""API route exports."""

from api.routes.analyze import router as analyze_router
from api.routes.audits import router as audits_router
from api.routes.checks import router as checks_router
from api.routes.health import router as health_router

__all__ = ["analyze_router", "audits_router", "checks_router", "health_router"]
