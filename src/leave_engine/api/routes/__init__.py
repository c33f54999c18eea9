"""API routes."""

from leave_engine.api.routes.employees import router as employees_router
from leave_engine.api.routes.health import router as health_router
from leave_engine.api.routes.leaves import router as leaves_router

__all__ = ["employees_router", "health_router", "leaves_router"]
