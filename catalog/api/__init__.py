"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from .routers import courses_router, health_router

__all__ = ["courses_router", "health_router"]
