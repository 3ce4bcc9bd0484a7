"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import get_course_service

__all__ = ["get_course_service"]
