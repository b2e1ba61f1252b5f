"""
Router package for the exercise catalog API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- exercises: Upstream search, lookup and image proxy
- local_exercises: Authenticated view of the imported catalog
"""

from api.routers.health import router as health_router
from api.routers.exercises import router as exercises_router
from api.routers.local_exercises import router as local_exercises_router

__all__ = [
    "health_router",
    "exercises_router",
    "local_exercises_router",
]
