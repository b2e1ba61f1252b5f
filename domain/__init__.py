"""
Domain layer for the exercise catalog service.

This package contains pure domain models, the muscle-group taxonomy and
converters that are independent of infrastructure concerns.
"""

from domain.models import ExerciseRecord, MediaRefs
from domain.taxonomy import MUSCLE_GROUPS

__all__ = [
    "ExerciseRecord",
    "MediaRefs",
    "MUSCLE_GROUPS",
]
