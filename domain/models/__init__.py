"""
Domain models for the exercise catalog.

These models are independent of infrastructure concerns (database, HTTP,
upstream provider):
- ExerciseRecord: canonical shape of a catalog exercise
- MediaRefs: optional media links of an exercise

Usage:
    >>> from domain.models import ExerciseRecord, MediaRefs
    >>> record = ExerciseRecord(
    ...     external_id="0001",
    ...     name="3/4 Sit-up",
    ...     muscle_group="waist",
    ...     media=MediaRefs(gif_url="https://example.com/0001.gif"),
    ... )
"""

from domain.models.exercise_record import ExerciseRecord, MediaRefs

__all__ = [
    "ExerciseRecord",
    "MediaRefs",
]
