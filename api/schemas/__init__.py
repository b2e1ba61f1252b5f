"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- exercises: Exercise catalog search, detail and local catalog models
"""

from api.schemas.exercises import (
    ErrorResponse,
    ExerciseDetailResponse,
    ExerciseResponse,
    LocalExerciseDetailResponse,
    LocalExerciseListResponse,
    LocalExerciseResponse,
    SearchExercisesResponse,
)

__all__ = [
    "ErrorResponse",
    "ExerciseDetailResponse",
    "ExerciseResponse",
    "LocalExerciseDetailResponse",
    "LocalExerciseListResponse",
    "LocalExerciseResponse",
    "SearchExercisesResponse",
]
