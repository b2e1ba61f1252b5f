"""
Exercise catalog API models.

Wire format is camelCase (externalId, bodyPart, gifUrl, ...) to match what
the mobile client already consumes; Python attributes stay snake_case.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models import ExerciseRecord


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExerciseResponse(CamelModel):
    """A catalog exercise as returned to clients."""

    external_id: Optional[str] = None
    name: str
    muscle_group: Optional[str] = None
    body_part: Optional[str] = None
    target: Optional[str] = None
    equipment: Optional[str] = None
    difficulty: Optional[str] = None
    category: Optional[str] = None
    secondary_muscles: List[str] = Field(default_factory=list)
    gif_url: Optional[str] = None
    video_url: Optional[str] = None
    image_url: Optional[str] = None
    notes: Optional[str] = None
    instructions: List[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: ExerciseRecord) -> "ExerciseResponse":
        """Convert an ExerciseRecord to its response model."""
        return cls(
            external_id=record.external_id,
            name=record.name,
            muscle_group=record.muscle_group,
            body_part=record.body_part,
            target=record.target,
            equipment=record.equipment,
            difficulty=record.difficulty,
            category=record.category,
            secondary_muscles=record.secondary_muscles,
            gif_url=record.media.gif_url,
            video_url=record.media.video_url,
            image_url=record.media.image_url,
            notes=record.notes,
            instructions=record.instructions,
        )


class SearchExercisesResponse(CamelModel):
    """One page of search results."""

    success: bool = True
    total: int = Field(..., description="Number of records after local refinement")
    limit: int
    offset: int
    exercises: List[ExerciseResponse]


class ExerciseDetailResponse(CamelModel):
    """A single upstream exercise."""

    success: bool = True
    exercise: ExerciseResponse


class LocalExerciseResponse(ExerciseResponse):
    """A stored catalog exercise, including its local id."""

    id: Any

    @classmethod
    def from_row(cls, row: Dict[str, Any], record: ExerciseRecord) -> "LocalExerciseResponse":
        """Combine a stored row id with its converted record."""
        return cls(id=row.get("id"), **ExerciseResponse.from_record(record).model_dump())


class LocalExerciseListResponse(CamelModel):
    """A page of stored catalog exercises."""

    success: bool = True
    limit: int
    offset: int
    exercises: List[LocalExerciseResponse]


class LocalExerciseDetailResponse(CamelModel):
    """A single stored catalog exercise."""

    item: LocalExerciseResponse


class ErrorResponse(BaseModel):
    """Error body returned by the catalog endpoints."""

    error: str
