"""
Canonical exercise catalog record.

Every provider payload, whatever its field names, is normalized into an
ExerciseRecord before it is filtered, returned to clients or stored.
The `(name, muscle_group)` pair is the natural key used by the importer.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class MediaRefs(BaseModel):
    """Optional media links attached to an exercise."""

    gif_url: Optional[str] = Field(default=None, description="Animated demonstration")
    video_url: Optional[str] = Field(default=None, description="Video demonstration")
    image_url: Optional[str] = Field(default=None, description="Still image")


class ExerciseRecord(BaseModel):
    """
    Value object representing one catalog exercise.

    Examples:
        >>> record = ExerciseRecord(name="Bench Press", muscle_group="chest")
        >>> record.natural_key
        ('Bench Press', 'chest')
        >>> record.secondary_muscles
        []
    """

    # Identity
    external_id: Optional[str] = Field(
        default=None, description="Identifier assigned by the upstream provider"
    )
    name: str = Field(..., description="Human-readable exercise name")

    # Classification
    muscle_group: Optional[str] = Field(
        default=None, description="Primary muscle group / body part (natural key part)"
    )
    body_part: Optional[str] = Field(default=None, description="Provider body part")
    target: Optional[str] = Field(default=None, description="Provider target muscle")
    equipment: Optional[str] = None
    difficulty: Optional[str] = None
    category: Optional[str] = None
    secondary_muscles: List[str] = Field(default_factory=list)

    # Content
    media: MediaRefs = Field(default_factory=MediaRefs)
    notes: Optional[str] = Field(
        default=None, description="Instruction steps joined by newlines"
    )

    @property
    def natural_key(self) -> Tuple[str, Optional[str]]:
        """Return the `(name, muscle_group)` dedup key."""
        return (self.name, self.muscle_group)

    @property
    def instructions(self) -> List[str]:
        """Split notes back into trimmed, non-empty instruction steps."""
        if not self.notes:
            return []
        return [line.strip() for line in self.notes.splitlines() if line.strip()]
