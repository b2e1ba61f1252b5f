"""
Converters: catalog database row <-> ExerciseRecord.

Database schema (exercises table):
- id: Local primary key
- external_id: Upstream provider identifier
- name, muscle_group: Natural key
- body_part, target, equipment, difficulty, category: Classification
- secondary_muscles: Array of strings
- gif_url, video_url, image_url: Media links
- notes: Instruction steps joined by newlines
- created_at, updated_at: Timestamps
"""

from typing import Any, Dict

from domain.converters.upstream_converters import split_segments
from domain.models import ExerciseRecord, MediaRefs

# Columns refreshed by the importer when a natural key already exists.
DESCRIPTIVE_COLUMNS = (
    "name",
    "muscle_group",
    "body_part",
    "target",
    "equipment",
    "difficulty",
    "category",
    "secondary_muscles",
    "gif_url",
    "video_url",
    "image_url",
    "notes",
)


def record_to_db_row(record: ExerciseRecord) -> Dict[str, Any]:
    """Convert an ExerciseRecord into an insertable row (no id, no timestamps)."""
    return {
        "external_id": record.external_id,
        "name": record.name,
        "muscle_group": record.muscle_group,
        "body_part": record.body_part,
        "target": record.target,
        "equipment": record.equipment,
        "difficulty": record.difficulty,
        "category": record.category,
        "secondary_muscles": list(record.secondary_muscles),
        "gif_url": record.media.gif_url,
        "video_url": record.media.video_url,
        "image_url": record.media.image_url,
        "notes": record.notes,
    }


def refresh_fields(record: ExerciseRecord, existing_row: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the update payload for an existing row.

    All descriptive columns are overwritten. external_id is only written when
    the stored row has none, so a provider id is never rewritten once set.
    """
    row = record_to_db_row(record)
    fields = {column: row[column] for column in DESCRIPTIVE_COLUMNS}
    if not existing_row.get("external_id") and record.external_id:
        fields["external_id"] = record.external_id
    return fields


def db_row_to_record(row: Dict[str, Any]) -> ExerciseRecord:
    """Convert a stored row back into an ExerciseRecord."""
    return ExerciseRecord(
        external_id=row.get("external_id"),
        name=row.get("name") or "",
        muscle_group=row.get("muscle_group"),
        body_part=row.get("body_part"),
        target=row.get("target"),
        equipment=row.get("equipment"),
        difficulty=row.get("difficulty"),
        category=row.get("category"),
        secondary_muscles=split_segments(row.get("secondary_muscles")),
        media=MediaRefs(
            gif_url=row.get("gif_url"),
            video_url=row.get("video_url"),
            image_url=row.get("image_url"),
        ),
        notes=row.get("notes"),
    )


def db_row_to_upstream_shape(row: Dict[str, Any]) -> Dict[str, Any]:
    """Render a stored row with provider field names, for local read paths."""
    record = db_row_to_record(row)
    return {
        "id": record.external_id,
        "name": record.name,
        "bodyPart": record.body_part or record.muscle_group,
        "target": record.target,
        "equipment": record.equipment,
        "difficulty": record.difficulty,
        "category": record.category,
        "secondaryMuscles": record.secondary_muscles,
        "gifUrl": record.media.gif_url,
        "videoUrl": record.media.video_url,
        "imageUrl": record.media.image_url,
        "instructions": record.instructions,
    }
