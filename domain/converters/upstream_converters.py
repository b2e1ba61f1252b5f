"""
Converters: upstream provider payload -> canonical ExerciseRecord.

Providers disagree on field names (`bodyPart` vs `muscle_group` vs `target`,
`gifUrl` vs `image`, list vs delimited string). normalize_upstream_record
resolves every canonical field from an ordered list of candidate keys:

| Canonical field     | Candidate keys (first non-empty wins)        | Default |
|---------------------|----------------------------------------------|---------|
| external_id         | id (stringified)                             | None    |
| name                | name, exercise                               | ""      |
| muscle_group        | bodyPart, muscle_group, target               | None    |
| body_part           | bodyPart, body_part                          | None    |
| target              | target, bodyPart, muscle_group               | None    |
| equipment           | equipment                                    | None    |
| difficulty          | difficulty, level, difficultyLevel           | None    |
| category            | category                                     | None    |
| secondary_muscles   | secondaryMuscles, secondary_muscles          | []      |
| media.gif_url       | gifUrl, gif_url                              | None    |
| media.video_url     | video, videoUrl, video_url                   | None    |
| media.image_url     | image, imageUrl, image_url                   | None    |
| notes               | instructions, description (steps joined)     | None    |
"""

import re
from typing import Any, Dict, List, Optional

from domain.models import ExerciseRecord, MediaRefs

RawUpstreamRecord = Dict[str, Any]

LIST_SEPARATORS = re.compile(r"[,\r\n]+")
STEP_SEPARATORS = re.compile(r"[\r\n]+")


def _text(value: Any) -> Optional[str]:
    """Coerce a scalar to str, treating None and empty strings as missing."""
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _first(raw: RawUpstreamRecord, *keys: str) -> Optional[str]:
    for key in keys:
        value = _text(raw.get(key))
        if value is not None:
            return value
    return None


def split_segments(value: Any, separators: re.Pattern = LIST_SEPARATORS) -> List[str]:
    """
    Turn a list or a delimited string into ordered, trimmed, non-empty segments.

    Examples:
        >>> split_segments(["biceps", " forearms "])
        ['biceps', 'forearms']
        >>> split_segments("biceps, forearms\\nlats")
        ['biceps', 'forearms', 'lats']
        >>> split_segments(None)
        []
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        parts = [str(item) for item in value if item is not None]
    else:
        parts = separators.split(str(value))
    return [part.strip() for part in parts if part.strip()]


def normalize_upstream_record(raw: RawUpstreamRecord) -> ExerciseRecord:
    """Map one provider payload onto the canonical ExerciseRecord shape."""
    steps = split_segments(
        raw.get("instructions") or raw.get("description"),
        separators=STEP_SEPARATORS,
    )
    secondary = raw.get("secondaryMuscles")
    if secondary is None:
        secondary = raw.get("secondary_muscles")

    return ExerciseRecord(
        external_id=_text(raw.get("id")),
        name=_first(raw, "name", "exercise") or "",
        muscle_group=_first(raw, "bodyPart", "muscle_group", "target"),
        body_part=_first(raw, "bodyPart", "body_part"),
        target=_first(raw, "target", "bodyPart", "muscle_group"),
        equipment=_first(raw, "equipment"),
        difficulty=_first(raw, "difficulty", "level", "difficultyLevel"),
        category=_first(raw, "category"),
        secondary_muscles=split_segments(secondary),
        media=MediaRefs(
            gif_url=_first(raw, "gifUrl", "gif_url"),
            video_url=_first(raw, "video", "videoUrl", "video_url"),
            image_url=_first(raw, "image", "imageUrl", "image_url"),
        ),
        notes="\n".join(steps) or None,
    )
