"""
Unit tests for domain converters.

Covers provider payload normalization and catalog row conversion.
"""

import pytest

from domain.converters import (
    db_row_to_record,
    db_row_to_upstream_shape,
    normalize_upstream_record,
    record_to_db_row,
    refresh_fields,
    split_segments,
)
from domain.models import ExerciseRecord, MediaRefs


@pytest.fixture
def exercisedb_payload():
    """A representative ExerciseDB record."""
    return {
        "id": "0025",
        "name": "barbell bench press",
        "bodyPart": "chest",
        "target": "pectorals",
        "equipment": "barbell",
        "gifUrl": "https://cdn.example.com/0025.gif",
        "secondaryMuscles": ["triceps", "shoulders"],
        "instructions": [
            "Lie flat on the bench.",
            "Lower the bar to your chest.",
            "Press the bar back up.",
        ],
    }


@pytest.mark.unit
class TestSplitSegments:
    """Tests for split_segments."""

    def test_list_is_trimmed_and_filtered(self):
        assert split_segments([" biceps ", "", None, "forearms"]) == ["biceps", "forearms"]

    def test_comma_and_newline_delimited_string(self):
        assert split_segments("biceps, forearms\nlats\r\n") == ["biceps", "forearms", "lats"]

    def test_none_is_empty(self):
        assert split_segments(None) == []

    def test_blank_string_is_empty(self):
        assert split_segments("  ,  \n ") == []


@pytest.mark.unit
class TestNormalizeUpstreamRecord:
    """Tests for normalize_upstream_record."""

    def test_exercisedb_fields(self, exercisedb_payload):
        record = normalize_upstream_record(exercisedb_payload)

        assert record.external_id == "0025"
        assert record.name == "barbell bench press"
        assert record.muscle_group == "chest"
        assert record.body_part == "chest"
        assert record.target == "pectorals"
        assert record.equipment == "barbell"
        assert record.secondary_muscles == ["triceps", "shoulders"]
        assert record.media.gif_url == "https://cdn.example.com/0025.gif"
        assert record.media.video_url is None

    def test_instructions_joined_into_notes(self, exercisedb_payload):
        record = normalize_upstream_record(exercisedb_payload)

        assert record.notes == (
            "Lie flat on the bench.\nLower the bar to your chest.\nPress the bar back up."
        )
        assert record.instructions == exercisedb_payload["instructions"]

    def test_instruction_with_comma_stays_one_step(self):
        record = normalize_upstream_record(
            {"name": "Row", "instructions": "Grip the bar, pull.\nLower slowly."}
        )
        assert record.instructions == ["Grip the bar, pull.", "Lower slowly."]

    def test_empty_instructions_give_no_notes(self):
        record = normalize_upstream_record({"name": "Row", "instructions": []})
        assert record.notes is None
        assert record.instructions == []

    def test_muscle_group_falls_back_to_target(self):
        record = normalize_upstream_record({"name": "Curl", "target": "biceps"})
        assert record.muscle_group == "biceps"
        assert record.body_part is None

    def test_target_falls_back_to_body_part(self):
        record = normalize_upstream_record({"name": "Plank", "bodyPart": "waist"})
        assert record.target == "waist"

    def test_alternate_field_names(self):
        record = normalize_upstream_record({
            "id": 42,
            "exercise": "Goblet Squat",
            "muscle_group": "quads",
            "level": "beginner",
            "secondary_muscles": "glutes, hamstrings",
            "videoUrl": "https://cdn.example.com/v.mp4",
            "imageUrl": "https://cdn.example.com/i.png",
            "description": "Hold the weight.\nSquat down.",
        })

        assert record.external_id == "42"
        assert record.name == "Goblet Squat"
        assert record.muscle_group == "quads"
        assert record.difficulty == "beginner"
        assert record.secondary_muscles == ["glutes", "hamstrings"]
        assert record.media.video_url == "https://cdn.example.com/v.mp4"
        assert record.media.image_url == "https://cdn.example.com/i.png"
        assert record.instructions == ["Hold the weight.", "Squat down."]

    def test_missing_name_is_empty_string(self):
        record = normalize_upstream_record({"id": "9"})
        assert record.name == ""
        assert record.external_id == "9"

    def test_empty_strings_treated_as_missing(self):
        record = normalize_upstream_record({"name": "Dip", "bodyPart": "", "target": "triceps"})
        assert record.muscle_group == "triceps"
        assert record.body_part is None


@pytest.mark.unit
class TestDbConverters:
    """Tests for catalog row conversion."""

    def test_record_to_db_row_flattens_media(self, exercisedb_payload):
        row = record_to_db_row(normalize_upstream_record(exercisedb_payload))

        assert row["external_id"] == "0025"
        assert row["muscle_group"] == "chest"
        assert row["gif_url"] == "https://cdn.example.com/0025.gif"
        assert row["secondary_muscles"] == ["triceps", "shoulders"]
        assert "id" not in row

    def test_db_row_to_record(self):
        record = db_row_to_record({
            "id": 7,
            "external_id": "0025",
            "name": "Bench Press",
            "muscle_group": "chest",
            "secondary_muscles": None,
            "gif_url": "https://cdn.example.com/0025.gif",
            "notes": "Step one\nStep two",
        })

        assert record.name == "Bench Press"
        assert record.secondary_muscles == []
        assert record.media.gif_url == "https://cdn.example.com/0025.gif"
        assert record.instructions == ["Step one", "Step two"]

    def test_refresh_fields_keeps_existing_external_id(self):
        record = ExerciseRecord(external_id="new", name="Squat", muscle_group="quads")
        fields = refresh_fields(record, {"id": 1, "external_id": "old"})

        assert "external_id" not in fields
        assert fields["name"] == "Squat"
        assert fields["muscle_group"] == "quads"

    def test_refresh_fields_fills_missing_external_id(self):
        record = ExerciseRecord(external_id="new", name="Squat", muscle_group="quads")
        fields = refresh_fields(record, {"id": 1, "external_id": None})

        assert fields["external_id"] == "new"

    def test_refresh_fields_overwrites_descriptive_columns(self):
        record = ExerciseRecord(
            name="Squat",
            muscle_group="quads",
            equipment=None,
            media=MediaRefs(gif_url="https://cdn.example.com/s.gif"),
        )
        fields = refresh_fields(record, {"id": 1, "equipment": "barbell"})

        assert fields["equipment"] is None
        assert fields["gif_url"] == "https://cdn.example.com/s.gif"

    def test_db_row_to_upstream_shape_roundtrips_through_normalizer(self):
        row = {
            "id": 3,
            "external_id": "0043",
            "name": "Barbell Full Squat",
            "muscle_group": "upper legs",
            "body_part": "upper legs",
            "target": "glutes",
            "equipment": "barbell",
            "secondary_muscles": ["quadriceps"],
            "notes": "Stand tall.\nSquat.",
        }
        shaped = db_row_to_upstream_shape(row)

        assert shaped["id"] == "0043"
        assert shaped["bodyPart"] == "upper legs"
        assert shaped["instructions"] == ["Stand tall.", "Squat."]
        assert normalize_upstream_record(shaped) == db_row_to_record(row)
