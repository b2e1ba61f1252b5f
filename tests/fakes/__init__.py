"""
Fake Port Implementations for Testing.

This package provides in-memory fake implementations of the catalog ports
for fast, isolated testing. No database or network access required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeCatalogStore, FakeExerciseProvider

    store = FakeCatalogStore()
    provider = FakeExerciseProvider(records=[make_upstream_record("Squat")])
"""
from typing import Any, Dict, List, Optional

from tests.fakes.catalog_store import FakeCatalogStore
from tests.fakes.exercise_provider import FakeExerciseProvider


def make_upstream_record(
    name: str,
    external_id: str = "0001",
    body_part: Optional[str] = "chest",
    target: Optional[str] = "pectorals",
    equipment: Optional[str] = "barbell",
    **extra: Any,
) -> Dict[str, Any]:
    """Build a provider payload with ExerciseDB field names."""
    record: Dict[str, Any] = {
        "id": external_id,
        "name": name,
        "bodyPart": body_part,
        "target": target,
        "equipment": equipment,
        "secondaryMuscles": [],
        "instructions": [],
    }
    record.update(extra)
    return record


def create_provider(records: List[Dict[str, Any]]) -> FakeExerciseProvider:
    """Create a provider pre-populated with records."""
    return FakeExerciseProvider(records=records)


__all__ = [
    "FakeCatalogStore",
    "FakeExerciseProvider",
    "make_upstream_record",
    "create_provider",
]
