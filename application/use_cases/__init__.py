"""
Application Use Cases for the exercise catalog service.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters:

- ExerciseQueryUseCase: search / get-by-id / image over the provider
- ImportExercisesUseCase: taxonomy sweep upserting into the catalog store

Dependencies are injected via constructors for testability.

Usage:
    from application.use_cases import ExerciseQueryUseCase, ImportExercisesUseCase

    query = ExerciseQueryUseCase(provider=provider)
    page = await query.search(q="squat", body_part="upper legs", limit=10)

    importer = ImportExercisesUseCase(provider=provider, catalog_store=store)
    report = await importer.import_all()
"""

from application.use_cases.import_exercises import (
    GroupImportReport,
    ImportExercisesUseCase,
    ImportRunReport,
)
from application.use_cases.query_exercises import (
    ExerciseQueryUseCase,
    SearchQuery,
    SearchResult,
    clamp_limit,
    clamp_offset,
    refine,
    select_strategy,
)

__all__ = [
    # Query
    "ExerciseQueryUseCase",
    "SearchQuery",
    "SearchResult",
    "clamp_limit",
    "clamp_offset",
    "refine",
    "select_strategy",
    # Import
    "ImportExercisesUseCase",
    "GroupImportReport",
    "ImportRunReport",
]
