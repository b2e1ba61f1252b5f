"""
Interfaces (Ports) for the exercise catalog service.

This package defines abstract interfaces that decouple the use cases from
infrastructure (HTTP provider, database). Implementations are provided in
the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import CatalogStore, ExerciseProvider

    class ImportExercisesUseCase:
        def __init__(self, provider: ExerciseProvider, catalog_store: CatalogStore):
            ...
"""

# Upstream provider
from application.ports.exercise_provider import CriteriaKind, ExerciseProvider

# Local catalog persistence
from application.ports.catalog_store import CatalogStore

__all__ = [
    "CriteriaKind",
    "ExerciseProvider",
    "CatalogStore",
]
