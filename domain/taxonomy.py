"""
Muscle-group taxonomy swept by the importer.

Mirrors the client-side target filter bar. Values are sent verbatim as the
upstream `target` criteria; a value the provider does not recognize simply
yields zero results.
"""

MUSCLE_GROUPS = (
    "abductors",
    "abs",
    "adductors",
    "biceps",
    "calves",
    "cardiovascular system",
    "delts",
    "forearms",
    "glutes",
    "hamstrings",
    "lats",
    "levator scapulae",
    "pectorals",
    "quads",
    "serratus anterior",
    "traps",
    "triceps",
    "upper back",
)
