#!/usr/bin/env python3
"""
Print the ExerciseDB id stored for a local catalog exercise.

Usage:
    python scripts/get_external_id.py <exercise_id>
"""
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from supabase import create_client

from application.exceptions import CatalogStoreError
from backend.settings import get_settings
from infrastructure import SupabaseCatalogStore


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/get_external_id.py <exercise_id>", file=sys.stderr)
        sys.exit(2)

    try:
        exercise_id = int(sys.argv[1])
    except ValueError:
        print(f"Invalid id: {sys.argv[1]}", file=sys.stderr)
        sys.exit(2)

    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_key:
        print("ERROR: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set", file=sys.stderr)
        sys.exit(1)

    store = SupabaseCatalogStore(
        create_client(settings.supabase_url, settings.supabase_key),
        table=settings.catalog_table,
    )

    try:
        row = store.get_by_id(exercise_id)
    except CatalogStoreError as e:
        print(f"Error querying catalog: {e}", file=sys.stderr)
        sys.exit(1)

    if not row:
        print(f"No exercise found with id={exercise_id}")
        return

    print(f"id={row['id']} external_id={row.get('external_id')} name={row.get('name')}")


if __name__ == "__main__":
    main()
