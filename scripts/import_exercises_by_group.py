#!/usr/bin/env python3
"""
Import ExerciseDB exercises into the local catalog, one muscle group at a time.

Sweeps the muscle-group taxonomy sequentially, fetching each group by target
muscle and upserting on (name, muscle_group). Groups that fail are reported
and skipped; the sweep always runs to the end.

Usage:
    python scripts/import_exercises_by_group.py [--group GROUP ...] [--pacing-ms N]

Options:
    --group GROUP   Import only this muscle group (repeatable)
    --pacing-ms N   Pause between groups in milliseconds (default: IMPORT_PACING_MS)
"""
import os
import sys
import asyncio
import argparse
import logging

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from supabase import create_client

from application.use_cases import ImportExercisesUseCase
from backend.settings import get_settings
from domain.taxonomy import MUSCLE_GROUPS
from infrastructure import ExerciseDBClient, SupabaseCatalogStore, UpstreamConfig


def build_use_case(groups, pacing_ms=None):
    """Wire the importer with the bulk-import timeout and configured pacing."""
    settings = get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        print("ERROR: SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        sys.exit(1)
    if not settings.exercisedb_key:
        print("WARNING: EXERCISEDB_KEY / RAPIDAPI_KEY is not set. Requests will fail.")

    config = UpstreamConfig.from_settings(settings, timeout=settings.import_timeout_seconds)
    store = SupabaseCatalogStore(
        create_client(settings.supabase_url, settings.supabase_key),
        table=settings.catalog_table,
    )
    pacing_seconds = settings.import_pacing_seconds if pacing_ms is None else pacing_ms / 1000.0

    return ImportExercisesUseCase(
        provider=ExerciseDBClient(config),
        catalog_store=store,
        muscle_groups=groups,
        pacing_seconds=pacing_seconds,
    )


def print_report(report):
    """Print per-group results and totals."""
    for group in report.groups:
        if group.ok:
            print(
                f"  {group.muscle_group:<22} fetched={group.total:<4} "
                f"inserted={group.inserted:<4} updated={group.updated}"
            )
        else:
            print(f"  {group.muscle_group:<22} FAILED: {group.error}")

    print()
    print("=" * 50)
    print(
        f"Import complete. Total inserted={report.total_inserted}, "
        f"updated={report.total_updated}"
    )
    if report.failed_groups:
        print(f"  Failed groups: {', '.join(g.muscle_group for g in report.failed_groups)}")


def main():
    parser = argparse.ArgumentParser(
        description="Import ExerciseDB exercises by muscle group"
    )
    parser.add_argument(
        "--group",
        action="append",
        choices=MUSCLE_GROUPS,
        help="Import only this muscle group (repeatable)"
    )
    parser.add_argument(
        "--pacing-ms",
        type=int,
        help="Pause between groups in milliseconds"
    )

    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    groups = args.group or list(MUSCLE_GROUPS)
    print(f"Starting import of {len(groups)} muscle groups...")
    print("=" * 50)

    use_case = build_use_case(groups, pacing_ms=args.pacing_ms)
    try:
        report = asyncio.run(use_case.import_all())
    except Exception as e:
        print(f"Import failed: {e}", file=sys.stderr)
        sys.exit(1)

    print_report(report)


if __name__ == "__main__":
    main()
