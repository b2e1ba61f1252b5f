"""
Import Exercises Use Case.

Sweeps the muscle-group taxonomy one group at a time, fetches each group's
exercises from the provider by target muscle, and upserts them into the
catalog store on the `(name, muscle_group)` natural key.

Scheduling policy: visit taxonomy entries sequentially with a fixed pause
after every visit, whatever its outcome. The pause is a self-imposed rate
limit towards the provider.

Failure policy: a group that fails is recorded in the report with its error
and the sweep moves on to the next group.

Concurrency: one run at a time across every process sharing the catalog.
Each run holds the store's `exercise-import` lock row for its duration; a
run that cannot take it raises ImportAlreadyRunning instead of queueing.
Store calls are synchronous and run in the threadpool.
"""
import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Sequence

from starlette.concurrency import run_in_threadpool

from application.exceptions import ImportAlreadyRunning, ImportGroupFailure
from application.ports import CatalogStore, CriteriaKind, ExerciseProvider
from domain.converters import normalize_upstream_record, record_to_db_row, refresh_fields
from domain.models import ExerciseRecord
from domain.taxonomy import MUSCLE_GROUPS

logger = logging.getLogger(__name__)

DEFAULT_PACING_SECONDS = 0.6
LOCK_NAME = "exercise-import"
# Longer than a full sweep at 20 s per group; a crashed run frees the lock after this.
DEFAULT_LOCK_TTL_SECONDS = 3600.0


@dataclass
class GroupImportReport:
    """Outcome of importing one muscle group."""
    muscle_group: str
    inserted: int = 0
    updated: int = 0
    total: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ImportRunReport:
    """Aggregate outcome of a full taxonomy sweep."""
    total_inserted: int = 0
    total_updated: int = 0
    groups: List[GroupImportReport] = field(default_factory=list)

    @property
    def failed_groups(self) -> List[GroupImportReport]:
        return [g for g in self.groups if not g.ok]


class ImportExercisesUseCase:
    """
    Use case for importing upstream exercises into the local catalog.

    Update policy is an unconditional overwrite: every record whose natural
    key already exists counts as updated, so re-running against an
    unchanged provider reports inserted=0 and updated=<all records>.
    """

    def __init__(
        self,
        provider: ExerciseProvider,
        catalog_store: CatalogStore,
        muscle_groups: Sequence[str] = MUSCLE_GROUPS,
        pacing_seconds: float = DEFAULT_PACING_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        lock_ttl_seconds: float = DEFAULT_LOCK_TTL_SECONDS,
    ):
        """
        Initialize with required dependencies.

        Args:
            provider: Upstream exercise provider (import timeout applies)
            catalog_store: Local catalog persistence
            muscle_groups: Taxonomy to sweep, in order
            pacing_seconds: Pause after each group
            sleep: Awaitable sleep, replaceable in tests
            lock_ttl_seconds: Lifetime of the store lock taken for a run
        """
        self._provider = provider
        self._store = catalog_store
        self._muscle_groups = tuple(muscle_groups)
        self._pacing_seconds = pacing_seconds
        self._sleep = sleep
        self._lock_ttl_seconds = lock_ttl_seconds
        self._owner = uuid.uuid4().hex
        self._run_lock = asyncio.Lock()

    @asynccontextmanager
    async def _exclusive_run(self) -> AsyncIterator[None]:
        """Hold the local run lock and the store lock, or raise ImportAlreadyRunning."""
        if self._run_lock.locked():
            raise ImportAlreadyRunning("An exercise import is already running")

        async with self._run_lock:
            acquired = await run_in_threadpool(
                self._store.acquire_import_lock,
                LOCK_NAME,
                self._owner,
                self._lock_ttl_seconds,
            )
            if not acquired:
                raise ImportAlreadyRunning(
                    "An exercise import is already running elsewhere"
                )
            try:
                yield
            finally:
                try:
                    await run_in_threadpool(
                        self._store.release_import_lock, LOCK_NAME, self._owner
                    )
                except Exception:
                    logger.exception(
                        f"Could not release import lock; it expires after "
                        f"{self._lock_ttl_seconds:.0f}s"
                    )

    async def _upsert(self, record: ExerciseRecord) -> bool:
        """Write one record on its natural key; True when a row was inserted."""
        existing = await run_in_threadpool(
            self._store.find_by_natural_key, record.name, record.muscle_group
        )
        if existing:
            await run_in_threadpool(
                self._store.update_by_id, existing["id"], refresh_fields(record, existing)
            )
            return False
        await run_in_threadpool(self._store.create, record_to_db_row(record))
        return True

    async def _import_group(self, muscle_group: str) -> GroupImportReport:
        try:
            raw_records = await self._provider.fetch_by_criteria(
                CriteriaKind.TARGET, muscle_group
            )
            logger.info(f"Fetched {len(raw_records)} items for target='{muscle_group}'")

            inserted = 0
            updated = 0
            for raw in raw_records:
                record = normalize_upstream_record(raw)
                if not record.name:
                    logger.warning(
                        f"Skipping nameless record external_id={record.external_id!r} "
                        f"in target='{muscle_group}'"
                    )
                    continue

                if await self._upsert(record):
                    inserted += 1
                else:
                    updated += 1

            logger.info(
                f"Target='{muscle_group}' => inserted={inserted}, updated={updated}"
            )
            return GroupImportReport(
                muscle_group=muscle_group,
                inserted=inserted,
                updated=updated,
                total=len(raw_records),
            )
        except Exception as e:
            failure = ImportGroupFailure(muscle_group, e)
            logger.error(str(failure))
            return GroupImportReport(muscle_group=muscle_group, error=str(e) or repr(e))

    async def import_group(self, muscle_group: str) -> GroupImportReport:
        """
        Import every upstream exercise targeting one muscle group.

        A failure while importing is logged and returned as a report whose
        counters are zero and whose error carries the message.

        Raises:
            ImportAlreadyRunning: If another import holds the lock
        """
        async with self._exclusive_run():
            return await self._import_group(muscle_group)

    async def import_all(self) -> ImportRunReport:
        """
        Sweep the whole taxonomy sequentially under a single lock.

        Returns:
            ImportRunReport whose totals sum every group, failed groups
            contributing zero

        Raises:
            ImportAlreadyRunning: If another import holds the lock
        """
        async with self._exclusive_run():
            logger.info(f"Starting import of {len(self._muscle_groups)} muscle groups")
            report = ImportRunReport()
            for group in self._muscle_groups:
                result = await self._import_group(group)
                report.groups.append(result)
                report.total_inserted += result.inserted
                report.total_updated += result.updated
                await self._sleep(self._pacing_seconds)

            logger.info(
                f"Import complete. Total inserted={report.total_inserted}, "
                f"updated={report.total_updated}, failed groups={len(report.failed_groups)}"
            )
            return report
