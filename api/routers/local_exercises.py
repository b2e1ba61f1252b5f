"""
Local exercises router for the imported catalog.

Read-only, authenticated view of the exercises the importer stored. Detail
responses re-split `notes` into `instructions` so the client can render a
stored exercise exactly like an upstream one.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse

from api.deps import get_catalog_store, get_current_user
from api.schemas import (
    ErrorResponse,
    LocalExerciseDetailResponse,
    LocalExerciseListResponse,
    LocalExerciseResponse,
)
from application.exceptions import CatalogStoreError
from application.ports import CatalogStore
from application.use_cases import clamp_offset
from domain.converters import db_row_to_record

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/local-exercises",
    tags=["Local Exercises"],
    dependencies=[Depends(get_current_user)],
)

MAX_PAGE_SIZE = 200


def _parse_row_id(value: str) -> Optional[int]:
    """Positive integer id, or None when the path segment is not one."""
    try:
        row_id = int(value)
    except ValueError:
        return None
    return row_id if row_id >= 1 else None


@router.get(
    "",
    response_model=LocalExerciseListResponse,
    responses={500: {"model": ErrorResponse}},
)
def list_local_exercises(
    limit: int = Query(50, ge=1, le=MAX_PAGE_SIZE, description="Maximum results to return"),
    offset: int = Query(0, description="Rows to skip"),
    store: CatalogStore = Depends(get_catalog_store),
):
    """List stored catalog exercises ordered by id."""
    offset = clamp_offset(offset)
    try:
        rows = store.list_all(limit=limit, offset=offset)
    except CatalogStoreError as e:
        logger.error(f"listLocalExercises error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to list exercises"})

    return LocalExerciseListResponse(
        limit=limit,
        offset=offset,
        exercises=[LocalExerciseResponse.from_row(row, db_row_to_record(row)) for row in rows],
    )


@router.get(
    "/{exercise_id}",
    response_model=LocalExerciseDetailResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def get_local_exercise(
    exercise_id: str = Path(..., description="Local catalog id"),
    store: CatalogStore = Depends(get_catalog_store),
):
    """Get one stored catalog exercise by its local id."""
    row_id = _parse_row_id(exercise_id)
    if row_id is None:
        return JSONResponse(status_code=400, content={"error": "id required"})

    try:
        row = store.get_by_id(row_id)
    except CatalogStoreError as e:
        logger.error(f"local exercise detail error: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch exercise"})

    if not row:
        return JSONResponse(status_code=404, content={"error": "Exercise not found"})

    return LocalExerciseDetailResponse(item=LocalExerciseResponse.from_row(row, db_row_to_record(row)))
