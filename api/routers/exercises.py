"""
Exercises router for upstream catalog search and lookup.

This router provides endpoints for:
- Searching exercises with one upstream call plus local refinement
- Looking up a single exercise by its provider id
- Proxying the provider's demonstration GIF

Upstream failures are logged and answered with generic messages; provider
details never reach the client.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse, Response

from api.deps import get_exercise_query_use_case
from api.schemas import (
    ErrorResponse,
    ExerciseDetailResponse,
    ExerciseResponse,
    SearchExercisesResponse,
)
from application.exceptions import ExerciseCatalogError, ExerciseNotFound
from application.use_cases import ExerciseQueryUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/exercises",
    tags=["Exercises"],
)

SEARCH_FAILED = "Failed to search exercises (upstream)"
NOT_FOUND = "Exercise not found"
IMAGE_FAILED = "Failed to fetch image from ExerciseDB"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "/search",
    response_model=SearchExercisesResponse,
    responses={500: {"model": ErrorResponse}},
)
async def search_exercises(
    q: Optional[str] = Query(None, description="Free-text name search"),
    body_part: Optional[str] = Query(None, alias="bodyPart", description="Body part filter"),
    equipment: Optional[str] = Query(None, description="Equipment filter"),
    target: Optional[str] = Query(None, description="Target muscle filter"),
    limit: Optional[str] = Query(None, description="Page size, clamped to 1..50 (default 20)"),
    offset: Optional[str] = Query(None, description="Page offset, negative means 0"),
    use_case: ExerciseQueryUseCase = Depends(get_exercise_query_use_case),
):
    """
    Search exercises.

    Exactly one upstream query is issued, chosen by priority:
    q, then bodyPart, then target, then equipment, else the full listing.
    The remaining filters are applied locally (AND logic) before paging.
    limit and offset never cause a validation error; invalid values fall
    back to their defaults.
    """
    try:
        result = await use_case.search(
            q=q,
            body_part=body_part,
            target=target,
            equipment=equipment,
            limit=limit,
            offset=offset,
        )
    except ExerciseCatalogError as e:
        logger.error(f"exercise.search error: {e}")
        return _error(500, SEARCH_FAILED)

    return SearchExercisesResponse(
        total=result.total,
        limit=result.limit,
        offset=result.offset,
        exercises=[ExerciseResponse.from_record(r) for r in result.items],
    )


@router.get(
    "/{external_id}/image",
    response_class=Response,
    responses={422: {"model": ErrorResponse}},
)
async def get_exercise_image(
    external_id: str = Path(..., description="Provider exercise id"),
    resolution: str = Query("180", description="GIF resolution"),
    use_case: ExerciseQueryUseCase = Depends(get_exercise_query_use_case),
):
    """Proxy the provider's demonstration GIF for an exercise."""
    try:
        content = await use_case.get_image(external_id, resolution=resolution)
    except ValueError:
        return _error(400, "exerciseId required")
    except ExerciseCatalogError as e:
        logger.error(f"exercise.image error for {external_id}: {e}")
        return _error(422, IMAGE_FAILED)

    return Response(
        content=content,
        media_type="image/gif",
        headers={
            "Cache-Control": "public, max-age=86400, s-maxage=86400",
            "Access-Control-Expose-Headers": "Content-Type, Cache-Control",
        },
    )


@router.get(
    "/{external_id}",
    response_model=ExerciseDetailResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_exercise(
    external_id: str = Path(..., description="Provider exercise id"),
    use_case: ExerciseQueryUseCase = Depends(get_exercise_query_use_case),
):
    """
    Get one exercise directly from the provider.

    A provider 404 becomes a 404 here; every other failure is a 500.
    """
    try:
        record = await use_case.get_by_external_id(external_id)
    except ValueError:
        return _error(400, "id required")
    except ExerciseNotFound:
        return _error(404, NOT_FOUND)
    except ExerciseCatalogError as e:
        logger.error(f"exercise.getByExternalId error for {external_id}: {e}")
        return _error(500, NOT_FOUND)

    return ExerciseDetailResponse(exercise=ExerciseResponse.from_record(record))
