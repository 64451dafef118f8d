"""
Timeline API endpoints.

The gesture layer posts one preview request per pointer-move tick and a
final one on release. Each request is independent.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from day_planner.api.deps import AppSettings, DiffService, TransformService
from day_planner.core.exceptions import (
    DuplicateTargetError,
    InvalidCursorError,
    TargetNotFoundError,
    UnorderedBaselineError,
    UnsupportedModeError,
)
from day_planner.models.timeline import TimelinePreviewRequest, TimelinePreviewResponse
from day_planner.utils.time_utils import clamp_start_minutes

router = APIRouter()


@router.post("/timeline/preview", response_model=TimelinePreviewResponse)
async def preview_timeline_edit(
    payload: TimelinePreviewRequest,
    settings: AppSettings,
    transform_service: TransformService,
    diff_service: DiffService,
):
    cursor_time = payload.cursor_time_minutes
    if settings.TIMELINE_CLAMP_CURSOR_TO_DAY:
        target = next(
            (item for item in payload.baseline if item.id == payload.edit.target_id),
            None,
        )
        if target is not None:
            cursor_time = clamp_start_minutes(
                cursor_time,
                target.duration_minutes,
                day_start=settings.DAY_START_MINUTES,
                day_end=settings.DAY_END_MINUTES,
            )

    try:
        items = transform_service.transform(payload.baseline, cursor_time, payload.edit)
    except TargetNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except DuplicateTargetError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except (InvalidCursorError, UnsupportedModeError, UnorderedBaselineError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return TimelinePreviewResponse(
        items=items,
        diff=diff_service.calculate_diff(payload.baseline, items),
    )
