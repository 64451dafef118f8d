"""
Dependency injection for API endpoints.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from day_planner.core.config import Settings, get_settings
from day_planner.services.timeline_diff_service import TimelineDiffService
from day_planner.services.timeline_transform_service import TimelineTransformService


@lru_cache()
def get_timeline_transform_service() -> TimelineTransformService:
    """Get transform service configured from settings."""
    settings = get_settings()
    return TimelineTransformService(validate_baseline=settings.TIMELINE_VALIDATE_BASELINE)


@lru_cache()
def get_timeline_diff_service() -> TimelineDiffService:
    """Get diff service instance."""
    return TimelineDiffService()


AppSettings = Annotated[Settings, Depends(get_settings)]
TransformService = Annotated[TimelineTransformService, Depends(get_timeline_transform_service)]
DiffService = Annotated[TimelineDiffService, Depends(get_timeline_diff_service)]
