"""API routers."""

from day_planner.api import timeline

__all__ = ["timeline"]
