"""
Query parameters shared by the class and task listings.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Query, status

from focus_hub.api.deps import get_app_settings
from focus_hub.core.config import Settings
from focus_hub.core.exceptions import ValidationError
from focus_hub.services.schedule_service import ScheduleQuery


def get_schedule_query(
    settings: Settings = Depends(get_app_settings),
    mode: Optional[str] = Query(None, description="next (default) or prev"),
    legacy_mode: Optional[str] = Query(None, alias="type", include_in_schema=False),
    view: Optional[str] = Query(None, description="flat (default) or group"),
    timezone: Optional[str] = Query(None, description="IANA timezone for day buckets"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
) -> ScheduleQuery:
    """
    Parse listing parameters. Invalid selectors are rejected here, before any
    repository is queried; bad page/limit values fall back to defaults.
    """
    try:
        return ScheduleQuery.parse(
            mode=mode if mode is not None else legacy_mode,
            view=view,
            timezone=timezone,
            page=page,
            limit=limit,
            default_timezone=settings.DEFAULT_TIMEZONE,
            default_page=settings.DEFAULT_PAGE,
            default_limit=settings.DEFAULT_PAGE_SIZE,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
