"""
Activity API - activity types, activity records and time usage analysis
"""
from datetime import datetime, timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query

from mindtrack.config.constants import DEFAULT_ANALYSIS_WINDOW_DAYS
from mindtrack.server.api.dependencies import get_current_user_id
from mindtrack.server.exceptions import MindTrackError, to_http_exception
from mindtrack.server.schemas.activity_schemas import (
    ActivityTypeItem,
    CreateActivityTypeRequest,
    UpdateActivityTypeRequest,
    ActivityRecordItem,
    CreateActivityRecordRequest,
    AnalysisResult,
)
from mindtrack.server.schemas.common_schemas import SuccessResponse
from mindtrack.server.services import activity_service, analytics_service
from mindtrack.utils import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/mindset/activity", tags=["Activity"])


# ============================================================================
# Activity types
# ============================================================================

@router.get("/types", response_model=List[ActivityTypeItem])
async def get_activity_types(user_id: str = Depends(get_current_user_id)):
    """
    Shared default types plus the caller's own types
    """
    return activity_service.get_activity_types(user_id)


@router.post("/types", response_model=ActivityTypeItem)
async def create_activity_type(
    request: CreateActivityTypeRequest,
    user_id: str = Depends(get_current_user_id)
):
    """
    Create an activity type owned by the caller

    Body:
    - **name**: type name (required)
    - **icon**: icon key (optional)
    - **color**: hex color (optional)
    """
    return activity_service.create_activity_type(user_id, request)


@router.put("/types/{type_id}", response_model=ActivityTypeItem)
async def update_activity_type(
    request: UpdateActivityTypeRequest,
    type_id: str = Path(..., description="Activity type id"),
    user_id: str = Depends(get_current_user_id)
):
    """
    Update one of the caller's types; shared types are read-only
    """
    try:
        return activity_service.update_activity_type(type_id, user_id, request)
    except MindTrackError as e:
        raise to_http_exception(e)


@router.delete("/types/{type_id}", response_model=SuccessResponse)
async def delete_activity_type(
    type_id: str = Path(..., description="Activity type id"),
    user_id: str = Depends(get_current_user_id)
):
    """
    Delete one of the caller's types that no record references
    """
    try:
        activity_service.delete_activity_type(type_id, user_id)
    except MindTrackError as e:
        raise to_http_exception(e)
    return SuccessResponse(success=True)


# ============================================================================
# Activity records
# ============================================================================

@router.post("/records", response_model=ActivityRecordItem)
async def create_activity_record(
    request: CreateActivityRecordRequest,
    user_id: str = Depends(get_current_user_id)
):
    """
    Record an activity

    Body:
    - **activityTypeId**: a type visible to the caller
    - **startTime** / **endTime**: endTime must be after startTime
    - **note**: optional
    """
    try:
        return activity_service.create_activity_record(user_id, request)
    except MindTrackError as e:
        raise to_http_exception(e)


@router.get("/records", response_model=List[ActivityRecordItem])
async def get_activity_records(
    start_date: Optional[datetime] = Query(default=None, alias="startDate", description="Range start"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate", description="Range end"),
    activity_type_id: Optional[str] = Query(default=None, alias="activityTypeId", description="Type filter"),
    user_id: str = Depends(get_current_user_id)
):
    """
    The caller's records, newest first

    The date range is applied only when both startDate and endDate are given.
    """
    try:
        return activity_service.get_activity_records(user_id, start_date, end_date, activity_type_id)
    except MindTrackError as e:
        raise to_http_exception(e)


@router.delete("/records/{record_id}", response_model=SuccessResponse)
async def delete_activity_record(
    record_id: str = Path(..., description="Activity record id"),
    user_id: str = Depends(get_current_user_id)
):
    try:
        activity_service.delete_activity_record(record_id, user_id)
    except MindTrackError as e:
        raise to_http_exception(e)
    return SuccessResponse(success=True)


# ============================================================================
# Time usage analysis
# ============================================================================

@router.get("/analyze", response_model=AnalysisResult)
async def analyze_time_usage(
    start_date: Optional[datetime] = Query(default=None, alias="startDate", description="Range start, defaults to 7 days before endDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate", description="Range end, defaults to now"),
    user_id: str = Depends(get_current_user_id)
):
    """
    Time usage analysis of the range

    **Returns**:
    - timeByActivity: per-type totals, descending
    - summary: totals, leisure share, days in range
    - suggestions: improvement suggestions
    """
    if end_date is None:
        end_date = datetime.now()
    if start_date is None:
        start_date = end_date - timedelta(days=DEFAULT_ANALYSIS_WINDOW_DAYS)

    try:
        return analytics_service.analyze(user_id, start_date, end_date)
    except MindTrackError as e:
        logger.error(f"Time usage analysis failed for user {user_id}: {e}")
        raise to_http_exception(e)
