"""
Activity service - activity types and activity records

Pure function interface over the activity providers
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from mindtrack.config.constants import DEFAULT_ACTIVITY_TYPES
from mindtrack.server.exceptions import (
    ActivityTypeNotFoundError,
    DefaultActivityTypeError,
    ActivityTypeInUseError,
    ActivityRecordNotFoundError,
    InvalidTimeRangeError,
)
from mindtrack.server.providers import activity_type_provider, activity_record_provider
from mindtrack.server.schemas.activity_schemas import (
    ActivityTypeOwnership,
    ActivityTypeItem,
    CreateActivityTypeRequest,
    UpdateActivityTypeRequest,
    ActivityRecordItem,
    CreateActivityRecordRequest,
)
from mindtrack.utils import get_logger, to_local_naive

logger = get_logger(__name__)


# ============================================================================
# Conversion
# ============================================================================

def _to_type_item(row: Dict[str, Any]) -> ActivityTypeItem:
    is_default = bool(row['is_default'])
    return ActivityTypeItem(
        id=row['id'],
        name=row['name'],
        icon=row.get('icon'),
        color=row.get('color'),
        is_default=is_default,
        user_id=row.get('user_id'),
        ownership=ActivityTypeOwnership.SHARED if is_default else ActivityTypeOwnership.OWNED,
    )


def _to_record_item(row: Dict[str, Any]) -> ActivityRecordItem:
    activity_type = _to_type_item({
        'id': row['activity_type_id'],
        'name': row['activity_type_name'],
        'icon': row.get('activity_type_icon'),
        'color': row.get('activity_type_color'),
        'is_default': row.get('activity_type_is_default'),
        'user_id': row.get('activity_type_user_id'),
    })
    return ActivityRecordItem(
        id=row['id'],
        user_id=row['user_id'],
        activity_type_id=row['activity_type_id'],
        activity_type=activity_type,
        start_time=row['start_time'],
        end_time=row['end_time'],
        note=row.get('note'),
        recorded_at=row.get('recorded_at'),
    )


# ============================================================================
# Activity types
# ============================================================================

def initialize_default_activity_types() -> int:
    """Seed the shared activity types; returns how many were inserted"""
    return activity_type_provider.seed_defaults(DEFAULT_ACTIVITY_TYPES)


def get_activity_types(user_id: str) -> List[ActivityTypeItem]:
    """
    Shared types plus the user's own types, oldest first
    """
    return [_to_type_item(row) for row in activity_type_provider.list_visible(user_id)]


def create_activity_type(user_id: str, request: CreateActivityTypeRequest) -> ActivityTypeItem:
    new_id = activity_type_provider.create(user_id, request.model_dump())
    return _to_type_item(activity_type_provider.get_by_id(new_id))


def _get_editable_type(type_id: str, user_id: str) -> Dict[str, Any]:
    """
    The type if the user may modify it

    Raises:
        ActivityTypeNotFoundError: missing or owned by another user
        DefaultActivityTypeError: shared type
    """
    row = activity_type_provider.get_visible(type_id, user_id)
    if not row:
        raise ActivityTypeNotFoundError("활동 유형을 찾을 수 없습니다.")
    if row['is_default']:
        raise DefaultActivityTypeError("기본 활동 유형은 수정하거나 삭제할 수 없습니다.")
    return row


def update_activity_type(
    type_id: str,
    user_id: str,
    request: UpdateActivityTypeRequest
) -> ActivityTypeItem:
    """
    Partially update a user-owned type

    Raises:
        ActivityTypeNotFoundError, DefaultActivityTypeError
    """
    _get_editable_type(type_id, user_id)
    activity_type_provider.update(type_id, request.model_dump(exclude_unset=True))
    return _to_type_item(activity_type_provider.get_by_id(type_id))


def delete_activity_type(type_id: str, user_id: str) -> bool:
    """
    Delete a user-owned type without records

    Raises:
        ActivityTypeNotFoundError, DefaultActivityTypeError
        ActivityTypeInUseError: records still reference the type
    """
    _get_editable_type(type_id, user_id)
    if activity_type_provider.has_records(type_id):
        raise ActivityTypeInUseError("이 활동 유형에 연결된 기록이 있어 삭제할 수 없습니다.")

    activity_type_provider.delete(type_id)
    logger.info(f"Activity type {type_id} deleted by user {user_id}")
    return True


# ============================================================================
# Activity records
# ============================================================================

def create_activity_record(user_id: str, request: CreateActivityRecordRequest) -> ActivityRecordItem:
    """
    Record an activity

    Raises:
        ActivityTypeNotFoundError: the type is not visible to the user
        InvalidTimeRangeError: end_time is not after start_time
    """
    if not activity_type_provider.get_visible(request.activity_type_id, user_id):
        raise ActivityTypeNotFoundError("활동 유형을 찾을 수 없습니다.")

    start_time = to_local_naive(request.start_time)
    end_time = to_local_naive(request.end_time)
    if end_time <= start_time:
        raise InvalidTimeRangeError("종료 시간은 시작 시간보다 늦어야 합니다.")

    new_id = activity_record_provider.create(user_id, {
        'activity_type_id': request.activity_type_id,
        'start_time': start_time,
        'end_time': end_time,
        'note': request.note,
    })
    return _to_record_item(activity_record_provider.get_record(new_id, user_id))


def get_activity_records(
    user_id: str,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    activity_type_id: Optional[str] = None
) -> List[ActivityRecordItem]:
    """
    Records of the user, newest first

    The date filter applies only when both start_date and end_date are given.
    """
    rows = activity_record_provider.list_records(user_id, start_date, end_date, activity_type_id)
    return [_to_record_item(row) for row in rows]


def delete_activity_record(record_id: str, user_id: str) -> bool:
    """
    Raises:
        ActivityRecordNotFoundError: missing or owned by another user
    """
    if not activity_record_provider.delete(record_id, user_id):
        raise ActivityRecordNotFoundError("활동 기록을 찾을 수 없습니다.")
    return True
