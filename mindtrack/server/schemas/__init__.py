"""
Pydantic schemas for request/response models
"""

from .common_schemas import CamelModel, SuccessResponse
from .activity_schemas import (
    ActivityTypeOwnership,
    ActivityTypeItem,
    CreateActivityTypeRequest,
    UpdateActivityTypeRequest,
    ActivityRecordItem,
    CreateActivityRecordRequest,
    ActivityTimeAggregate,
    AnalysisSummary,
    AnalysisResult,
)
from .mindset_schemas import (
    SleepSchedule,
    SelfTestAnswers,
    TakeSelfTestRequest,
    SelfTestItem,
    EligibilityResponse,
)

__all__ = [
    "CamelModel",
    "SuccessResponse",
    "ActivityTypeOwnership",
    "ActivityTypeItem",
    "CreateActivityTypeRequest",
    "UpdateActivityTypeRequest",
    "ActivityRecordItem",
    "CreateActivityRecordRequest",
    "ActivityTimeAggregate",
    "AnalysisSummary",
    "AnalysisResult",
    "SleepSchedule",
    "SelfTestAnswers",
    "TakeSelfTestRequest",
    "SelfTestItem",
    "EligibilityResponse",
]
