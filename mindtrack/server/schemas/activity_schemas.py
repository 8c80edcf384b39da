"""
Activity type / record / analysis schemas
"""

from datetime import datetime
from enum import Enum
from typing import Optional, List

from pydantic import Field, field_validator

from .common_schemas import CamelModel


# ============================================================================
# Activity Type
# ============================================================================

class ActivityTypeOwnership(str, Enum):
    """Who can see an activity type"""
    SHARED = "shared"  # default type, visible to every user
    OWNED = "owned"    # visible to its owner only


class ActivityTypeItem(CamelModel):
    """Activity type"""
    id: str = Field(..., description="Activity type id")
    name: str = Field(..., description="Activity type name")
    icon: Optional[str] = Field(default=None, description="Icon key")
    color: Optional[str] = Field(default=None, description="Hex color")
    is_default: bool = Field(default=False, description="Shared default type")
    user_id: Optional[str] = Field(default=None, description="Owner id, null for shared types")
    ownership: ActivityTypeOwnership = Field(..., description="shared / owned")


class CreateActivityTypeRequest(CamelModel):
    """Create activity type request"""
    name: str = Field(..., min_length=1, description="Activity type name")
    icon: Optional[str] = Field(default=None, description="Icon key")
    color: Optional[str] = Field(default=None, description="Hex color")


class UpdateActivityTypeRequest(CamelModel):
    """Update activity type request (partial)"""
    name: Optional[str] = Field(default=None, min_length=1, description="Activity type name")
    icon: Optional[str] = Field(default=None, description="Icon key")
    color: Optional[str] = Field(default=None, description="Hex color")

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value: Optional[str]) -> str:
        # may be omitted, but an explicit null would clear a NOT NULL column
        if value is None:
            raise ValueError("name cannot be null")
        return value


# ============================================================================
# Activity Record
# ============================================================================

class ActivityRecordItem(CamelModel):
    """Activity record with its type embedded"""
    id: str = Field(..., description="Record id")
    user_id: str = Field(..., description="Owner id")
    activity_type_id: str = Field(..., description="Activity type id")
    activity_type: ActivityTypeItem = Field(..., description="Activity type")
    start_time: datetime = Field(..., description="Start time")
    end_time: datetime = Field(..., description="End time")
    note: Optional[str] = Field(default=None, description="Note")
    recorded_at: Optional[datetime] = Field(default=None, description="When the record was written")


class CreateActivityRecordRequest(CamelModel):
    """Create activity record request"""
    activity_type_id: str = Field(..., min_length=1, description="Activity type id")
    start_time: datetime = Field(..., description="Start time")
    end_time: datetime = Field(..., description="End time")
    note: Optional[str] = Field(default=None, description="Note")


# ============================================================================
# Time usage analysis
# ============================================================================

class ActivityTimeAggregate(CamelModel):
    """Total time spent on one activity type"""
    id: str = Field(..., description="Activity type id")
    name: str = Field(..., description="Activity type name")
    color: str = Field(..., description="Hex color")
    total_minutes: int = Field(..., description="Total minutes (rounded)")
    total_hours: float = Field(..., description="Total hours (one decimal)")


class AnalysisSummary(CamelModel):
    """Summary statistics of the analysed range"""
    total_recorded_minutes: int = Field(default=0, description="Sum of aggregate minutes")
    total_recorded_hours: float = Field(default=0.0, description="Total hours (one decimal)")
    leisure_minutes: int = Field(default=0, description="Minutes spent on leisure types")
    leisure_percentage: int = Field(default=0, ge=0, le=100, description="Leisure share (0-100)")
    days_in_range: int = Field(default=0, description="Days covered by the range (ceil)")


class AnalysisResult(CamelModel):
    """Time usage analysis"""
    time_by_activity: List[ActivityTimeAggregate] = Field(default_factory=list, description="Per-type totals, descending")
    summary: AnalysisSummary = Field(default_factory=AnalysisSummary, description="Summary")
    suggestions: List[str] = Field(default_factory=list, description="Improvement suggestions")
