"""
Mindset self-test schemas
"""

from datetime import datetime
from typing import Optional, List

from pydantic import Field

from .common_schemas import CamelModel

_HH_MM = r"^([01]\d|2[0-3]):[0-5]\d$"


class SleepSchedule(CamelModel):
    bedtime: str = Field(..., pattern=_HH_MM, description="Bedtime HH:mm")
    wakeup_time: str = Field(..., pattern=_HH_MM, description="Wake-up time HH:mm")


class SelfTestAnswers(CamelModel):
    """Answers of one self-test"""
    social_media_usage: float = Field(..., ge=0, le=24, description="SNS usage per day (hours)")
    procrastination: int = Field(..., ge=1, le=5, description="Procrastination level (1-5)")
    focus_time: float = Field(..., ge=0, description="Focus span (minutes)")
    distractions: List[str] = Field(default_factory=list, description="Distracting factors")
    productive_hours: float = Field(..., ge=0, le=24, description="Productive hours per day")
    sleep_schedule: SleepSchedule = Field(..., description="Sleep schedule")


class TakeSelfTestRequest(CamelModel):
    """Take self-test request"""
    answers: SelfTestAnswers = Field(..., description="Test answers")


class SelfTestItem(CamelModel):
    """Stored self-test"""
    id: str = Field(..., description="Self-test id")
    user_id: str = Field(..., description="Owner id")
    score: int = Field(..., ge=0, le=100, description="Score (0-100)")
    answers: SelfTestAnswers = Field(..., description="Answers")
    feedback: str = Field(..., description="Feedback text")
    taken_at: datetime = Field(..., description="When the test was taken")
    is_completed: bool = Field(default=True, description="Finished")


class EligibilityResponse(CamelModel):
    """Whether the user may take the self-test now"""
    can_take: bool = Field(..., description="Test available now")
    next_available_at: Optional[datetime] = Field(default=None, description="Next possible time, null when available")
