"""
Business logic services

- Service classes are exported as singletons (AnalyticsService)
- Builder / helper modules are imported as pure function modules
"""

from .analytics_service import AnalyticsService

from . import activity_service
from . import mindset_service
from . import analytics_builder
from . import suggestion_rules
from . import eligibility

analytics_service = AnalyticsService()

__all__ = [
    "AnalyticsService",
    "analytics_service",
    "activity_service",
    "mindset_service",
    "analytics_builder",
    "suggestion_rules",
    "eligibility",
]
