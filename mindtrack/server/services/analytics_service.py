"""
Time usage analytics service
"""

from datetime import datetime

from mindtrack.config import settings
from mindtrack.server.schemas.activity_schemas import AnalysisResult
from mindtrack.server.services.analytics_builder import build_time_usage_analysis
from mindtrack.utils import get_logger, to_local_naive

logger = get_logger(__name__)


class AnalyticsService:
    """
    Time usage analytics

    Fetches the records of a range from the record store and hands them to
    the analytics builder. Retrieval errors (RecordRetrievalError) are not
    caught here.
    """

    def __init__(self, record_store=None):
        """
        Args:
            record_store: object with find_records(user_id, start_time, end_time),
                defaults to the activity record provider
        """
        if record_store is None:
            from mindtrack.server.providers import activity_record_provider
            record_store = activity_record_provider
        self.record_store = record_store

    def analyze(self, user_id: str, start_date: datetime, end_date: datetime) -> AnalysisResult:
        """
        Analyse a user's time usage in [start_date, end_date]

        Args:
            user_id: user id
            start_date: range start (inclusive)
            end_date: range end (inclusive)

        Returns:
            AnalysisResult: empty and zero-filled when start_date > end_date
        """
        start_date = to_local_naive(start_date)
        end_date = to_local_naive(end_date)

        records = self.record_store.find_records(user_id, start_date, end_date)
        logger.debug(f"Analysing {len(records)} records for user {user_id}")

        return build_time_usage_analysis(
            records,
            start_date,
            end_date,
            leisure_categories=settings.leisure_categories,
            default_color=settings.default_activity_color,
        )
