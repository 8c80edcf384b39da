"""
AnalyticsService tests

The record store is mocked for the pure cases; the last class runs the
service against a real SQLite file.
"""
import sqlite3
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock, patch

import pytest

from conftest import make_record, DAY_START
from mindtrack.config import settings
from mindtrack.server.exceptions import RecordRetrievalError
from mindtrack.server.providers import ActivityRecordProvider
from mindtrack.server.schemas.activity_schemas import CreateActivityRecordRequest
from mindtrack.server.services import activity_service
from mindtrack.server.services.analytics_service import AnalyticsService


class TestAnalyticsServiceWithMockStore:
    def setup_method(self):
        self.store = MagicMock()
        self.service = AnalyticsService(record_store=self.store)

    def test_passes_range_to_store(self):
        self.store.find_records.return_value = []
        end = DAY_START + timedelta(days=1)

        self.service.analyze("u1", DAY_START, end)

        self.store.find_records.assert_called_once_with("u1", DAY_START, end)

    def test_aware_bounds_become_local_naive(self):
        self.store.find_records.return_value = []
        start = datetime(2025, 3, 10, 0, 0, tzinfo=timezone.utc)
        end = start + timedelta(days=1)

        self.service.analyze("u1", start, end)

        _, called_start, called_end = self.store.find_records.call_args[0]
        assert called_start.tzinfo is None
        assert called_end.tzinfo is None
        assert called_end - called_start == timedelta(days=1)

    def test_builds_analysis_from_records(self):
        self.store.find_records.return_value = [
            make_record("work", "work", DAY_START + timedelta(hours=9), 120),
            make_record("sns", "SNS", DAY_START + timedelta(hours=12), 80),
        ]

        result = self.service.analyze("u1", DAY_START, DAY_START + timedelta(days=1))

        assert result.summary.total_recorded_minutes == 200
        assert result.summary.leisure_percentage == 40
        assert len(result.suggestions) == 3

    def test_retrieval_error_propagates(self):
        self.store.find_records.side_effect = RecordRetrievalError("boom")

        with pytest.raises(RecordRetrievalError):
            self.service.analyze("u1", DAY_START, DAY_START + timedelta(days=1))

    def test_leisure_categories_come_from_settings(self):
        self.store.find_records.return_value = [
            make_record("game", "게임", DAY_START, 60),
            make_record("work", "업무", DAY_START + timedelta(hours=1), 60),
        ]

        with patch.object(type(settings), "leisure_categories", new=["게임"]):
            result = self.service.analyze("u1", DAY_START, DAY_START + timedelta(days=1))

        assert result.summary.leisure_minutes == 60
        assert result.summary.leisure_percentage == 50


class TestAnalyticsServiceWithDatabase:
    @pytest.fixture(autouse=True)
    def _setup(self, seeded_db):
        self.db = seeded_db
        self.service = AnalyticsService(record_store=ActivityRecordProvider(seeded_db))
        types = {t.name: t.id for t in activity_service.get_activity_types("u1")}
        self.work_id = types["업무"]
        self.sns_id = types["SNS"]

    def _record(self, user_id, type_id, start, minutes):
        activity_service.create_activity_record(user_id, CreateActivityRecordRequest(
            activity_type_id=type_id,
            start_time=start,
            end_time=start + timedelta(minutes=minutes),
        ))

    def test_only_records_of_user_and_range_count(self):
        self._record("u1", self.work_id, DAY_START + timedelta(hours=9), 120)
        self._record("u1", self.sns_id, DAY_START + timedelta(hours=12), 80)
        self._record("u2", self.work_id, DAY_START + timedelta(hours=9), 300)
        self._record("u1", self.work_id, DAY_START + timedelta(days=3), 60)

        result = self.service.analyze("u1", DAY_START, DAY_START + timedelta(days=1))

        assert [(a.name, a.total_minutes) for a in result.time_by_activity] == [
            ("업무", 120),
            ("SNS", 80),
        ]
        assert result.time_by_activity[0].color == "#4F46E5"

    def test_start_bound_is_inclusive(self):
        self._record("u1", self.work_id, DAY_START, 30)

        result = self.service.analyze("u1", DAY_START, DAY_START + timedelta(hours=1))

        assert result.summary.total_recorded_minutes == 30

    def test_inverted_range_is_empty(self):
        self._record("u1", self.work_id, DAY_START + timedelta(hours=9), 120)

        result = self.service.analyze("u1", DAY_START + timedelta(days=1), DAY_START)

        assert result.time_by_activity == []
        assert result.summary.total_recorded_minutes == 0

    def test_database_failure_becomes_retrieval_error(self):
        provider = ActivityRecordProvider(self.db)
        with patch.object(provider, "_fetch_all", side_effect=sqlite3.OperationalError("locked")):
            with pytest.raises(RecordRetrievalError):
                AnalyticsService(record_store=provider).analyze(
                    "u1", DAY_START, DAY_START + timedelta(days=1)
                )
