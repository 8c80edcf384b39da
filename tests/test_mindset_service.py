"""
Mindset self-test service tests
"""
from datetime import datetime, timedelta

import pytest

from mindtrack.server.exceptions import SelfTestUnavailableError
from mindtrack.server.schemas.mindset_schemas import (
    SelfTestAnswers,
    SleepSchedule,
    TakeSelfTestRequest,
)
from mindtrack.server.services.mindset_service import (
    calculate_score,
    generate_feedback,
    get_eligibility,
    get_test_history,
    take_self_test,
)

NOW = datetime(2025, 3, 10, 9, 0, 0)


def _answers(sns=2, procrastination=3, focus=60, productive=4, distractions=None):
    return SelfTestAnswers(
        social_media_usage=sns,
        procrastination=procrastination,
        focus_time=focus,
        distractions=distractions or [],
        productive_hours=productive,
        sleep_schedule=SleepSchedule(bedtime="23:30", wakeup_time="07:00"),
    )


class TestCalculateScore:
    def test_typical_answers(self):
        # 100 - 10 - 20 + 2 + 20
        assert calculate_score(_answers()) == 92

    def test_heavy_sns_and_procrastination(self):
        # 100 - 40 - 40 + 1 + 5
        assert calculate_score(_answers(sns=8, procrastination=5, focus=30, productive=1)) == 26

    def test_penalties_and_bonuses_are_capped(self):
        # SNS penalty caps at 50, so the worst case is 10
        assert calculate_score(_answers(sns=24, procrastination=5, focus=0, productive=0)) == 10

    def test_clamped_to_100(self):
        assert calculate_score(_answers(sns=0, procrastination=1, focus=600, productive=6)) == 100

    def test_rounds_half_up(self):
        # 100 - 5 - 10 + 1.5 = 86.5
        assert calculate_score(_answers(sns=1, procrastination=2, focus=45, productive=0)) == 87


class TestGenerateFeedback:
    def test_low_band_mentions_sns_hours(self):
        feedback = generate_feedback(50, _answers(sns=8))
        paragraphs = feedback.split("\n\n")

        assert len(paragraphs) == 3
        assert "하루 8시간의 SNS" in paragraphs[0]

    def test_medium_band_mentions_focus_minutes(self):
        feedback = generate_feedback(51, _answers(focus=90))

        assert "하루 90분의 집중 시간" in feedback
        assert generate_feedback(80, _answers(focus=90)) == feedback

    def test_high_band(self):
        feedback = generate_feedback(81, _answers())

        assert feedback.startswith("현재의 좋은 습관을 잘 유지하고 있습니다.")
        assert len(feedback.split("\n\n")) == 3

    def test_fractional_values_are_kept(self):
        feedback = generate_feedback(10, _answers(sns=2.5))
        assert "하루 2.5시간의 SNS" in feedback


class TestSelfTestFlow:
    @pytest.fixture(autouse=True)
    def _setup(self, db_manager):
        self.request = TakeSelfTestRequest(answers=_answers())

    def test_first_test_is_stored(self):
        item = take_self_test("u1", self.request, now=NOW)

        assert item.user_id == "u1"
        assert item.score == 92
        assert item.taken_at == NOW
        assert item.is_completed is True
        assert item.answers.sleep_schedule.bedtime == "23:30"
        assert item.feedback == generate_feedback(92, self.request.answers)

    def test_second_test_within_a_day_is_rejected(self):
        take_self_test("u1", self.request, now=NOW)

        with pytest.raises(SelfTestUnavailableError) as exc_info:
            take_self_test("u1", self.request, now=NOW + timedelta(hours=23))

        assert exc_info.value.status_code == 400
        assert "2025-03-11 09:00" in exc_info.value.message
        assert len(get_test_history("u1")) == 1

    def test_allowed_again_after_a_day(self):
        take_self_test("u1", self.request, now=NOW)
        take_self_test("u1", self.request, now=NOW + timedelta(hours=24))

        history = get_test_history("u1")
        assert [t.taken_at for t in history] == [NOW + timedelta(hours=24), NOW]

    def test_eligibility_follows_latest_test(self):
        assert get_eligibility("u1", now=NOW).can_take is True

        take_self_test("u1", self.request, now=NOW)
        eligibility = get_eligibility("u1", now=NOW + timedelta(hours=1))

        assert eligibility.can_take is False
        assert eligibility.next_available_at == NOW + timedelta(hours=24)

    def test_users_are_independent(self):
        take_self_test("u1", self.request, now=NOW)

        assert get_eligibility("u2", now=NOW).can_take is True
        assert get_test_history("u2") == []
