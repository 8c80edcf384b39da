"""
Mindset service - self-test business logic

Pure function interface over the self-test provider
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from mindtrack.server.exceptions import SelfTestUnavailableError
from mindtrack.server.providers import self_test_provider
from mindtrack.server.schemas.mindset_schemas import (
    SelfTestAnswers,
    SelfTestItem,
    EligibilityResponse,
    TakeSelfTestRequest,
)
from mindtrack.server.services.eligibility import can_take_test
from mindtrack.utils import get_logger, round_half_up, to_db_time

logger = get_logger(__name__)

LOW_SCORE_MAX = 50
MEDIUM_SCORE_MAX = 80


# ============================================================================
# Scoring
# ============================================================================

def calculate_score(answers: SelfTestAnswers) -> int:
    """
    Score a test, 0-100

    Starts at 100; SNS usage and procrastination take points away, focus
    span and productive hours add them back.
    """
    score = 100.0
    score -= min(50, answers.social_media_usage * 5)
    score -= (answers.procrastination - 1) * 10
    score += min(20, answers.focus_time / 30)
    score += min(30, answers.productive_hours * 5)

    return max(0, min(100, round_half_up(score)))


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def generate_feedback(score: int, answers: SelfTestAnswers) -> str:
    if score <= LOW_SCORE_MAX:
        feedbacks = [
            f"하루 {_format_number(answers.social_media_usage)}시간의 SNS 사용은 많은 시간을 소비하고 있습니다. "
            "SNS 사용 시간을 절반으로 줄이는 것을 목표로 해보세요.",
            "주의를 분산시키는 요소들을 제거하고, 집중할 수 있는 환경을 만드는 것이 중요합니다.",
            "작은 목표부터 시작하여 성취감을 느껴보세요. 점진적인 개선이 중요합니다.",
        ]
    elif score <= MEDIUM_SCORE_MAX:
        feedbacks = [
            "현재의 습관을 유지하면서, 조금 더 개선할 수 있는 부분을 찾아보세요.",
            f"하루 {_format_number(answers.focus_time)}분의 집중 시간은 좋은 출발점입니다. 이를 조금씩 늘려보세요.",
            "규칙적인 생활 패턴을 만드는 것이 더 나은 결과를 가져올 수 있습니다.",
        ]
    else:
        feedbacks = [
            "현재의 좋은 습관을 잘 유지하고 있습니다.",
            "다른 사람들과 경험을 공유하여 긍정적인 영향을 줄 수 있습니다.",
            "현재 습관을 더욱 발전시키고, 새로운 도전을 시도해보세요.",
        ]
    return "\n\n".join(feedbacks)


# ============================================================================
# Self-test
# ============================================================================

def _to_item(row: Dict[str, Any]) -> SelfTestItem:
    return SelfTestItem(
        id=row['id'],
        user_id=row['user_id'],
        score=row['score'],
        answers=SelfTestAnswers.model_validate(row['answers']),
        feedback=row['feedback'],
        taken_at=row['taken_at'],
        is_completed=row['is_completed'],
    )


def get_eligibility(user_id: str, now: Optional[datetime] = None) -> EligibilityResponse:
    """
    Whether the user may take the self-test now

    Args:
        user_id: user id
        now: current time (tests)
    """
    latest = self_test_provider.get_latest(user_id)
    return can_take_test(latest['taken_at'] if latest else None, now)


def take_self_test(
    user_id: str,
    request: TakeSelfTestRequest,
    now: Optional[datetime] = None
) -> SelfTestItem:
    """
    Score, store and return a self-test

    Raises:
        SelfTestUnavailableError: the previous test is less than a day old
    """
    eligibility = get_eligibility(user_id, now)
    if not eligibility.can_take:
        next_available = eligibility.next_available_at.strftime("%Y-%m-%d %H:%M")
        raise SelfTestUnavailableError(
            f"이미 테스트를 진행하셨습니다. 다음 테스트는 {next_available} 에 가능합니다. "
            "하루에 한 번만 테스트가 가능합니다."
        )

    answers = request.answers
    score = calculate_score(answers)
    feedback = generate_feedback(score, answers)

    new_id = self_test_provider.create(
        user_id,
        score,
        answers.model_dump(),
        feedback,
        taken_at=to_db_time(now or datetime.now()),
    )
    return _to_item(self_test_provider.get_by_id(new_id))


def get_test_history(user_id: str) -> List[SelfTestItem]:
    """Self-tests of the user, newest first"""
    return [_to_item(row) for row in self_test_provider.list_by_user(user_id)]
