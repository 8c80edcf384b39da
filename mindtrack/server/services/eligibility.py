"""
Self-test eligibility gate

A user may take the self-test once every SELF_TEST_COOLDOWN_HOURS.
"""
from datetime import datetime, timedelta
from typing import Optional

from mindtrack.config.constants import SELF_TEST_COOLDOWN_HOURS
from mindtrack.server.schemas.mindset_schemas import EligibilityResponse
from mindtrack.utils import to_local_naive

COOLDOWN = timedelta(hours=SELF_TEST_COOLDOWN_HOURS)


def can_take_test(
    last_taken_at: Optional[datetime],
    now: Optional[datetime] = None
) -> EligibilityResponse:
    """
    Args:
        last_taken_at: time of the previous test, None if there was none
        now: current time (defaults to datetime.now())

    Returns:
        EligibilityResponse: next_available_at is set only when can_take is False
    """
    if last_taken_at is None:
        return EligibilityResponse(can_take=True, next_available_at=None)

    last_taken_at = to_local_naive(last_taken_at)
    now = to_local_naive(now) if now is not None else datetime.now()

    if now - last_taken_at >= COOLDOWN:
        return EligibilityResponse(can_take=True, next_available_at=None)
    return EligibilityResponse(can_take=False, next_available_at=last_taken_at + COOLDOWN)
