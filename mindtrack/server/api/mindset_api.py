"""
Mindset API - self-test
"""
from typing import List

from fastapi import APIRouter, Depends

from mindtrack.server.api.dependencies import get_current_user_id
from mindtrack.server.exceptions import MindTrackError, to_http_exception
from mindtrack.server.schemas.mindset_schemas import (
    TakeSelfTestRequest,
    SelfTestItem,
    EligibilityResponse,
)
from mindtrack.server.services import mindset_service

router = APIRouter(prefix="/mindset", tags=["Mindset"])


@router.post("/self-test", response_model=SelfTestItem)
async def take_self_test(
    request: TakeSelfTestRequest,
    user_id: str = Depends(get_current_user_id)
):
    """
    Take the self-test (once per 24 hours)

    Returns the stored test with its score and feedback.
    """
    try:
        return mindset_service.take_self_test(user_id, request)
    except MindTrackError as e:
        raise to_http_exception(e)


@router.get("/self-test/history", response_model=List[SelfTestItem])
async def get_test_history(user_id: str = Depends(get_current_user_id)):
    """
    The caller's self-tests, newest first
    """
    return mindset_service.get_test_history(user_id)


@router.get("/self-test/can-take", response_model=EligibilityResponse)
async def can_take_test(user_id: str = Depends(get_current_user_id)):
    """
    Whether the caller may take the self-test now
    """
    return mindset_service.get_eligibility(user_id)
