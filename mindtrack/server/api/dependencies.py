"""
Shared API dependencies
"""
from typing import Optional

from fastapi import Header, HTTPException


async def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id", description="Caller's user id")
) -> str:
    """
    Identity of the caller

    Authentication happens upstream; the authenticated user id is forwarded
    in the X-User-Id header.
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="사용자 정보가 없습니다.")
    return x_user_id.strip()
