from fastapi import APIRouter, Body, Response
from typing import Any, Dict

from job_portal.core.security import clear_token_cookie, create_access_token, set_token_cookie
from job_portal.schemas.results import SuccessResponse
from job_portal.utils.logger import auth_logger

router = APIRouter(tags=["auth"])


@router.post(
    "/jwt",
    response_model=SuccessResponse,
    summary="세션 토큰 발급",
    description="요청 본문(최소 email 포함)을 1시간짜리 JWT로 서명해 httpOnly 쿠키로 설정합니다.",
)
async def issue_token(response: Response, user: Dict[str, Any] = Body(...)):
    token = create_access_token(user)
    set_token_cookie(response, token)
    auth_logger.info(f"토큰 발급: {user.get('email')}")
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse, summary="로그아웃 (쿠키 삭제)")
async def logout(response: Response):
    clear_token_cookie(response)
    return SuccessResponse()
