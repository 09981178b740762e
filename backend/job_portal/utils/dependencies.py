from typing import Any, Dict, Optional

from fastapi import Cookie
from jose import JWTError

from job_portal.core.security import decode_access_token
from job_portal.utils.exceptions import ForbiddenException, UnauthorizedException
from job_portal.utils.logger import auth_logger

# 쿠키의 JWT 토큰에서 현재 사용자 claims 가져오기
async def get_current_user(token: Optional[str] = Cookie(None)) -> Dict[str, Any]:
    if not token:
        raise UnauthorizedException()
    try:
        payload = decode_access_token(token)
    except JWTError as e:
        auth_logger.warning(f"Token verification failed: {e}")
        raise UnauthorizedException()
    return payload


def require_owner(email: str, current_user: Dict[str, Any]) -> None:
    """토큰의 이메일과 요청 경로의 이메일이 다르면 403"""
    if current_user.get("email") != email:
        auth_logger.warning(
            f"Forbidden access: token email {current_user.get('email')!r} requested data of {email!r}"
        )
        raise ForbiddenException()
