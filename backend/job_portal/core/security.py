from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Response
from jose import jwt

from job_portal.config import settings

# 세션 토큰이 담기는 쿠키 이름
TOKEN_COOKIE_NAME = "token"

# 발급 본문은 임의의 JSON이므로 서명과 만료만 검증
DECODE_OPTIONS = {"verify_aud": False, "verify_sub": False, "verify_jti": False}

# 액세스 토큰 생성
def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta is not None:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)

# 토큰 검증 후 claims 반환 (실패 시 JWTError 계열 예외 발생)
def decode_access_token(token: str) -> Dict[str, Any]:
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options=DECODE_OPTIONS,
    )


def cookie_options() -> Dict[str, Any]:
    """운영 환경에서는 cross-site 전송을 위해 secure + SameSite=None"""
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(key=TOKEN_COOKIE_NAME, value=token, **cookie_options())


def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(key=TOKEN_COOKIE_NAME, **cookie_options())
