from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from fastapi import Response
from app.config import settings


class InvalidTokenError(Exception):
    """서명 불일치, 형식 오류, 만료 또는 email 클레임 누락"""


class TokenService:
    """이메일을 담은 JWT 발급/검증"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: Optional[timedelta] = None):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta or timedelta(days=365)

    # 액세스 토큰 생성
    def issue(self, email: str) -> str:
        expire = datetime.now(timezone.utc) + self.expires_delta
        to_encode = {"email": email, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    # 토큰 검증 후 email 반환
    def verify(self, token: str) -> str:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e
        email = payload.get("email")
        if not email or not isinstance(email, str):
            raise InvalidTokenError("email claim missing")
        return email


token_service = TokenService(
    settings.SECRET_KEY,
    algorithm=settings.ALGORITHM,
    expires_delta=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
)


def get_token_service() -> TokenService:
    return token_service


def _cookie_options() -> dict:
    # 운영 환경: cross-site 쿠키 + HTTPS 필수 / 개발 환경: same-site 전용
    if settings.is_production:
        return {"secure": True, "samesite": "none"}
    return {"secure": False, "samesite": "strict"}


def set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        settings.TOKEN_COOKIE_NAME,
        token,
        httponly=True,
        **_cookie_options(),
    )


def clear_token_cookie(response: Response) -> None:
    """클라이언트 쿠키만 만료시킵니다. 토큰 자체는 exp 까지 유효합니다."""
    response.delete_cookie(
        settings.TOKEN_COOKIE_NAME,
        httponly=True,
        **_cookie_options(),
    )
