from fastapi import APIRouter, Depends, Response
from app.core.security import TokenService, clear_token_cookie, get_token_service, set_token_cookie
from app.schemas.auth import TokenRequest
from app.schemas.common import SuccessResponse
from app.utils.logger import auth_logger

router = APIRouter(tags=["auth"])


@router.post(
    "/jwt",
    response_model=SuccessResponse,
    operation_id="issue_token",
    summary="JWT 발급",
    description="""
이메일을 받아 JWT 를 발급하고 `token` 쿠키(httpOnly)로 내려줍니다.

- 운영 환경(`ENVIRONMENT=production`): `Secure`, `SameSite=None`
- 개발 환경: `SameSite=Strict`
"""
)
def issue_token(
    data: TokenRequest,
    response: Response,
    tokens: TokenService = Depends(get_token_service),
) -> SuccessResponse:
    token = tokens.issue(data.email)
    set_token_cookie(response, token)
    auth_logger.info(f"토큰 발급: {data.email}")
    return SuccessResponse()


@router.get(
    "/jwt-logout",
    response_model=SuccessResponse,
    operation_id="logout",
    summary="로그아웃 (쿠키 삭제)",
    description="`token` 쿠키를 만료시킵니다. 서버에 블랙리스트가 없으므로 토큰 자체는 만료 시각까지 유효합니다."
)
def logout(response: Response) -> SuccessResponse:
    clear_token_cookie(response)
    return SuccessResponse()
