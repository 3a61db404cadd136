from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.config import settings
from app.core.security import InvalidTokenError, TokenService, get_token_service
from app.database import get_mongo_db
from app.services.bid_service import BidService
from app.services.job_service import JobService
from app.utils.exceptions import ForbiddenException, UnauthorizedException
from app.utils.logger import auth_logger

# 쿠키의 JWT 토큰 검증 후 이메일(identity) 반환
def verify_token(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> str:
    token = request.cookies.get(settings.TOKEN_COOKIE_NAME)
    if not token:
        raise UnauthorizedException()
    try:
        email = tokens.verify(token)
    except InvalidTokenError as e:
        auth_logger.warning(f"토큰 검증 실패: {str(e)}")
        raise UnauthorizedException()

    request.state.user = {"email": email}
    return email

# 경로의 email 과 토큰의 email 이 같은 경우만 통과
def require_email_owner(email: str, current_email: str = Depends(verify_token)) -> str:
    auth_logger.info(f"Decoded email--> {current_email}")
    if current_email != email:
        raise ForbiddenException()
    return current_email

# PROTECT_MUTATIONS 설정 시에만 토큰을 요구하는 선택적 가드
def protect_mutation(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
) -> None:
    if settings.PROTECT_MUTATIONS:
        verify_token(request, tokens)

def get_job_service(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> JobService:
    return JobService(db[settings.JOBS_COLLECTION])

def get_bid_service(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> BidService:
    return BidService(db[settings.BIDS_COLLECTION], db[settings.JOBS_COLLECTION])
