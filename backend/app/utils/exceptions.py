from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from typing import Any, Dict, Optional

from app.utils.logger import app_logger

class AppException(HTTPException):
    """애플리케이션 전용 예외 클래스"""
    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        extra_data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail)
        self.error_code = error_code
        self.extra_data = extra_data or {}

def create_error_response(
    status_code: int,
    message: str,
    error_code: Optional[str] = None,
    extra_data: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """일관된 에러 응답 포맷 생성"""
    response = {
        "success": False,
        "message": message,
        "error": {
            "code": error_code or f"ERR_{status_code}",
            "message": message
        }
    }

    if extra_data:
        response["error"]["details"] = extra_data

    return response

# 자주 사용되는 에러들
class NotFoundException(AppException):
    def __init__(self, resource: str, detail: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail or f"{resource} not found",
            error_code="NOT_FOUND"
        )

class BadRequestException(AppException):
    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
            error_code=error_code or "BAD_REQUEST"
        )

class UnauthorizedException(AppException):
    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            error_code="UNAUTHORIZED"
        )

class ForbiddenException(AppException):
    def __init__(self, message: str = "Unauthorized access"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=message,
            error_code="FORBIDDEN"
        )

class InternalServerException(AppException):
    def __init__(self, message: str = "Internal server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
            error_code="INTERNAL_ERROR"
        )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=create_error_response(exc.status_code, exc.detail, exc.error_code, exc.extra_data),
    )


async def store_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """MongoDB 오류는 재시도 없이 원본 메시지 그대로 전달"""
    app_logger.error(f"MongoDB 오류 ({request.method} {request.url.path}): {str(exc)}")
    error = InternalServerException(str(exc))
    return JSONResponse(
        status_code=error.status_code,
        content=create_error_response(error.status_code, error.detail, "STORE_ERROR"),
    )
