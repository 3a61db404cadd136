from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from pymongo.errors import PyMongoError
from app.config import settings
from app.database.mongo import init_mongo, close_mongo
from app.utils.exceptions import AppException, app_exception_handler, store_exception_handler
from app.utils.logger import app_logger
from app.routers import (
    auth,
    job,
    bid_job,
)

# 앱 시작 시 MongoDB 연결, 종료 시 정리
@asynccontextmanager
async def lifespan(app: FastAPI):
    # MongoDB: 연결 확인 및 인덱스 생성
    await init_mongo()
    app_logger.info(f"Server running on port {settings.PORT} ({settings.ENVIRONMENT})")
    # 애플리케이션 실행
    yield
    # 앱 종료 시 MongoDB 연결 정리
    await close_mongo()

# FastAPI 앱 생성
app = FastAPI(
    title="JobOrbit API",
    lifespan=lifespan
)

@app.get("/", response_class=PlainTextResponse)
async def root():
    """서버 상태 확인"""
    return "Hello from jobOrbit Server...."

# CORS 설정 (쿠키 전송을 위해 credentials 허용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 예외 핸들러 등록
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(PyMongoError, store_exception_handler)

# 라우터 등록
app.include_router(auth.router)
app.include_router(job.router)
app.include_router(bid_job.router)
