from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.server_api import ServerApi
from app.config import settings
from app.utils.logger import db_logger

motor_client: Optional[AsyncIOMotorClient] = None

async def init_mongo():
    """MongoDB 클라이언트를 생성하고 연결을 확인합니다."""
    global motor_client
    motor_client = AsyncIOMotorClient(
        settings.MONGO_URI,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )
    await motor_client.admin.command("ping")
    db_logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    await ensure_indexes(motor_client[settings.MONGO_DB_NAME])

async def ensure_indexes(db: AsyncIOMotorDatabase):
    """(email, jobId) 조합당 입찰 1건만 허용하는 유니크 인덱스 생성"""
    await db[settings.BIDS_COLLECTION].create_index(
        [("email", ASCENDING), ("jobId", ASCENDING)],
        unique=True,
        name="unique_bid_per_user_job",
    )

async def close_mongo():
    """MongoDB 연결을 안전하게 종료합니다."""
    global motor_client
    if motor_client:
        motor_client.close()
        motor_client = None
        db_logger.info("MongoDB 연결 종료")

def get_mongo_db() -> AsyncIOMotorDatabase:
    # 앱 시작(lifespan) 시 초기화된 클라이언트의 DB 핸들을 반환
    if motor_client is None:
        raise RuntimeError("MongoDB client is not initialized")
    return motor_client[settings.MONGO_DB_NAME]
