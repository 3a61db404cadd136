import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


def _default_mongo_uri() -> str:
    # 기존 Atlas 클러스터 접속 정보 (DB_USER / DB_PASS)
    user = os.getenv("DB_USER", "")
    password = os.getenv("DB_PASS", "")
    host = os.getenv("DB_HOST", "cluster0.euk0j.mongodb.net")
    if not user:
        return "mongodb://localhost:27017"
    return (
        f"mongodb+srv://{user}:{password}@{host}/"
        "?retryWrites=true&w=majority&appName=Cluster0"
    )


class Settings(BaseSettings):
    # MongoDB 설정
    MONGO_URI: str = os.getenv("MONGO_URI") or _default_mongo_uri()
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "soloDB")
    JOBS_COLLECTION: str = os.getenv("JOBS_COLLECTION", "jobs")
    BIDS_COLLECTION: str = os.getenv("BIDS_COLLECTION", "bidJobs")

    # 보안 설정
    SECRET_KEY: str = os.getenv("SECRET_KEY", "SUPERSECRETKEY")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "365"))
    TOKEN_COOKIE_NAME: str = "token"

    # 실행 환경 (production / development)
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development"))

    # 삭제/수정/상태변경 라우트에 토큰 요구 여부 (기본값: 미적용)
    PROTECT_MUTATIONS: bool = os.getenv("PROTECT_MUTATIONS", "false").lower() in ("1", "true", "yes")

    # 로그 레벨 (DEBUG / INFO / WARNING / ERROR)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # 서버 설정
    PORT: int = int(os.getenv("PORT", "9000"))

    # CORS 설정
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173")

    @property
    def cors_origins(self) -> list:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

settings = Settings()
