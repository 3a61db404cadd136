import logging
import sys
from typing import Optional, Union
from app.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str, None]) -> int:
    """DEBUG 같은 레벨 이름이나 숫자 레벨을 logging 레벨로 변환 (알 수 없으면 INFO)"""
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """stdout 으로 출력하는 이름별 로거 (레벨 기본값은 settings.LOG_LEVEL)"""
    logger = logging.getLogger(name)
    resolved = resolve_level(level if level is not None else settings.LOG_LEVEL)
    logger.setLevel(resolved)

    if not logger.handlers:  # 중복 핸들러 방지
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    return logger

# 기본 로거들
app_logger = setup_logger("app")
auth_logger = setup_logger("auth")
db_logger = setup_logger("db")
