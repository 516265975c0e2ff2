"""
CardLens 설정 관리

모든 설정값은 .env 파일에서 관리합니다.
사용법:
    from cardlens.config import settings
    url = settings.VALIDATOR_BASE_URL
"""

import sys
from typing import Optional

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # .env에 정의되지 않은 변수 무시
    )

    # === 환경 ===
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # === 마일리지 회원번호 검증 서비스 ===
    VALIDATOR_BASE_URL: str = "http://localhost:8080/api/v1"
    VALIDATOR_API_KEY: str = ""
    VALIDATOR_TIMEOUT: int = 10


# 싱글톤 인스턴스
settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """stderr 싱크 하나만 남기고 로그 레벨을 설정합니다."""
    logger.remove()
    logger.add(sys.stderr, level=level or settings.LOG_LEVEL)
