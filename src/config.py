# src/config.py
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    환경변수에서 읽어오는 애플리케이션 설정입니다.

    Attributes:
        database_url: 데이터베이스 연결 문자열 (기본값: 로컬 SQLite 파일)
        database_echo: SQL 로그 출력 여부
        log_level: 루트 로거 레벨
    """
    database_url: str = "sqlite:///auth_metadata.db"
    database_echo: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 한 번만 만들어 재사용합니다."""
    return Settings()


def configure_logging(level: str = None):
    """루트 로거에 기본 포맷과 레벨을 적용합니다."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
