from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from src.config import get_settings


def create_db_engine(url: str = None, echo: bool = None):
    """
    주어진 연결 문자열로 SQLAlchemy 엔진을 생성합니다.
    SQLite인 경우에만 check_same_thread 옵션을 꺼서 여러 스레드에서 세션을 사용할 수 있게 합니다.
    """
    settings = get_settings()
    url = url or settings.database_url
    echo = settings.database_echo if echo is None else echo
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=echo, connect_args=connect_args)


engine = create_db_engine()

# autocommit=False, autoflush=False로 설정하여, 명시적으로 commit을 호출해야 DB에 반영됩니다.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()


@contextmanager
def session_scope(session_factory=SessionLocal):
    """
    세션을 열고, 블록 안에서 예외가 발생하면 롤백한 뒤 그대로 다시 던집니다.
    블록이 끝나면 세션은 항상 닫힙니다.
    """
    session = session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
