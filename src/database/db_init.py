import logging

from .database import engine as default_engine, SessionLocal, Base
from .models import *

logger = logging.getLogger(__name__)


def initialize_db(engine=None, session_factory=None):
    """
    DB와 테이블을 생성하고, ERole의 모든 값에 대해 Role 레코드를 하나씩 삽입합니다.
    이미 저장된 역할은 건너뛰므로 여러 번 실행해도 결과가 같습니다.

    Returns:
        이번 실행에서 새로 삽입된 역할 이름의 리스트.
    """
    engine = engine or default_engine
    session_factory = session_factory or SessionLocal

    logger.info("DB 초기화 중 (SQLAlchemy 사용)...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=engine)
    logger.info("테이블 생성 완료.")

    db = session_factory()
    try:
        existing = {name for (name,) in db.query(Role.name).all()}
        missing = [role_name for role_name in ERole if role_name not in existing]
        if not missing:
            logger.info("기본 역할이 이미 존재합니다. 초기화를 건너뜁니다.")
            return []

        for role_name in missing:
            db.add(Role(name=role_name))
        db.commit()
        logger.info("역할 삽입 완료: %s", ", ".join(r.value for r in missing))
        return missing

    except Exception:
        logger.exception("역할 초기화 중 오류 발생")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == '__main__':
    from src.config import configure_logging

    configure_logging()
    initialize_db()
