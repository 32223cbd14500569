# tests/conftest.py
import pytest
from sqlalchemy.orm import sessionmaker

from src.database.database import Base, create_db_engine
from src.database import models


@pytest.fixture
def engine(tmp_path):
    """테스트마다 임시 SQLite 파일 DB를 만들고 모든 테이블을 생성합니다."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded_roles(db_session):
    """ERole의 모든 값에 대해 Role 레코드를 하나씩 저장합니다."""
    roles = {name: models.Role(name=name) for name in models.ERole}
    db_session.add_all(roles.values())
    db_session.commit()
    return roles
