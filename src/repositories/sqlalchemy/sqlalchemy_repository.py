import logging
from typing import Generic, List, Optional, Type, TypeVar
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from src.repositories.interfaces import IRepository

ModelT = TypeVar("ModelT")

logger = logging.getLogger(__name__)


class SqlalchemyRepository(IRepository[ModelT], Generic[ModelT]):
    """
    IRepository의 공통 CRUD 연산을 SQLAlchemy 세션 위에 구현합니다.
    하위 클래스는 model 속성에 대상 모델 클래스를 지정합니다.
    """
    model: Type[ModelT]

    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, model: ModelT) -> ModelT:
        self.db.add(model)
        try:
            self.db.commit()
        except IntegrityError as e:
            # 세션을 다시 사용할 수 있도록 롤백한 뒤, 원래 예외를 그대로 전파
            self.db.rollback()
            logger.warning("%s 생성 실패 (제약 조건 위반): %s", self.model.__name__, e.orig)
            raise
        self.db.refresh(model)
        return model

    def find_by_id(self, record_id: int) -> Optional[ModelT]:
        return self.db.query(self.model).filter(self.model.id == record_id).first()

    def list_all(self) -> List[ModelT]:
        return self.db.query(self.model).order_by(self.model.id.asc()).all()

    def exists_by_id(self, record_id: int) -> bool:
        return self._exists(self.model.id == record_id)

    def count(self) -> int:
        return self.db.query(self.model).count()

    def delete(self, model: ModelT) -> bool:
        if model:
            self.db.delete(model)
            self.db.commit()
            return True
        return False

    def _exists(self, *criteria) -> bool:
        """주어진 조건에 맞는 레코드가 있는지 EXISTS 쿼리로 확인합니다."""
        subquery = self.db.query(self.model).filter(*criteria).exists()
        return bool(self.db.query(subquery).scalar())
