from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

ModelT = TypeVar("ModelT")


class IRepository(ABC, Generic[ModelT]):
    """모든 엔티티 리포지토리가 공통으로 제공하는 기본 CRUD 연산입니다."""

    @abstractmethod
    def create(self, model: ModelT) -> ModelT:
        """새로운 레코드를 데이터베이스에 생성합니다. 고유 제약 위반은 그대로 전파됩니다."""
        pass

    @abstractmethod
    def find_by_id(self, record_id: int) -> Optional[ModelT]:
        """고유 ID로 특정 레코드를 조회합니다."""
        pass

    @abstractmethod
    def list_all(self) -> List[ModelT]:
        """모든 레코드의 목록을 ID 오름차순으로 조회합니다."""
        pass

    @abstractmethod
    def exists_by_id(self, record_id: int) -> bool:
        """해당 ID의 레코드가 존재하는지 확인합니다."""
        pass

    @abstractmethod
    def count(self) -> int:
        """저장된 레코드의 개수를 조회합니다."""
        pass

    @abstractmethod
    def delete(self, model: ModelT) -> bool:
        """특정 레코드를 데이터베이스에서 삭제합니다."""
        pass
