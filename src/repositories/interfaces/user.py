from abc import abstractmethod
from typing import Optional
from src.database import models
from .base import IRepository

class IUserRepository(IRepository[models.User]):
    @abstractmethod
    def find_by_username(self, username: str) -> Optional[models.User]:
        """사용자 이름으로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def exists_by_username(self, username: str) -> bool:
        """
        해당 사용자 이름을 가진 사용자가 하나라도 존재하는지 확인합니다.

        삽입 전 중복 여부를 미리 알려주는 용도일 뿐이며,
        동시에 들어온 가입 요청은 DB의 UNIQUE 제약으로만 걸러집니다.
        """
        pass

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """해당 이메일을 가진 사용자가 하나라도 존재하는지 확인합니다."""
        pass
