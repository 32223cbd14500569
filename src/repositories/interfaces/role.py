from abc import abstractmethod
from typing import Optional
from src.database import models
from .base import IRepository

class IRoleRepository(IRepository[models.Role]):
    @abstractmethod
    def find_by_name(self, name: models.ERole) -> Optional[models.Role]:
        """이름으로 특정 역할을 조회합니다. 없으면 None을 반환합니다."""
        pass
