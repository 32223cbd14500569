from typing import Optional
from src.database import models
from src.repositories.interfaces import IRoleRepository
from .sqlalchemy_repository import SqlalchemyRepository

class SqlalchemyRoleRepository(SqlalchemyRepository[models.Role], IRoleRepository):
    model = models.Role

    def find_by_name(self, name: models.ERole) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.name == name).first()
