from typing import Optional
from src.database import models
from src.repositories.interfaces import IUserRepository
from .sqlalchemy_repository import SqlalchemyRepository

class SqlalchemyUserRepository(SqlalchemyRepository[models.User], IUserRepository):
    model = models.User

    def find_by_username(self, username: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.username == username).first()

    def exists_by_username(self, username: str) -> bool:
        return self._exists(models.User.username == username)

    def exists_by_email(self, email: str) -> bool:
        return self._exists(models.User.email == email)
