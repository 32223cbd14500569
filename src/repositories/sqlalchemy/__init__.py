from .sqlalchemy_repository import SqlalchemyRepository
from .sqlalchemy_role_repository import SqlalchemyRoleRepository
from .sqlalchemy_user_repository import SqlalchemyUserRepository

__all__ = ["SqlalchemyRepository", "SqlalchemyRoleRepository", "SqlalchemyUserRepository"]
