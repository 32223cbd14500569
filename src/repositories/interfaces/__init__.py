from .base import IRepository
from .role import IRoleRepository
from .user import IUserRepository

__all__ = ["IRepository", "IRoleRepository", "IUserRepository"]
