from .role import ERole, Role
from .association import user_roles
from .user import User

__all__ = ["ERole", "Role", "User", "user_roles"]
