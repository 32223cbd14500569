import enum

from sqlalchemy import Column, Integer, Enum
from ..database import Base


class ERole(str, enum.Enum):
    """시스템에서 허용되는 역할의 고정된 목록입니다."""
    ROLE_USER = "ROLE_USER"
    ROLE_MODERATOR = "ROLE_MODERATOR"
    ROLE_ADMIN = "ROLE_ADMIN"


class Role(Base):
    """
    사용자 계정에 부여되는 권한 레이블입니다.
    (예: ROLE_USER, ROLE_ADMIN).
    이름은 ERole 값 중 하나로 제한되며, 값마다 최대 한 개의 레코드만 저장됩니다.
    """
    __tablename__ = "roles"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(Enum(ERole, native_enum=False, length=20), unique=True, nullable=False)

    def __repr__(self):
        return f"<Role(id={self.id}, name='{self.name.value if self.name else None}')>"
