from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base
from .association import user_roles


class User(Base):
    """
    시스템에 가입한 계정을 나타냅니다.
    사용자 이름과 이메일은 모든 사용자 사이에서 고유해야 하며,
    이 제약은 테이블의 UNIQUE 제약으로 강제됩니다.
    """
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(20), unique=True, nullable=False, index=True)
    email = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(120), nullable=False)

    roles = relationship("Role", secondary=user_roles, lazy="selectin")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
