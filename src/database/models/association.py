from sqlalchemy import Column, Integer, ForeignKey, Table
from ..database import Base

# 사용자(User)와 역할(Role) 사이의 다대다(many-to-many) 관계를 연결하는 연관 테이블입니다.
user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id"), primary_key=True),
)
