import hashlib
import hmac
import logging
import secrets
from typing import Dict, Any, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError

from src.database import models
from src.repositories.interfaces import IUserRepository, IRoleRepository
from src.services.exceptions import UserCreationError, UserNotFoundError, RoleNotFoundError

logger = logging.getLogger(__name__)

# 가입 요청에서 받는 역할 문자열과 ERole의 대응. 목록에 없는 값은 ROLE_USER로 처리합니다.
ROLE_ALIASES = {
    "admin": models.ERole.ROLE_ADMIN,
    "mod": models.ERole.ROLE_MODERATOR,
}

# PBKDF2 반복 횟수. 저장 형식: pbkdf2_sha256$<반복 횟수>$<salt hex>$<hash hex>
PBKDF2_ITERATIONS = 600_000


def hash_password(password: str, salt: Optional[bytes] = None, iterations: int = PBKDF2_ITERATIONS) -> str:
    """사용자마다 임의의 salt를 붙여 PBKDF2-SHA256으로 비밀번호를 해시합니다."""
    salt = salt or secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, iterations)
    return f"pbkdf2_sha256${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """저장된 해시와 평문 비밀번호가 일치하는지 확인합니다."""
    try:
        algorithm, iterations, salt_hex, _ = password_hash.split('$')
    except ValueError:
        return False
    if algorithm != 'pbkdf2_sha256':
        return False
    expected = hash_password(password, bytes.fromhex(salt_hex), int(iterations))
    return hmac.compare_digest(expected, password_hash)


class IdentityService:
    """사용자 가입과 사용자/역할 조회 서비스를 제공합니다."""

    def __init__(self, user_repo: IUserRepository, role_repo: IRoleRepository):
        """
        IdentityService를 초기화합니다.

        Args:
            user_repo: 사용자 데이터에 접근하기 위한 리포지토리.
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
        """
        self.user_repo = user_repo
        self.role_repo = role_repo

    def register_user(self, username: str, email: str, password: str,
                      roles: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        새로운 사용자를 가입시킵니다. 비밀번호는 해시하여 저장합니다.

        exists_by_username / exists_by_email 검사는 빠른 실패를 위한 사전 확인입니다.
        두 요청이 동시에 검사를 통과하더라도 DB의 UNIQUE 제약이 두 번째 삽입을 거부하며,
        이 경우에도 UserCreationError로 변환됩니다.

        Args:
            username: 가입할 사용자 이름.
            email: 가입할 이메일 주소.
            password: 평문 비밀번호.
            roles: "admin", "mod", "user" 등 요청된 역할 문자열. 없으면 ROLE_USER.

        Returns:
            생성된 사용자의 ID, 이름, 이메일, 역할 이름 목록을 담은 딕셔너리.

        Raises:
            UserCreationError: 사용자 이름 또는 이메일이 이미 사용 중일 때.
            RoleNotFoundError: 요청된 역할이 DB에 저장되어 있지 않을 때.
        """
        if self.user_repo.exists_by_username(username):
            raise UserCreationError("Error: Username is already taken!")
        if self.user_repo.exists_by_email(email):
            raise UserCreationError("Error: Email is already in use!")

        role_models = [self._resolve_role(name) for name in self._requested_roles(roles)]

        new_user = models.User(username=username, email=email, password_hash=hash_password(password))
        new_user.roles = role_models
        try:
            created_user = self.user_repo.create(new_user)
        except IntegrityError as e:
            logger.info("동시 가입 충돌로 사용자 '%s' 생성이 거부되었습니다.", username)
            raise UserCreationError(f"User with username '{username}' or email '{email}' already exists.") from e

        logger.info("사용자 '%s' 가입 완료 (id=%s)", created_user.username, created_user.id)
        return self._to_dict(created_user)

    def get_user_by_username(self, username: str) -> Dict[str, Any]:
        """
        사용자 이름으로 특정 사용자를 조회합니다. (비밀번호 제외)

        Raises:
            UserNotFoundError: 해당 이름의 사용자를 찾을 수 없을 때.
        """
        user = self.user_repo.find_by_username(username)
        if not user:
            raise UserNotFoundError(f"User with username '{username}' not found.")
        return self._to_dict(user)

    def is_username_available(self, username: str) -> bool:
        return not self.user_repo.exists_by_username(username)

    def is_email_available(self, email: str) -> bool:
        return not self.user_repo.exists_by_email(email)

    @staticmethod
    def _requested_roles(roles: Optional[Iterable[str]]) -> List[models.ERole]:
        resolved = []
        for name in roles or ():
            role_name = ROLE_ALIASES.get(name, models.ERole.ROLE_USER)
            if role_name not in resolved:
                resolved.append(role_name)
        return resolved or [models.ERole.ROLE_USER]

    def _resolve_role(self, role_name: models.ERole) -> models.Role:
        role = self.role_repo.find_by_name(role_name)
        if not role:
            raise RoleNotFoundError("Error: Role is not found.")
        return role

    @staticmethod
    def _to_dict(user: models.User) -> Dict[str, Any]:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "roles": [role.name.value for role in user.roles],
        }
