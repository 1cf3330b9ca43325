# meowmatch/models/user_role.py
from enum import Enum

class UserRole(str, Enum):
    """인증된 사용자의 권한 라벨. 역할 부여는 외부 관리 작업입니다."""
    ADMIN = "admin"
    SHELTER_STAFF = "shelter_staff"
    USER = "user"

# 관리자 대시보드(고양이 레코드 편집)에 접근할 수 있는 역할
EDITOR_ROLES = frozenset({UserRole.ADMIN, UserRole.SHELTER_STAFF})
