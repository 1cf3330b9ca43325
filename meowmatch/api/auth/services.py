# meowmatch/api/auth/services.py
import logging
import threading
from concurrent.futures import Executor
from typing import Any, Dict, List, Optional

from firebase_admin import firestore

from meowmatch.core.errors import AuthError, DataAccessError
from meowmatch.models.user_role import UserRole, EDITOR_ROLES
from meowmatch.services.firebase_auth_client import AuthEvent, AuthSession, AuthUser

class RoleService:
    """'user_roles' 컬렉션에서 사용자의 역할 목록을 읽습니다 (읽기 전용)."""
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.roles_ref = self.db.collection('user_roles')

    def get_roles(self, user_id: str) -> List[UserRole]:
        try:
            docs = list(self.roles_ref.where('user_id', '==', user_id).stream())
        except Exception as e:
            logging.error(f"Role fetch failed (user_id: {user_id}): {e}", exc_info=True)
            raise DataAccessError("Failed to load user roles.", cause=e)

        roles = []
        for doc in docs:
            value = doc.to_dict().get('role')
            try:
                role = UserRole(value)
            except ValueError:
                logging.warning(f"Ignoring unknown role '{value}' for user {user_id}")
                continue
            if role not in roles:
                roles.append(role)
        return roles

class AuthSessionProvider:
    """
    현재 인증 상태와 역할 플래그를 나머지 애플리케이션에 제공합니다.

    상태는 두 단계로 나뉩니다.
    - session_known: 세션(로그인 여부) 확인 완료
    - roles_known: 해당 사용자의 역할 조회 완료
    권한 판단은 두 단계가 모두 끝난 뒤에만 해야 합니다 (loading 동안은 '모름').

    세션 변경 알림 구독이 진실의 원천이며, 초기 세션 확인보다 먼저 도착한 알림이 이깁니다.
    이미 지나간 세션에 대한 역할 조회 결과는 버립니다.
    """
    def __init__(self, auth_client, role_service: RoleService, executor: Optional[Executor] = None):
        self.auth_client = auth_client
        self.role_service = role_service
        self.executor = executor

        self.session: Optional[AuthSession] = None
        self.user: Optional[AuthUser] = None
        self.roles: List[UserRole] = []

        self._lock = threading.Lock()
        self._roles_ready = threading.Event()
        self._session_known = False
        self._roles_known = False
        self._event_seen = False
        self._generation = 0
        self._subscription = None

    # --- 초기화 / 정리 ---
    def initialize(self) -> "AuthSessionProvider":
        """구독을 먼저 걸고, 로그아웃 화면 깜빡임을 막기 위해 현재 세션을 한 번 즉시 확인합니다."""
        self._subscription = self.auth_client.on_auth_state_change(self._on_auth_state_change)
        try:
            session = self.auth_client.get_session()
        except AuthError as e:
            logging.warning(f"Initial session check failed: {e.message}")
            session = None
        self._apply_session(session, from_initial_check=True)
        return self

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    # --- 세션 상태 반영 ---
    def _on_auth_state_change(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        logging.info(f"Auth state change: {event.value}")
        self._apply_session(session)

    def _apply_session(self, session: Optional[AuthSession], from_initial_check: bool = False) -> None:
        with self._lock:
            if from_initial_check and self._event_seen:
                # 구독 알림이 이미 더 최신 상태를 반영함
                return
            if not from_initial_check:
                self._event_seen = True
            self._generation += 1
            generation = self._generation
            self.session = session
            self.user = session.user if session else None
            self._session_known = True

            if self.user is None:
                # 로그아웃: 역할은 즉시 동기적으로 비움
                self.roles = []
                self._roles_known = True
                self._roles_ready.set()
                return

            self._roles_known = False
            self._roles_ready.clear()
            user_id = self.user.user_id

        if self.executor is not None:
            self.executor.submit(self._fetch_roles, user_id, generation)
        else:
            self._fetch_roles(user_id, generation)

    def _fetch_roles(self, user_id: str, generation: int) -> None:
        try:
            roles = self.role_service.get_roles(user_id)
        except DataAccessError as e:
            # 역할을 읽지 못하면 권한 없음으로 취급
            logging.warning(f"Role fetch failed, treating user {user_id} as unprivileged: {e.message}")
            roles = []
        with self._lock:
            if generation != self._generation:
                logging.info(f"Discarding stale role fetch for user {user_id}")
                return
            self.roles = roles
            self._roles_known = True
            self._roles_ready.set()

    # --- 파생 상태 ---
    @property
    def session_known(self) -> bool:
        return self._session_known

    @property
    def roles_known(self) -> bool:
        return self._roles_known

    @property
    def loading(self) -> bool:
        return not (self._session_known and self._roles_known)

    @property
    def is_admin(self) -> bool:
        return UserRole.ADMIN in self.roles

    @property
    def is_shelter_staff(self) -> bool:
        return UserRole.SHELTER_STAFF in self.roles

    @property
    def can_edit_cats(self) -> bool:
        return bool(EDITOR_ROLES.intersection(self.roles))

    def wait_until_ready(self, timeout: Optional[float] = None) -> bool:
        """세션과 역할이 모두 확정될 때까지 기다립니다. 시간 내에 확정되지 않으면 False."""
        if not self._session_known:
            return False
        return self._roles_ready.wait(timeout)

    # --- 명령 ---
    def sign_in(self, id_token: str) -> AuthSession:
        """ID 토큰으로 로그인합니다. 결과 상태는 구독 알림을 통해 반영됩니다."""
        return self.auth_client.sign_in_with_id_token(id_token)

    def sign_out(self) -> None:
        """외부 인증 시스템에 로그아웃을 위임합니다. 실패해도 호출자에게 전파하지 않습니다."""
        try:
            self.auth_client.sign_out()
        except AuthError as e:
            logging.warning(f"Sign-out failed (ignored): {e.message}")

    def snapshot(self) -> Dict[str, Any]:
        """/api/auth/me 응답과 템플릿에서 쓰는 상태 요약."""
        user = self.user
        return {
            "user": {"user_id": user.user_id, "email": user.email, "display_name": user.display_name} if user else None,
            "roles": [role.value for role in self.roles],
            "is_admin": self.is_admin,
            "is_shelter_staff": self.is_shelter_staff,
            "can_edit_cats": self.can_edit_cats,
            "session_known": self.session_known,
            "roles_known": self.roles_known,
            "loading": self.loading
        }
