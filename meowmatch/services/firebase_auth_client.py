# 파일 경로: meowmatch/services/firebase_auth_client.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Callable, List, Optional

from firebase_admin import auth as firebase_auth

from meowmatch.core.errors import AuthError

class AuthEvent(str, Enum):
    """세션 변경 알림 종류."""
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"

@dataclass
class AuthUser:
    user_id: str
    email: Optional[str] = None
    display_name: Optional[str] = None

@dataclass
class AuthSession:
    """Firebase 세션 쿠키 하나에 대응하는 로그인 세션."""
    user: AuthUser
    token: str
    expires_at: Optional[datetime] = None

AuthListener = Callable[[AuthEvent, Optional[AuthSession]], None]

class Subscription:
    """on_auth_state_change 가 돌려주는 구독 핸들."""
    def __init__(self, listeners: List[AuthListener], listener: AuthListener):
        self._listeners = listeners
        self._listener = listener

    def unsubscribe(self) -> None:
        if self._listener in self._listeners:
            self._listeners.remove(self._listener)

class FirebaseAuthClient:
    """
    Firebase Authentication 과의 실제 통신을 담당하는 클라이언트입니다.

    요청 하나마다 브라우저가 보낸 세션 쿠키(session_token)로 생성되며,
    로그인/로그아웃/갱신 시 구독자에게 세션 변경을 알립니다.
    """
    def __init__(self, session_token: Optional[str] = None, expires_in: timedelta = timedelta(days=5)):
        self._session_token = session_token
        self._expires_in = expires_in
        self._listeners: List[AuthListener] = []

    def on_auth_state_change(self, listener: AuthListener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self._listeners, listener)

    def _emit(self, event: AuthEvent, session: Optional[AuthSession]) -> None:
        for listener in list(self._listeners):
            listener(event, session)

    @staticmethod
    def _session_from_claims(claims: dict, token: str) -> AuthSession:
        expires_at = None
        if claims.get('exp'):
            expires_at = datetime.fromtimestamp(claims['exp'], tz=timezone.utc)
        user = AuthUser(
            user_id=claims['uid'] if 'uid' in claims else claims['sub'],
            email=claims.get('email'),
            display_name=claims.get('name')
        )
        return AuthSession(user=user, token=token, expires_at=expires_at)

    def get_session(self) -> Optional[AuthSession]:
        """현재 세션 쿠키를 검증합니다. 쿠키가 없거나 무효/만료/폐기된 경우 None."""
        if not self._session_token:
            return None
        try:
            claims = firebase_auth.verify_session_cookie(self._session_token, check_revoked=True)
        except (firebase_auth.InvalidSessionCookieError, firebase_auth.UserDisabledError) as e:
            logging.info(f"Session cookie rejected: {e}")
            return None
        except Exception as e:
            logging.error(f"Session cookie verification failed: {e}", exc_info=True)
            raise AuthError("Could not verify the current session.")
        return self._session_from_claims(claims, self._session_token)

    def sign_in_with_id_token(self, id_token: str) -> AuthSession:
        """클라이언트 SDK 에서 받은 ID 토큰을 세션 쿠키로 교환하고 SIGNED_IN 을 알립니다."""
        try:
            claims = firebase_auth.verify_id_token(id_token, check_revoked=True)
            session_cookie = firebase_auth.create_session_cookie(id_token, expires_in=self._expires_in)
        except (firebase_auth.InvalidIdTokenError, firebase_auth.UserDisabledError) as e:
            logging.info(f"ID token rejected: {e}")
            raise AuthError("Invalid or expired sign-in token.")
        except Exception as e:
            logging.error(f"Firebase sign-in failed: {e}", exc_info=True)
            raise AuthError("Sign-in failed. Please try again.")

        claims = dict(claims, exp=int((datetime.now(timezone.utc) + self._expires_in).timestamp()))
        event = AuthEvent.TOKEN_REFRESHED if self._session_token else AuthEvent.SIGNED_IN
        self._session_token = session_cookie
        session = self._session_from_claims(claims, session_cookie)
        self._emit(event, session)
        return session

    def sign_out(self) -> None:
        """사용자의 refresh 토큰을 폐기하여 모든 세션 쿠키를 무효화하고 SIGNED_OUT 을 알립니다."""
        session = self.get_session()
        if session is not None:
            try:
                firebase_auth.revoke_refresh_tokens(session.user.user_id)
            except Exception as e:
                logging.error(f"Failed to revoke tokens for {session.user.user_id}: {e}", exc_info=True)
                raise AuthError("Sign-out failed.")
        self._session_token = None
        self._emit(AuthEvent.SIGNED_OUT, None)
