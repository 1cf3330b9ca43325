# meowmatch/core/security.py
from functools import wraps
from typing import Optional

from flask import request, jsonify, g, current_app, redirect

from meowmatch.api.auth.services import AuthSessionProvider

def get_session_token() -> Optional[str]:
    """세션 쿠키 또는 'Authorization: Bearer <session cookie>' 헤더에서 세션 토큰을 꺼냅니다."""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1]
    return request.cookies.get(current_app.config['SESSION_TOKEN_COOKIE'])

def get_auth() -> AuthSessionProvider:
    """요청마다 한 번만 AuthSessionProvider 를 만들어 g 에 보관합니다."""
    if 'auth' not in g:
        client = current_app.auth_client_factory(get_session_token())
        g.auth = AuthSessionProvider(client, current_app.services['roles']).initialize()
    return g.auth

def close_auth(exc=None):
    provider = g.pop('auth', None)
    if provider is not None:
        provider.close()

def roles_required(*roles, redirect_on_fail: bool = False):
    """
    지정한 역할 중 하나라도 가진 사용자만 통과시키는 데코레이터.
    redirect_on_fail=True 이면(HTML 페이지) 권한 부족 시 JSON 오류 대신 AUTH_REDIRECT_PATH 로 보냅니다.
    역할 조회가 끝나지 않은 상태는 '권한 없음'이 아니라 '모름'으로 보고 503 을 돌려줍니다.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            auth = get_auth()
            if not auth.wait_until_ready(current_app.config['ROLE_FETCH_TIMEOUT_SECONDS']):
                return jsonify({"error_code": "AUTH_PENDING", "message": "Authorization is still being resolved."}), 503

            if auth.user is None:
                if redirect_on_fail:
                    return redirect(current_app.config["AUTH_REDIRECT_PATH"])
                return jsonify({"error_code": "UNAUTHORIZED", "message": "Sign-in required."}), 401

            if not set(roles).intersection(auth.roles):
                if redirect_on_fail:
                    return redirect(current_app.config["AUTH_REDIRECT_PATH"])
                return jsonify({"error_code": "FORBIDDEN", "message": "You do not have access to this resource."}), 403

            return f(*args, **kwargs)

        return decorated_function
    return decorator
