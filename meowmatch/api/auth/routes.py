# meowmatch/api/auth/routes.py

import logging
from flask import Blueprint, request, jsonify, current_app

from meowmatch.core.errors import AuthError, ValidationError
from meowmatch.core.security import get_auth
from meowmatch.core.validation import load_or_raise
from .schemas import SessionLoginSchema

auth_bp = Blueprint('auth_bp', __name__)

@auth_bp.route('/session', methods=['POST'])
def create_session():
    """Firebase ID 토큰을 세션 쿠키로 교환합니다."""
    try:
        data = load_or_raise(SessionLoginSchema(), request.get_json(silent=True))
        auth = get_auth()
        session = auth.sign_in(data['id_token'])
    except ValidationError as err:
        return jsonify(err.to_dict()), 400
    except AuthError as e:
        return jsonify(e.to_dict()), 401

    auth.wait_until_ready(current_app.config['ROLE_FETCH_TIMEOUT_SECONDS'])
    response = jsonify(auth.snapshot())
    response.set_cookie(
        current_app.config['SESSION_TOKEN_COOKIE'],
        session.token,
        max_age=current_app.config['SESSION_TOKEN_EXPIRES_DAYS'] * 24 * 60 * 60,
        httponly=True,
        secure=current_app.config.get('SESSION_COOKIE_SECURE', False),
        samesite='Lax'
    )
    return response, 200

@auth_bp.route('/me', methods=['GET'])
def me():
    """현재 사용자, 역할, 로딩 단계 정보."""
    auth = get_auth()
    auth.wait_until_ready(current_app.config['ROLE_FETCH_TIMEOUT_SECONDS'])
    return jsonify(auth.snapshot()), 200

@auth_bp.route('/logout', methods=['POST'])
def logout():
    """로그아웃. 외부 인증 실패는 기록만 하고 항상 쿠키를 지웁니다."""
    auth = get_auth()
    auth.sign_out()
    logging.info("Sign-out requested")
    response = jsonify({"message": "Signed out."})
    response.delete_cookie(current_app.config['SESSION_TOKEN_COOKIE'])
    return response, 200
