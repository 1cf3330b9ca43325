# meowmatch/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # Flask 세션 쿠키 서명 키. 즐겨찾기 목록이 이 쿠키에 저장되므로 위변조 방지에 필요합니다.
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key')

    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')

    # 로그인 화면의 Firebase 웹 SDK 설정 (공개 값)
    FIREBASE_WEB_API_KEY = os.getenv('FIREBASE_WEB_API_KEY')
    FIREBASE_AUTH_DOMAIN = os.getenv('FIREBASE_AUTH_DOMAIN')

    # Firebase 세션 쿠키 (로그인 세션 토큰)
    SESSION_TOKEN_COOKIE = os.getenv('SESSION_TOKEN_COOKIE', 'session_token')
    SESSION_TOKEN_EXPIRES_DAYS = int(os.getenv('SESSION_TOKEN_EXPIRES_DAYS', 5))

    # 즐겨찾기 목록을 담는 로컬 저장소 키
    FAVORITES_STORAGE_KEY = os.getenv('FAVORITES_STORAGE_KEY', 'favorites')
    # UUID 100개면 서명된 쿠키가 약 3KB. 브라우저 쿠키 한도(약 4KB) 안에 머물도록 제한
    MAX_FAVORITES = int(os.getenv('MAX_FAVORITES', 100))

    # 권한이 없는 사용자가 관리자 페이지에 접근했을 때 이동할 경로
    AUTH_REDIRECT_PATH = os.getenv('AUTH_REDIRECT_PATH', '/auth')

    # 역할 조회가 끝나기를 기다리는 최대 시간(초)
    ROLE_FETCH_TIMEOUT_SECONDS = float(os.getenv('ROLE_FETCH_TIMEOUT_SECONDS', 5))

    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'testing-secret-key'
    ROLE_FETCH_TIMEOUT_SECONDS = 1.0

class ProductionConfig(Config):
    """운영 환경 설정. 세션 쿠키는 HTTPS로만 전송합니다."""
    DEBUG = False
    SESSION_COOKIE_SECURE = True

# FLASK_ENV 값에 따라 create_app에서 적절한 설정 클래스를 선택합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
