# meowmatch/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from datetime import timedelta
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
import firebase_admin
from firebase_admin import credentials, firestore

# - 설정 / 공통 예외
from meowmatch.core.config import config_by_name
from meowmatch.core.errors import AppError
from meowmatch.core.security import close_auth

# - API 블루프린트
from meowmatch.api.cats.routes import cats_bp
from meowmatch.api.favorites.routes import favorites_bp
from meowmatch.api.applications.routes import applications_bp
from meowmatch.api.admin.routes import admin_bp
from meowmatch.api.auth.routes import auth_bp
from meowmatch.pages.routes import pages_bp

# - 서비스 모듈
from meowmatch.api.cats.services import CatService
from meowmatch.api.applications.services import ApplicationService
from meowmatch.api.admin.services import CatEditorService
from meowmatch.api.auth.services import RoleService
from meowmatch.services.firebase_auth_client import FirebaseAuthClient

def _init_firebase(app: Flask) -> None:
    """Firebase Admin SDK 를 한 번만 초기화합니다."""
    if firebase_admin._apps:
        return
    cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
    options = {'projectId': app.config['FIREBASE_PROJECT_ID']} if app.config.get('FIREBASE_PROJECT_ID') else None
    if cred_path:
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase credentials file not found: {cred_path}")
        firebase_admin.initialize_app(credentials.Certificate(cred_path), options)
    else:
        # GOOGLE_APPLICATION_CREDENTIALS 등 기본 자격 증명 사용
        firebase_admin.initialize_app(options=options)

def create_app(config_name=None, db=None, auth_client_factory=None):
    """
    Flask 애플리케이션 팩토리 함수.

    db / auth_client_factory 를 주입하면 Firebase 초기화를 건너뜁니다 (테스트용).
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 외부 서비스 초기화
    # =====================================================================================
    if db is None:
        _init_firebase(app)
        db = firestore.client()

    if auth_client_factory is None:
        expires_in = timedelta(days=app.config['SESSION_TOKEN_EXPIRES_DAYS'])
        auth_client_factory = lambda token: FirebaseAuthClient(token, expires_in=expires_in)
    app.auth_client_factory = auth_client_factory

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}
    app.services['cats'] = CatService(db=db)
    app.services['roles'] = RoleService(db=db)
    app.services['applications'] = ApplicationService(cat_service=app.services['cats'], db=db)
    app.services['cat_editor'] = CatEditorService(cat_service=app.services['cats'], db=db)
    logging.info("Services initialized successfully")

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(cats_bp, url_prefix='/api/cats')
    app.register_blueprint(applications_bp, url_prefix='/api/cats')
    app.register_blueprint(favorites_bp, url_prefix='/api/favorites')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(pages_bp)

    app.teardown_appcontext(close_auth)

    @app.route('/api/health')
    def health_check():
        return jsonify({"status": "healthy", "service": "meowmatch"}), 200

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(AppError)
    def handle_app_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # HTTP 예외(404, 405 등)는 Flask 기본 응답을 유지
        if isinstance(err, HTTPException):
            return err
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "An unexpected server error occurred."}
        return jsonify(response), 500

    # =====================================================================================
    # 8. CLI 명령, 로깅 및 앱 반환
    # =====================================================================================
    from meowmatch.seed import register_commands
    register_commands(app)

    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
