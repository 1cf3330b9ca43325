# meowmatch/core/errors.py
"""
애플리케이션 공통 예외 정의.

라우트는 이 예외들을 잡아 {"error_code": ..., "message": ...} 형태의 JSON으로 변환합니다.
어떤 예외도 프로세스를 종료시키지 않으며, 최악의 경우 빈 목록이나 실패한 폼 제출로 끝납니다.
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    """모든 도메인 예외의 기반 클래스."""
    error_code = "APP_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error_code": self.error_code, "message": self.message}


class ValidationError(AppError):
    """클라이언트 입력 검증 실패. 처음으로 위반된 규칙 하나만 보고합니다."""
    error_code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        return {"error_code": self.error_code, "field": self.field, "message": self.message}


class DataAccessError(AppError):
    """백엔드(Firestore) 읽기/쓰기 실패."""
    error_code = "DATA_ACCESS_ERROR"
    status_code = 502

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class NotFoundError(AppError):
    """이미 사라진 레코드를 대상으로 한 요청."""
    error_code = "NOT_FOUND"
    status_code = 404


class AuthError(AppError):
    """세션 확인 또는 로그아웃 실패. 치명적이지 않은 오류로 취급합니다."""
    error_code = "AUTH_ERROR"
    status_code = 401


class PermissionDeniedError(AppError):
    """로그인은 되어 있으나 필요한 역할이 없는 경우."""
    error_code = "FORBIDDEN"
    status_code = 403
