# meowmatch/api/admin/services.py
import logging
import uuid
from typing import Any, Dict, Iterable

from firebase_admin import firestore
from google.api_core.exceptions import NotFound

from meowmatch.api.cats.schemas import CatWriteSchema
from meowmatch.api.cats.services import CatService
from meowmatch.core.errors import DataAccessError, NotFoundError, PermissionDeniedError
from meowmatch.core.validation import load_or_raise
from meowmatch.models.cat import Cat
from meowmatch.models.user_role import UserRole, EDITOR_ROLES
from meowmatch.utils.datetime_utils import DateTimeUtils

class CatEditorService:
    """
    관리자 대시보드의 고양이 레코드 생성/수정/삭제 서비스.

    firebase-admin 은 Firestore 보안 규칙을 우회하므로, 라우트의 역할 검사와 별개로
    이 서비스도 쓰기 직전에 호출자의 역할을 다시 확인합니다.
    """
    def __init__(self, cat_service: CatService, db=None):
        self.db = db or firestore.client()
        self.cats_ref = self.db.collection('cats')
        self.shelters_ref = self.db.collection('shelters')
        self.cat_service = cat_service

    @staticmethod
    def _authorize(actor_roles: Iterable[UserRole]) -> None:
        if not EDITOR_ROLES.intersection(actor_roles or ()):
            raise PermissionDeniedError("Admin or shelter staff role required.")

    def _attributing_shelter_id(self) -> str:
        """호출자에게 보이는 첫 번째 보호소 id. 다중 보호소 귀속은 지원하지 않습니다."""
        try:
            shelter_doc = next(self.shelters_ref.limit(1).stream(), None)
        except Exception as e:
            logging.error(f"Shelter lookup failed: {e}", exc_info=True)
            raise DataAccessError("Failed to load shelters.", cause=e)
        if shelter_doc is None:
            raise NotFoundError("No shelter found. Please contact administrator.")
        return shelter_doc.id

    def _require_existing(self, cat_id: str):
        cat_ref = self.cats_ref.document(cat_id)
        try:
            doc = cat_ref.get()
        except Exception as e:
            logging.error(f"Cat lookup failed (cat_id: {cat_id}): {e}", exc_info=True)
            raise DataAccessError("Failed to load cat.", cause=e)
        if not doc.exists:
            raise NotFoundError(f"Cat '{cat_id}' not found.")
        return cat_ref

    def list_cats(self, actor_roles: Iterable[UserRole]):
        """관리자 목록: 입양 완료된 고양이까지 전부."""
        self._authorize(actor_roles)
        return self.cat_service.list_all()

    def create(self, fields: Dict[str, Any], actor_roles: Iterable[UserRole]) -> Cat:
        """검증 후 첫 번째 보호소에 귀속시켜 새 레코드를 저장합니다."""
        self._authorize(actor_roles)
        validated = load_or_raise(CatWriteSchema(), fields)
        shelter_id = self._attributing_shelter_id()

        cat_id = str(uuid.uuid4())
        now = DateTimeUtils.now()
        cat_data = dict(validated, cat_id=cat_id, shelter_id=shelter_id, created_at=now, updated_at=now)
        try:
            self.cats_ref.document(cat_id).set(DateTimeUtils.for_firestore(cat_data))
        except Exception as e:
            logging.error(f"Cat create failed: {e}", exc_info=True)
            raise DataAccessError("Failed to save cat. Please try again.", cause=e)

        logging.info(f"Cat {cat_id} created for shelter {shelter_id}")
        return Cat.from_dict(cat_data)

    def update(self, cat_id: str, fields: Dict[str, Any], actor_roles: Iterable[UserRole]) -> Cat:
        """전체 필드를 검증한 뒤 덮어씁니다. 대상이 없으면 NotFoundError."""
        self._authorize(actor_roles)
        validated = load_or_raise(CatWriteSchema(), fields)
        cat_ref = self._require_existing(cat_id)

        update_data = dict(validated, updated_at=DateTimeUtils.now())
        try:
            cat_ref.update(DateTimeUtils.for_firestore(update_data))
        except NotFound:
            # 존재 확인 이후 다른 편집자가 삭제한 경우
            logging.warning(f"Cat {cat_id} was deleted before the update was applied")
            raise NotFoundError(f"Cat '{cat_id}' not found.")
        except Exception as e:
            logging.error(f"Cat update failed (cat_id: {cat_id}): {e}", exc_info=True)
            raise DataAccessError("Failed to save cat. Please try again.", cause=e)

        logging.info(f"Cat {cat_id} updated with fields: {list(validated.keys())}")
        return self.cat_service.get_cat(cat_id)

    def delete(self, cat_id: str, actor_roles: Iterable[UserRole]) -> None:
        """되돌릴 수 없는 삭제. 호출 전에 반드시 사용자 확인을 받아야 합니다."""
        self._authorize(actor_roles)
        cat_ref = self._require_existing(cat_id)
        try:
            cat_ref.delete()
        except Exception as e:
            logging.error(f"Cat delete failed (cat_id: {cat_id}): {e}", exc_info=True)
            raise DataAccessError("Failed to delete cat.", cause=e)
        logging.info(f"Cat {cat_id} deleted")
