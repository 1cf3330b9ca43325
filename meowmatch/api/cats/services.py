# meowmatch/api/cats/services.py
import logging
from typing import List, Optional

from firebase_admin import firestore

from meowmatch.core.errors import DataAccessError, NotFoundError
from meowmatch.models.cat import Cat
from meowmatch.utils.datetime_utils import DateTimeUtils

class CatService:
    """
    'cats' 컬렉션 조회를 담당하는 서비스.
    목록은 페이지네이션 없이 한 번에 모두 가져옵니다 (보호소 한 곳 규모를 전제).
    """
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.cats_ref = self.db.collection('cats')

    def _to_cat(self, doc) -> Optional[Cat]:
        data = DateTimeUtils.from_firestore(doc.to_dict())
        data.setdefault('cat_id', doc.id)
        try:
            return Cat.from_dict(data)
        except (ValueError, TypeError):
            logging.warning(f"Skipping malformed cat document {doc.id}")
            return None

    def _run_query(self, query, description: str) -> List[Cat]:
        try:
            docs = list(query.stream())
        except Exception as e:
            logging.error(f"Cat query failed ({description}): {e}", exc_info=True)
            raise DataAccessError("Failed to load cats.", cause=e)
        return [cat for cat in (self._to_cat(doc) for doc in docs) if cat is not None]

    def list_available(self) -> List[Cat]:
        """공개 카탈로그용: is_available=True 인 고양이를 최신 등록순으로 반환합니다."""
        query = (self.cats_ref
                 .where('is_available', '==', True)
                 .order_by('created_at', direction=firestore.Query.DESCENDING))
        return self._run_query(query, "available")

    def list_all(self) -> List[Cat]:
        """관리자 화면용: 입양 여부와 관계없이 모든 고양이를 최신 등록순으로 반환합니다."""
        query = self.cats_ref.order_by('created_at', direction=firestore.Query.DESCENDING)
        return self._run_query(query, "all")

    def get_cat(self, cat_id: str) -> Cat:
        """단일 고양이 조회. 없으면 NotFoundError."""
        try:
            doc = self.cats_ref.document(cat_id).get()
        except Exception as e:
            logging.error(f"Cat lookup failed (cat_id: {cat_id}): {e}", exc_info=True)
            raise DataAccessError("Failed to load cat.", cause=e)
        if not doc.exists:
            raise NotFoundError(f"Cat '{cat_id}' not found.")
        cat = self._to_cat(doc)
        if cat is None:
            raise DataAccessError(f"Cat '{cat_id}' has invalid data.")
        return cat

    def exists(self, cat_id: str) -> bool:
        try:
            return self.cats_ref.document(cat_id).get().exists
        except Exception as e:
            logging.error(f"Cat existence check failed (cat_id: {cat_id}): {e}", exc_info=True)
            raise DataAccessError("Failed to load cat.", cause=e)

    def get_available_cat(self, cat_id: str) -> Cat:
        """공개 상세 조회. 입양 완료된 고양이는 카탈로그와 마찬가지로 없는 것으로 취급합니다."""
        cat = self.get_cat(cat_id)
        if not cat.is_available:
            raise NotFoundError(f"Cat '{cat_id}' not found.")
        return cat
