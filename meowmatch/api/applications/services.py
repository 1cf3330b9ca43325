# meowmatch/api/applications/services.py
import logging
import uuid
from dataclasses import asdict
from typing import Any, Dict

from firebase_admin import firestore

from meowmatch.api.cats.services import CatService
from meowmatch.core.errors import DataAccessError, NotFoundError
from meowmatch.core.validation import load_or_raise
from meowmatch.models.adoption_application import AdoptionApplication
from meowmatch.utils.datetime_utils import DateTimeUtils
from .schemas import AdoptionApplicationSchema

class ApplicationService:
    """입양 신청서를 검증하고 'adoption_applications' 컬렉션에 저장하는 서비스."""
    def __init__(self, cat_service: CatService, db=None):
        self.db = db or firestore.client()
        self.applications_ref = self.db.collection('adoption_applications')
        self.cat_service = cat_service

    def submit(self, cat_id: str, form_data: Dict[str, Any]) -> AdoptionApplication:
        """
        신청서를 제출합니다.
        검증 실패(ValidationError)는 네트워크 호출 전에 발생하며, 대상 고양이가 없으면 NotFoundError.
        """
        validated = load_or_raise(AdoptionApplicationSchema(), form_data)

        if not self.cat_service.exists(cat_id):
            raise NotFoundError(f"Cat '{cat_id}' not found.")

        application = AdoptionApplication(
            application_id=str(uuid.uuid4()),
            cat_id=cat_id,
            applicant_name=validated['name'],
            applicant_email=validated['email'],
            applicant_phone=validated['phone'],
            applicant_location=validated['location'],
            message=validated['message']
        )
        try:
            self.applications_ref.document(application.application_id).set(
                DateTimeUtils.for_firestore(asdict(application))
            )
        except Exception as e:
            logging.error(f"Adoption application save failed (cat_id: {cat_id}): {e}", exc_info=True)
            raise DataAccessError("Failed to submit application. Please try again.", cause=e)

        logging.info(f"Adoption application {application.application_id} submitted for cat {cat_id}")
        return application
