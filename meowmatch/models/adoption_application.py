# meowmatch/models/adoption_application.py
from dataclasses import dataclass, field
from datetime import datetime

from meowmatch.utils.datetime_utils import DateTimeUtils

@dataclass
class AdoptionApplication:
    """
    Firestore 'adoption_applications' 컬렉션 문서 구조.
    제출 시 한 번 생성되며 이 시스템에서는 수정/삭제하지 않습니다 (처리는 보호소 직원 몫).
    """
    application_id: str
    cat_id: str
    applicant_name: str
    applicant_email: str
    applicant_phone: str
    applicant_location: str
    message: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)
