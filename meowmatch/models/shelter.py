# meowmatch/models/shelter.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from meowmatch.utils.datetime_utils import DateTimeUtils

@dataclass
class Shelter:
    """Firestore 'shelters' 컬렉션 문서 구조. 새로 등록되는 고양이의 소속 보호소."""
    shelter_id: str
    name: str
    location: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)
