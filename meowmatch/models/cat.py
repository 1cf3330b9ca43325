# meowmatch/models/cat.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Dict, Any
from enum import Enum
import logging

from meowmatch.utils.datetime_utils import DateTimeUtils

class CatAge(Enum):
    KITTEN = "kitten"
    YOUNG = "young"
    ADULT = "adult"
    SENIOR = "senior"

class CatSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

class CatGender(Enum):
    MALE = "male"
    FEMALE = "female"

# 화면에 표시하는 나이 구간 라벨
AGE_LABELS = {
    CatAge.KITTEN: "Kitten (0-1 year)",
    CatAge.YOUNG: "Young (1-3 years)",
    CatAge.ADULT: "Adult (3-7 years)",
    CatAge.SENIOR: "Senior (7+ years)",
}

# UI에서 제공하는 고정 팔레트. 데이터 계층에서는 강제하지 않습니다.
COLOR_PALETTE = ["orange", "black", "white", "gray", "calico", "tabby", "siamese"]
PERSONALITY_TRAITS = ["playful", "calm", "affectionate", "independent"]
GOOD_WITH_OPTIONS = ["children", "dogs", "other-cats"]

@dataclass
class Cat:
    """
    Firestore 'cats' 컬렉션 문서 구조.
    입양 가능한 고양이 한 마리를 나타내며, is_available=False 는 입양 완료(이력 보존)를 뜻합니다.
    """
    cat_id: str
    name: str
    age: CatAge
    color: str
    size: CatSize
    gender: CatGender
    description: str
    image_url: str
    personality: List[str] = field(default_factory=list)
    good_with: List[str] = field(default_factory=list)
    is_available: bool = True
    shelter_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def age_label(self) -> str:
        return AGE_LABELS.get(self.age, self.age.value)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cat":
        """
        Firestore에서 받은 딕셔너리로부터 Cat 인스턴스를 생성합니다.
        문자열로 저장된 Enum 값과 ISO 시각 문자열을 변환하며, 알 수 없는 값은 데이터 입력 오류로 보고 ValueError를 던집니다.
        """
        processed_data = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}

        try:
            processed_data['age'] = CatAge(processed_data.get('age'))
            processed_data['size'] = CatSize(processed_data.get('size'))
            processed_data['gender'] = CatGender(processed_data.get('gender'))
        except ValueError as e:
            logging.warning(f"Invalid enumerated value for cat {processed_data.get('cat_id')}: {e}")
            raise

        # 웹 클라이언트가 직접 쓴 문서는 시각을 ISO 문자열로 저장하기도 함
        for key in ('created_at', 'updated_at'):
            if isinstance(processed_data.get(key), str):
                processed_data[key] = DateTimeUtils.parse_iso_datetime(processed_data[key])

        # personality / good_with 가 None 인 경우 빈 리스트로 초기화
        for key in ('personality', 'good_with'):
            if processed_data.get(key) is None:
                processed_data[key] = []

        return cls(**processed_data)

    def to_dict(self) -> Dict[str, Any]:
        """Enum 값을 문자열로 풀어 JSON/Firestore 저장에 적합한 딕셔너리를 만듭니다."""
        return {
            'cat_id': self.cat_id,
            'name': self.name,
            'age': self.age.value,
            'color': self.color,
            'size': self.size.value,
            'gender': self.gender.value,
            'personality': list(self.personality),
            'good_with': list(self.good_with),
            'description': self.description,
            'image_url': self.image_url,
            'is_available': self.is_available,
            'shelter_id': self.shelter_id,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
