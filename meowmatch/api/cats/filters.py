# meowmatch/api/cats/filters.py
"""
카탈로그 필터 조합기.

각 차원(age, color, size, personality, good_with, gender)은 구체적인 값 또는
'제약 없음'(빈 문자열 / "all")을 가집니다. 제약들은 AND 로만 결합되며,
결과는 입력 목록의 순서를 그대로 유지하는 부분 수열입니다.
"""
from dataclasses import dataclass, fields, replace
from typing import Iterable, List, Mapping, Optional, Set

from meowmatch.models.cat import Cat

# '제약 없음' 을 뜻하는 값들. 필터 UI 의 "All ..." 항목은 "all" 을 보냅니다.
NO_CONSTRAINT = ""
_SENTINELS = frozenset({"", "all"})

# 스칼라 필드와 같은지 비교하는 차원
EQUALITY_DIMENSIONS = ("age", "color", "size", "gender")
# 태그 집합에 포함되는지 검사하는 차원
MEMBERSHIP_DIMENSIONS = ("personality", "good_with")


def is_unconstrained(value: Optional[str]) -> bool:
    return value is None or value.strip().lower() in _SENTINELS


@dataclass(frozen=True)
class CatFilters:
    """필터 상태. favorites_only 는 차원 필터와 독립적인 토글입니다."""
    age: str = NO_CONSTRAINT
    color: str = NO_CONSTRAINT
    size: str = NO_CONSTRAINT
    personality: str = NO_CONSTRAINT
    good_with: str = NO_CONSTRAINT
    gender: str = NO_CONSTRAINT
    favorites_only: bool = False

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> "CatFilters":
        """쿼리 문자열(request.args)로부터 필터를 만듭니다. goodWith 표기도 허용합니다."""
        values = {}
        for name in EQUALITY_DIMENSIONS + MEMBERSHIP_DIMENSIONS:
            raw = args.get(name)
            if raw is None and name == "good_with":
                raw = args.get("goodWith")
            values[name] = NO_CONSTRAINT if is_unconstrained(raw) else raw.strip()
        favorites_only = str(args.get("favorites_only", "")).lower() in ("1", "true", "yes", "on")
        return cls(favorites_only=favorites_only, **values)

    def with_value(self, dimension: str, value: str) -> "CatFilters":
        """한 차원의 값만 바꾼 새 필터를 돌려줍니다."""
        if dimension not in EQUALITY_DIMENSIONS + MEMBERSHIP_DIMENSIONS:
            raise KeyError(dimension)
        return replace(self, **{dimension: NO_CONSTRAINT if is_unconstrained(value) else value})

    def reset(self) -> "CatFilters":
        """모든 차원을 '제약 없음' 으로, favorites_only 를 끈 상태로 한 번에 되돌립니다."""
        return CatFilters()

    def active(self) -> dict:
        """값이 지정된 차원만 모은 딕셔너리."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "favorites_only" and not is_unconstrained(getattr(self, f.name))
        }


def _field_value(cat: Cat, name: str):
    value = getattr(cat, name)
    return getattr(value, "value", value)


def matches(cat: Cat, filters: CatFilters) -> bool:
    """한 마리가 모든 활성 제약을 만족하는지 판정합니다."""
    for name, wanted in filters.active().items():
        if name in MEMBERSHIP_DIMENSIONS:
            if wanted not in _field_value(cat, name):
                return False
        elif _field_value(cat, name) != wanted:
            return False
    return True


def filter_cats(cats: Iterable[Cat],
                filters: CatFilters,
                favorites: Optional[Set[str]] = None) -> List[Cat]:
    """
    입력 순서를 유지한 채 필터를 통과한 고양이 목록을 반환합니다.
    favorites_only 가 켜져 있으면 favorites 에 id 가 있는 고양이로 추가 제한합니다.
    결과가 비어 있어도 정상입니다.
    """
    favorite_ids = {str(i) for i in (favorites or ())}
    result = []
    for cat in cats:
        if filters.favorites_only and str(cat.cat_id) not in favorite_ids:
            continue
        if matches(cat, filters):
            result.append(cat)
    return result
