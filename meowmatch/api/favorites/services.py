# meowmatch/api/favorites/services.py
import json
import logging
from typing import Iterable, MutableMapping, Optional, Set

from meowmatch.core.errors import ValidationError

class FavoritesStore:
    """
    방문자가 '좋아요' 한 고양이 id 집합을 기기(브라우저) 단위로 보관하는 저장소.

    storage 는 어떤 MutableMapping 이든 됩니다. 운영에서는 Flask 의 서명된 세션 쿠키,
    테스트에서는 일반 dict 를 사용합니다. 값은 JSON 배열 문자열 하나로 저장되며,
    모든 변경은 즉시 전체 집합을 다시 씁니다 (단일 작성자, 마지막 쓰기 우선).

    쿠키는 브라우저에서 약 4KB 를 넘으면 경고 없이 버려지므로 limit 으로 개수를 제한합니다.
    """
    def __init__(self, storage: MutableMapping, key: str = 'favorites', limit: Optional[int] = None):
        self.storage = storage
        self.key = key
        self.limit = limit

    def load(self) -> Set[str]:
        """저장된 집합을 읽습니다. 없거나 해석할 수 없으면 빈 집합."""
        raw = self.storage.get(self.key)
        if raw is None:
            return set()
        try:
            values = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
            if not isinstance(values, list):
                raise ValueError(f"expected a list, got {type(values).__name__}")
            return {str(v) for v in values}
        except (ValueError, TypeError) as e:
            logging.warning(f"Discarding unreadable favorites value: {e}")
            return set()

    def save(self, favorites: Iterable[str]) -> None:
        """집합 전체를 덮어씁니다. 순서는 의미가 없으므로 정렬해서 저장합니다."""
        self.storage[self.key] = json.dumps(sorted(str(v) for v in favorites))

    def toggle(self, cat_id: str, favorites: Optional[Set[str]] = None) -> Set[str]:
        """
        id 가 있으면 빼고 없으면 넣은 새 집합을 저장하고 반환합니다. 두 번 토글하면 원래대로.
        이미 limit 개가 저장되어 있으면 추가하지 않고 ValidationError 를 던집니다 (제거는 항상 허용).
        """
        current = set(self.load() if favorites is None else favorites)
        cat_id = str(cat_id)
        if cat_id in current:
            current.remove(cat_id)
        else:
            if self.limit is not None and len(current) >= self.limit:
                raise ValidationError('cat_id', f"You can save up to {self.limit} favorites. Remove one to add another.")
            current.add(cat_id)
        self.save(current)
        return current

    def clear(self) -> None:
        """사용자의 명시적 요청으로 즐겨찾기를 비웁니다."""
        self.save(set())
