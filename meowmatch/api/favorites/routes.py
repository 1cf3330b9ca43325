# meowmatch/api/favorites/routes.py
from flask import Blueprint, jsonify, session, current_app

from meowmatch.core.errors import ValidationError
from .services import FavoritesStore

favorites_bp = Blueprint('favorites_bp', __name__)

def get_favorites_store() -> FavoritesStore:
    """현재 브라우저의 세션 쿠키를 저장소로 쓰는 FavoritesStore."""
    # 브라우저를 닫아도 유지되도록 영구 쿠키로 발급
    session.permanent = True
    return FavoritesStore(
        session,
        key=current_app.config['FAVORITES_STORAGE_KEY'],
        limit=current_app.config['MAX_FAVORITES']
    )

@favorites_bp.route('/', methods=['GET'])
def list_favorites():
    """즐겨찾기한 고양이 id 목록."""
    favorites = get_favorites_store().load()
    return jsonify({"favorites": sorted(favorites), "count": len(favorites)}), 200

@favorites_bp.route('/<string:cat_id>/toggle', methods=['POST'])
def toggle_favorite(cat_id: str):
    """즐겨찾기 추가/해제 토글."""
    try:
        favorites = get_favorites_store().toggle(cat_id)
    except ValidationError as err:
        return jsonify(err.to_dict()), 400
    return jsonify({
        "favorites": sorted(favorites),
        "count": len(favorites),
        "is_favorite": cat_id in favorites
    }), 200

@favorites_bp.route('/', methods=['DELETE'])
def clear_favorites():
    """즐겨찾기 전체 삭제."""
    get_favorites_store().clear()
    return jsonify({"favorites": [], "count": 0}), 200
