# meowmatch/api/cats/routes.py
import logging
from typing import Any, Dict

from flask import Blueprint, request, jsonify, current_app

from meowmatch.core.errors import AppError, DataAccessError
from meowmatch.models.cat import (
    Cat, CatAge, CatSize, CatGender, AGE_LABELS,
    COLOR_PALETTE, PERSONALITY_TRAITS, GOOD_WITH_OPTIONS
)
from meowmatch.api.favorites.routes import get_favorites_store
from .filters import CatFilters, filter_cats
from .schemas import CatResponseSchema

cats_bp = Blueprint('cats_bp', __name__)

def cat_payload(cat: Cat) -> Dict[str, Any]:
    """Cat 객체를 응답 스키마에 맞는 딕셔너리로 변환합니다."""
    data = cat.to_dict()
    data['age_label'] = cat.age_label
    return CatResponseSchema().dump(data)

@cats_bp.route('/', methods=['GET'])
def list_cats():
    """공개 카탈로그. 쿼리 파라미터로 필터를 받고, 조회 실패 시에는 빈 목록을 보여줍니다."""
    filters = CatFilters.from_args(request.args)
    favorites = get_favorites_store().load()
    try:
        cats = current_app.services['cats'].list_available()
    except DataAccessError as e:
        logging.warning(f"Catalog read degraded to empty list: {e.message}")
        cats = []

    result = filter_cats(cats, filters, favorites)
    return jsonify({
        "cats": [cat_payload(cat) for cat in result],
        "count": len(result),
        "favorites": sorted(favorites),
        "filters": filters.active(),
        "favorites_only": filters.favorites_only
    }), 200

@cats_bp.route('/options', methods=['GET'])
def filter_options():
    """필터/편집 폼에서 쓰는 고정 선택지."""
    return jsonify({
        "ages": [{"value": age.value, "label": AGE_LABELS[age]} for age in CatAge],
        "colors": COLOR_PALETTE,
        "sizes": [size.value for size in CatSize],
        "personality": PERSONALITY_TRAITS,
        "good_with": GOOD_WITH_OPTIONS,
        "genders": [gender.value for gender in CatGender]
    }), 200

@cats_bp.route('/<string:cat_id>', methods=['GET'])
def get_cat(cat_id: str):
    """입양 가능한 고양이 한 마리 상세 조회."""
    try:
        cat = current_app.services['cats'].get_available_cat(cat_id)
        return jsonify(cat_payload(cat)), 200
    except AppError as e:
        return jsonify(e.to_dict()), e.status_code
