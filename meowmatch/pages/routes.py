# meowmatch/pages/routes.py
import logging
from flask import Blueprint, request, render_template, current_app

from meowmatch.api.favorites.routes import get_favorites_store
from meowmatch.api.cats.filters import CatFilters, filter_cats
from meowmatch.api.cats.schemas import CatWriteSchema
from meowmatch.core.errors import DataAccessError
from meowmatch.core.security import get_auth, roles_required
from meowmatch.models.cat import (
    CatAge, CatSize, CatGender, AGE_LABELS,
    COLOR_PALETTE, PERSONALITY_TRAITS, GOOD_WITH_OPTIONS
)
from meowmatch.models.user_role import UserRole

pages_bp = Blueprint('pages_bp', __name__)

def _filter_options():
    return {
        "age": [(age.value, AGE_LABELS[age]) for age in CatAge],
        "color": [(color, color.capitalize()) for color in COLOR_PALETTE],
        "size": [(size.value, size.value.capitalize()) for size in CatSize],
        "personality": [(trait, trait.capitalize()) for trait in PERSONALITY_TRAITS],
        "good_with": [(value, value.replace('-', ' ').capitalize()) for value in GOOD_WITH_OPTIONS],
        "gender": [(gender.value, gender.value.capitalize()) for gender in CatGender],
    }

@pages_bp.route('/', methods=['GET'])
def catalog_page():
    """공개 카탈로그 화면."""
    filters = CatFilters.from_args(request.args)
    favorites = get_favorites_store().load()
    try:
        cats = current_app.services['cats'].list_available()
    except DataAccessError as e:
        logging.warning(f"Catalog page shows empty state: {e.message}")
        cats = []

    return render_template(
        'index.html',
        cats=filter_cats(cats, filters, favorites),
        filters=filters,
        favorites=favorites,
        options=_filter_options()
    )

@pages_bp.route('/admin', methods=['GET'])
@roles_required(UserRole.ADMIN, UserRole.SHELTER_STAFF, redirect_on_fail=True)
def admin_page():
    """관리자 대시보드. 권한이 없으면 데코레이터가 /auth 로 보내므로 편집 컨트롤은 렌더링되지 않습니다."""
    auth = get_auth()
    try:
        cats = current_app.services['cat_editor'].list_cats(auth.roles)
    except DataAccessError as e:
        logging.warning(f"Admin page shows empty list: {e.message}")
        cats = []
    # 수정 대화상자에 미리 채울 값
    editable = {cat.cat_id: CatWriteSchema().dump(cat.to_dict()) for cat in cats}
    return render_template('admin.html', cats=cats, editable=editable, auth=auth.snapshot(), options=_filter_options())

@pages_bp.route('/auth', methods=['GET'])
def auth_page():
    """로그인 화면. Firebase 웹 SDK 로 받은 ID 토큰을 /api/auth/session 으로 보냅니다."""
    firebase_config = {
        "apiKey": current_app.config['FIREBASE_WEB_API_KEY'],
        "authDomain": current_app.config['FIREBASE_AUTH_DOMAIN'],
        "projectId": current_app.config['FIREBASE_PROJECT_ID'],
    }
    return render_template('auth.html', auth=get_auth().snapshot(), firebase_config=firebase_config)
