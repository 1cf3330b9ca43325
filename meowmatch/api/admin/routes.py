# meowmatch/api/admin/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app

from meowmatch.api.cats.routes import cat_payload
from meowmatch.core.errors import AppError, ValidationError
from meowmatch.core.security import get_auth, roles_required
from meowmatch.models.user_role import UserRole

admin_bp = Blueprint('admin_bp', __name__)

EDITOR = (UserRole.ADMIN, UserRole.SHELTER_STAFF)

@admin_bp.route('/cats/', methods=['GET'])
@roles_required(*EDITOR)
def list_all_cats():
    """[관리자] 입양 여부와 관계없이 전체 고양이 목록."""
    service = current_app.services['cat_editor']
    try:
        cats = service.list_cats(get_auth().roles)
    except AppError as e:
        logging.warning(f"Admin cat list failed: {e.message}")
        return jsonify(e.to_dict()), e.status_code
    return jsonify({"cats": [cat_payload(cat) for cat in cats], "count": len(cats)}), 200

@admin_bp.route('/cats/', methods=['POST'])
@roles_required(*EDITOR)
def create_cat():
    """[관리자] 고양이 등록."""
    service = current_app.services['cat_editor']
    try:
        cat = service.create(request.get_json(silent=True), get_auth().roles)
        return jsonify(cat_payload(cat)), 201
    except ValidationError as err:
        return jsonify(err.to_dict()), 400
    except AppError as e:
        return jsonify(e.to_dict()), e.status_code

@admin_bp.route('/cats/<string:cat_id>', methods=['PUT'])
@roles_required(*EDITOR)
def update_cat(cat_id: str):
    """[관리자] 고양이 정보 수정 (입양 완료 처리 포함)."""
    service = current_app.services['cat_editor']
    try:
        cat = service.update(cat_id, request.get_json(silent=True), get_auth().roles)
        return jsonify(cat_payload(cat)), 200
    except ValidationError as err:
        return jsonify(err.to_dict()), 400
    except AppError as e:
        return jsonify(e.to_dict()), e.status_code

@admin_bp.route('/cats/<string:cat_id>', methods=['DELETE'])
@roles_required(*EDITOR)
def delete_cat(cat_id: str):
    """[관리자] 고양이 삭제. 되돌릴 수 없으므로 confirm=true 가 없으면 거부합니다."""
    if request.args.get('confirm', '').lower() != 'true':
        return jsonify({
            "error_code": "CONFIRMATION_REQUIRED",
            "message": "Are you sure you want to delete this cat? Repeat the request with confirm=true."
        }), 400

    service = current_app.services['cat_editor']
    try:
        service.delete(cat_id, get_auth().roles)
        return jsonify({"message": "Cat deleted successfully"}), 200
    except AppError as e:
        return jsonify(e.to_dict()), e.status_code
