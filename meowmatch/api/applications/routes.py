# meowmatch/api/applications/routes.py
import logging
from dataclasses import asdict
from flask import Blueprint, request, jsonify, current_app

from meowmatch.core.errors import AppError, ValidationError
from .schemas import AdoptionApplicationResponseSchema

applications_bp = Blueprint('applications_bp', __name__)

@applications_bp.route('/<string:cat_id>/applications', methods=['POST'])
def submit_application(cat_id: str):
    """입양 신청 API. 검증 오류는 처음 위반된 필드 하나만 알려줍니다."""
    service = current_app.services['applications']
    try:
        application = service.submit(cat_id, request.get_json(silent=True) or request.form.to_dict())
        return jsonify(AdoptionApplicationResponseSchema().dump(asdict(application))), 201
    except ValidationError as err:
        return jsonify(err.to_dict()), 400
    except AppError as e:
        logging.warning(f"Adoption application failed (cat_id: {cat_id}): {e.message}")
        return jsonify(e.to_dict()), e.status_code
