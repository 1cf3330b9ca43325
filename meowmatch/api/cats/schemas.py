# meowmatch/api/cats/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from meowmatch.models.cat import CatAge, CatSize, CatGender

class CatWriteSchema(Schema):
    """POST/PUT /api/admin/cats 고양이 레코드 생성·수정 요청 스키마."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=100, error="Name is required (max 100 characters)."))
    age = fields.Str(required=True, validate=validate.OneOf([e.value for e in CatAge]))
    color = fields.Str(required=True, validate=validate.Length(min=1, error="Color is required."))
    size = fields.Str(required=True, validate=validate.OneOf([e.value for e in CatSize]))
    gender = fields.Str(required=True, validate=validate.OneOf([e.value for e in CatGender]))
    personality = fields.List(fields.Str(), load_default=list)
    good_with = fields.List(fields.Str(), load_default=list)
    description = fields.Str(
        required=True,
        validate=validate.Length(min=10, max=500, error="Description must be between 10 and 500 characters.")
    )
    image_url = fields.URL(required=True, require_tld=False, error_messages={"invalid": "Must be a valid URL."})
    is_available = fields.Bool(load_default=True)

class CatResponseSchema(Schema):
    """카탈로그/관리자 화면 응답 스키마."""
    cat_id = fields.Str(dump_only=True)
    name = fields.Str()
    age = fields.Str()
    age_label = fields.Str()
    color = fields.Str()
    size = fields.Str()
    gender = fields.Str()
    personality = fields.List(fields.Str())
    good_with = fields.List(fields.Str())
    description = fields.Str()
    image_url = fields.Str()
    is_available = fields.Bool()
    shelter_id = fields.Str(allow_none=True)
    created_at = fields.DateTime(allow_none=True)
