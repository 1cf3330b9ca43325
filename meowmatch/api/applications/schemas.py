# meowmatch/api/applications/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

class AdoptionApplicationSchema(Schema):
    """POST /api/cats/<cat_id>/applications 입양 신청 폼 스키마."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=100, error="Name must be between 1 and 100 characters."))
    email = fields.Email(
        required=True,
        validate=validate.Length(max=255, error="Email must be at most 255 characters."),
        error_messages={"invalid": "Please enter a valid email address."}
    )
    phone = fields.Str(required=True, validate=validate.Length(min=10, max=20, error="Phone number must be between 10 and 20 characters."))
    location = fields.Str(required=True, validate=validate.Length(min=1, max=100, error="Location must be between 1 and 100 characters."))
    message = fields.Str(required=True, validate=validate.Length(min=10, max=1000, error="Message must be between 10 and 1000 characters."))

class AdoptionApplicationResponseSchema(Schema):
    """신청 접수 결과 응답 스키마."""
    application_id = fields.Str()
    cat_id = fields.Str()
    applicant_name = fields.Str()
    applicant_email = fields.Str()
    created_at = fields.DateTime()
