#meowmatch/api/auth/schemas.py
from marshmallow import Schema, fields, validate

class SessionLoginSchema(Schema):
    """로그인 요청의 유효성을 검사하는 스키마"""
    # Firebase 클라이언트 SDK 로그인 후 발급된 ID 토큰
    id_token = fields.Str(
        required=True,
        validate=validate.Length(min=1),
        metadata={"description": "Firebase ID token"}
    )
