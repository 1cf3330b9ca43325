# meowmatch/core/validation.py
"""marshmallow 스키마 검증 결과를 '첫 번째 위반 규칙' 하나로 줄여 주는 헬퍼."""
from typing import Any, Dict, Mapping

from marshmallow import Schema
from marshmallow import ValidationError as SchemaValidationError

from meowmatch.core.errors import ValidationError


def _first_message(messages: Any) -> str:
    # marshmallow 메시지는 list/dict 로 중첩될 수 있음
    if isinstance(messages, dict):
        return _first_message(next(iter(messages.values())))
    if isinstance(messages, (list, tuple)):
        return _first_message(messages[0])
    return str(messages)


def first_violation(schema: Schema, messages: Mapping[str, Any]) -> ValidationError:
    """스키마 필드 선언 순서를 기준으로 첫 번째 오류를 ValidationError로 변환합니다."""
    for field_name in schema.fields:
        if field_name in messages:
            return ValidationError(field_name, _first_message(messages[field_name]))
    # 스키마 수준 오류(_schema) 또는 알 수 없는 필드
    field_name = next(iter(messages))
    return ValidationError(field_name, _first_message(messages[field_name]))


def load_or_raise(schema: Schema, data: Any) -> Dict[str, Any]:
    """요청 데이터를 검증합니다. 실패 시 네트워크 호출 전에 ValidationError를 던집니다."""
    if data is None:
        data = {}
    try:
        return schema.load(data)
    except SchemaValidationError as err:
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        raise first_violation(schema, messages) from err
