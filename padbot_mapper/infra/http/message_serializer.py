"""Padbot 게이트웨이 메시지 JSON 직렬화/역직렬화.

도메인 엔티티 ↔ 게이트웨이 JSON (camelCase) 변환을 담당한다.
snake_case(도메인) ↔ camelCase(게이트웨이) 변환은
이 모듈에서만 처리한다.
"""

from __future__ import annotations

from dataclasses import fields
import json
import re
from typing import Any

from padbot_mapper.domain.entities.robot_status import RobotStatus
from padbot_mapper.domain.exceptions import StatusParseError


# -- snake_case ↔ camelCase 변환 --

_SNAKE_RE = re.compile(r'_([a-z])')


def _snake_to_camel(name: str) -> str:
    """snake_case → camelCase 변환."""
    return _SNAKE_RE.sub(lambda m: m.group(1).upper(), name)


# 필드가 없거나 null이면 JSON 기본값(0, '')을 사용한다.
# 빈 문자열은 프로퍼티 조회 시 센티널로 치환된다.
_ZERO_VALUES: dict[type, Any] = {int: 0, str: ''}


def _decode_field(key: str, value: Any, expected: type) -> Any:
    """단일 필드 값을 기대 타입으로 검증한다."""
    if value is None:
        return _ZERO_VALUES[expected]
    # bool은 int의 하위 타입이므로 따로 거른다
    if isinstance(value, bool) or not isinstance(value, expected):
        raise StatusParseError(
            f'Field {key!r} expected {expected.__name__}, '
            f'got {type(value).__name__}'
        )
    return value


# -- 역직렬화 (JSON → 도메인) --

def deserialize_status(payload: bytes | str) -> RobotStatus:
    """GET /status 응답 본문을 RobotStatus로 변환한다.

    Args:
        payload: JSON 응답 본문.

    Returns:
        해석된 RobotStatus. 모르는 키는 무시한다.

    Raises:
        StatusParseError: JSON이 아니거나 필드 타입이 맞지 않을 때.
    """
    try:
        data = json.loads(payload)
    except (ValueError, UnicodeDecodeError) as e:
        raise StatusParseError(f'Invalid status JSON: {e}') from e

    if not isinstance(data, dict):
        raise StatusParseError(
            f'Status body must be a JSON object, got {type(data).__name__}'
        )

    kwargs: dict[str, Any] = {}
    for f in fields(RobotStatus):
        expected = int if f.name == 'battery_percentage' else str
        key = _snake_to_camel(f.name)
        kwargs[f.name] = _decode_field(key, data.get(key), expected)
    return RobotStatus(**kwargs)


# -- 직렬화 (도메인 → JSON) --

def status_to_dict(status: RobotStatus) -> dict[str, Any]:
    """RobotStatus를 camelCase dict로 변환한다."""
    return {
        _snake_to_camel(f.name): getattr(status, f.name)
        for f in fields(status)
    }


def serialize_navigation(target_point: str) -> str:
    """POST /navigation 요청 본문을 만든다."""
    return json.dumps({'targetPoint': target_point})
