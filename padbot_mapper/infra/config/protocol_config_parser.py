"""디바이스 매퍼 프로토콜 설정 파서.

호스트 플랫폼이 전달하는 JSON 설정 블롭을 해석한다.

- protocolCommon: ``{"customizedValues": {"padbotBaseURL": ...}}``
- visitor: ``{"configData": {"propertyName": ...}}``
- protocol: ``{"protocolName": ..., "configData": {"padbotBaseURL": ...}}``
"""

from __future__ import annotations

import json
from typing import Any

from padbot_mapper.domain.exceptions import ConfigurationError
from padbot_mapper.usecase.ports.config_port import GatewayConfig

RawConfig = bytes | str | dict[str, Any] | None


def _load_object(raw: RawConfig, what: str) -> dict[str, Any]:
    """JSON 블롭을 dict로 읽는다. 비어 있으면 빈 dict."""
    if raw is None or raw == b'' or raw == '':
        return {}
    if isinstance(raw, dict):
        return raw
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise ConfigurationError(f'Invalid {what} JSON: {e}') from e
    if not isinstance(data, dict):
        raise ConfigurationError(f'{what} must be a JSON object')
    return data


def _section(data: dict[str, Any], key: str, what: str) -> dict[str, Any]:
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(f'{what}.{key} must be a JSON object')
    return section


def _string(data: dict[str, Any], key: str) -> str:
    """data[key]를 문자열로 읽는다. 없거나 null이면 빈 문자열."""
    value = data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ConfigurationError(f'{key} must be a string')
    return value


def parse_gateway_config(
    protocol_common: RawConfig,
    protocol: RawConfig = None,
    **overrides: Any,
) -> GatewayConfig:
    """protocolCommon(+protocol) 블롭에서 GatewayConfig를 만든다.

    protocolCommon의 customizedValues.padbotBaseURL이 우선이고,
    없으면 protocol의 configData.padbotBaseURL을 사용한다.

    Args:
        protocol_common: protocolCommon JSON.
        protocol: protocol JSON.
        **overrides: GatewayConfig의 나머지 필드 값.

    Raises:
        ConfigurationError: JSON 형식이 올바르지 않을 때.
    """
    common = _load_object(protocol_common, 'protocolCommon')
    customized = _section(common, 'customizedValues', 'protocolCommon')
    base_url = _string(customized, 'padbotBaseURL')

    if not base_url:
        proto = _load_object(protocol, 'protocol')
        base_url = _string(
            _section(proto, 'configData', 'protocol'), 'padbotBaseURL'
        )

    return GatewayConfig(base_url=base_url, **overrides)


def parse_property_name(visitor: RawConfig) -> str:
    """visitor 블롭에서 프로퍼티 이름을 꺼낸다.

    Raises:
        ConfigurationError: JSON 형식이 올바르지 않을 때.
    """
    data = _load_object(visitor, 'visitor')
    return _string(
        _section(data, 'configData', 'visitor'), 'propertyName'
    )
