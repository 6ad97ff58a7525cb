"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from padbot_mapper.domain.exceptions import ConfigurationError
from padbot_mapper.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    GatewayConfig,
)

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_params.yaml"
)


def _typed(
    data: dict[str, Any], key: str, default: Any, kind: type | tuple
) -> Any:
    """data[key]를 kind 타입으로 검증하여 반환한다."""
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigurationError(
            f"Config key {key!r} has invalid value: {value!r}"
        )
    return value


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 설정을 읽어 AppConfig로 변환한다.
    파일이 없으면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다."""
        raw = self._read_yaml()
        params = self._extract_params(raw)

        gateway_data = params.get("gateway")
        if gateway_data is None:
            gateway_data = {}
        if not isinstance(gateway_data, dict):
            raise ConfigurationError("'gateway' section must be a mapping")

        number = (int, float)
        config = AppConfig(
            gateway=GatewayConfig(
                base_url=_typed(gateway_data, "base_url", "", str),
                poll_interval_sec=float(
                    _typed(gateway_data, "poll_interval_sec", 1.0, number)
                ),
                request_timeout_sec=float(
                    _typed(gateway_data, "request_timeout_sec", 2.0, number)
                ),
            ),
            device_name=_typed(params, "device_name", "padbot", str),
            log_level=_typed(params, "log_level", "INFO", str).upper(),
            report_interval_sec=float(
                _typed(params, "report_interval_sec", 5.0, number)
            ),
        )

        if config.gateway.poll_interval_sec <= 0:
            raise ConfigurationError("poll_interval_sec must be positive")
        if config.gateway.request_timeout_sec <= 0:
            raise ConfigurationError("request_timeout_sec must be positive")
        if config.log_level not in logging.getLevelNamesMapping():
            raise ConfigurationError(f"Unknown log_level: {config.log_level}")

        logger.info("Config loaded from %s", self._path)
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self._path}: {e}"
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config root must be a mapping: {self._path}"
            )
        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """YAML 구조에서 padbot_mapper 섹션을 추출한다."""
        node_data = raw.get("padbot_mapper", raw)
        if isinstance(node_data, dict):
            return node_data
        raise ConfigurationError("'padbot_mapper' section must be a mapping")
