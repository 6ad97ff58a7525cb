"""설정 로딩 인프라."""

from padbot_mapper.infra.config.protocol_config_parser import (
    parse_gateway_config,
    parse_property_name,
)
from padbot_mapper.infra.config.yaml_config_loader import YamlConfigLoader

__all__ = [
    "YamlConfigLoader",
    "parse_gateway_config",
    "parse_property_name",
]
