"""Padbot HTTP 게이트웨이 인프라 (RobotGateway 구현)."""

from padbot_mapper.infra.http.padbot_http_gateway import PadbotHttpGateway

__all__ = ["PadbotHttpGateway"]
