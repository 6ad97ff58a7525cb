"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from padbot_mapper.usecase.ports.config_port import (
    AppConfig,
    ConfigPort,
    GatewayConfig,
)
from padbot_mapper.usecase.ports.event_publisher import EventPublisher
from padbot_mapper.usecase.ports.robot_gateway import RobotGateway
from padbot_mapper.usecase.ports.snapshot_repository import (
    SnapshotRepository,
)

__all__ = [
    "AppConfig",
    "ConfigPort",
    "EventPublisher",
    "GatewayConfig",
    "RobotGateway",
    "SnapshotRepository",
]
