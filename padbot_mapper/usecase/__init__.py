"""Padbot 매퍼 유스케이스 레이어.

도메인 로직을 포트를 통해 조율하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from padbot_mapper.usecase.command_dispatcher import NavigationDispatcher
from padbot_mapper.usecase.padbot_driver import PadbotDriver
from padbot_mapper.usecase.periodic_poller import PeriodicPoller
from padbot_mapper.usecase.property_adapter import (
    PropertyAdapter,
    PropertyReadResult,
    WriteResult,
)
from padbot_mapper.usecase.update_robot_state import UpdateRobotState

__all__ = [
    "NavigationDispatcher",
    "PadbotDriver",
    "PeriodicPoller",
    "PropertyAdapter",
    "PropertyReadResult",
    "UpdateRobotState",
    "WriteResult",
]
