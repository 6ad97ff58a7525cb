"""Padbot 도메인 엔티티."""

from padbot_mapper.domain.entities.robot_status import (
    RobotSnapshot,
    RobotStatus,
)

__all__ = [
    'RobotSnapshot',
    'RobotStatus',
]
