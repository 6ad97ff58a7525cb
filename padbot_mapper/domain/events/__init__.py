"""Padbot 도메인 이벤트."""

from padbot_mapper.domain.events.robot_events import (
    DomainEvent,
    HealthChangedEvent,
    NavigationDispatchedEvent,
    StatusRefreshedEvent,
)

__all__ = [
    "DomainEvent",
    "HealthChangedEvent",
    "NavigationDispatchedEvent",
    "StatusRefreshedEvent",
]
