"""Padbot 로봇 상태 엔티티.

게이트웨이 /status 응답과 1:1로 대응하는 상태 레코드와,
health 플래그를 함께 담는 스냅샷을 정의한다.
두 타입 모두 불변이며, 갱신은 항상 통째 교체로 이루어진다.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from padbot_mapper.domain.enums import UNKNOWN, UNKNOWN_BATTERY


@dataclass(frozen=True)
class RobotStatus:
    """로봇 상태 레코드.

    Args:
        battery_percentage: 배터리 잔량 (%). -1이면 알 수 없음.
        battery_status: 배터리 상태 (e.g. 'CHARGING').
        action_status: 동작 상태.
        navigation_status: 내비게이션 상태.
        robot_location: 현재 위치 이름.
    """

    battery_percentage: int = UNKNOWN_BATTERY
    battery_status: str = UNKNOWN
    action_status: str = UNKNOWN
    navigation_status: str = UNKNOWN
    robot_location: str = UNKNOWN

    @classmethod
    def unknown(cls) -> RobotStatus:
        """모든 필드가 센티널인 레코드를 반환한다."""
        return cls()

    @property
    def is_unknown(self) -> bool:
        """모든 필드가 센티널 값인지 여부."""
        return self == RobotStatus.unknown()


@dataclass(frozen=True)
class RobotSnapshot:
    """로봇의 마지막으로 관측된 상태와 health 플래그.

    Args:
        status: 최근 상태 폴링 결과.
        healthy: 최근 health 프로브 성공 여부.
    """

    status: RobotStatus = field(default_factory=RobotStatus.unknown)
    healthy: bool = False

    def with_status(self, status: RobotStatus) -> RobotSnapshot:
        """status만 교체한 새 스냅샷을 반환한다."""
        return replace(self, status=status)

    def with_health(self, healthy: bool) -> RobotSnapshot:
        """healthy만 교체한 새 스냅샷을 반환한다."""
        return replace(self, healthy=healthy)
