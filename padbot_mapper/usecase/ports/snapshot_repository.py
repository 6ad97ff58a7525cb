"""로봇 스냅샷 저장소 포트 인터페이스.

폴러가 쓰고 프로퍼티 조회가 읽는 공유 상태를 추상화한다.
"""

from abc import ABC, abstractmethod

from padbot_mapper.domain.entities.robot_status import (
    RobotSnapshot,
    RobotStatus,
)


class SnapshotRepository(ABC):
    """로봇 스냅샷 저장소 인터페이스.

    구현체는 읽기 측이 서로 다른 폴링 주기의 필드가 섞인
    레코드를 관찰하지 않도록 보장해야 한다.
    """

    @abstractmethod
    def get_snapshot(self) -> RobotSnapshot:
        """현재 스냅샷을 반환한다."""

    @abstractmethod
    def save_status(self, status: RobotStatus) -> None:
        """상태 레코드 전체를 한 번에 교체한다.

        Args:
            status: 새 상태 레코드.
        """

    @abstractmethod
    def save_health(self, healthy: bool) -> bool:
        """healthy 플래그를 교체한다.

        Args:
            healthy: 새 healthy 값.

        Returns:
            교체 전 healthy 값.
        """

    @abstractmethod
    def reset(self) -> None:
        """스냅샷을 초기 상태(전부 센티널, unhealthy)로 되돌린다."""
