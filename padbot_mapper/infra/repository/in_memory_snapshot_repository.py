"""인메모리 로봇 스냅샷 저장소 구현체."""

import threading

from padbot_mapper.domain.entities.robot_status import (
    RobotSnapshot,
    RobotStatus,
)
from padbot_mapper.usecase.ports.snapshot_repository import (
    SnapshotRepository,
)


class InMemorySnapshotRepository(SnapshotRepository):
    """SnapshotRepository의 인메모리 구현체.

    불변 RobotSnapshot 하나를 참조로 보관하고,
    쓰기는 Lock 안에서 새 스냅샷으로 통째 교체한다.
    읽기는 교체 전후 중 하나의 완전한 스냅샷만 관찰한다.

    Args:
        initial: 초기 스냅샷. None이면 전부 센티널.
    """

    def __init__(self, initial: RobotSnapshot | None = None) -> None:
        self._lock = threading.Lock()
        self._snapshot = initial or RobotSnapshot()

    def get_snapshot(self) -> RobotSnapshot:
        with self._lock:
            return self._snapshot

    def save_status(self, status: RobotStatus) -> None:
        with self._lock:
            self._snapshot = self._snapshot.with_status(status)

    def save_health(self, healthy: bool) -> bool:
        with self._lock:
            previous = self._snapshot.healthy
            self._snapshot = self._snapshot.with_health(healthy)
            return previous

    def reset(self) -> None:
        with self._lock:
            self._snapshot = RobotSnapshot()
