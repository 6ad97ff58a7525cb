"""스냅샷 저장소 인프라 (SnapshotRepository 구현)."""

from padbot_mapper.infra.repository.in_memory_snapshot_repository import (
    InMemorySnapshotRepository,
)

__all__ = ["InMemorySnapshotRepository"]
