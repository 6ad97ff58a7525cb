"""프로퍼티 어댑터.

외부에서 요청한 프로퍼티 이름을 스냅샷 필드 조회(read)나
내비게이션 명령 전송(write)으로 변환한다.
읽기는 네트워크 I/O 없이 스냅샷만 참조한다.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
import logging

from padbot_mapper.domain.entities.robot_status import RobotStatus
from padbot_mapper.domain.enums import UNKNOWN, PropertyName
from padbot_mapper.domain.exceptions import PropertyValueError
from padbot_mapper.usecase.command_dispatcher import NavigationDispatcher
from padbot_mapper.usecase.ports.snapshot_repository import (
    SnapshotRepository,
)

logger = logging.getLogger(__name__)


class WriteResult(IntEnum):
    """프로퍼티 쓰기 결과. 두 값 모두 호출 성공을 의미한다."""

    ACCEPTED = 0
    IGNORED = 1


@dataclass(frozen=True)
class PropertyReadResult:
    """프로퍼티 읽기 결과.

    Args:
        name: 요청한 프로퍼티 이름.
        value: 문자열 값. 비어 있지 않음이 보장된다.
        known: 알려진 프로퍼티인지 여부.
    """

    name: str
    value: str
    known: bool = True


_READERS: dict[str, Callable[[RobotStatus], str]] = {
    PropertyName.BATTERY_PERCENTAGE.value: (
        lambda s: str(s.battery_percentage)
    ),
    PropertyName.BATTERY_STATUS.value: lambda s: s.battery_status,
    PropertyName.ACTION_STATUS.value: lambda s: s.action_status,
    PropertyName.NAVIGATION_STATUS.value: lambda s: s.navigation_status,
    PropertyName.ROBOT_LOCATION.value: lambda s: s.robot_location,
}

# 'UNKNOWN' 목표는 upstream에서 "미설정"을 뜻하므로 전송하지 않는다
_IGNORED_TARGETS = frozenset({'', UNKNOWN})


class PropertyAdapter:
    """프로퍼티 이름 ↔ 스냅샷 필드/명령 매핑.

    Args:
        snapshot_repo: 스냅샷 저장소.
        dispatcher: 내비게이션 명령 디스패처. None이면 쓰기를 무시한다.
    """

    def __init__(
        self,
        snapshot_repo: SnapshotRepository,
        dispatcher: NavigationDispatcher | None = None,
    ) -> None:
        self._snapshot_repo = snapshot_repo
        self._dispatcher = dispatcher

    @staticmethod
    def readable_properties() -> list[str]:
        """읽기 가능한 프로퍼티 이름 목록."""
        return list(_READERS)

    def read(self, name: str) -> PropertyReadResult:
        """프로퍼티 값을 스냅샷에서 읽는다.

        Args:
            name: 프로퍼티 이름.

        Returns:
            읽기 결과. 모르는 이름이면 known=False, value='UNKNOWN'.
        """
        reader = _READERS.get(name)
        if reader is None:
            logger.error('Unknown propertyName: %s', name)
            return PropertyReadResult(name=name, value=UNKNOWN, known=False)

        value = reader(self._snapshot_repo.get_snapshot().status)
        return PropertyReadResult(name=name, value=value or UNKNOWN)

    def read_all(self) -> dict[str, str]:
        """모든 프로퍼티를 하나의 스냅샷에서 읽는다."""
        status = self._snapshot_repo.get_snapshot().status
        return {
            name: reader(status) or UNKNOWN
            for name, reader in _READERS.items()
        }

    def write(self, name: str, value: object) -> WriteResult:
        """프로퍼티에 값을 쓴다.

        robotLocation만 쓰기 가능하며, 명령 전송을 예약한 뒤
        전송 완료를 기다리지 않고 반환한다.

        Args:
            name: 프로퍼티 이름.
            value: 쓸 값 (robotLocation은 목표 지점 이름).

        Returns:
            ACCEPTED: 명령 전송을 시작함.
            IGNORED: 쓰기 불가 프로퍼티이거나 미설정 목표.

        Raises:
            PropertyValueError: robotLocation 값이 문자열이 아닐 때.
        """
        if name != PropertyName.ROBOT_LOCATION:
            logger.error(
                'Unknown propertyName or not support write: %s', name
            )
            return WriteResult.IGNORED

        if not isinstance(value, str):
            raise PropertyValueError(
                f'{name} expects a string target point, '
                f'got {type(value).__name__}'
            )

        if value in _IGNORED_TARGETS:
            logger.debug('Ignoring unset navigation target: %r', value)
            return WriteResult.IGNORED

        if self._dispatcher is None:
            logger.warning(
                'Driver not initialized, navigation to %s ignored', value
            )
            return WriteResult.IGNORED
        if not self._dispatcher.dispatch(value):
            return WriteResult.IGNORED
        return WriteResult.ACCEPTED
