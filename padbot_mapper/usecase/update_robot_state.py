"""로봇 상태 업데이트 유스케이스.

게이트웨이의 /health, /status 를 조회하여
스냅샷 저장소를 갱신하고 이벤트를 발행한다.
"""

import logging

from padbot_mapper.domain.entities.robot_status import RobotStatus
from padbot_mapper.domain.events.robot_events import (
    HealthChangedEvent,
    StatusRefreshedEvent,
)
from padbot_mapper.domain.exceptions import GatewayError, StatusParseError
from padbot_mapper.usecase.ports.event_publisher import EventPublisher
from padbot_mapper.usecase.ports.robot_gateway import RobotGateway
from padbot_mapper.usecase.ports.snapshot_repository import (
    SnapshotRepository,
)

logger = logging.getLogger(__name__)


class UpdateRobotState:
    """로봇 상태 업데이트 유스케이스.

    게이트웨이 조회 → 저장소 교체 → 이벤트 발행.
    폴링 실패는 호출자에게 전파하지 않고 센티널/unhealthy로 기록한다.

    Args:
        gateway: 로봇 게이트웨이 포트.
        snapshot_repo: 스냅샷 저장소.
        event_publisher: 이벤트 발행자.
        enabled: False면 게이트웨이를 호출하지 않는다 (base_url 미설정).
    """

    def __init__(
        self,
        gateway: RobotGateway,
        snapshot_repo: SnapshotRepository,
        event_publisher: EventPublisher,
        enabled: bool = True,
    ) -> None:
        self._gateway = gateway
        self._snapshot_repo = snapshot_repo
        self._event_publisher = event_publisher
        self._enabled = enabled

    def disable(self) -> None:
        """이후 조회 결과를 저장소에 기록하지 않는다."""
        self._enabled = False

    def update_health(self) -> None:
        """health 프로브 1회를 수행한다.

        200 응답 외의 모든 결과(예상치 못한 예외 포함)는 unhealthy로
        기록한다.
        """
        if not self._enabled:
            return

        healthy = False
        try:
            healthy = self._gateway.check_health()
        except GatewayError as e:
            logger.error('Get health error: %s', e)
        finally:
            self._save_health(healthy)

    def _save_health(self, healthy: bool) -> None:
        if not self._enabled:
            return
        previous = self._snapshot_repo.save_health(healthy)
        if previous != healthy:
            logger.info('Robot health changed: %s -> %s', previous, healthy)
            self._event_publisher.publish(
                HealthChangedEvent(previous=previous, healthy=healthy)
            )

    def update_status(self) -> None:
        """status 폴링 1회를 수행한다.

        성공/실패와 무관하게 마지막에 반드시 상태 레코드를 교체한다.
        실패 시에는 이전 값을 유지하지 않고 전부 센티널로 교체한다.
        """
        if not self._enabled:
            return

        status = RobotStatus.unknown()
        succeeded = False
        try:
            status = self._gateway.fetch_status()
            succeeded = True
        except StatusParseError as e:
            logger.error('Parse status body error: %s', e)
        except GatewayError as e:
            logger.error('Get status error: %s', e)
        finally:
            if self._enabled:
                self._snapshot_repo.save_status(status)
            self._event_publisher.publish(
                StatusRefreshedEvent(status=status, succeeded=succeeded)
            )
