"""PadbotDriver: 호스트 플랫폼 ↔ Padbot 로봇 브릿지.

호스트 플랫폼이 호출하는 initialize / read_property / write_property /
get_health / shutdown 을 제공한다. health/status 폴러의 생명주기를
관리하며, 모든 조회는 캐시된 스냅샷에서만 응답한다.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import threading

from padbot_mapper.domain.entities.robot_status import RobotSnapshot
from padbot_mapper.domain.events.robot_events import DomainEvent
from padbot_mapper.domain.exceptions import (
    ConfigurationError,
    DriverStateError,
)
from padbot_mapper.usecase.command_dispatcher import NavigationDispatcher
from padbot_mapper.usecase.periodic_poller import PeriodicPoller
from padbot_mapper.usecase.ports.config_port import GatewayConfig
from padbot_mapper.usecase.ports.event_publisher import (
    EventHandler,
    EventPublisher,
    Unsubscribe,
)
from padbot_mapper.usecase.ports.robot_gateway import RobotGateway
from padbot_mapper.usecase.ports.snapshot_repository import (
    SnapshotRepository,
)
from padbot_mapper.usecase.property_adapter import (
    PropertyAdapter,
    PropertyReadResult,
    WriteResult,
)
from padbot_mapper.usecase.update_robot_state import UpdateRobotState

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[GatewayConfig], RobotGateway]


class PadbotDriver:
    """단일 Padbot 로봇의 상태 미러링 드라이버.

    Args:
        gateway_factory: GatewayConfig로 RobotGateway를 만드는 함수.
        snapshot_repo: 스냅샷 저장소.
        event_publisher: 이벤트 발행자.
    """

    def __init__(
        self,
        gateway_factory: GatewayFactory,
        snapshot_repo: SnapshotRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._snapshot_repo = snapshot_repo
        self._event_publisher = event_publisher

        # initialize/shutdown 직렬화
        self._lifecycle_lock = threading.Lock()
        self._config: GatewayConfig | None = None
        self._gateway: RobotGateway | None = None
        self._dispatcher: NavigationDispatcher | None = None
        self._update: UpdateRobotState | None = None
        self._pollers: list[PeriodicPoller] = []
        self._properties = PropertyAdapter(snapshot_repo)

    @property
    def config(self) -> GatewayConfig | None:
        """initialize 시 전달된 게이트웨이 설정."""
        return self._config

    @property
    def is_running(self) -> bool:
        """폴러가 동작 중인지 여부."""
        return any(p.is_running for p in self._pollers)

    # -- 생명주기 --

    def initialize(self, config: GatewayConfig) -> None:
        """base_url을 등록하고 health/status 폴러를 시작한다.

        폴러 시작 후 즉시 반환한다. base_url이 비어 있으면
        폴러는 돌지만 게이트웨이를 호출하지 않는다.

        Args:
            config: 게이트웨이 접속 설정.

        Raises:
            ConfigurationError: 설정이 올바르지 않을 때.
            DriverStateError: 이미 초기화된 경우.
        """
        if not isinstance(config, GatewayConfig):
            raise ConfigurationError(
                f'Expected GatewayConfig, got {type(config).__name__}'
            )
        if config.poll_interval_sec <= 0:
            raise ConfigurationError('poll_interval_sec must be positive')

        with self._lifecycle_lock:
            if self._pollers:
                raise DriverStateError('Driver already initialized')

            enabled = config.is_configured
            if not enabled:
                logger.warning(
                    'Gateway base URL is empty, pollers will stay idle'
                )

            gateway = self._gateway_factory(config)
            update = UpdateRobotState(
                gateway=gateway,
                snapshot_repo=self._snapshot_repo,
                event_publisher=self._event_publisher,
                enabled=enabled,
            )
            dispatcher = NavigationDispatcher(
                gateway=gateway,
                event_publisher=self._event_publisher,
                enabled=enabled,
            )

            self._config = config
            self._gateway = gateway
            self._dispatcher = dispatcher
            self._update = update
            # 새 세션은 전부 센티널, unhealthy에서 시작
            self._snapshot_repo.reset()
            self._properties = PropertyAdapter(
                self._snapshot_repo, dispatcher
            )
            self._pollers = [
                PeriodicPoller(
                    'health', update.update_health, config.poll_interval_sec
                ),
                PeriodicPoller(
                    'status', update.update_status, config.poll_interval_sec
                ),
            ]
            for poller in self._pollers:
                poller.start()

        logger.info(
            'Padbot driver initialized: base_url=%s, interval=%.1fs',
            config.base_url or '<unset>', config.poll_interval_sec,
        )

    def shutdown(self, timeout: float | None = None) -> bool:
        """두 폴러에 각각 정지 신호를 보내고 종료를 기다린다.

        정지 신호는 폴러마다 독립적이므로, 이미 종료된 폴러나
        HTTP 호출 중인 폴러 때문에 블로킹되지 않는다.
        대기 시간은 폴러당 timeout으로 제한된다.
        종료 후 스냅샷은 센티널로 되돌린다. 시간 내에 멈추지 않은
        폴러의 늦은 결과는 저장되지 않는다.

        Args:
            timeout: 폴러당 최대 대기 시간 (초). None이면
                request_timeout_sec + poll_interval_sec.

        Returns:
            모든 폴러가 시간 내에 종료되었으면 True.
        """
        with self._lifecycle_lock:
            pollers, self._pollers = self._pollers, []
            gateway, self._gateway = self._gateway, None
            dispatcher, self._dispatcher = self._dispatcher, None
            update, self._update = self._update, None
            config = self._config
            self._properties = PropertyAdapter(self._snapshot_repo)

        if not pollers:
            return True

        if timeout is None and config is not None:
            timeout = config.request_timeout_sec + config.poll_interval_sec

        if update is not None:
            update.disable()
        for poller in pollers:
            poller.stop()

        stopped = True
        for poller in pollers:
            if not poller.join(timeout):
                logger.warning(
                    '%s poller did not stop within %.1fs',
                    poller.name, timeout,
                )
                stopped = False

        if dispatcher is not None and stopped:
            # 전송 중인 명령이 있으면 마지막 명령이 끝날 때 닫힌다
            dispatcher.close()
        elif gateway is not None:
            logger.warning(
                'Gateway left open, pollers still running'
            )

        self._snapshot_repo.reset()

        logger.info('Padbot driver stopped')
        return stopped

    # -- 프로퍼티 --

    def read_property(self, name: str) -> PropertyReadResult:
        """프로퍼티 값을 캐시에서 읽는다. 네트워크 I/O 없음."""
        return self._properties.read(name)

    def read_all_properties(self) -> dict[str, str]:
        """모든 프로퍼티를 하나의 스냅샷에서 읽는다."""
        return self._properties.read_all()

    def write_property(self, name: str, value: object) -> WriteResult:
        """프로퍼티에 값을 쓴다. 명령 전송 완료를 기다리지 않는다.

        Raises:
            PropertyValueError: 값 형식이 올바르지 않을 때.
        """
        return self._properties.write(name, value)

    # -- 상태 조회 --

    def get_health(self) -> bool:
        """마지막 health 프로브 결과를 반환한다."""
        return self._snapshot_repo.get_snapshot().healthy

    def get_snapshot(self) -> RobotSnapshot:
        """현재 스냅샷을 반환한다."""
        return self._snapshot_repo.get_snapshot()

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> Unsubscribe:
        """드라이버 이벤트(health 전이, 명령 전송 결과 등)를 구독한다.

        Returns:
            구독 해제 함수.
        """
        return self._event_publisher.subscribe(event_type, handler)
