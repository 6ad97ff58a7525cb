"""내비게이션 명령 디스패처.

명령마다 별도의 데몬 스레드에서 POST /navigation 을 호출한다.
호출자는 전송 완료를 기다리지 않으며,
결과는 로그와 NavigationDispatchedEvent로만 관찰할 수 있다.
"""

from __future__ import annotations

import logging
import threading

from padbot_mapper.domain.enums import DispatchOutcome
from padbot_mapper.domain.events.robot_events import (
    NavigationDispatchedEvent,
)
from padbot_mapper.domain.exceptions import GatewayError
from padbot_mapper.usecase.ports.event_publisher import EventPublisher
from padbot_mapper.usecase.ports.robot_gateway import RobotGateway

logger = logging.getLogger(__name__)


class NavigationDispatcher:
    """fire-and-forget 내비게이션 명령 전송기.

    Args:
        gateway: 로봇 게이트웨이 포트.
        event_publisher: 전송 결과를 발행할 이벤트 발행자.
        enabled: False면 명령을 전송하지 않는다 (base_url 미설정).
    """

    def __init__(
        self,
        gateway: RobotGateway,
        event_publisher: EventPublisher,
        enabled: bool = True,
    ) -> None:
        self._gateway = gateway
        self._event_publisher = event_publisher
        self._enabled = enabled
        self._lock = threading.Lock()
        self._in_flight: set[threading.Thread] = set()
        self._closing = False

    @property
    def in_flight(self) -> int:
        """전송 중인 명령 수."""
        with self._lock:
            return len(self._in_flight)

    def dispatch(self, target_point: str) -> bool:
        """명령 전송 스레드를 띄우고 즉시 반환한다.

        Args:
            target_point: 목표 지점 이름.

        Returns:
            전송 스레드를 시작했으면 True.
        """
        if not self._enabled:
            logger.warning(
                'Gateway base URL not configured, '
                'navigation to %s ignored', target_point,
            )
            return False

        thread = threading.Thread(
            target=self._send,
            args=(target_point,),
            name=f'navigation-{target_point}',
            daemon=True,
        )
        with self._lock:
            if self._closing:
                logger.warning(
                    'Dispatcher closed, navigation to %s ignored',
                    target_point,
                )
                return False
            self._in_flight.add(thread)
        thread.start()
        return True

    def close(self) -> None:
        """새 명령을 거부하고 게이트웨이를 닫는다.

        전송 중인 명령이 있으면 마지막 명령이 끝난 뒤에 닫는다.
        """
        with self._lock:
            self._closing = True
            idle = not self._in_flight
        if idle:
            self._gateway.close()
        else:
            logger.debug('Gateway close deferred to in-flight commands')

    def _send(self, target_point: str) -> None:
        try:
            event = self._deliver(target_point)
        finally:
            with self._lock:
                self._in_flight.discard(threading.current_thread())
                last = self._closing and not self._in_flight
        self._event_publisher.publish(event)
        if last:
            self._gateway.close()

    def _deliver(self, target_point: str) -> NavigationDispatchedEvent:
        try:
            status_code = self._gateway.send_navigation(target_point)
        except GatewayError as e:
            logger.error('Post navigation request error: %s', e)
            return NavigationDispatchedEvent(
                target_point=target_point,
                outcome=DispatchOutcome.FAILED,
                error=str(e),
            )
        except Exception as e:
            logger.exception(
                'Unexpected error sending navigation to %s', target_point
            )
            return NavigationDispatchedEvent(
                target_point=target_point,
                outcome=DispatchOutcome.FAILED,
                error=repr(e),
            )

        if status_code != 200:
            logger.error(
                'Post navigation request error, statusCode: %d',
                status_code,
            )
            return NavigationDispatchedEvent(
                target_point=target_point,
                outcome=DispatchOutcome.REJECTED,
                status_code=status_code,
                error=f'HTTP {status_code}',
            )

        logger.info('Navigation command delivered: %s', target_point)
        return NavigationDispatchedEvent(
            target_point=target_point,
            outcome=DispatchOutcome.DELIVERED,
            status_code=status_code,
        )
