"""인메모리 도메인 이벤트 발행자 구현체.

health/status 폴러와 내비게이션 전송 스레드가 동시에 발행하는
로봇 이벤트를 발행 스레드에서 바로 구독자에게 전달한다.
"""

import logging
import threading

from padbot_mapper.domain.events.robot_events import DomainEvent
from padbot_mapper.usecase.ports.event_publisher import (
    EventHandler,
    EventPublisher,
    Unsubscribe,
)

logger = logging.getLogger(__name__)


class InMemoryEventPublisher(EventPublisher):
    """EventPublisher의 인메모리 구현체.

    이벤트 타입의 상위 타입으로 구독한 핸들러도 호출된다.
    예를 들어 DomainEvent 구독자는 모든 로봇 이벤트를 받는다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # (타입, 핸들러), 구독 순서대로
        self._subscriptions: list[tuple[type[DomainEvent], EventHandler]] = []

    def publish(self, event: DomainEvent) -> None:
        """도메인 이벤트를 발행한다.

        개별 핸들러의 예외는 로깅 후 무시하여
        폴러/전송 스레드와 다른 핸들러에 영향을 주지 않는다.
        """
        with self._lock:
            handlers = [
                handler for event_type, handler in self._subscriptions
                if isinstance(event, event_type)
            ]

        logger.debug(
            "Publishing %s (handlers=%d)", type(event).__name__, len(handlers)
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Error in event handler for %s", type(event).__name__
                )

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> Unsubscribe:
        entry = (event_type, handler)
        with self._lock:
            self._subscriptions.append(entry)
        logger.debug("Subscribed to event: %s", event_type.__name__)
        return self._unsubscriber(entry)

    def _unsubscriber(
        self, entry: tuple[type[DomainEvent], EventHandler]
    ) -> Unsubscribe:
        def unsubscribe() -> None:
            with self._lock:
                # 같은 핸들러를 여러 번 구독했으면 이 구독만 제거
                for i, existing in enumerate(self._subscriptions):
                    if existing is entry:
                        del self._subscriptions[i]
                        break

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        """현재 구독 수."""
        with self._lock:
            return len(self._subscriptions)
