"""고정 주기 백그라운드 폴러.

폴러마다 독립된 정지 Event를 가지며,
반복 사이의 대기를 Event.wait()로 수행하여
정지 신호가 대기 중에도 즉시 관찰되도록 한다.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import threading

logger = logging.getLogger(__name__)


class PeriodicPoller:
    """step 함수를 고정 주기로 반복 호출하는 데몬 스레드.

    Args:
        name: 폴러 이름 (스레드 이름, 로그용).
        step: 매 주기 호출할 함수. 예외는 로깅 후 다음 주기로 넘어간다.
        interval_sec: 호출 간 대기 시간 (초).
    """

    def __init__(
        self,
        name: str,
        step: Callable[[], None],
        interval_sec: float,
    ) -> None:
        self.name = name
        self._step = step
        self._interval_sec = interval_sec
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """폴러 스레드가 살아 있는지 여부."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """폴러 스레드를 시작한다. 이미 실행 중이면 무시한다."""
        if self.is_running:
            return
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name=f'{self.name}-poller',
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """정지 신호를 보낸다. 블로킹하지 않는다."""
        self._stop_event.set()

    def join(self, timeout: float | None = None) -> bool:
        """폴러 스레드 종료를 기다린다.

        Args:
            timeout: 최대 대기 시간 (초).

        Returns:
            스레드가 종료되었으면 True.
        """
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run(self, stop_event: threading.Event) -> None:
        logger.debug('%s poller started', self.name)
        while not stop_event.is_set():
            try:
                self._step()
            except Exception:
                logger.exception('Error in %s poller', self.name)
            stop_event.wait(self._interval_sec)
        logger.debug('%s poller stopped', self.name)
