"""PeriodicPoller 단위 테스트."""

import threading
import time

from padbot_mapper.usecase.periodic_poller import PeriodicPoller


class TestPeriodicPoller:
    def test_calls_step_repeatedly(self, wait_until):
        calls = []
        poller = PeriodicPoller("test", lambda: calls.append(1), 0.01)

        poller.start()
        try:
            assert wait_until(lambda: len(calls) >= 3)
        finally:
            poller.stop()
            assert poller.join(1.0)

    def test_step_exception_does_not_stop_loop(self, wait_until):
        calls = []

        def step():
            calls.append(1)
            raise RuntimeError("boom")

        poller = PeriodicPoller("failing", step, 0.01)
        poller.start()
        try:
            assert wait_until(lambda: len(calls) >= 3)
            assert poller.is_running
        finally:
            poller.stop()
            poller.join(1.0)

    def test_stop_interrupts_sleep(self):
        poller = PeriodicPoller("slow", lambda: None, 60.0)
        poller.start()

        started = time.monotonic()
        poller.stop()
        assert poller.join(1.0)
        assert time.monotonic() - started < 1.0
        assert not poller.is_running

    def test_stop_observed_after_slow_step(self):
        entered = threading.Event()
        release = threading.Event()
        calls = []

        def step():
            calls.append(1)
            entered.set()
            release.wait(1.0)

        poller = PeriodicPoller("busy", step, 0.01)
        poller.start()
        assert entered.wait(1.0)

        poller.stop()
        release.set()

        assert poller.join(1.0)
        assert len(calls) == 1

    def test_stop_without_start(self):
        poller = PeriodicPoller("idle", lambda: None, 1.0)
        poller.stop()
        assert poller.join(0.1)

    def test_start_twice_keeps_single_thread(self, wait_until):
        poller = PeriodicPoller("twice", lambda: None, 0.01)
        poller.start()
        first = poller._thread
        poller.start()
        try:
            assert poller._thread is first
        finally:
            poller.stop()
            poller.join(1.0)

    def test_restart_after_stop(self, wait_until):
        calls = []
        poller = PeriodicPoller("restart", lambda: calls.append(1), 0.01)
        poller.start()
        poller.stop()
        assert poller.join(1.0)

        count = len(calls)
        poller.start()
        try:
            assert wait_until(lambda: len(calls) > count)
        finally:
            poller.stop()
            poller.join(1.0)
