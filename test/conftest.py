"""공통 테스트 fixture."""

import json
import time

import httpx
import pytest

from padbot_mapper.domain.entities.robot_status import RobotStatus
from padbot_mapper.usecase.ports.config_port import AppConfig, GatewayConfig

BASE_URL = "http://padbot.local:5000"


@pytest.fixture
def sample_status():
    return RobotStatus(
        battery_percentage=87,
        battery_status="DISCHARGING",
        action_status="IDLE",
        navigation_status="ARRIVED",
        robot_location="Room42",
    )


@pytest.fixture
def sample_status_body():
    return {
        "batteryPercentage": 87,
        "batteryStatus": "DISCHARGING",
        "actionStatus": "IDLE",
        "navigationStatus": "ARRIVED",
        "robotLocation": "Room42",
    }


@pytest.fixture
def gateway_config():
    return GatewayConfig(
        base_url=BASE_URL,
        poll_interval_sec=0.05,
        request_timeout_sec=0.5,
    )


@pytest.fixture
def sample_config(gateway_config):
    return AppConfig(gateway=gateway_config, device_name="padbot-test")


class FakeRobotServer:
    """httpx.MockTransport 핸들러로 동작하는 가짜 게이트웨이.

    health_code / status_code / status_body / navigation_code 를
    테스트 중에 바꿔 응답을 제어한다. 받은 요청은 requests에 쌓인다.
    """

    def __init__(self, status_body):
        self.health_code = 200
        self.status_code = 200
        self.status_body = json.dumps(status_body)
        self.navigation_code = 200
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path == "/health":
            return httpx.Response(self.health_code, text="ok")
        if path == "/status":
            return httpx.Response(self.status_code, text=self.status_body)
        if path == "/navigation":
            return httpx.Response(self.navigation_code, json={"ok": True})
        return httpx.Response(404)

    def requests_to(self, path):
        return [r for r in list(self.requests) if r.url.path == path]


@pytest.fixture
def fake_server(sample_status_body):
    return FakeRobotServer(sample_status_body)


@pytest.fixture
def mock_http_client(fake_server):
    client = httpx.Client(transport=httpx.MockTransport(fake_server))
    yield client
    client.close()


@pytest.fixture
def wait_until():
    """조건이 참이 될 때까지 폴링한다."""

    def _wait(predicate, timeout=2.0, interval=0.01):
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(interval)
        return predicate()

    return _wait
