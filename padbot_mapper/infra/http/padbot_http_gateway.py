"""Padbot HTTP 게이트웨이 클라이언트.

httpx 동기 클라이언트로 로봇의 /health, /status, /navigation
엔드포인트를 호출하는 RobotGateway 구현체.
"""

from __future__ import annotations

import logging

import httpx

from padbot_mapper.domain.entities.robot_status import RobotStatus
from padbot_mapper.domain.exceptions import GatewayError
from padbot_mapper.infra.http.message_serializer import (
    deserialize_status,
    serialize_navigation,
)
from padbot_mapper.usecase.ports.config_port import GatewayConfig
from padbot_mapper.usecase.ports.robot_gateway import RobotGateway

logger = logging.getLogger(__name__)

_HEALTH_PATH = '/health'
_STATUS_PATH = '/status'
_NAVIGATION_PATH = '/navigation'

# InvalidURL은 HTTPError 하위 클래스가 아니다
_REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


class PadbotHttpGateway(RobotGateway):
    """httpx 기반 RobotGateway 구현.

    httpx.Client는 스레드 안전하므로 두 폴러와
    명령 전송 스레드가 하나의 클라이언트를 공유한다.

    Args:
        config: 게이트웨이 접속 설정.
        client: 주입할 httpx.Client (테스트용). None이면 생성한다.
    """

    def __init__(
        self,
        config: GatewayConfig,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._http = client or httpx.Client(
            timeout=config.request_timeout_sec,
        )

    def _url(self, path: str) -> str:
        return f'{self._config.base_url}{path}'

    def check_health(self) -> bool:
        try:
            resp = self._http.get(self._url(_HEALTH_PATH))
        except _REQUEST_ERRORS as e:
            raise GatewayError(f'Health request failed: {e}') from e
        if resp.status_code != 200:
            logger.warning(
                'Health check returned status %d', resp.status_code
            )
            return False
        return True

    def fetch_status(self) -> RobotStatus:
        try:
            resp = self._http.get(self._url(_STATUS_PATH))
        except _REQUEST_ERRORS as e:
            raise GatewayError(f'Status request failed: {e}') from e
        if resp.status_code != 200:
            raise GatewayError(
                f'Status request returned status {resp.status_code}'
            )
        return deserialize_status(resp.content)

    def send_navigation(self, target_point: str) -> int:
        try:
            resp = self._http.post(
                self._url(_NAVIGATION_PATH),
                content=serialize_navigation(target_point),
                headers={'Content-Type': 'application/json'},
            )
        except _REQUEST_ERRORS as e:
            raise GatewayError(f'Navigation request failed: {e}') from e
        return resp.status_code

    def close(self) -> None:
        self._http.close()
