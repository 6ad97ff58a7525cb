"""디바이스 매퍼 호환 드라이버.

호스트 플랫폼의 매퍼 드라이버 계약(JSON 설정 블롭 기반)을
PadbotDriver 호출로 변환한다. 의존성 조립도 이 모듈에서 한다.
"""

from __future__ import annotations

import logging
from typing import Any

from padbot_mapper.domain.exceptions import PropertyValueError
from padbot_mapper.infra.config.protocol_config_parser import (
    RawConfig,
    parse_gateway_config,
    parse_property_name,
)
from padbot_mapper.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from padbot_mapper.infra.http.padbot_http_gateway import PadbotHttpGateway
from padbot_mapper.infra.repository.in_memory_snapshot_repository import (
    InMemorySnapshotRepository,
)
from padbot_mapper.usecase.padbot_driver import GatewayFactory, PadbotDriver

logger = logging.getLogger(__name__)


def build_driver(
    gateway_factory: GatewayFactory | None = None,
) -> PadbotDriver:
    """인메모리 저장소/이벤트 버스와 HTTP 게이트웨이로 드라이버를 조립한다.

    Args:
        gateway_factory: 게이트웨이 생성 함수. None이면 PadbotHttpGateway.
    """
    return PadbotDriver(
        gateway_factory=gateway_factory or PadbotHttpGateway,
        snapshot_repo=InMemorySnapshotRepository(),
        event_publisher=InMemoryEventPublisher(),
    )


class PadbotMapperDriver:
    """호스트 플랫폼용 Padbot 프로토콜 드라이버.

    read/write 호출마다 전달되는 protocolCommon/protocol 블롭은
    형식 검증에만 쓰이며, base_url은 init_device 시점 값을 유지한다.

    Args:
        driver: 감쌀 PadbotDriver. None이면 build_driver()로 만든다.
        **gateway_options: GatewayConfig의 base_url 외 필드.
    """

    def __init__(
        self,
        driver: PadbotDriver | None = None,
        **gateway_options: Any,
    ) -> None:
        self.driver = driver or build_driver()
        self._gateway_options = gateway_options

    def init_device(
        self, protocol_common: RawConfig, protocol: RawConfig = None
    ) -> None:
        """protocolCommon을 해석하고 폴러를 시작한다.

        Raises:
            ConfigurationError: JSON 형식이 올바르지 않을 때.
        """
        config = parse_gateway_config(
            protocol_common, protocol, **self._gateway_options
        )
        self.driver.initialize(config)

    def read_device_data(
        self,
        protocol_common: RawConfig,
        visitor: RawConfig,
        protocol: RawConfig = None,
    ) -> str:
        """visitor가 가리키는 프로퍼티 값을 문자열로 반환한다.

        모르는 프로퍼티는 'UNKNOWN'을 반환한다.

        Raises:
            ConfigurationError: JSON 형식이 올바르지 않을 때.
        """
        parse_gateway_config(protocol_common, protocol)
        name = parse_property_name(visitor)
        return self.driver.read_property(name).value

    def write_device_data(
        self,
        data: Any,
        protocol_common: RawConfig,
        visitor: RawConfig,
        protocol: RawConfig = None,
    ) -> None:
        """visitor가 가리키는 프로퍼티에 data를 쓴다.

        Raises:
            ConfigurationError: JSON 형식이 올바르지 않을 때.
            PropertyValueError: data 형식이 올바르지 않을 때.
        """
        parse_gateway_config(protocol_common, protocol)
        name = parse_property_name(visitor)
        try:
            self.driver.write_property(name, data)
        except PropertyValueError:
            logger.error('Invalid data for %s: %r', name, data)
            raise

    def stop_device(self) -> None:
        """폴러를 정지한다."""
        self.driver.shutdown()

    def get_device_status(
        self,
        protocol_common: RawConfig = None,
        visitor: RawConfig = None,
        protocol: RawConfig = None,
    ) -> bool:
        """True면 OK, False면 DISCONNECTED."""
        return self.driver.get_health()
