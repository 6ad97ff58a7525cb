"""설정 포트 인터페이스.

애플리케이션 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GatewayConfig:
    """로봇 게이트웨이 접속 설정.

    Args:
        base_url: 게이트웨이 주소 (e.g. 'http://192.168.1.20:5000').
            빈 문자열이면 폴링과 명령 전송을 하지 않는다.
        poll_interval_sec: health/status 폴링 주기 (초).
        request_timeout_sec: HTTP 요청 타임아웃 (초).
    """

    base_url: str = ''
    poll_interval_sec: float = 1.0
    request_timeout_sec: float = 2.0

    def __post_init__(self) -> None:
        # {base_url}/health 에 '//'가 생기지 않도록 정규화
        object.__setattr__(self, 'base_url', self.base_url.rstrip('/'))

    @property
    def is_configured(self) -> bool:
        """base_url이 설정되어 있는지 여부."""
        return bool(self.base_url)


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정.

    Args:
        gateway: 게이트웨이 접속 설정.
        device_name: 로그에 표시할 디바이스 이름.
        log_level: 로깅 레벨 이름.
        report_interval_sec: CLI 프로퍼티 보고 주기 (초).
    """

    gateway: GatewayConfig = field(default_factory=GatewayConfig)
    device_name: str = 'padbot'
    log_level: str = 'INFO'
    report_interval_sec: float = 5.0


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드한다.

        Returns:
            로드된 AppConfig.

        Raises:
            ConfigurationError: 설정 형식이 올바르지 않을 때.
        """
