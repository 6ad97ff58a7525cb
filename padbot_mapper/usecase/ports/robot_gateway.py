"""로봇 게이트웨이 포트 인터페이스.

Padbot 로봇의 HTTP 제어 서비스와의 통신을 추상화한다.
infra/http/ 레이어에서 구현한다.
"""

from abc import ABC, abstractmethod

from padbot_mapper.domain.entities.robot_status import RobotStatus


class RobotGateway(ABC):
    """로봇 게이트웨이 통신 포트.

    모든 메서드는 호출 스레드를 블로킹하며,
    타임아웃은 구현체가 보장한다.
    """

    @abstractmethod
    def check_health(self) -> bool:
        """GET /health 를 호출한다.

        Returns:
            HTTP 200이면 True, 그 외 응답은 False.

        Raises:
            GatewayError: 전송 실패 시.
        """

    @abstractmethod
    def fetch_status(self) -> RobotStatus:
        """GET /status 를 호출하여 상태 레코드를 반환한다.

        Returns:
            응답 본문을 해석한 RobotStatus.

        Raises:
            GatewayError: 전송 실패 또는 200이 아닌 응답 시.
            StatusParseError: 응답 본문 해석 실패 시.
        """

    @abstractmethod
    def send_navigation(self, target_point: str) -> int:
        """POST /navigation 으로 이동 명령을 전송한다.

        Args:
            target_point: 목표 지점 이름.

        Returns:
            HTTP 응답 코드. 응답 본문은 버린다.

        Raises:
            GatewayError: 전송 실패 시.
        """

    @abstractmethod
    def close(self) -> None:
        """하위 HTTP 연결을 해제한다."""
