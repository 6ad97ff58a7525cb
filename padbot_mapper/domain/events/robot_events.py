"""Padbot 도메인 이벤트 정의.

폴링 결과와 명령 전송 결과를 외부에서 관찰할 수 있도록
이벤트로 발행한다. 호출자의 동기 반환값에는 영향을 주지 않는다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from padbot_mapper.domain.entities.robot_status import RobotStatus
from padbot_mapper.domain.enums import DispatchOutcome


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class HealthChangedEvent(DomainEvent):
    """게이트웨이 health 전이 이벤트.

    Args:
        previous: 이전 healthy 값.
        healthy: 새 healthy 값.
    """

    previous: bool = False
    healthy: bool = False


@dataclass(frozen=True)
class StatusRefreshedEvent(DomainEvent):
    """상태 폴링 1회 완료 이벤트.

    Args:
        status: 발행된 상태 레코드.
        succeeded: 폴링 성공 여부. 실패 시 status는 전부 센티널이다.
    """

    status: RobotStatus = field(default_factory=RobotStatus.unknown)
    succeeded: bool = False


@dataclass(frozen=True)
class NavigationDispatchedEvent(DomainEvent):
    """내비게이션 명령 전송 결과 이벤트.

    Args:
        target_point: 목표 지점 이름.
        outcome: 전송 결과.
        status_code: HTTP 응답 코드 (전송 실패 시 None).
        error: 실패 사유.
    """

    target_point: str = ""
    outcome: DispatchOutcome = DispatchOutcome.FAILED
    status_code: int | None = None
    error: str = ""
