"""Padbot 매퍼 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class ConfigurationError(DomainError):
    """설정 파싱/검증 실패 시. 초기화 시점에만 발생한다."""


class DriverStateError(DomainError):
    """드라이버 생명주기 순서에 맞지 않는 호출 시."""


class GatewayError(DomainError):
    """게이트웨이 HTTP 호출 실패 시."""


class StatusParseError(GatewayError):
    """/status 응답 본문 해석 실패 시."""


class PropertyValueError(DomainError):
    """프로퍼티 쓰기 값이 올바르지 않을 때."""
