"""Padbot 매퍼 도메인 열거형 및 센티널 정의."""

from enum import StrEnum

# 값을 알 수 없음을 나타내는 센티널
UNKNOWN = 'UNKNOWN'
UNKNOWN_BATTERY = -1


class PropertyName(StrEnum):
    """외부에서 접근 가능한 디바이스 프로퍼티."""

    BATTERY_PERCENTAGE = 'batteryPercentage'
    BATTERY_STATUS = 'batteryStatus'
    ACTION_STATUS = 'actionStatus'
    NAVIGATION_STATUS = 'navigationStatus'
    ROBOT_LOCATION = 'robotLocation'


class DispatchOutcome(StrEnum):
    """내비게이션 명령 전송 결과."""

    DELIVERED = 'DELIVERED'
    REJECTED = 'REJECTED'
    FAILED = 'FAILED'
