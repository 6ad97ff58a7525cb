"""Padbot 매퍼 프레젠테이션 레이어 (호스트 플랫폼 진입점)."""
