"""Padbot 매퍼 도메인 레이어."""
