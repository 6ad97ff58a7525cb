"""Padbot 매퍼 인프라 레이어."""
