"""Padbot 로봇 HTTP 게이트웨이용 디바이스 매퍼."""

__version__ = '0.1.0'
