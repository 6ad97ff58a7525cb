r"""Padbot 매퍼 진입점.

실행: padbot_mapper -c config.yaml
      padbot_mapper --base-url http://192.168.1.20:5000
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
import signal
import sys
import threading

from padbot_mapper.domain.events.robot_events import (
    DomainEvent,
    HealthChangedEvent,
    NavigationDispatchedEvent,
)
from padbot_mapper.domain.exceptions import ConfigurationError
from padbot_mapper.infra.config.yaml_config_loader import YamlConfigLoader
from padbot_mapper.presentation.mapper_driver import build_driver
from padbot_mapper.usecase.ports.config_port import AppConfig

logger = logging.getLogger('padbot_mapper')


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='padbot_mapper',
        description='Padbot robot device mapper',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the config.yaml file',
    )
    parser.add_argument(
        '--base-url', type=str, default=None,
        help='Override the gateway base URL',
    )
    parser.add_argument(
        '--log-level', type=str.upper, default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the log level',
    )
    return parser.parse_args(argv)


def _load_config(args: argparse.Namespace) -> AppConfig:
    """설정 파일을 읽고 CLI 인자로 덮어쓴다."""
    config = YamlConfigLoader(args.config_file).load()
    if args.base_url is not None:
        config = replace(
            config, gateway=replace(config.gateway, base_url=args.base_url)
        )
    if args.log_level is not None:
        config = replace(config, log_level=args.log_level)
    return config


def main(argv: list[str] | None = None) -> int:
    """매퍼를 시작하고 종료 신호까지 프로퍼티를 주기적으로 보고한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        프로세스 종료 코드.
    """
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    try:
        config = _load_config(args)
    except ConfigurationError as e:
        logger.error('Failed to load config: %s', e)
        return 2

    logging.getLogger().setLevel(config.log_level)

    driver = build_driver()
    subscriptions = [
        driver.subscribe(
            DomainEvent, lambda e: logger.debug('event: %s', e),
        ),
        driver.subscribe(
            HealthChangedEvent,
            lambda e: logger.info(
                '[%s] health: %s', config.device_name,
                'OK' if e.healthy else 'DISCONNECTED',
            ),
        ),
        driver.subscribe(
            NavigationDispatchedEvent,
            lambda e: logger.info(
                '[%s] navigation %s: %s', config.device_name,
                e.target_point, e.outcome,
            ),
        ),
    ]

    try:
        driver.initialize(config.gateway)
    except ConfigurationError as e:
        logger.error('Failed to initialize driver: %s', e)
        return 2

    stop_event = threading.Event()

    def _on_signal(signum, frame) -> None:
        logger.info('Signal %d received, shutting down', signum)
        stop_event.set()

    signal.signal(signal.SIGINT, _on_signal)
    signal.signal(signal.SIGTERM, _on_signal)

    logger.info('Padbot Mapper Started: %s', config.device_name)
    while not stop_event.wait(config.report_interval_sec):
        logger.info(
            '[%s] healthy=%s %s', config.device_name,
            driver.get_health(), driver.read_all_properties(),
        )

    stopped = driver.shutdown()
    for unsubscribe in subscriptions:
        unsubscribe()
    return 0 if stopped else 1


if __name__ == '__main__':
    sys.exit(main())
