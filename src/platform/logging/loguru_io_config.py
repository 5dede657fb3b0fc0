"""
Loguru sinks for the parking service.

One stdout sink always; an hourly rotated file sink while DEBUG is on. The standard
``logging`` module (cassandra driver, granian, asyncio) is routed into loguru so every
line carries the same service/call-target columns.
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Keyword arguments whose values never reach a sink
SENSITIVE_KEYWORDS = frozenset({'password', 'plaintext', 'salt', 'digest'})

# Driver loggers that flood DEBUG with heartbeats and pool resizing
_NOISY_LOGGER_PREFIXES = ('cassandra', 'asyncio')

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def log_format() -> str:
    columns = (
        '<g>{time:HH:mm:ss.SSS}</>',
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        f'<lk>{{elapsed}} {{extra[{ExtraField.CHAIN_START_TIME}]}}</>',
    )
    return ' | '.join(columns)


def log_file_path() -> str:
    log_dir = os.environ.get('TEST_LOG_DIR') or str(LOG_DIR)
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{log_dir}/{prefix}{datetime.now(timezone.utc):%Y-%m-%d_%H}.log'


class InterceptHandler(logging.Handler):
    def __init__(self, target: 'LoguruLogger') -> None:
        super().__init__()
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        if record.levelno <= logging.DEBUG and record.name.startswith(_NOISY_LOGGER_PREFIXES):
            return

        try:
            level: str | int = loguru_logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        self.target.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logger() -> 'LoguruLogger':
    bound = loguru_logger.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CHAIN_START_TIME: '',
            ExtraField.CALL_TARGET: '',
        }
    )
    level = 'DEBUG' if settings.DEBUG else 'INFO'

    loguru_logger.remove()
    bound.add(sys.stdout, format=log_format(), level=level, enqueue=True)
    if settings.DEBUG:
        bound.add(
            log_file_path(),
            format=log_format(),
            level=level,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
        )

    logging.basicConfig(handlers=[InterceptHandler(bound)], level=0, force=True)
    return bound


custom_logger = configure_logger()
