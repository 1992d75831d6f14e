from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


# Tests redirect log files away from the project log directory
TEST_LOG_DIR = os.environ.get('TEST_LOG_DIR')
LOG_DIR = TEST_LOG_DIR or LOG_DIR

MAX_CONTENT_LENGTH = 300
DEPTH_LINE = '│ '

call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CALL_TARGET = 'call_target'


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
    )
)


def _log_file_path() -> str:
    prefix = 'test_' if TEST_LOG_DIR else ''
    return f'{LOG_DIR}/{prefix}catalog_{datetime.now():%Y-%m-%d}.log'


def build_logger() -> 'LoguruLogger':
    loguru_logger.remove()
    bound = loguru_logger.bind(
        **{
            ExtraField.SERVICE_CONTEXT: get_service_context(),
            ExtraField.CALL_TARGET: '',
        }
    )

    # stdout belongs to the cashier-facing messages
    bound.add(sys.stderr, format=io_log_format, level='DEBUG' if settings.DEBUG else 'INFO')

    if settings.DEBUG or TEST_LOG_DIR:
        bound.add(
            _log_file_path(),
            format=io_log_format,
            rotation='1 day',
            retention='7 days',
            level='DEBUG',
        )
    return bound


custom_logger = build_logger()
