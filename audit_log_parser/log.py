"""Логирование через structlog поверх стандартного logging.

Пока приложение не вызвало setup_logging(), события парсера уходят в
logger 'audit_log_parser' без обработчиков и никуда не печатаются.
"""

import logging
import sys
from typing import Any, cast

import structlog

ROOT_LOGGER = "audit_log_parser"


def setup_logging(level: str = "INFO", format: str = "console") -> None:
    """
    Args:
        level: DEBUG, INFO, WARNING, ERROR
        format: "json" или "console"
    """
    if format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.ExtraAdder(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
    ))

    root = logging.getLogger(ROOT_LOGGER)
    root.handlers = [handler]
    root.setLevel(level.upper())
    root.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return cast(structlog.stdlib.BoundLogger, structlog.wrap_logger(
        logging.getLogger(name),
        processors=[structlog.stdlib.render_to_log_kwargs],
        wrapper_class=structlog.stdlib.BoundLogger,
    ))
