"""structlog configuration for taiwan_id.

Two output modes:
- Human (default): colored console output to stderr
- JSON (``log_json``): Structured JSON lines to stderr

Library code never calls this on import; the embedding application does.
"""

from __future__ import annotations

import logging
import sys

import structlog

from taiwan_id.config.settings import TaiwanIdSettings


def configure_logging(settings: TaiwanIdSettings | None = None) -> None:
    """Configure structlog processors and output routing from *settings*.

    ``settings.verbose`` enables DEBUG output for ``taiwan_id`` loggers
    (WARNING+ otherwise); ``settings.log_json`` switches to JSON lines.
    Without *settings*, ``TAIWAN_ID_*`` env vars and defaults apply.
    """
    settings = settings or TaiwanIdSettings()
    package_level = logging.DEBUG if settings.verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("taiwan_id").setLevel(package_level)
