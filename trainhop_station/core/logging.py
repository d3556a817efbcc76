"""structlog setup for trainhop-check.

Reports go to stdout as JSON, so every log line is sent to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog

# third-party loggers that only matter when they fail
_QUIET_LOGGERS = ("httpx", "httpcore")

_RENDERERS = {
    "console": lambda: structlog.dev.ConsoleRenderer(colors=False),
    "json": structlog.processors.JSONRenderer,
}


def setup_logging(level: str | None = None, *, stream: TextIO | None = None) -> None:
    """Route structlog and stdlib records through one stderr handler.

    *level* overrides ``TRAINHOP_LOG_LEVEL`` (default ``INFO``).
    ``TRAINHOP_LOG_FORMAT`` picks ``console`` (default) or ``json``;
    an unknown format falls back to ``console``.
    """
    log_level = (level or os.environ.get("TRAINHOP_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("TRAINHOP_LOG_FORMAT", "console").lower()
    renderer = _RENDERERS.get(log_format, _RENDERERS["console"])()

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
