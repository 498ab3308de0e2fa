"""
Structured logging setup for aclcore.

aclcore modules log through structlog and never configure it on import;
the embedding application owns logging. configure_logging() is a
convenience for applications (and tests) that have no setup of their
own.
"""

import logging
import sys

import structlog

from aclcore.schema import AclSettings, LogFormat, LogLevel


def configure_logging(
    level: LogLevel | str = LogLevel.WARNING,
    fmt: LogFormat | str = LogFormat.CONSOLE,
) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Minimum level to emit (debug, info, warning, error)
        fmt: "console" for human-readable lines, "json" for JSON lines

    A stdout handler is installed only if the root logger has none. The
    root level is always set to `level`, including when the application
    configured its own handlers first.
    """
    level = LogLevel(level)
    fmt = LogFormat(fmt)

    if fmt is LogFormat.JSON:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Handlers are added only when root has none; the level always applies
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(getattr(logging, level.value.upper()))


def configure_logging_from_settings(settings: AclSettings) -> None:
    """Apply the log settings of an AclSettings object."""
    configure_logging(settings.log_level, settings.log_format)
