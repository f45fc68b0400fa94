import logging
from typing import Any

import structlog

# structlog's stdlib factory names loggers after the calling module, so
# every adiparse logger sits under this one.
PACKAGE_LOGGER = "adiparse"

_level_before_debug: int | None = None


def configure_logging(level: int | str = logging.INFO, *, debug: bool = False) -> None:
    """Configure structlog/standard logging bridge.

    JSON lines by default; ``debug=True`` switches to the console renderer
    and lowers the level so per-request API events are visible.
    """

    renderer: Any = (
        structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=logging.DEBUG if debug else level, format="%(message)s")


def set_log_level(level: int | str) -> None:
    """Set the level of the adiparse loggers without touching the root logger."""

    logging.getLogger(PACKAGE_LOGGER).setLevel(
        level.upper() if isinstance(level, str) else level
    )


def set_debug_logging(enabled: bool) -> None:
    """Lower the adiparse loggers to DEBUG, or restore the level they had."""

    global _level_before_debug
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if enabled:
        if _level_before_debug is None:
            _level_before_debug = package_logger.level
        package_logger.setLevel(logging.DEBUG)
    elif _level_before_debug is not None:
        package_logger.setLevel(_level_before_debug)
        _level_before_debug = None


def bind_context(**kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Bind contextual fields for downstream logs (identity, locator, ...)."""

    logger = structlog.get_logger()
    return logger.bind(**kwargs)
