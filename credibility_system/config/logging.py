"""Loguru configuration for the credibility system.

Log records go to stderr so stdout stays reserved for reports (the CLI's
``--json`` output is piped into other tools). Every record carries a
``component`` field; modules get a logger bound to their own component via
``get_logger``.
"""

import sys
from typing import Optional

from loguru import logger

from credibility_system.config.settings import settings

DEFAULT_COMPONENT = "credibility_system"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]}</cyan> | <level>{message}</level>"
)


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    (Re)configure the loguru sink.

    Args:
        level: Overrides LOG_LEVEL from settings (the CLI's --verbose uses this)
        log_format: Overrides LOG_FORMAT; "console" is honoured only on a TTY

    Behavior:
    - Console format on a TTY: colorized, one line per record
    - Otherwise: JSON-serialized records
    """
    level = (level or settings.log_level).upper()
    use_console = (log_format or settings.log_format).lower() == "console" and sys.stderr.isatty()

    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})

    if use_console:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)
    else:
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            serialize=True,
            diagnose=False,
        )


def get_logger(component: str):
    """
    Logger bound to ``component``.

    Example:
        >>> log = get_logger("extractors.sources")
        >>> log.debug("Sources extracted", count=2)
    """
    return logger.bind(component=component)


configure_logging()

__all__ = ["logger", "get_logger", "configure_logging"]
