"""Central logger setup for the ordered tree modules and the demo."""

import logging
from typing import Optional

from tree_errors import ConfigError
from tree_settings import TreeSettings, VALID_LOG_LEVELS


def configure_logger(
    name: Optional[str] = None,
    level: str = "WARNING",
    fmt: str = TreeSettings.log_format,
    output: str = "console",
) -> logging.Logger:
    """
    Configure and return a logger.

    Args:
        name: Logger name. None configures the root logger.
        level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
        fmt: Format string for the handler.
        output: "console" attaches a StreamHandler; "none" attaches nothing
            and only sets the level.

    Returns:
        The configured logger. Calling this again for the same name updates
        the level without stacking another handler.
    """
    if level.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"invalid log level: {level!r}", config_key="level", value=level)
    if output not in {"console", "none"}:
        raise ConfigError(f"invalid log output: {output!r}", config_key="output", value=output)

    logger = logging.getLogger(name)
    numeric_level = getattr(logging, level.upper())
    logger.setLevel(numeric_level)

    if output == "console":
        existing = [h for h in logger.handlers if getattr(h, "_ordered_tree_handler", False)]
        if existing:
            for handler in existing:
                handler.setLevel(numeric_level)
        else:
            handler = logging.StreamHandler()
            handler.setLevel(numeric_level)
            handler.setFormatter(logging.Formatter(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S"))
            handler._ordered_tree_handler = True  # type: ignore[attr-defined]
            logger.addHandler(handler)

    return logger


def configure_from_settings(settings: TreeSettings, name: Optional[str] = None) -> logging.Logger:
    return configure_logger(name=name, level=settings.log_level, fmt=settings.log_format)
