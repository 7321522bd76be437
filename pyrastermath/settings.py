"""
Library-wide settings and constants.
"""
import logging
import os
import sys

from pyrastermath.types.enums import LogLevel

LOG_LEVEL_ENV_VAR = "PYRASTERMATH_LOG_LEVEL"

_STDLIB_LEVELS = {
    LogLevel.NONE: logging.CRITICAL + 10,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class Settings:
    """
    Constants that shape vector behaviour. These are read at call time,
    so overriding a class attribute changes the behaviour of every vector type.
    """

    COLOR_CHANNEL_SCALE: int = 255
    """Factor a component is multiplied by before it is packed into a color channel."""

    COLOR_CHANNEL_MASK: int = 0xFF
    """Mask applied to each scaled channel."""

    COLOR_CHANNEL_BITS: int = 8
    """Width of one packed color channel."""

    CLAMP_LOWER: float = 0.0
    """Lower bound used by clamp()."""

    CLAMP_UPPER: float = 1.0
    """Upper bound used by clamp()."""

    FROM_VEC2_W: int = 0
    """Value of the w component when widening a 2-D vector to 4-D."""

    FROM_VEC3_W: int = 1
    """Value of the w component when widening a 3-D vector to 4-D."""

    DEFAULT_TOLERANCE: float = 1e-6
    """Tolerance used by is_close() when none is given."""

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    """Default logging level for the library."""

    LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_log_level(level=None) -> LogLevel:
    """
    Picks the effective LogLevel: an explicit argument wins, then the
    PYRASTERMATH_LOG_LEVEL environment variable (name or number), then Settings.LOG_LEVEL.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR)
        if level is None:
            return Settings.LOG_LEVEL
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            level = int(name)
        elif name in LogLevel.__members__:
            return LogLevel[name]
        else:
            raise ValueError(f"Unknown log level '{level}'.")
    try:
        return LogLevel(level)
    except ValueError:
        raise ValueError(f"Unknown log level '{level}'.") from None


def configure_logging(level=None, stream=None) -> logging.Logger:
    """
    Attaches a formatted stream handler to the 'pyrastermath' logger.
    Calling it again replaces the handler it installed before.
    """
    lib_logger = logging.getLogger("pyrastermath")
    for handler in list(lib_logger.handlers):
        if getattr(handler, "_pyrastermath_handler", False):
            lib_logger.removeHandler(handler)

    stdlib_level = _STDLIB_LEVELS[resolve_log_level(level)]
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(Settings.LOG_FORMAT))
    handler.setLevel(stdlib_level)
    handler._pyrastermath_handler = True
    lib_logger.addHandler(handler)
    lib_logger.setLevel(stdlib_level)
    return lib_logger
