"""
Logging Configuration for the PROJ Binding.

Every module of the binding obtains its logger through `get_logger` so that
all records share one handler and one format. Native calls themselves are
never logged; the binding logs library discovery, handle lifecycle and the
documented cases where a native failure is reported without raising.
"""

import logging
import sys
from typing import Optional, Union


PACKAGE_LOGGERS = ("common", "libproj", "geospatial")

_LEVEL_OVERRIDE: Optional[int] = None


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level {level!r}")
    return resolved


def get_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """Get a logger configured for the binding.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int or str, optional
        Logging level. Defaults to the level set with `set_log_level`,
        or WARNING.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(_coerce_level(level))
    elif _LEVEL_OVERRIDE is not None:
        logger.setLevel(_LEVEL_OVERRIDE)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)
    return logger


def set_log_level(level: Union[int, str]) -> int:
    """Apply a level to every logger already created under the package roots.

    Loggers created afterwards pick the same level up in `get_logger`.

    Parameters
    ----------
    level : int or str
        Logging level, e.g. ``logging.DEBUG`` or ``"debug"``.

    Returns
    -------
    int
        The numeric level applied.
    """
    global _LEVEL_OVERRIDE
    numeric = _coerce_level(level)
    _LEVEL_OVERRIDE = numeric

    for name in list(logging.Logger.manager.loggerDict):
        if name.split(".")[0] in PACKAGE_LOGGERS:
            logging.getLogger(name).setLevel(numeric)
    return numeric


def apply_default_level(level: Union[int, str]) -> Optional[int]:
    """Apply `level` only if no level was applied to the package yet.

    Contexts call this with their configured level, so the first context
    decides the process-wide default and later contexts leave it alone.
    An explicit `set_log_level` always takes effect.

    Returns
    -------
    int or None
        The numeric level applied, or None when a level was already set.
    """
    if _LEVEL_OVERRIDE is not None:
        return None
    return set_log_level(level)
