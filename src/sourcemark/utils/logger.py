"""Loggers for sourcemark modules.

Everything logs at debug level under the ``sourcemark`` logger: skipped
column marks, normalised markers and one summary line per render. Handlers
are left to the host application, so a silent library stays silent until
``logging.getLogger("sourcemark")`` is configured.

Example:
    >>> import logging
    >>> logging.getLogger("sourcemark").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "sourcemark"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the sourcemark hierarchy.

    Module names from ``__name__`` are already inside it; bare names such as
    ``"columns"`` are placed below ``sourcemark.``.

    Example:
        >>> get_logger("columns").name
        'sourcemark.columns'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
