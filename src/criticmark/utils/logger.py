"""Package-namespaced loggers.

Every module logs through ``get_logger(__name__)`` so records land under the
``criticmark`` logger. The package attaches a NullHandler there and nothing
else; applications decide where records go.

Example:
    >>> import logging
    >>> logging.getLogger("criticmark").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "criticmark"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``criticmark`` namespace.

    Names outside the package (``"mymodule"``, ``"criticmark_other"``) are
    prefixed; ``"criticmark"`` and its submodules are used as-is.

    Example:
        >>> get_logger("plugin").name
        'criticmark.plugin'
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
