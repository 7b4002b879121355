"""Loggers for Migas.

Every module logs under the ``migas`` namespace, so one call configures
the whole package. Conversion only logs at DEBUG level: handler fallbacks
for unknown tags (``migas.state``), extracted task checkboxes
(``migas.handlers.list_item``) and per-call summaries (``migas``).

Example:
    >>> import logging
    >>> logging.getLogger("migas").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

PACKAGE = "migas"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, placed under the package namespace.

    Module ``__name__`` values already start with ``migas.`` and pass
    through; bare names such as ``"handlers"`` become ``migas.handlers``.
    """
    if name != PACKAGE and not name.startswith(f"{PACKAGE}."):
        name = f"{PACKAGE}.{name}"
    return logging.getLogger(name)
