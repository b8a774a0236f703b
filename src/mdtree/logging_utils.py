"""Logging setup shared by the CLI entry points"""

import logging
import sys


def configure_logging(log_level: int | str) -> logging.Logger:
    """Install a single stderr handler on the root logger and return it.

    log_level may be a numeric level or a name such as "INFO"; unknown names
    fall back to WARNING.
    """
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, str(log_level).upper(), logging.WARNING)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(handler)
    return root
