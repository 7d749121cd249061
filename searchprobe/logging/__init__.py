"""Logging setup shared by the CLI and the behave environment."""

from __future__ import annotations

import logging
import sys

from searchprobe.logging.filters import StreamRoutingFilter
from searchprobe.logging.formatters import StreamFormatter

NOISY_LOGGERS = ("selenium", "urllib3", "parse")


def configure_logging(verbose: bool = False) -> None:
    """Install stdout/stderr handlers on the root logger.

    Parameters
    ----------
    verbose : bool
        Log at DEBUG level instead of INFO
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(StreamFormatter("%(message)s"))
    stdout_handler.addFilter(StreamRoutingFilter("stdout"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(StreamFormatter("%(message)s"))
    stderr_handler.addFilter(StreamRoutingFilter("stderr"))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["StreamFormatter", "StreamRoutingFilter", "configure_logging"]
