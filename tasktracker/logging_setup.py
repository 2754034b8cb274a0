from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "tasktracker"


def setup_logging(*, verbose: bool = False) -> None:
    """
    Send package logs to stderr: WARNING and up normally, everything with -v.

    Safe to call more than once per process; the previous handler is replaced.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    logger.propagate = False
