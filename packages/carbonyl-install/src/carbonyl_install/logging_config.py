"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(message)s"
VERBOSE_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging once, at process start.

    INFO progress lines by default, DEBUG (including external commands) with
    verbose, warnings and errors only with quiet. Third-party HTTP loggers
    stay at WARNING unless verbose.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root = logging.getLogger()
    if getattr(root, "_carbonyl_install_configured", False):
        root.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    root._carbonyl_install_configured = True  # type: ignore[attr-defined]

    if not verbose:
        for name in ("httpx", "httpcore"):
            logging.getLogger(name).setLevel(logging.WARNING)
