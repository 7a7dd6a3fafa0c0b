"""Subprocess helper with consistent logging for external commands."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class CommandFailedError(OSError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        argv: The command that was run.
        returncode: Its exit status.
        stderr: Captured standard error, stripped.
    """

    def __init__(self, argv: list[str], returncode: int, stderr: str) -> None:
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"{format_argv(argv)}: {detail}")
        self.argv = argv
        self.returncode = returncode
        self.stderr = stderr.strip()


@dataclass(frozen=True)
class CommandResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def format_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_command(argv: Sequence[str]) -> CommandResult:
    """Run a command, blocking until it exits.

    - Always logs the command at debug level.
    - Captures stdout/stderr.
    - A missing executable surfaces as FileNotFoundError.

    Raises:
        CommandFailedError: If the command exits non-zero.
    """
    argv_list = list(argv)
    logger.debug("CMD %s", format_argv(argv_list))

    p = subprocess.run(
        argv_list,
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )

    if p.stdout:
        logger.debug("STDOUT %s", p.stdout.strip())
    if p.stderr:
        logger.debug("STDERR %s", p.stderr.strip())

    if p.returncode != 0:
        raise CommandFailedError(argv_list, p.returncode, p.stderr)

    return CommandResult(
        argv=argv_list, returncode=p.returncode, stdout=p.stdout, stderr=p.stderr
    )
