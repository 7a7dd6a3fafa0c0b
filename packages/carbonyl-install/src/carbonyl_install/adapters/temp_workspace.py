"""Temporary-directory implementation of the WorkspacePort."""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class TemporaryWorkspace:
    """Adapter providing self-cleaning workspaces under the temp directory.

    Each open() creates a fresh directory with mkdtemp and removes it in a
    finally block, so the workspace never outlives the run whether it ends
    in success, an exception or KeyboardInterrupt.
    """

    def __init__(self, prefix: str = "carbonyl-install-", base_dir: Path | None = None) -> None:
        self._prefix = prefix
        self._base_dir = base_dir

    @contextmanager
    def open(self) -> Iterator[Path]:
        path = Path(tempfile.mkdtemp(prefix=self._prefix, dir=self._base_dir))
        try:
            yield path
        finally:
            shutil.rmtree(path, ignore_errors=True)
