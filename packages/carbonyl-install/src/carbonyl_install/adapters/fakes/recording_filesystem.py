"""Recording filesystem for testing.

Wraps LocalFilesystem so tests run against a sandboxed directory tree,
recording every mutation and optionally failing a chosen operation to
simulate insufficient privilege.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from carbonyl_install.adapters.local_filesystem import LocalFilesystem


@dataclass(frozen=True)
class FilesystemCall:
    """Record of a single filesystem mutation.

    Attributes:
        operation: Method name (e.g. 'copy_tree').
        paths: Path arguments in call order.
    """

    operation: str
    paths: tuple[Path, ...]


class RecordingFilesystem:
    """FilesystemPort implementation for tests.

    Example:
        >>> fs = RecordingFilesystem()
        >>> fs.fail_on("rename", PermissionError("Operation not permitted"))
        >>> fs.calls
        []
    """

    def __init__(self) -> None:
        self._delegate = LocalFilesystem()
        self._calls: list[FilesystemCall] = []
        self._failures: dict[str, OSError] = {}

    @property
    def calls(self) -> list[FilesystemCall]:
        return list(self._calls)

    def operations(self) -> list[str]:
        return [call.operation for call in self._calls]

    def fail_on(self, operation: str, error: OSError) -> None:
        """Raise error from every subsequent call to operation."""
        self._failures[operation] = error

    def clear_failures(self) -> None:
        self._failures.clear()

    def _record(self, operation: str, *paths: Path) -> None:
        self._calls.append(FilesystemCall(operation, paths))
        if operation in self._failures:
            raise self._failures[operation]

    def exists(self, path: Path) -> bool:
        return self._delegate.exists(path)

    def remove_tree(self, path: Path) -> None:
        self._record("remove_tree", path)
        self._delegate.remove_tree(path)

    def make_dirs(self, path: Path) -> None:
        self._record("make_dirs", path)
        self._delegate.make_dirs(path)

    def copy_tree(self, src: Path, dst: Path) -> None:
        self._record("copy_tree", src, dst)
        self._delegate.copy_tree(src, dst)

    def copy_file(self, src: Path, dst: Path) -> None:
        self._record("copy_file", src, dst)
        self._delegate.copy_file(src, dst)

    def symlink(self, target: Path, link: Path) -> None:
        self._record("symlink", target, link)
        self._delegate.symlink(target, link)

    def rename(self, src: Path, dst: Path) -> None:
        self._record("rename", src, dst)
        self._delegate.rename(src, dst)
