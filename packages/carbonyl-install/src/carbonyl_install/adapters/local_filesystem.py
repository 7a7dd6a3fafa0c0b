"""Direct implementation of the FilesystemPort.

Performs mutations with the privileges of the current process. Used when the
installer already runs as a user allowed to write the target paths, and as
the sandboxed filesystem in tests.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class LocalFilesystem:
    """Adapter mutating the filesystem through os and shutil."""

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def remove_tree(self, path: Path) -> None:
        if path.is_symlink() or path.is_file():
            path.unlink()
        elif path.is_dir():
            shutil.rmtree(path)

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def copy_tree(self, src: Path, dst: Path) -> None:
        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)

    def copy_file(self, src: Path, dst: Path) -> None:
        # Never write through an existing link at the destination.
        if dst.is_symlink():
            dst.unlink()
        shutil.copy2(src, dst)

    def symlink(self, target: Path, link: Path) -> None:
        """Create link -> target, atomically replacing any existing entry."""
        if link.is_dir() and not link.is_symlink():
            raise IsADirectoryError(f"refusing to replace directory {link} with a link")

        tmp_link = link.with_name(f".{link.name}.tmp-{os.getpid()}")
        if os.path.lexists(tmp_link):
            tmp_link.unlink()
        os.symlink(target, tmp_link)
        try:
            os.replace(tmp_link, link)
        except OSError:
            tmp_link.unlink()
            raise

    def rename(self, src: Path, dst: Path) -> None:
        os.rename(src, dst)
