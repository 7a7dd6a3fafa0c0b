"""Privileged implementation of the FilesystemPort using sudo.

Each mutation shells out to the matching coreutils command under sudo, as
the original shell installer did. Reads are unprivileged.
"""

from __future__ import annotations

import os
from pathlib import Path

from carbonyl_install.adapters.command_runner import run_command


class SudoFilesystem:
    """Adapter mutating the filesystem through `sudo <coreutil>`.

    Failures surface as CommandFailedError (an OSError), for example when
    sudo is denied.
    """

    def __init__(self, sudo: str = "sudo") -> None:
        self._sudo = sudo

    def _run(self, *argv: str) -> None:
        run_command([self._sudo, *argv])

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def remove_tree(self, path: Path) -> None:
        self._run("rm", "-rf", "--", str(path))

    def make_dirs(self, path: Path) -> None:
        self._run("mkdir", "-p", "--", str(path))

    def copy_tree(self, src: Path, dst: Path) -> None:
        # "src/." copies the contents, dotfiles included.
        self._run("cp", "-a", "--", f"{src}/.", f"{dst}/")

    def copy_file(self, src: Path, dst: Path) -> None:
        self._run("cp", "-f", "--", str(src), str(dst))

    def symlink(self, target: Path, link: Path) -> None:
        # ln -sfn would create the link inside an existing directory.
        if link.is_dir() and not link.is_symlink():
            raise IsADirectoryError(f"refusing to replace directory {link} with a link")
        self._run("ln", "-sfn", "--", str(target), str(link))

    def rename(self, src: Path, dst: Path) -> None:
        self._run("mv", "--", str(src), str(dst))
