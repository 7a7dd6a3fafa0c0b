"""Installation composer use case for building the installation directory."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from carbonyl_install.adapters.ports import FilesystemPort, LoggingPort
from carbonyl_install.domain.artifacts import DependencyArtifact, LocalArtifact
from carbonyl_install.domain.exceptions import InstallationFailureError


class InstallationComposer:
    """Builds the installation directory from upstream content plus overrides.

    The new tree is composed in a staging directory next to the target:
    1. Copy every entry of the content root, preserving attributes
    2. Overwrite the main library with the local artifact
    3. Add the dependency library under its exact versioned name

    The staging tree then replaces the previous installation by renaming the
    old tree aside, renaming the stage into place and removing the old tree.
    Until that swap the previous installation is untouched, so a failure while
    composing never leaves the target missing.
    """

    def __init__(
        self,
        filesystem: FilesystemPort,
        logger: LoggingPort,
        main_library_name: str = "libcarbonyl.so",
    ) -> None:
        """Initialize the composer.

        Args:
            filesystem: Port performing the (possibly privileged) mutations.
            logger: Port receiving progress messages.
            main_library_name: Filename of the library the local build replaces.
        """
        self._fs = filesystem
        self._logger = logger
        self._main_library_name = main_library_name

    @staticmethod
    def staging_dir(install_dir: Path) -> Path:
        return install_dir.with_name(f".{install_dir.name}.staging")

    @staticmethod
    def backup_dir(install_dir: Path) -> Path:
        return install_dir.with_name(f".{install_dir.name}.old")

    def compose(
        self,
        content_root: Path,
        local_artifact: LocalArtifact,
        dependency: DependencyArtifact,
        install_dir: Path,
    ) -> Path:
        """Compose the installation and swap it into install_dir.

        Args:
            content_root: Directory holding the extracted upstream files.
            local_artifact: Library replacing the upstream main library.
            dependency: Dependency library bundled into the installation.
            install_dir: Final installation directory.

        Returns:
            install_dir.

        Raises:
            InstallationFailureError: If any filesystem operation fails.
        """
        self._logger.info(f"Installing to {install_dir}...")
        staging = self.staging_dir(install_dir)

        try:
            self._run("remove", staging, self._fs.remove_tree, staging)
            self._run("create", staging, self._fs.make_dirs, staging)
            self._run("copy release files into", staging, self._fs.copy_tree, content_root, staging)
            self._run(
                "copy local library to",
                staging / self._main_library_name,
                self._fs.copy_file,
                local_artifact.path,
                staging / self._main_library_name,
            )
            self._run(
                "copy dependency to",
                staging / dependency.versioned_name,
                self._fs.copy_file,
                dependency.path,
                staging / dependency.versioned_name,
            )
            self._swap(staging, install_dir)
        except InstallationFailureError:
            self._discard(staging)
            raise

        self._remove_backup(install_dir)
        return install_dir

    def _swap(self, staging: Path, install_dir: Path) -> None:
        """Replace install_dir with staging, restoring it if the move fails."""
        backup = self.backup_dir(install_dir)
        self._run("remove", backup, self._fs.remove_tree, backup)

        had_previous = self._fs.exists(install_dir)
        if had_previous:
            self._run("move aside", install_dir, self._fs.rename, install_dir, backup)

        try:
            self._run("move staging into", install_dir, self._fs.rename, staging, install_dir)
        except InstallationFailureError:
            if had_previous:
                self._restore(backup, install_dir)
            raise

    def _remove_backup(self, install_dir: Path) -> None:
        backup = self.backup_dir(install_dir)
        try:
            self._fs.remove_tree(backup)
        except OSError as e:
            self._logger.warning(f"Could not remove previous installation {backup}: {e}")

    def _run(
        self,
        operation: str,
        path: Path,
        action: Callable[..., None],
        *args: Path,
    ) -> None:
        try:
            action(*args)
        except OSError as e:
            raise InstallationFailureError(operation, path, e) from e

    def _discard(self, staging: Path) -> None:
        try:
            self._fs.remove_tree(staging)
        except OSError as e:
            self._logger.warning(f"Could not remove staging directory {staging}: {e}")

    def _restore(self, backup: Path, install_dir: Path) -> None:
        try:
            self._fs.rename(backup, install_dir)
        except OSError as e:
            self._logger.warning(
                f"Could not restore previous installation from {backup}: {e}"
            )
