"""Symlink manager use case for the dependency chain and PATH entry point."""

from __future__ import annotations

from pathlib import Path

from carbonyl_install.adapters.ports import FilesystemPort
from carbonyl_install.domain.artifacts import DependencyArtifact, SymlinkChain
from carbonyl_install.domain.exceptions import InstallationFailureError


class SymlinkManager:
    """Establishes the dependency symlink chain and the PATH link.

    Inside the installation directory (relative targets, so the tree stays
    valid if moved):
        lib<name>.so.<abi>  -> lib<name>.so.<version>
        lib<name>.so        -> lib<name>.so.<abi>

    Outside it:
        <bin_link>          -> <install_dir>/<binary_name>

    Every link is created with replace-if-exists semantics.
    """

    def __init__(self, filesystem: FilesystemPort) -> None:
        self._fs = filesystem

    def link(
        self,
        install_dir: Path,
        dependency: DependencyArtifact,
        binary_name: str,
        bin_link: Path,
    ) -> SymlinkChain:
        """Create all links.

        Args:
            install_dir: Composed installation directory.
            dependency: Dependency bundled under its versioned name.
            binary_name: Entry-point binary inside install_dir.
            bin_link: PATH-visible link location.

        Returns:
            The dependency SymlinkChain.

        Raises:
            InstallationFailureError: If any link cannot be created.
        """
        chain = SymlinkChain(
            real_file=install_dir / dependency.versioned_name,
            abi_link=install_dir / dependency.abi_name,
            bare_link=install_dir / dependency.bare_name,
        )
        self._symlink(Path(dependency.versioned_name), chain.abi_link)
        self._symlink(Path(dependency.abi_name), chain.bare_link)

        try:
            self._fs.make_dirs(bin_link.parent)
        except OSError as e:
            raise InstallationFailureError("create", bin_link.parent, e) from e
        self._symlink(install_dir / binary_name, bin_link)

        return chain

    def _symlink(self, target: Path, link: Path) -> None:
        try:
            self._fs.symlink(target, link)
        except OSError as e:
            raise InstallationFailureError("link", link, e) from e
