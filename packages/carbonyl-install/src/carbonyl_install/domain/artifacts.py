"""Artifact value objects for the composed installation.

Local artifacts are selected (never created) by the installer, dependency
artifacts are resolved by exact versioned filename, and the installation
manifest describes the final on-disk state after a successful run.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from carbonyl_install.domain.exceptions import InstallerConfigError
from carbonyl_install.domain.release import AssetReference


class ArtifactVariant(Enum):
    """Build variant of a locally built library.

    Attributes:
        RELEASE: Optimized build, preferred.
        DEBUG: Debug build, selected with a warning.
    """

    RELEASE = "release"
    DEBUG = "debug"


@dataclass(frozen=True)
class LocalArtifact:
    """Locally built shared library overriding the upstream one.

    Attributes:
        path: Path to the built library file.
        variant: Which build produced it.
    """

    path: Path
    variant: ArtifactVariant


@dataclass(frozen=True)
class DependencyArtifact:
    """Externally installed shared library of an exact pinned version.

    Attributes:
        name: Library name without 'lib' prefix (e.g. 'fidelitty').
        path: Path to the fully versioned library file.
        pinned_version: Exact version string (e.g. '0.1.0').
        search_dir: Directory the library was resolved from.
        abi_major: ABI-major number used for the soname link (e.g. '0').
    """

    name: str
    path: Path
    pinned_version: str
    search_dir: Path
    abi_major: str

    def __post_init__(self) -> None:
        """Validate the path matches the exact versioned filename."""
        if not self.pinned_version:
            raise InstallerConfigError("pinned_version cannot be empty")
        if self.path.name != self.versioned_name:
            raise InstallerConfigError(
                f"dependency path must be named {self.versioned_name!r}, "
                f"got: {self.path.name!r}"
            )
        if self.abi_name == self.versioned_name:
            raise InstallerConfigError(
                f"abi_major {self.abi_major!r} must differ from pinned_version, "
                "otherwise the soname link would point at itself"
            )

    @staticmethod
    def filename(name: str, version: str) -> str:
        """Return 'lib<name>.so.<version>'."""
        return f"lib{name}.so.{version}"

    @property
    def versioned_name(self) -> str:
        return self.filename(self.name, self.pinned_version)

    @property
    def abi_name(self) -> str:
        return self.filename(self.name, self.abi_major)

    @property
    def bare_name(self) -> str:
        return f"lib{self.name}.so"


@dataclass(frozen=True)
class SymlinkChain:
    """Three names for one dependency file.

    The bare link points at the ABI link, which points at the real file.

    Attributes:
        real_file: Fully versioned library file.
        abi_link: ABI-major symlink pointing to real_file.
        bare_link: Unversioned symlink pointing to abi_link.
    """

    real_file: Path
    abi_link: Path
    bare_link: Path


@dataclass(frozen=True)
class InstallationManifest:
    """Final on-disk state of a successful installation run.

    Attributes:
        install_dir: Directory holding the composed installation.
        binary_link_path: PATH-visible link to the installed binary.
        binary_path: The installed binary the link points at.
        dependency_chain: Symlink chain of the bundled dependency.
        local_artifact: Local library that replaced the upstream one.
        dependency: Dependency library bundled into the installation.
        asset: Upstream release asset the tree was built from.
    """

    install_dir: Path
    binary_link_path: Path
    binary_path: Path
    dependency_chain: SymlinkChain
    local_artifact: LocalArtifact
    dependency: DependencyArtifact
    asset: AssetReference
