"""Release-related domain value objects.

This module contains the value objects that identify which upstream
Carbonyl release artifact applies to the running host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from carbonyl_install.domain.exceptions import InstallerConfigError

ASSET_FILENAME_TEMPLATE = "carbonyl.{os}-{arch}.zip"


@dataclass(frozen=True)
class PlatformTarget:
    """Platform value object representing OS and architecture.

    Immutable value object resolved once per run from host introspection.

    Attributes:
        os: Operating system, must be 'linux' or 'macos'.
        arch: Architecture, must be 'amd64' or 'arm64'.
    """

    os: Literal["linux", "macos"]
    arch: Literal["amd64", "arm64"]

    def __post_init__(self) -> None:
        """Validate platform configuration."""
        self._validate_os()
        self._validate_arch()

    def _validate_os(self) -> None:
        """Validate os is a valid value."""
        valid_os = ("linux", "macos")
        if self.os not in valid_os:
            raise InstallerConfigError(
                f"os must be one of {valid_os}, got: {self.os!r}"
            )

    def _validate_arch(self) -> None:
        """Validate arch is a valid value."""
        valid_arch = ("amd64", "arm64")
        if self.arch not in valid_arch:
            raise InstallerConfigError(
                f"arch must be one of {valid_arch}, got: {self.arch!r}"
            )

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"


@dataclass(frozen=True)
class AssetReference:
    """Reference to a single asset attached to an upstream release.

    Attributes:
        repo_owner: Owner of the upstream repository (e.g. 'fathyb').
        repo_name: Name of the upstream repository (e.g. 'carbonyl').
        version_tag: Release tag (e.g. 'v0.0.3').
        filename: Asset filename (e.g. 'carbonyl.linux-amd64.zip').
    """

    repo_owner: str
    repo_name: str
    version_tag: str
    filename: str

    def __post_init__(self) -> None:
        """Validate asset reference fields are non-empty."""
        for field_name in ("repo_owner", "repo_name", "version_tag", "filename"):
            value = getattr(self, field_name)
            if not value or not value.strip():
                raise InstallerConfigError(f"{field_name} cannot be empty")

    @property
    def repo(self) -> str:
        """Return the repository identifier in 'owner/name' form."""
        return f"{self.repo_owner}/{self.repo_name}"

    @staticmethod
    def filename_for(target: PlatformTarget) -> str:
        """Derive the upstream archive filename for a platform target."""
        return ASSET_FILENAME_TEMPLATE.format(os=target.os, arch=target.arch)
