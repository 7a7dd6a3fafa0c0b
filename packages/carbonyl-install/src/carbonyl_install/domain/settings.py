"""Installer settings domain entity."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from carbonyl_install.domain.exceptions import InstallerConfigError

DEFAULT_INSTALL_DIR = Path("/usr/local/lib/carbonyl")
DEFAULT_BIN_LINK = Path("/usr/local/bin/carbonyl")
DEFAULT_REPO = "fathyb/carbonyl"
DEFAULT_VERSION_TAG = "v0.0.3"
DEFAULT_DEPENDENCY_NAME = "fidelitty"
DEFAULT_DEPENDENCY_VERSION = "0.1.0"
DEFAULT_DEPENDENCY_ABI_MAJOR = "0"
DEFAULT_DEPENDENCY_SEARCH_DIR = Path("/usr/local/lib")
DEFAULT_MAIN_LIBRARY_NAME = "libcarbonyl.so"
DEFAULT_BINARY_NAME = "carbonyl"


@dataclass(frozen=True)
class InstallerSettings:
    """Installer configuration domain entity.

    Explicit configuration structure passed into the install pipeline. Values
    that could come from the environment (dependency search directory, GitHub
    token) are captured here once instead of being read ambiently.

    Attributes:
        project_root: Root of the project holding build/{release,debug}.
        install_dir: Installation directory, fully owned by the installer.
        bin_link: PATH-visible symlink to the installed binary.
        repo: Upstream repository identifier in 'owner/name' form.
        version_tag: Pinned upstream release tag.
        dependency_name: Dependency library name without 'lib' prefix.
        dependency_version: Exact pinned dependency version.
        dependency_abi_major: ABI-major number for the soname link.
        dependency_search_dir: Directory searched for the dependency library.
        main_library_name: Filename of the library overridden by the local build.
        binary_name: Filename of the entry-point binary inside install_dir.
        retriever: Release retrieval backend, 'httpx' or 'gh'.
        use_sudo: Perform filesystem mutations through sudo.
        github_token: Optional token for the GitHub API.
    """

    project_root: Path = field(default_factory=Path.cwd)
    install_dir: Path = DEFAULT_INSTALL_DIR
    bin_link: Path = DEFAULT_BIN_LINK
    repo: str = DEFAULT_REPO
    version_tag: str = DEFAULT_VERSION_TAG
    dependency_name: str = DEFAULT_DEPENDENCY_NAME
    dependency_version: str = DEFAULT_DEPENDENCY_VERSION
    dependency_abi_major: str = DEFAULT_DEPENDENCY_ABI_MAJOR
    dependency_search_dir: Path = DEFAULT_DEPENDENCY_SEARCH_DIR
    main_library_name: str = DEFAULT_MAIN_LIBRARY_NAME
    binary_name: str = DEFAULT_BINARY_NAME
    retriever: Literal["httpx", "gh"] = "httpx"
    use_sudo: bool = False
    github_token: str | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate settings."""
        self._validate_paths()
        self._validate_repo()
        self._validate_versions()
        self._validate_retriever()

    def _validate_paths(self) -> None:
        """Validate install paths are absolute."""
        for name in ("install_dir", "bin_link"):
            path = getattr(self, name)
            if not isinstance(path, Path):
                raise InstallerConfigError(f"{name} must be a Path, got: {path!r}")
            if not path.is_absolute():
                raise InstallerConfigError(f"{name} must be absolute, got: {path}")

        if self.install_dir == Path(self.install_dir.anchor):
            raise InstallerConfigError("install_dir cannot be the filesystem root")

    def _validate_repo(self) -> None:
        """Validate repo is in 'owner/name' form."""
        parts = self.repo.split("/")
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise InstallerConfigError(
                f"repo must be in 'owner/name' form, got: {self.repo!r}"
            )

    def _validate_versions(self) -> None:
        """Validate pinned versions are non-empty and yield distinct link names."""
        for name in ("version_tag", "dependency_version", "dependency_abi_major"):
            if not str(getattr(self, name)).strip():
                raise InstallerConfigError(f"{name} cannot be empty")
        if self.dependency_abi_major == self.dependency_version:
            raise InstallerConfigError(
                "dependency_abi_major must differ from dependency_version, "
                f"got: {self.dependency_abi_major!r} for both"
            )

    def _validate_retriever(self) -> None:
        """Validate retriever backend name."""
        valid = ("httpx", "gh")
        if self.retriever not in valid:
            raise InstallerConfigError(
                f"retriever must be one of {valid}, got: {self.retriever!r}"
            )

    @property
    def repo_owner(self) -> str:
        return self.repo.split("/")[0]

    @property
    def repo_name(self) -> str:
        return self.repo.split("/")[1]

    @property
    def binary_path(self) -> Path:
        """Return the installed entry-point binary path."""
        return self.install_dir / self.binary_name

    def with_overrides(self, **overrides: Any) -> InstallerSettings:
        """Return a copy with the given non-None fields replaced.

        Raises:
            InstallerConfigError: If an unknown field is given or the result
                is invalid.
        """
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise InstallerConfigError(f"Unknown settings: {', '.join(unknown)}")

        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)
