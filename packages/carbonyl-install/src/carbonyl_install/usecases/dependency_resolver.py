"""Dependency resolver use case for the pinned external shared library."""

from __future__ import annotations

from pathlib import Path

from carbonyl_install.domain.artifacts import DependencyArtifact
from carbonyl_install.domain.exceptions import MissingDependencyArtifactError


class DependencyResolver:
    """Use case for locating a dependency library of an exact pinned version.

    Only the exact filename 'lib<name>.so.<version>' inside the given search
    directory is accepted; there is no fuzzy or latest-version matching.
    """

    def __init__(
        self,
        name: str,
        pinned_version: str,
        abi_major: str,
        override_hint: str = "FIDELITTY_LIB_DIR",
    ) -> None:
        """Initialize the resolver.

        Args:
            name: Library name without 'lib' prefix.
            pinned_version: Exact required version.
            abi_major: ABI-major number of the library.
            override_hint: Name of the setting that overrides the search dir,
                shown in the error message.
        """
        self._name = name
        self._pinned_version = pinned_version
        self._abi_major = abi_major
        self._override_hint = override_hint

    def resolve(self, search_dir: Path) -> DependencyArtifact:
        """Resolve the dependency in search_dir.

        Raises:
            MissingDependencyArtifactError: If the exact file is absent.
        """
        filename = DependencyArtifact.filename(self._name, self._pinned_version)
        path = search_dir / filename
        if not path.is_file():
            raise MissingDependencyArtifactError(
                filename,
                search_dir,
                f"Install {self._name} {self._pinned_version} first, "
                f"or set {self._override_hint}",
            )

        return DependencyArtifact(
            name=self._name,
            path=path,
            pinned_version=self._pinned_version,
            search_dir=search_dir,
            abi_major=self._abi_major,
        )
