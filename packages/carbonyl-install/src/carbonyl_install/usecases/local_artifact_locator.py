"""Local artifact locator use case for finding the locally built library."""

from __future__ import annotations

from pathlib import Path

from carbonyl_install.adapters.ports import LoggingPort
from carbonyl_install.domain.artifacts import ArtifactVariant, LocalArtifact
from carbonyl_install.domain.exceptions import MissingLocalArtifactError


class LocalArtifactLocator:
    """Use case for selecting the locally built library override.

    Checks, in strict priority order:
    1. <project_root>/build/release/<library>
    2. <project_root>/build/debug/<library>

    Selecting the debug build is a degraded but non-fatal outcome and is
    reported through the logging port.
    """

    _PRIORITY = (ArtifactVariant.RELEASE, ArtifactVariant.DEBUG)

    def __init__(self, logger: LoggingPort, library_name: str = "libcarbonyl.so") -> None:
        """Initialize the locator.

        Args:
            logger: Port receiving the debug-build warning.
            library_name: Filename of the library to look for.
        """
        self._logger = logger
        self._library_name = library_name

    def candidates(self, project_root: Path) -> list[tuple[ArtifactVariant, Path]]:
        """Return the candidate paths in priority order."""
        return [
            (variant, project_root / "build" / variant.value / self._library_name)
            for variant in self._PRIORITY
        ]

    def locate(self, project_root: Path) -> LocalArtifact:
        """Locate the best available local build.

        Args:
            project_root: Root of the project holding the build directory.

        Returns:
            LocalArtifact for the first existing candidate.

        Raises:
            MissingLocalArtifactError: If no candidate exists.
        """
        candidates = self.candidates(project_root)
        for variant, path in candidates:
            if not path.is_file():
                continue
            if variant is ArtifactVariant.DEBUG:
                self._logger.warning(f"Warning: using debug build of {self._library_name}")
            return LocalArtifact(path=path, variant=variant)

        raise MissingLocalArtifactError(
            self._library_name, [path for _, path in candidates]
        )
