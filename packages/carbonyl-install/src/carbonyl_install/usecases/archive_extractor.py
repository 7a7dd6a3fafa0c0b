"""Archive extractor use case for locating the content root."""

from __future__ import annotations

import fnmatch
from pathlib import Path

from carbonyl_install.adapters.ports import ArchiveExtractorPort, LoggingPort
from carbonyl_install.domain.exceptions import ExtractionFailureError

EXTRACT_DIRNAME = "extracted"
CONTENT_ROOT_PATTERN = "carbonyl-*"


class ArchiveExtractor:
    """Expands a downloaded archive and identifies its content root.

    The archive is expanded into '<workspace>/extracted' so that the archive
    file itself never becomes part of the content. The content root is the
    immediate child directory matching 'carbonyl-*' (the upstream archives
    wrap everything in 'carbonyl-<version>/'). A flat archive without such
    a directory is accepted with a warning; an archive that expands to
    nothing is an error.
    """

    def __init__(
        self,
        port: ArchiveExtractorPort,
        logger: LoggingPort,
        content_root_pattern: str = CONTENT_ROOT_PATTERN,
    ) -> None:
        """Initialize the extractor.

        Args:
            port: ArchiveExtractorPort implementation for decompression.
            logger: Port receiving progress messages and warnings.
            content_root_pattern: Glob matched against top-level directories.
        """
        self._port = port
        self._logger = logger
        self._pattern = content_root_pattern

    def extract(self, archive: Path, workspace: Path) -> Path:
        """Expand archive inside workspace and return the content root.

        Raises:
            ExtractionFailureError: If decompression fails or yields no files.
        """
        self._logger.info("Extracting...")
        destination = workspace / EXTRACT_DIRNAME
        try:
            self._port.extract(archive, destination)
        except Exception as e:
            raise ExtractionFailureError(
                f"Failed to extract {archive.name}: {e}",
                archive=archive,
                original_error=e,
            ) from e

        return self.find_content_root(destination, archive)

    def find_content_root(self, destination: Path, archive: Path) -> Path:
        """Pick the content root among the immediate children of destination."""
        entries = sorted(destination.iterdir()) if destination.is_dir() else []
        if not entries:
            raise ExtractionFailureError(
                f"Archive {archive.name} contains no files", archive=archive
            )

        matches = [
            entry
            for entry in entries
            if entry.is_dir() and fnmatch.fnmatch(entry.name, self._pattern)
        ]
        if len(matches) > 1:
            self._logger.warning(
                f"Multiple content roots in {archive.name}: "
                f"{', '.join(m.name for m in matches)}; using {matches[0].name}"
            )
        if matches:
            return matches[0]

        self._logger.warning(
            f"No {self._pattern} directory in {archive.name}; "
            "treating archive as flat"
        )
        return destination
