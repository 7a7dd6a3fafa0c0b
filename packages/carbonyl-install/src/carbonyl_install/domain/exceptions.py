"""Domain exceptions.

Exception hierarchy:
- CarbonylInstallError: Base exception for every failure of an install run.
  - InstallerConfigError: Invalid settings or value objects.
  - UnsupportedPlatformError: Host OS or CPU outside the supported set.
  - MissingLocalArtifactError: No locally built libcarbonyl.so.
  - MissingDependencyArtifactError: Pinned dependency library not found.
  - DownloadFailureError: Upstream release asset could not be retrieved.
  - ExtractionFailureError: Archive could not be expanded.
  - InstallationFailureError: A filesystem mutation failed.

Every error is terminal for the run. The CLI reports str(error) as a single
diagnostic line and exits with status 1.
"""

from __future__ import annotations

from pathlib import Path


class CarbonylInstallError(Exception):
    """Base exception for all installer failures."""

    pass


class InstallerConfigError(CarbonylInstallError):
    """Raised when installer configuration or a value object is invalid."""

    pass


class UnsupportedPlatformError(CarbonylInstallError):
    """Raised when the host OS or architecture is not supported.

    Attributes:
        kind: Either "OS" or "architecture".
        value: The raw, unrecognized value reported by the host.
    """

    def __init__(self, kind: str, value: str) -> None:
        super().__init__(f"Unsupported {kind}: {value}")
        self.kind = kind
        self.value = value


class MissingLocalArtifactError(CarbonylInstallError):
    """Raised when neither a release nor a debug build of the library exists.

    Attributes:
        searched: Paths that were checked, in priority order.
    """

    def __init__(self, library_name: str, searched: list[Path]) -> None:
        super().__init__(
            f"No local {library_name} found. Build first with: cargo build --release"
        )
        self.library_name = library_name
        self.searched = searched


class MissingDependencyArtifactError(CarbonylInstallError):
    """Raised when the pinned dependency library is absent from its search dir.

    Attributes:
        filename: The exact versioned filename that was expected.
        search_dir: Directory that was searched.
    """

    def __init__(self, filename: str, search_dir: Path, hint: str) -> None:
        super().__init__(f"{filename} not found in {search_dir}. {hint}")
        self.filename = filename
        self.search_dir = search_dir


class DownloadFailureError(CarbonylInstallError):
    """Raised when the upstream release asset cannot be downloaded.

    Attributes:
        message: Error reported by the retrieval capability, verbatim.
        asset: Filename of the requested asset.
        original_error: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        asset: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.asset = asset
        self.original_error = original_error


class ExtractionFailureError(CarbonylInstallError):
    """Raised when the downloaded archive cannot be expanded."""

    def __init__(
        self,
        message: str,
        archive: Path | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.archive = archive
        self.original_error = original_error


class InstallationFailureError(CarbonylInstallError):
    """Raised when composing the installation or linking fails.

    Attributes:
        operation: Short name of the filesystem operation that failed.
        path: Path the operation was acting on.
        original_error: The underlying exception, if any.
    """

    def __init__(
        self,
        operation: str,
        path: Path,
        original_error: Exception | None = None,
    ) -> None:
        detail = f": {original_error}" if original_error is not None else ""
        super().__init__(f"Failed to {operation} {path}{detail}")
        self.operation = operation
        self.path = path
        self.original_error = original_error
