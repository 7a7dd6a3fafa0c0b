"""Port interfaces for the carbonyl installer.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from carbonyl_install.domain.release import PlatformTarget


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the host platform.

    Contract:
        - detect() returns the PlatformTarget of the running host
        - Raises UnsupportedPlatformError for unsupported OS or CPU
    """

    def detect(self) -> PlatformTarget:
        """Detect the current platform.

        Returns:
            PlatformTarget with os and arch fields.

        Raises:
            UnsupportedPlatformError: If the host is not supported.
        """
        ...


@runtime_checkable
class ReleaseRetrieverPort(Protocol):
    """Port interface for retrieving a release asset from a hosting service.

    Implementations download exactly one asset matching a filename pattern
    from the release identified by a version tag.

    Contract:
        - download() writes the asset into destination and returns its path
        - Raises any exception on network failure, missing release or
          missing asset; callers wrap it without retrying
    """

    def download(
        self,
        version_tag: str,
        repo: str,
        pattern: str,
        destination: Path,
    ) -> Path:
        """Download one matching release asset.

        Args:
            version_tag: Release tag (e.g. 'v0.0.3').
            repo: Repository identifier in 'owner/name' form.
            pattern: Asset filename or glob pattern.
            destination: Existing directory to write the asset into.

        Returns:
            Path to the downloaded asset.
        """
        ...


@runtime_checkable
class ArchiveExtractorPort(Protocol):
    """Port interface for expanding an archive.

    Contract:
        - extract() expands archive into destination (created if missing)
        - Raises any exception on a corrupt or unreadable archive
    """

    def extract(self, archive: Path, destination: Path) -> None:
        """Expand archive into destination.

        Args:
            archive: Path to the archive file.
            destination: Directory to expand into.
        """
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Port interface for (possibly privileged) filesystem mutation.

    Implementations may act directly or through an elevation helper such as
    sudo. Every mutating method may fail for lack of privilege.

    Contract:
        - remove_tree() is a no-op for a missing path
        - make_dirs() creates parents and tolerates an existing directory
        - copy_tree() copies the contents of src into dst, preserving
          attributes and symlinks
        - copy_file() replaces dst if present
        - symlink() replaces link if present (force semantics)
        - rename() moves src to dst on the same filesystem
        - Failures raise OSError (CommandFailedError for elevated commands)
    """

    def exists(self, path: Path) -> bool:
        """Return True if path exists (symlinks are not followed)."""
        ...

    def remove_tree(self, path: Path) -> None:
        """Remove path recursively."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create a directory and its parents."""
        ...

    def copy_tree(self, src: Path, dst: Path) -> None:
        """Copy every entry of src into the existing directory dst."""
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a single file to dst."""
        ...

    def symlink(self, target: Path, link: Path) -> None:
        """Create or replace link so it points at target."""
        ...

    def rename(self, src: Path, dst: Path) -> None:
        """Rename src to dst."""
        ...


@runtime_checkable
class WorkspacePort(Protocol):
    """Port interface for ephemeral, self-cleaning workspaces.

    Contract:
        - open() returns a context manager yielding a fresh empty directory
        - The directory is removed on every exit path, including exceptions
          and KeyboardInterrupt
    """

    def open(self) -> AbstractContextManager[Path]:
        """Acquire a fresh workspace directory."""
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for logging.

    Abstracts the logging mechanism from use cases that report progress and
    non-fatal conditions (e.g., falling back to a debug build).

    Contract:
        - info()/warning() are fire-and-forget
        - Implementations may format, filter, or route messages as needed
    """

    def info(self, message: str) -> None:
        """Log an informational progress message."""
        ...

    def warning(self, message: str) -> None:
        """Log a warning message."""
        ...
