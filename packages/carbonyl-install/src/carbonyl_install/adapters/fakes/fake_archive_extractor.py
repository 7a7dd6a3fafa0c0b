"""Fake archive extractor for testing.

Provides a test double for ArchiveExtractorPort that materializes a
preconfigured file tree instead of decompressing anything.
"""

from __future__ import annotations

from pathlib import Path


class FakeArchiveExtractor:
    """Fake implementation of ArchiveExtractorPort for testing.

    Writes each configured (relative path -> bytes) entry beneath the
    destination. Records calls and supports a configured exception.

    Example:
        >>> fake = FakeArchiveExtractor({"carbonyl-0.0.3/carbonyl": b"bin"})
        >>> fake.calls
        []
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self._files = dict(files or {})
        self._exception: BaseException | None = None
        self._calls: list[tuple[Path, Path]] = []

    @property
    def calls(self) -> list[tuple[Path, Path]]:
        """Return (archive, destination) tuples."""
        return self._calls

    def set_exception(self, exception: BaseException | None) -> None:
        self._exception = exception

    def extract(self, archive: Path, destination: Path) -> None:
        self._calls.append((archive, destination))

        if self._exception is not None:
            raise self._exception

        destination.mkdir(parents=True, exist_ok=True)
        for relative, content in self._files.items():
            path = destination / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
