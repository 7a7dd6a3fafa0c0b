"""Fake release retriever for testing.

Provides a test double for ReleaseRetrieverPort that writes preconfigured
bytes without network operations.
"""

from __future__ import annotations

from pathlib import Path


class FakeReleaseRetriever:
    """Fake implementation of ReleaseRetrieverPort for testing.

    Writes the configured content to '<destination>/<pattern>' and records
    every call. Supports configuring an exception for error path testing.

    Example:
        >>> fake = FakeReleaseRetriever(content=b"zip bytes")
        >>> fake.set_exception(RuntimeError("release not found"))
        >>> fake.calls
        []
    """

    def __init__(self, content: bytes = b"") -> None:
        self._content = content
        self._exception: BaseException | None = None
        self._calls: list[tuple[str, str, str, Path]] = []

    @property
    def calls(self) -> list[tuple[str, str, str, Path]]:
        """Return (version_tag, repo, pattern, destination) tuples."""
        return self._calls

    def set_content(self, content: bytes) -> None:
        self._content = content

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from download(), or None to clear."""
        self._exception = exception

    def download(
        self,
        version_tag: str,
        repo: str,
        pattern: str,
        destination: Path,
    ) -> Path:
        self._calls.append((version_tag, repo, pattern, destination))

        if self._exception is not None:
            raise self._exception

        target = destination / pattern
        target.write_bytes(self._content)
        return target
