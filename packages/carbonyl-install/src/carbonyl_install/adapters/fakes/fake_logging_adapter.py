"""Fake logging adapter for testing."""

from __future__ import annotations


class FakeLoggingAdapter:
    """Fake logging adapter that captures log messages for assertion.

    Implements LoggingPort protocol by storing messages in lists for later
    retrieval and assertion in tests.

    Example:
        logger = FakeLoggingAdapter()
        LocalArtifactLocator(logger).locate(project_root)
        assert "Warning: using debug build of libcarbonyl.so" in logger.warnings
    """

    def __init__(self) -> None:
        """Initialize with empty message lists."""
        self._infos: list[str] = []
        self._warnings: list[str] = []

    def info(self, message: str) -> None:
        self._infos.append(message)

    def warning(self, message: str) -> None:
        self._warnings.append(message)

    @property
    def infos(self) -> list[str]:
        """Get a copy of captured info messages."""
        return list(self._infos)

    @property
    def warnings(self) -> list[str]:
        """Get a copy of captured warning messages."""
        return list(self._warnings)

    def clear(self) -> None:
        """Clear all captured messages."""
        self._infos.clear()
        self._warnings.clear()
