"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from typing import Literal

from carbonyl_install.domain.release import PlatformTarget


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Returns a configured PlatformTarget, or raises a configured exception
    to simulate an unsupported host.

    Example:
        >>> fake = FakePlatformDetector.from_tuple("macos", "arm64")
        >>> fake.detect()
        PlatformTarget(os='macos', arch='arm64')
    """

    def __init__(self, target: PlatformTarget) -> None:
        self._target = target
        self._exception: BaseException | None = None

    @classmethod
    def from_tuple(
        cls,
        os: Literal["linux", "macos"],
        arch: Literal["amd64", "arm64"],
    ) -> FakePlatformDetector:
        """Create a FakePlatformDetector from OS and architecture strings."""
        return cls(PlatformTarget(os=os, arch=arch))

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from detect(), or None to clear."""
        self._exception = exception

    def detect(self) -> PlatformTarget:
        if self._exception is not None:
            raise self._exception
        return self._target
