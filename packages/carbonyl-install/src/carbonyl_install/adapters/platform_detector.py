"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform

from carbonyl_install.domain.release import PlatformTarget
from carbonyl_install.usecases.platform_resolver import PlatformResolver


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by feeding platform.system() and
    platform.machine() (the values reported by uname -s / uname -m) into
    the PlatformResolver.
    """

    def __init__(self, resolver: PlatformResolver | None = None) -> None:
        self._resolver = resolver or PlatformResolver()

    def detect(self) -> PlatformTarget:
        """Detect the current platform.

        Returns:
            PlatformTarget value object with os and arch fields.

        Raises:
            UnsupportedPlatformError: If the current OS or architecture is
                not supported.
        """
        return self._resolver(platform.system(), platform.machine())
