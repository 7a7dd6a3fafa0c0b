"""Platform resolver use case mapping host identity to a PlatformTarget."""

from __future__ import annotations

from typing import Literal

from carbonyl_install.domain.exceptions import UnsupportedPlatformError
from carbonyl_install.domain.release import PlatformTarget


class PlatformResolver:
    """Maps a host OS name and CPU string to a canonical PlatformTarget.

    Pure and deterministic. Matching is exact, on the spellings reported by
    uname; the error reports the raw value as given by the host.

    Mappings:
        - Linux -> linux, Darwin -> macos
        - x86_64 -> amd64
        - aarch64, arm64 -> arm64
    """

    _OS_MAP: dict[str, Literal["linux", "macos"]] = {
        "Linux": "linux",
        "Darwin": "macos",
    }

    _ARCH_MAP: dict[str, Literal["amd64", "arm64"]] = {
        "x86_64": "amd64",
        "aarch64": "arm64",
        "arm64": "arm64",
    }

    def __call__(self, os_name: str, machine: str) -> PlatformTarget:
        """Resolve the platform target.

        Args:
            os_name: Host OS name, as from platform.system() or uname -s.
            machine: CPU architecture, as from platform.machine() or uname -m.

        Returns:
            PlatformTarget for the host.

        Raises:
            UnsupportedPlatformError: If OS or architecture is unsupported.
        """
        if os_name not in self._OS_MAP:
            raise UnsupportedPlatformError("OS", os_name)

        if machine not in self._ARCH_MAP:
            raise UnsupportedPlatformError("architecture", machine)

        return PlatformTarget(os=self._OS_MAP[os_name], arch=self._ARCH_MAP[machine])
