"""Installation checker use case for verifying a composed installation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from carbonyl_install.domain.artifacts import DependencyArtifact
from carbonyl_install.domain.settings import InstallerSettings


class InstallationStatus(Enum):
    """Status of an installation check.

    Attributes:
        OK: Installation directory, binary, libraries and links are in place.
        MISSING: Installation directory or a required file does not exist.
        BROKEN: Files exist but a link or permission is wrong.
    """

    OK = "ok"
    MISSING = "missing"
    BROKEN = "broken"


@dataclass(frozen=True)
class InstallationCheckResult:
    """Result of installation check.

    Attributes:
        status: The installation status.
        install_dir: Installation directory that was checked.
        error_message: Error details for failed checks, None for success.
    """

    status: InstallationStatus
    install_dir: Path
    error_message: str | None

    @classmethod
    def create_success(cls, install_dir: Path) -> InstallationCheckResult:
        return cls(
            status=InstallationStatus.OK,
            install_dir=install_dir,
            error_message=None,
        )

    @classmethod
    def create_failure(
        cls,
        status: InstallationStatus,
        install_dir: Path,
        error_message: str,
    ) -> InstallationCheckResult:
        return cls(status=status, install_dir=install_dir, error_message=error_message)


class InstallationChecker:
    """Use case for checking a composed installation.

    Verifies, in order:
    1. The installation directory exists
    2. The binary and the main library exist, the binary is executable
    3. The bundled dependency is a real versioned file reachable from the
       bare name through exactly one ABI-major link
    4. The PATH link points at the installed binary
    """

    def __call__(self, settings: InstallerSettings) -> InstallationCheckResult:
        install_dir = settings.install_dir

        def failure(status: InstallationStatus, message: str) -> InstallationCheckResult:
            return InstallationCheckResult.create_failure(status, install_dir, message)

        if not install_dir.is_dir():
            return failure(
                InstallationStatus.MISSING,
                f"Installation directory does not exist at {install_dir}",
            )

        for required in (settings.binary_path, install_dir / settings.main_library_name):
            if not required.is_file():
                return failure(InstallationStatus.MISSING, f"{required} does not exist")

        if not os.access(settings.binary_path, os.X_OK):
            return failure(
                InstallationStatus.BROKEN,
                f"Binary at {settings.binary_path} is not executable",
            )

        chain_error = self._check_dependency_chain(settings)
        if chain_error is not None:
            return failure(*chain_error)

        bin_link = settings.bin_link
        if not bin_link.is_symlink():
            return failure(InstallationStatus.MISSING, f"{bin_link} is not a symlink")
        if bin_link.resolve() != settings.binary_path.resolve():
            return failure(
                InstallationStatus.BROKEN,
                f"{bin_link} does not point at {settings.binary_path}",
            )

        return InstallationCheckResult.create_success(install_dir)

    def _check_dependency_chain(
        self, settings: InstallerSettings
    ) -> tuple[InstallationStatus, str] | None:
        install_dir = settings.install_dir
        name = settings.dependency_name
        versioned = DependencyArtifact.filename(name, settings.dependency_version)
        abi = DependencyArtifact.filename(name, settings.dependency_abi_major)
        bare = f"lib{name}.so"

        real_file = install_dir / versioned
        if not real_file.is_file() or real_file.is_symlink():
            return InstallationStatus.MISSING, f"{real_file} does not exist"

        for link, expected in ((install_dir / abi, versioned), (install_dir / bare, abi)):
            if not link.is_symlink():
                return InstallationStatus.MISSING, f"{link} is not a symlink"
            actual = os.readlink(link)
            if actual != expected:
                return (
                    InstallationStatus.BROKEN,
                    f"{link} points at {actual}, expected {expected}",
                )

        return None
