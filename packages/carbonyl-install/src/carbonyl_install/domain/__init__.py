"""Domain layer: Entities with zero external dependencies."""

from carbonyl_install.domain.artifacts import (
    ArtifactVariant,
    DependencyArtifact,
    InstallationManifest,
    LocalArtifact,
    SymlinkChain,
)
from carbonyl_install.domain.exceptions import (
    CarbonylInstallError,
    DownloadFailureError,
    ExtractionFailureError,
    InstallationFailureError,
    InstallerConfigError,
    MissingDependencyArtifactError,
    MissingLocalArtifactError,
    UnsupportedPlatformError,
)
from carbonyl_install.domain.release import AssetReference, PlatformTarget
from carbonyl_install.domain.settings import InstallerSettings

__all__ = [
    "ArtifactVariant",
    "AssetReference",
    "CarbonylInstallError",
    "DependencyArtifact",
    "DownloadFailureError",
    "ExtractionFailureError",
    "InstallationFailureError",
    "InstallationManifest",
    "InstallerConfigError",
    "InstallerSettings",
    "LocalArtifact",
    "MissingDependencyArtifactError",
    "MissingLocalArtifactError",
    "PlatformTarget",
    "SymlinkChain",
    "UnsupportedPlatformError",
]
