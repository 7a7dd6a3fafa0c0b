"""Use cases: Application logic layer."""

from carbonyl_install.usecases.archive_extractor import ArchiveExtractor
from carbonyl_install.usecases.asset_namer import AssetNamer
from carbonyl_install.usecases.dependency_resolver import DependencyResolver
from carbonyl_install.usecases.installation_checker import (
    InstallationChecker,
    InstallationCheckResult,
    InstallationStatus,
)
from carbonyl_install.usecases.installation_composer import InstallationComposer
from carbonyl_install.usecases.installer import Installer
from carbonyl_install.usecases.local_artifact_locator import LocalArtifactLocator
from carbonyl_install.usecases.platform_resolver import PlatformResolver
from carbonyl_install.usecases.release_fetcher import ReleaseFetcher
from carbonyl_install.usecases.symlink_manager import SymlinkManager

__all__ = [
    "ArchiveExtractor",
    "AssetNamer",
    "DependencyResolver",
    "InstallationChecker",
    "InstallationCheckResult",
    "InstallationStatus",
    "InstallationComposer",
    "Installer",
    "LocalArtifactLocator",
    "PlatformResolver",
    "ReleaseFetcher",
    "SymlinkManager",
]
