"""Factory functions for creating installer instances.

Selects concrete adapters from InstallerSettings so callers (the CLI,
scripts) only deal with configuration.
"""

from __future__ import annotations

from carbonyl_install.adapters.gh_release_retriever import GhReleaseRetriever
from carbonyl_install.adapters.httpx_release_retriever import HttpxReleaseRetriever
from carbonyl_install.adapters.local_filesystem import LocalFilesystem
from carbonyl_install.adapters.logging_adapter import StdlibLoggingAdapter
from carbonyl_install.adapters.platform_detector import OsPlatformDetector
from carbonyl_install.adapters.ports import (
    FilesystemPort,
    LoggingPort,
    ReleaseRetrieverPort,
)
from carbonyl_install.adapters.sudo_filesystem import SudoFilesystem
from carbonyl_install.adapters.temp_workspace import TemporaryWorkspace
from carbonyl_install.adapters.zipfile_archive_extractor import ZipfileArchiveExtractor
from carbonyl_install.domain.settings import InstallerSettings
from carbonyl_install.usecases.installer import Installer


def create_release_retriever(settings: InstallerSettings) -> ReleaseRetrieverPort:
    """Return the retriever selected by settings.retriever."""
    if settings.retriever == "gh":
        return GhReleaseRetriever()
    return HttpxReleaseRetriever(token=settings.github_token)


def create_filesystem(settings: InstallerSettings) -> FilesystemPort:
    """Return a sudo-backed filesystem when settings.use_sudo is set."""
    if settings.use_sudo:
        return SudoFilesystem()
    return LocalFilesystem()


def create_installer(
    settings: InstallerSettings,
    logger: LoggingPort | None = None,
) -> Installer:
    """Create an Installer wired with the production adapters.

    Args:
        settings: Installer configuration.
        logger: Optional logging port; defaults to the stdlib adapter.

    Returns:
        Installer ready to run().
    """
    return Installer(
        settings=settings,
        platform_detector=OsPlatformDetector(),
        retriever=create_release_retriever(settings),
        extractor=ZipfileArchiveExtractor(),
        filesystem=create_filesystem(settings),
        workspace=TemporaryWorkspace(),
        logger=logger or StdlibLoggingAdapter(),
    )
