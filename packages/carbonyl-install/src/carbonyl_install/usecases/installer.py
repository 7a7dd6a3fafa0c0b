"""Installer use case wiring the resolution-and-composition pipeline."""

from __future__ import annotations

from carbonyl_install.adapters.ports import (
    ArchiveExtractorPort,
    FilesystemPort,
    LoggingPort,
    PlatformDetectorPort,
    ReleaseRetrieverPort,
    WorkspacePort,
)
from carbonyl_install.domain.artifacts import InstallationManifest
from carbonyl_install.domain.settings import InstallerSettings
from carbonyl_install.usecases.archive_extractor import ArchiveExtractor
from carbonyl_install.usecases.asset_namer import AssetNamer
from carbonyl_install.usecases.dependency_resolver import DependencyResolver
from carbonyl_install.usecases.installation_composer import InstallationComposer
from carbonyl_install.usecases.local_artifact_locator import LocalArtifactLocator
from carbonyl_install.usecases.release_fetcher import ReleaseFetcher
from carbonyl_install.usecases.symlink_manager import SymlinkManager


class Installer:
    """Use case running one complete installation.

    Orchestrates, strictly in order and failing fast:
    1. Detect the platform and name the upstream asset
    2. Locate the local library build and the pinned dependency
       (both before any network activity)
    3. Fetch and extract the release inside a self-cleaning workspace
    4. Compose the installation directory
    5. Link the dependency chain and the PATH entry point

    Every failure surfaces as a CarbonylInstallError subclass. The workspace
    is released on every exit path.
    """

    def __init__(
        self,
        settings: InstallerSettings,
        platform_detector: PlatformDetectorPort,
        retriever: ReleaseRetrieverPort,
        extractor: ArchiveExtractorPort,
        filesystem: FilesystemPort,
        workspace: WorkspacePort,
        logger: LoggingPort,
    ) -> None:
        """Initialize the installer.

        Args:
            settings: Explicit installer configuration.
            platform_detector: Port detecting the host platform.
            retriever: Port downloading release assets.
            extractor: Port expanding archives.
            filesystem: Port performing installation mutations.
            workspace: Port providing the ephemeral workspace.
            logger: Port receiving progress messages and warnings.
        """
        self._settings = settings
        self._platform_detector = platform_detector
        self._filesystem = filesystem
        self._workspace = workspace
        self._logger = logger

        self._asset_namer = AssetNamer(
            settings.repo_owner, settings.repo_name, settings.version_tag
        )
        self._locator = LocalArtifactLocator(logger, settings.main_library_name)
        self._dependency_resolver = DependencyResolver(
            settings.dependency_name,
            settings.dependency_version,
            settings.dependency_abi_major,
        )
        self._fetcher = ReleaseFetcher(retriever, logger)
        self._extractor = ArchiveExtractor(extractor, logger)
        self._composer = InstallationComposer(
            filesystem, logger, settings.main_library_name
        )
        self._symlinks = SymlinkManager(filesystem)

    def run(self) -> InstallationManifest:
        """Execute the installation.

        Returns:
            InstallationManifest describing the installed state.

        Raises:
            CarbonylInstallError: On any resolution, fetch, extraction or
                installation failure.
        """
        settings = self._settings

        target = self._platform_detector.detect()
        asset = self._asset_namer(target)
        self._logger.info(f"Platform: {target}")

        local_artifact = self._locator.locate(settings.project_root)
        self._logger.info(f"Using {settings.main_library_name}: {local_artifact.path}")

        dependency = self._dependency_resolver.resolve(settings.dependency_search_dir)
        self._logger.info(f"Using lib{dependency.name}: {dependency.path}")

        with self._workspace.open() as workspace:
            archive = self._fetcher.fetch(asset, workspace)
            content_root = self._extractor.extract(archive, workspace)
            self._composer.compose(
                content_root, local_artifact, dependency, settings.install_dir
            )

        chain = self._symlinks.link(
            settings.install_dir,
            dependency,
            settings.binary_name,
            settings.bin_link,
        )

        return InstallationManifest(
            install_dir=settings.install_dir,
            binary_link_path=settings.bin_link,
            binary_path=settings.binary_path,
            dependency_chain=chain,
            local_artifact=local_artifact,
            dependency=dependency,
            asset=asset,
        )
