"""Release fetcher use case for retrieving the upstream archive."""

from __future__ import annotations

from pathlib import Path

from carbonyl_install.adapters.ports import LoggingPort, ReleaseRetrieverPort
from carbonyl_install.domain.exceptions import DownloadFailureError
from carbonyl_install.domain.release import AssetReference


class ReleaseFetcher:
    """Orchestrates retrieval of one release asset into a workspace.

    Delegates the transfer to the provided retriever port. Any error it
    reports is surfaced as DownloadFailureError with the original message
    unchanged. Nothing is retried.

    The workspace itself is owned by the caller, which guarantees its
    removal on every exit path.
    """

    def __init__(self, retriever: ReleaseRetrieverPort, logger: LoggingPort) -> None:
        """Initialize the release fetcher.

        Args:
            retriever: ReleaseRetrieverPort implementation for the transfer.
            logger: Port receiving progress messages.
        """
        self._retriever = retriever
        self._logger = logger

    def fetch(self, asset: AssetReference, workspace: Path) -> Path:
        """Download the asset into workspace.

        Args:
            asset: Reference to the release asset.
            workspace: Existing, empty workspace directory.

        Returns:
            Path to the downloaded archive inside workspace.

        Raises:
            DownloadFailureError: If the retriever reports any error, or
                reports success without producing the file.
        """
        self._logger.info(
            f"Downloading {asset.filename} from {asset.repo} {asset.version_tag}..."
        )
        try:
            archive = self._retriever.download(
                asset.version_tag, asset.repo, asset.filename, workspace
            )
        except Exception as e:
            raise DownloadFailureError(
                str(e), asset=asset.filename, original_error=e
            ) from e

        if not archive.is_file():
            raise DownloadFailureError(
                f"Downloaded asset {asset.filename} not found at {archive}",
                asset=asset.filename,
            )
        return archive
