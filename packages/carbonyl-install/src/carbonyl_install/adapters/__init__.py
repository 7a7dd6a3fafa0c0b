"""Interface adapters: ports plus filesystem, network and process adapters."""

from carbonyl_install.adapters.ports import (
    ArchiveExtractorPort,
    FilesystemPort,
    LoggingPort,
    PlatformDetectorPort,
    ReleaseRetrieverPort,
    WorkspacePort,
)

__all__ = [
    "ArchiveExtractorPort",
    "FilesystemPort",
    "LoggingPort",
    "PlatformDetectorPort",
    "ReleaseRetrieverPort",
    "WorkspacePort",
]
