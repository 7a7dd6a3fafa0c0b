"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without network access or elevated privileges.
"""

from carbonyl_install.adapters.fakes.fake_archive_extractor import FakeArchiveExtractor
from carbonyl_install.adapters.fakes.fake_logging_adapter import FakeLoggingAdapter
from carbonyl_install.adapters.fakes.fake_platform_detector import FakePlatformDetector
from carbonyl_install.adapters.fakes.fake_release_retriever import FakeReleaseRetriever
from carbonyl_install.adapters.fakes.recording_filesystem import (
    FilesystemCall,
    RecordingFilesystem,
)

__all__ = [
    "FakeArchiveExtractor",
    "FakeLoggingAdapter",
    "FakePlatformDetector",
    "FakeReleaseRetriever",
    "FilesystemCall",
    "RecordingFilesystem",
]
