"""
Root conftest.py for the carbonyl-install test suite.

Pytest plugin that enforces TRA (Test Responsibility Architecture) and Tier
markers, plus fixtures shared by unit and BDD tests.

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.LocalArtifactLocator")
    def test_something():
        ...

Configuration:
    Set TIER_ENFORCE=0 to disable tier enforcement
    Set TRA_ENFORCE=0 to disable TRA enforcement
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from carbonyl_install.adapters.fakes import (
    FakeArchiveExtractor,
    FakeLoggingAdapter,
    FakePlatformDetector,
    FakeReleaseRetriever,
    RecordingFilesystem,
)
from carbonyl_install.adapters.temp_workspace import TemporaryWorkspace
from carbonyl_install.domain.settings import InstallerSettings
from carbonyl_install.usecases.installer import Installer

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# ============================================================================
# TRA (Test Responsibility Architecture) Configuration
# ============================================================================

VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
        "Interface.",
    ]
)

# Tier timeout limits in seconds
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,  # 100ms - instant
    1: 2.0,  # 2s - fast (pre-commit)
    2: 30.0,  # 30s - standard (CI)
}


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and Tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - declares the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract, Interface",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard). "
        "Determines when test runs and enforces timeout.",
    )
    config.addinivalue_line("markers", "unit: Unit tests (no network, no sudo)")
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and tier in TIER_TIMEOUTS:
                return tier
    return None


def _enforce_markers(items: list[Item]) -> list[str]:
    """Validate TRA and tier markers on all tests.

    Returns:
        List of error messages. Empty if all valid.
    """
    errors: list[str] = []
    check_tra = os.environ.get("TRA_ENFORCE", "1") != "0"
    check_tier = os.environ.get("TIER_ENFORCE", "1") != "0"

    for item in items:
        test_id = item.nodeid

        if check_tra:
            tra_markers = list(item.iter_markers(name="tra"))
            if len(tra_markers) != 1 or not tra_markers[0].args:
                errors.append(f"{test_id}: expected exactly one @pytest.mark.tra('...')")
            else:
                anchor = tra_markers[0].args[0]
                if not isinstance(anchor, str) or not any(
                    anchor.startswith(prefix) for prefix in VALID_TRA_PREFIXES
                ):
                    valid = ", ".join(sorted(VALID_TRA_PREFIXES))
                    errors.append(
                        f"{test_id}: Invalid TRA anchor {anchor!r}. Must start with one of: {valid}"
                    )

        if check_tier and _get_tier(item) is None:
            errors.append(f"{test_id}: missing or invalid @pytest.mark.tier()")

    return errors


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Apply timeout based on tier level when pytest-timeout is installed."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        item.add_marker(pytest.mark.timeout(TIER_TIMEOUTS[tier] * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Enforce TRA and Tier markers at collection time."""
    errors = _enforce_markers(items)
    if errors:
        pytest.fail(
            "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
            pytrace=False,
        )

    _apply_tier_timeouts(items)


# ============================================================================
# Shared fixtures
# ============================================================================

UPSTREAM_ROOT = "carbonyl-0.0.3"

UPSTREAM_FILES: dict[str, bytes] = {
    f"{UPSTREAM_ROOT}/carbonyl": b"#!/bin/sh\necho carbonyl\n",
    f"{UPSTREAM_ROOT}/libcarbonyl.so": b"upstream libcarbonyl",
    f"{UPSTREAM_ROOT}/libEGL.so": b"upstream libEGL",
    f"{UPSTREAM_ROOT}/locales/en-US.pak": b"upstream locale",
}

RELEASE_LIBRARY = b"local release libcarbonyl"
DEBUG_LIBRARY = b"local debug libcarbonyl"
DEPENDENCY_LIBRARY = b"libfidelitty 0.1.0"


@dataclass
class Sandbox:
    """Sandboxed project, dependency directory and install prefix."""

    root: Path
    project_root: Path
    dependency_dir: Path
    prefix: Path

    @property
    def install_dir(self) -> Path:
        return self.prefix / "lib" / "carbonyl"

    @property
    def bin_link(self) -> Path:
        return self.prefix / "bin" / "carbonyl"

    def add_local_build(self, variant: str, content: bytes) -> Path:
        path = self.project_root / "build" / variant / "libcarbonyl.so"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    def add_dependency(self, version: str = "0.1.0", content: bytes = DEPENDENCY_LIBRARY) -> Path:
        path = self.dependency_dir / f"libfidelitty.so.{version}"
        path.write_bytes(content)
        return path

    def settings(self, **overrides: object) -> InstallerSettings:
        settings = InstallerSettings(
            project_root=self.project_root,
            install_dir=self.install_dir,
            bin_link=self.bin_link,
            dependency_search_dir=self.dependency_dir,
        )
        return settings.with_overrides(**overrides)


@pytest.fixture
def sandbox(tmp_path: Path) -> Sandbox:
    """Create an empty sandbox (no builds, no dependency)."""
    box = Sandbox(
        root=tmp_path,
        project_root=tmp_path / "project",
        dependency_dir=tmp_path / "deps",
        prefix=tmp_path / "usr" / "local",
    )
    box.project_root.mkdir()
    box.dependency_dir.mkdir()
    (box.prefix / "bin").mkdir(parents=True)
    (box.prefix / "lib").mkdir(parents=True)
    return box


@pytest.fixture
def ready_sandbox(sandbox: Sandbox) -> Sandbox:
    """Sandbox with a release build and the pinned dependency present."""
    sandbox.add_local_build("release", RELEASE_LIBRARY)
    sandbox.add_dependency()
    return sandbox


@pytest.fixture
def fake_logger() -> FakeLoggingAdapter:
    return FakeLoggingAdapter()


@pytest.fixture
def fake_retriever() -> FakeReleaseRetriever:
    return FakeReleaseRetriever(content=b"PK fake archive")


@pytest.fixture
def upstream_files() -> dict[str, bytes]:
    """Files of the fake upstream archive, keyed by archive path."""
    return dict(UPSTREAM_FILES)


@pytest.fixture
def fake_extractor(upstream_files: dict[str, bytes]) -> FakeArchiveExtractor:
    return FakeArchiveExtractor(upstream_files)


@pytest.fixture
def recording_fs() -> RecordingFilesystem:
    return RecordingFilesystem()


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Directory under which workspaces are created, so tests can inspect it."""
    path = tmp_path / "workspaces"
    path.mkdir()
    return path


@pytest.fixture
def make_installer(
    fake_retriever: FakeReleaseRetriever,
    fake_extractor: FakeArchiveExtractor,
    recording_fs: RecordingFilesystem,
    fake_logger: FakeLoggingAdapter,
    workspace_root: Path,
):
    """Factory building an Installer over fakes for given settings."""

    def factory(
        settings: InstallerSettings,
        platform_detector: FakePlatformDetector | None = None,
    ) -> Installer:
        return Installer(
            settings=settings,
            platform_detector=platform_detector
            or FakePlatformDetector.from_tuple("linux", "amd64"),
            retriever=fake_retriever,
            extractor=fake_extractor,
            filesystem=recording_fs,
            workspace=TemporaryWorkspace(base_dir=workspace_root),
            logger=fake_logger,
        )

    return factory
