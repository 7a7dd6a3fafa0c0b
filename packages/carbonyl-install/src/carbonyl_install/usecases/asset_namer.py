"""Asset namer use case deriving the upstream archive reference."""

from __future__ import annotations

from carbonyl_install.domain.release import AssetReference, PlatformTarget


class AssetNamer:
    """Derives the upstream release asset for a platform target.

    The filename follows the fixed pattern 'carbonyl.<os>-<arch>.zip'.
    """

    def __init__(self, repo_owner: str, repo_name: str, version_tag: str) -> None:
        self._repo_owner = repo_owner
        self._repo_name = repo_name
        self._version_tag = version_tag

    def __call__(self, target: PlatformTarget) -> AssetReference:
        return AssetReference(
            repo_owner=self._repo_owner,
            repo_name=self._repo_name,
            version_tag=self._version_tag,
            filename=AssetReference.filename_for(target),
        )
