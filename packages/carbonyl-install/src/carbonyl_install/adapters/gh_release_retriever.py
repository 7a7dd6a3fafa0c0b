"""GitHub CLI implementation of the ReleaseRetrieverPort."""

from __future__ import annotations

from pathlib import Path

from carbonyl_install.adapters.command_runner import run_command


class GhReleaseRetriever:
    """Adapter that downloads release assets with `gh release download`.

    Relies on the gh CLI being installed and authenticated. The asset path
    is derived from the pattern, which must therefore be an exact filename.
    """

    def __init__(self, executable: str = "gh") -> None:
        self._executable = executable

    def download(
        self,
        version_tag: str,
        repo: str,
        pattern: str,
        destination: Path,
    ) -> Path:
        """Download the asset via gh.

        Raises:
            CommandFailedError: If gh exits non-zero.
            FileNotFoundError: If gh is not installed.
        """
        run_command(
            [
                self._executable,
                "release",
                "download",
                version_tag,
                "--repo",
                repo,
                "--pattern",
                pattern,
                "--dir",
                str(destination),
            ]
        )
        return destination / pattern
