"""HTTPX-based implementation of the ReleaseRetrieverPort.

This adapter uses httpx and the GitHub REST API to download a single
release asset.
"""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Any

import httpx

GITHUB_API_URL = "https://api.github.com"


class ReleaseAssetNotFoundError(LookupError):
    """Raised when the release or a unique matching asset does not exist."""

    pass


class HttpxReleaseRetriever:
    """HTTPX-based adapter for downloading GitHub release assets.

    Looks up the release by tag, selects exactly one asset whose name matches
    the pattern and streams it to disk.

    Attributes:
        token: Optional GitHub token sent as a bearer token to the API.
    """

    def __init__(
        self,
        token: str | None = None,
        client: httpx.Client | None = None,
        api_url: str = GITHUB_API_URL,
        timeout: float = 60.0,
    ) -> None:
        """Initialize the HTTPX release retriever.

        Args:
            token: Optional GitHub token for authenticated API requests.
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per download.
            api_url: Base URL of the GitHub API.
            timeout: Request timeout in seconds.
        """
        self._token = token
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout

    def download(
        self,
        version_tag: str,
        repo: str,
        pattern: str,
        destination: Path,
    ) -> Path:
        """Download one release asset matching pattern into destination.

        Returns:
            Path to the written asset.

        Raises:
            ReleaseAssetNotFoundError: If the release is missing, or zero or
                several assets match.
            httpx.HTTPError: For network failures and HTTP errors.
            OSError: For filesystem errors.
        """
        if self._client is not None:
            return self._download(self._client, version_tag, repo, pattern, destination)

        with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
            return self._download(client, version_tag, repo, pattern, destination)

    def _download(
        self,
        client: httpx.Client,
        version_tag: str,
        repo: str,
        pattern: str,
        destination: Path,
    ) -> Path:
        asset = self._find_asset(client, version_tag, repo, pattern)
        target = destination / asset["name"]

        with client.stream(
            "GET",
            asset["browser_download_url"],
            headers={"Accept": "application/octet-stream"},
            follow_redirects=True,
        ) as response:
            response.raise_for_status()
            with target.open("wb") as fh:
                for chunk in response.iter_bytes():
                    fh.write(chunk)

        return target

    def _find_asset(
        self,
        client: httpx.Client,
        version_tag: str,
        repo: str,
        pattern: str,
    ) -> dict[str, Any]:
        url = f"{self._api_url}/repos/{repo}/releases/tags/{version_tag}"
        response = client.get(url, headers=self._api_headers())
        if response.status_code == 404:
            raise ReleaseAssetNotFoundError(f"release not found: {repo} {version_tag}")
        response.raise_for_status()

        assets = response.json().get("assets", [])
        matches = [a for a in assets if fnmatch.fnmatch(a.get("name", ""), pattern)]
        if not matches:
            raise ReleaseAssetNotFoundError(
                f"no assets match the file pattern {pattern!r} in {repo} {version_tag}"
            )
        if len(matches) > 1:
            names = ", ".join(a["name"] for a in matches)
            raise ReleaseAssetNotFoundError(
                f"pattern {pattern!r} matches multiple assets: {names}"
            )
        return matches[0]

    def _api_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers
