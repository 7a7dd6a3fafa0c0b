"""Unit tests for HttpxReleaseRetriever adapter."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from carbonyl_install.adapters.httpx_release_retriever import (
    HttpxReleaseRetriever,
    ReleaseAssetNotFoundError,
)
from carbonyl_install.adapters.ports import ReleaseRetrieverPort

API = "https://api.github.test"
RELEASE_URL = f"{API}/repos/fathyb/carbonyl/releases/tags/v0.0.3"
DOWNLOAD_URL = "https://objects.github.test/carbonyl.linux-amd64.zip"


def _release(*names: str) -> dict:
    return {
        "tag_name": "v0.0.3",
        "assets": [
            {"name": name, "browser_download_url": f"https://objects.github.test/{name}"}
            for name in names
        ],
    }


class GitHubStub:
    """Route handler standing in for the GitHub API and asset host."""

    def __init__(self, release: dict | None, asset: bytes = b"PK zip") -> None:
        self.release = release
        self.asset = asset
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == RELEASE_URL:
            if self.release is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=self.release)
        if str(request.url) == DOWNLOAD_URL:
            return httpx.Response(200, content=self.asset)
        return httpx.Response(404)

    def retriever(self, token: str | None = None) -> HttpxReleaseRetriever:
        client = httpx.Client(transport=httpx.MockTransport(self))
        return HttpxReleaseRetriever(token=token, client=client, api_url=API)


@pytest.mark.tier(1)
@pytest.mark.unit
@pytest.mark.tra("Adapter.HttpxReleaseRetriever")
class TestHttpxReleaseRetriever:
    """Test HttpxReleaseRetriever.download()."""

    def test_satisfies_protocol(self) -> None:
        """Test that HttpxReleaseRetriever satisfies ReleaseRetrieverPort."""
        assert isinstance(HttpxReleaseRetriever(), ReleaseRetrieverPort)

    def test_download_writes_matching_asset(self, tmp_path: Path) -> None:
        """Test the single matching asset is streamed into the destination."""
        stub = GitHubStub(_release("carbonyl.linux-amd64.zip", "carbonyl.macos-arm64.zip"))

        path = stub.retriever().download(
            "v0.0.3", "fathyb/carbonyl", "carbonyl.linux-amd64.zip", tmp_path
        )

        assert path == tmp_path / "carbonyl.linux-amd64.zip"
        assert path.read_bytes() == b"PK zip"

    def test_glob_pattern_selects_asset(self, tmp_path: Path) -> None:
        """Test shell-style patterns are matched against asset names."""
        stub = GitHubStub(_release("carbonyl.linux-amd64.zip", "checksums.txt"))

        path = stub.retriever().download("v0.0.3", "fathyb/carbonyl", "*.zip", tmp_path)

        assert path.name == "carbonyl.linux-amd64.zip"

    def test_token_is_sent_to_api_only(self, tmp_path: Path) -> None:
        """Test the bearer token never reaches the asset host."""
        stub = GitHubStub(_release("carbonyl.linux-amd64.zip"))

        stub.retriever(token="ghp_secret").download(
            "v0.0.3", "fathyb/carbonyl", "carbonyl.linux-amd64.zip", tmp_path
        )

        api_request, asset_request = stub.requests
        assert api_request.headers["Authorization"] == "Bearer ghp_secret"
        assert "Authorization" not in asset_request.headers

    def test_no_token_sends_no_authorization(self, tmp_path: Path) -> None:
        """Test anonymous access omits the Authorization header."""
        stub = GitHubStub(_release("carbonyl.linux-amd64.zip"))

        stub.retriever().download(
            "v0.0.3", "fathyb/carbonyl", "carbonyl.linux-amd64.zip", tmp_path
        )

        assert "Authorization" not in stub.requests[0].headers

    def test_missing_release(self, tmp_path: Path) -> None:
        """Test a 404 for the tag raises ReleaseAssetNotFoundError."""
        stub = GitHubStub(None)

        with pytest.raises(ReleaseAssetNotFoundError, match="release not found"):
            stub.retriever().download(
                "v0.0.3", "fathyb/carbonyl", "carbonyl.linux-amd64.zip", tmp_path
            )

    def test_no_matching_asset(self, tmp_path: Path) -> None:
        """Test a pattern matching nothing raises ReleaseAssetNotFoundError."""
        stub = GitHubStub(_release("carbonyl.macos-arm64.zip"))

        with pytest.raises(ReleaseAssetNotFoundError, match="no assets match"):
            stub.retriever().download(
                "v0.0.3", "fathyb/carbonyl", "carbonyl.linux-amd64.zip", tmp_path
            )
        assert list(tmp_path.iterdir()) == []

    def test_ambiguous_pattern(self, tmp_path: Path) -> None:
        """Test a pattern matching several assets is rejected."""
        stub = GitHubStub(_release("carbonyl.linux-amd64.zip", "carbonyl.linux-arm64.zip"))

        with pytest.raises(ReleaseAssetNotFoundError, match="multiple assets"):
            stub.retriever().download("v0.0.3", "fathyb/carbonyl", "carbonyl.linux-*", tmp_path)

    def test_server_error_raises_http_error(self, tmp_path: Path) -> None:
        """Test non-404 API failures surface as httpx errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        retriever = HttpxReleaseRetriever(
            client=httpx.Client(transport=httpx.MockTransport(handler)), api_url=API
        )

        with pytest.raises(httpx.HTTPStatusError):
            retriever.download("v0.0.3", "fathyb/carbonyl", "*.zip", tmp_path)
