"""Tests for GitHub fetching and repository cloning."""

from unittest.mock import patch

import pytest
import requests
from conftest import make_response

from local_dev_lib.api import github as github_api
from local_dev_lib.errors import GithubError
from local_dev_lib.lib.github import (
    clone_github_repo,
    download_github_repo_zip,
    fetch_release_data,
)
from local_dev_lib.types import GithubReleaseData


class TestGithubApi:
    """Tests for the raw GitHub requests."""

    def test_fetch_repo_file(self):
        response = make_response(200, content=b"name: theme")
        with patch.object(github_api._session, "get", return_value=response) as get:
            text = github_api.fetch_repo_file("owner/repo", "config.yml", "main")

        assert text == "name: theme"
        assert get.call_args.args[0] == (
            "https://raw.githubusercontent.com/owner/repo/main/config.yml"
        )

    def test_latest_release(self):
        response = make_response(
            200, {"tag_name": "v1.2.0", "zipball_url": "https://zip", "id": 9}
        )
        with patch.object(github_api._session, "get", return_value=response) as get:
            release = github_api.fetch_repo_release_data("owner/repo")

        assert get.call_args.args[0].endswith("/repos/owner/repo/releases/latest")
        assert release.tag_name == "v1.2.0"
        assert release.zipball_url == "https://zip"

    def test_tagged_release(self):
        response = make_response(200, {"tag_name": "v2.0.0"})
        with patch.object(github_api._session, "get", return_value=response) as get:
            github_api.fetch_repo_release_data("owner/repo", "v2.0.0")
        assert get.call_args.args[0].endswith("/releases/tags/v2.0.0")

    def test_github_token_header(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TOKEN", "gh-token")
        response = make_response(200, content=b"zip")
        with patch.object(github_api._session, "get", return_value=response) as get:
            github_api.fetch_repo_as_zip("https://api.github.com/zip")

        headers = get.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer gh-token"
        assert "User-Agent" in headers

    def test_error_status(self):
        response = make_response(404)
        with patch.object(github_api._session, "get", return_value=response):
            with pytest.raises(GithubError, match=r"\[404\] Not Found"):
                github_api.fetch_repo_as_zip("https://api.github.com/zip")

    def test_connection_error(self):
        with patch.object(
            github_api._session,
            "get",
            side_effect=requests.exceptions.ConnectionError("offline"),
        ):
            with pytest.raises(GithubError, match="repository archive"):
                github_api.fetch_repo_as_zip("https://api.github.com/zip")


class TestFetchReleaseData:
    """Tests for tag normalization."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [("1.0.0", "v1.0.0"), ("v1.0.0", "v1.0.0"), (None, None)],
    )
    def test_tag_prefix(self, tag, expected):
        with patch(
            "local_dev_lib.lib.github.fetch_repo_release_data",
            return_value=GithubReleaseData(tag_name="v1.0.0"),
        ) as fetch:
            fetch_release_data("owner/repo", tag)
        fetch.assert_called_once_with("owner/repo", expected)


class TestDownloadGithubRepoZip:
    """Tests for choosing which zipball to download."""

    def test_default_branch(self):
        with patch(
            "local_dev_lib.lib.github.fetch_repo_as_zip", return_value=b"zip"
        ) as fetch:
            assert download_github_repo_zip("owner/repo") == b"zip"
        fetch.assert_called_once_with("https://api.github.com/repos/owner/repo/zipball")

    def test_branch(self):
        with patch("local_dev_lib.lib.github.fetch_repo_as_zip") as fetch:
            download_github_repo_zip("owner/repo", branch="dev")
        fetch.assert_called_once_with(
            "https://api.github.com/repos/owner/repo/zipball/dev"
        )

    def test_release_zipball_url(self):
        release = GithubReleaseData(tag_name="v1.0.0", zipball_url="https://zipball")
        with patch(
            "local_dev_lib.lib.github.fetch_repo_release_data", return_value=release
        ), patch("local_dev_lib.lib.github.fetch_repo_as_zip") as fetch:
            download_github_repo_zip("owner/repo", is_release=True, tag="1.0.0")
        fetch.assert_called_once_with("https://zipball")

    def test_release_without_zipball_url(self):
        release = GithubReleaseData(tag_name="v1.0.0")
        with patch(
            "local_dev_lib.lib.github.fetch_repo_release_data", return_value=release
        ), patch("local_dev_lib.lib.github.fetch_repo_as_zip") as fetch:
            download_github_repo_zip("owner/repo", is_release=True)
        fetch.assert_called_once_with(
            "https://api.github.com/repos/owner/repo/zipball/v1.0.0"
        )


class TestCloneGithubRepo:
    """Tests for clone_github_repo."""

    def test_extracts_into_dest(self, tmp_path):
        with patch(
            "local_dev_lib.lib.github.fetch_repo_as_zip", return_value=b"zip-bytes"
        ), patch(
            "local_dev_lib.lib.github.extract_zip_archive", return_value=True
        ) as extract:
            assert clone_github_repo(
                "owner/repo", tmp_path / "dest", branch="main", source_dir="src"
            )

        extract.assert_called_once_with(
            b"zip-bytes",
            "repo",
            tmp_path / "dest",
            source_dir="src",
            log_callbacks=None,
        )

    def test_propagates_github_errors(self, tmp_path):
        with patch(
            "local_dev_lib.lib.github.fetch_repo_as_zip",
            side_effect=GithubError("Failed to fetch repository archive"),
        ):
            with pytest.raises(GithubError):
                clone_github_repo("owner/repo", tmp_path / "dest")
