"""Shared pytest fixtures and configuration."""

from unittest.mock import Mock

import pytest
import requests

from models.config_models import Config, CredentialsConfig

API = "https://api.github.com"


@pytest.fixture
def test_env(monkeypatch):
    """
    Set valid test environment variables.

    This fixture sets up valid test environment variables so config
    can be loaded during tests without requiring real credentials.
    """
    monkeypatch.setenv("GITHUB_USERNAME", "octocat")
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_token_1234567890")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    for name in (
        "GITHUB_API_BASE_URL",
        "GITHUB_PAGE_SIZE",
        "GITHUB_SEARCH_TIMEOUT",
        "GITHUB_LOGO_TIMEOUT",
        "GITHUB_COMMITS_TIMEOUT",
        "COMMIT_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)

    return {
        "github_username": "octocat",
        "github_token": "ghp_test_token_1234567890",
        "log_level": "DEBUG",
    }


@pytest.fixture
def invalid_env(monkeypatch):
    """
    Set up invalid/missing environment variables for testing validation.
    """
    monkeypatch.setenv("GITHUB_USERNAME", "")
    monkeypatch.setenv("GITHUB_TOKEN", "")


@pytest.fixture
def config():
    """Valid config with default GitHub settings."""
    return Config(
        credentials=CredentialsConfig(
            github_username="octocat",
            github_token="ghp_test_token",
        )
    )


def make_response(payload=None, status_code=200, json_error=None):
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.headers = {}
    response.text = ""
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


def search_item(number, repo="octocat/hello-world", title=None):
    """Raw GitHub search item for a PR."""
    return {
        "title": title or f"PR {number}",
        "html_url": f"https://github.com/{repo}/pull/{number}",
        "repository_url": f"{API}/repos/{repo}",
        "number": number,
        "created_at": "2025-01-15T10:30:00Z",
        "state": "open",
    }


def raw_commit(message):
    """Raw GitHub commit object."""
    return {"sha": "abc123", "commit": {"message": message}}
