"""Data models for the PR showcase."""

from models.config_models import Config, CredentialsConfig, GitHubConfig
from models.data_models import Commit, LogoResult, PullRequest, PullRequestDetail, Report

__all__ = [
    "Config",
    "CredentialsConfig",
    "GitHubConfig",
    "Commit",
    "LogoResult",
    "PullRequest",
    "PullRequestDetail",
    "Report",
]
