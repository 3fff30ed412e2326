"""Configuration models for validation using Pydantic."""

from pydantic import BaseModel, Field, field_validator


class CredentialsConfig(BaseModel):
    """GitHub identity loaded from environment variables."""

    github_username: str = Field(..., min_length=1, description="GitHub login whose PRs are reported")
    github_token: str = Field(..., min_length=1, description="GitHub personal access token")

    @field_validator("github_username")
    @classmethod
    def validate_github_username(cls, v: str) -> str:
        """Validate GitHub username is set and has no whitespace."""
        v = v.strip()
        if not v or v == "your_github_username":
            raise ValueError("GitHub username must be set in .env file")
        if any(ch.isspace() for ch in v):
            raise ValueError("GitHub username must not contain whitespace")
        return v

    @field_validator("github_token")
    @classmethod
    def validate_github_token(cls, v: str) -> str:
        """Validate GitHub token is set."""
        if not v or v == "ghp_your_token_here":
            raise ValueError("GitHub token must be set in .env file")
        return v


class GitHubConfig(BaseModel):
    """GitHub API endpoint and per-request limits."""

    api_base_url: str = Field(default="https://api.github.com", description="GitHub REST API root")
    page_size: int = Field(default=100, ge=1, le=100, description="Search results per page")
    search_timeout: float = Field(default=5.0, gt=0, description="Timeout (s) for each PR search page")
    logo_timeout: float = Field(default=10.0, gt=0, description="Timeout (s) for repository lookups")
    commits_timeout: float = Field(default=5.0, gt=0, description="Timeout (s) for PR commit lists")

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Validate API base URL and drop any trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("GitHub API base URL must start with http:// or https://")
        return v.rstrip("/")


class Config(BaseModel):
    """Application configuration."""

    credentials: CredentialsConfig
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    commit_workers: int = Field(default=1, ge=1, le=16, description="Parallel commit fetches per report")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
