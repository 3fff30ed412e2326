"""Configuration loader that reads from .env and validates with Pydantic."""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import Config, CredentialsConfig, GitHubConfig

# Optional GitHub settings: env var -> GitHubConfig field
GITHUB_ENV_FIELDS = {
    "GITHUB_API_BASE_URL": "api_base_url",
    "GITHUB_PAGE_SIZE": "page_size",
    "GITHUB_SEARCH_TIMEOUT": "search_timeout",
    "GITHUB_LOGO_TIMEOUT": "logo_timeout",
    "GITHUB_COMMITS_TIMEOUT": "commits_timeout",
}


def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Reads from .env file in the project root and validates the GitHub
    credentials and settings using Pydantic models. Variables already set
    in the environment take precedence over the .env file.

    Returns:
        Config: Validated configuration object

    Raises:
        SystemExit: If configuration is invalid or missing required fields
    """
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    github_settings = {
        field: os.getenv(env_name)
        for env_name, field in GITHUB_ENV_FIELDS.items()
        if os.getenv(env_name)
    }

    try:
        config = Config(
            credentials=CredentialsConfig(
                github_username=os.getenv("GITHUB_USERNAME", ""),
                github_token=os.getenv("GITHUB_TOKEN", ""),
            ),
            github=GitHubConfig(**github_settings),
            commit_workers=os.getenv("COMMIT_WORKERS", "1"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

        return config

    except ValidationError as e:
        print("❌ Configuration validation failed:", file=sys.stderr)
        print("\nPlease check your .env file. Missing or invalid fields:", file=sys.stderr)

        for error in e.errors():
            field_path = " → ".join(str(x) for x in error["loc"])
            message = error["msg"]
            print(f"  • {field_path}: {message}", file=sys.stderr)

        print("\nHint: Copy .env.example to .env and fill in your credentials.", file=sys.stderr)
        sys.exit(1)
