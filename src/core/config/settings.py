"""
Main configuration class that composes all configs.
"""

import os

import structlog
from dotenv import load_dotenv

from src.core.config.github_config import GitHubConfig
from src.core.config.logging_config import LoggingConfig
from src.core.errors import ConfigurationError

logger = structlog.get_logger()

# Load environment variables from a .env file
load_dotenv()


class Config:
    """
    Main configuration class.

    Built from the process environment. The relay endpoint builds a fresh
    instance for every delivery, so edits to the environment (for example
    the workflow mappings) apply without a restart.
    """

    def __init__(self) -> None:
        self.github = GitHubConfig(
            token=os.getenv("GITHUB_TOKEN", ""),
            automation_repo_owner=os.getenv("AUTOMATION_REPO_OWNER", ""),
            automation_repo_name=os.getenv("AUTOMATION_REPO_NAME", ""),
            workflow_mappings=os.getenv("WORKFLOW_MAPPINGS", ""),
            webhook_secret=os.getenv("WEBHOOK_SECRET", ""),
            api_base_url=os.getenv("GITHUB_API_BASE_URL", "https://api.github.com").rstrip("/"),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            json_output=os.getenv("LOG_JSON", "false").lower() == "true",
        )

        self.environment = os.getenv("ENVIRONMENT", "production")

    @property
    def diagnostics_enabled(self) -> bool:
        """Whether stack traces may be returned in error responses."""
        return self.environment.lower() == "development"

    def validate(self) -> None:
        """
        Validate the settings every delivery needs.

        The workflow mappings are checked later, when the target is resolved.

        Raises:
            ConfigurationError: If the token or the automation repository is missing.
        """
        if not self.github.token:
            logger.error("missing_github_token")
            raise ConfigurationError("Server configuration error: missing authentication token")

        if not self.github.automation_repo_owner or not self.github.automation_repo_name:
            logger.error(
                "missing_repository_configuration",
                has_repo_owner=bool(self.github.automation_repo_owner),
                has_repo_name=bool(self.github.automation_repo_name),
            )
            raise ConfigurationError("Server configuration error: missing repository configuration")


def load_config() -> Config:
    """Read a fresh configuration from the environment."""
    return Config()
