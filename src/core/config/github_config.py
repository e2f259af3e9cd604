"""
GitHub configuration.
"""

from dataclasses import dataclass


@dataclass
class GitHubConfig:
    """GitHub configuration for the automation repository and its workflows."""

    token: str
    automation_repo_owner: str
    automation_repo_name: str
    workflow_mappings: str
    webhook_secret: str = ""
    api_base_url: str = "https://api.github.com"

    @property
    def automation_repo(self) -> str:
        """The automation repository in 'owner/name' form."""
        return f"{self.automation_repo_owner}/{self.automation_repo_name}"
