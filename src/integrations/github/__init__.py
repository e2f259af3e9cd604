"""
GitHub API adapter.

This package provides the REST client used to read repository metadata and
dispatch workflows.
"""

from src.integrations.github.client import GitHubClient

__all__ = [
    "GitHubClient",
]
