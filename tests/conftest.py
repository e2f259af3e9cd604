"""
Shared relay fixtures. The project root is put on sys.path by the pytest
`pythonpath` setting in pyproject.toml.
"""

import pytest

from src.core.config import Config

API_BASE = "https://api.github.com"
AUTOMATION_OWNER = "acme"
AUTOMATION_NAME = "automation"
WORKFLOW_MAPPINGS = "acme/app:ci.yml,acme/site:deploy.yml"


@pytest.fixture
def relay_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """A complete relay environment; tests may override single variables."""
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    monkeypatch.setenv("AUTOMATION_REPO_OWNER", AUTOMATION_OWNER)
    monkeypatch.setenv("AUTOMATION_REPO_NAME", AUTOMATION_NAME)
    monkeypatch.setenv("WORKFLOW_MAPPINGS", WORKFLOW_MAPPINGS)
    monkeypatch.delenv("WEBHOOK_SECRET", raising=False)
    monkeypatch.delenv("GITHUB_API_BASE_URL", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    return monkeypatch


@pytest.fixture
def relay_config(relay_env: pytest.MonkeyPatch) -> Config:
    return Config()


@pytest.fixture
def push_payload() -> dict[str, object]:
    """Push webhook payload for a mapped repository."""
    return {
        "ref": "refs/heads/main",
        "after": "abc123",
        "pusher": {"name": "alice", "email": "alice@example.com"},
        "head_commit": {"message": "Fix build", "url": "https://github.com/acme/app/commit/abc123"},
        "sender": {"login": "alice", "id": 1, "type": "User"},
        "repository": {"id": 1, "name": "app", "full_name": "acme/app"},
    }


@pytest.fixture
def pr_payload() -> dict[str, object]:
    """Pull request webhook payload for a mapped repository."""
    return {
        "action": "opened",
        "number": 42,
        "sender": {"login": "bob", "id": 2, "type": "User"},
        "repository": {"id": 2, "name": "site", "full_name": "acme/site"},
        "pull_request": {
            "number": 42,
            "title": "Add landing page",
            "html_url": "https://github.com/acme/site/pull/42",
            "user": {"login": "bob"},
            "head": {"ref": "feature/landing"},
            "base": {"ref": "main"},
        },
    }
