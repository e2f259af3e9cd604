"""
Core error classes for the workflow relay.

Every error carries the HTTP status it is surfaced with and the fields of its
JSON body, so the webhook endpoint can translate any of them uniformly.
"""

from typing import Any


class RelayError(Exception):
    """Base class for failures that end the handling of a delivery."""

    status_code: int = 500

    def __init__(self, error: str, message: str | None = None, **details: Any) -> None:
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message or error)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        body.update(self.details)
        return body


class BadRequestError(RelayError):
    """Raised when the inbound request is missing or carries malformed data."""

    status_code = 400


class ConfigurationError(RelayError):
    """Raised when the service itself is misconfigured."""

    status_code = 500


class NotConfiguredError(RelayError):
    """Raised when the source repository has no workflow mapping."""

    status_code = 400

    def __init__(self, repository: str, available_repositories: list[str]) -> None:
        self.repository = repository
        self.available_repositories = available_repositories
        super().__init__(
            "Repository not configured",
            f"No workflow mapping found for repository: {repository}",
            available_repositories=available_repositories,
        )


class UpstreamError(RelayError):
    """Raised when a GitHub API call fails or returns an unusable response."""

    status_code = 500


class SignatureError(RelayError):
    """Raised when the webhook signature is missing or does not match."""

    status_code = 401
