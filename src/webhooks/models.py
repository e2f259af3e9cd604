"""
Schemas for the parts of GitHub webhook payloads the relay reads.

Every field is optional: a missing field is reported by the handler with a
precise message, while a field of the wrong type fails validation here.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError


def describe_validation_error(error: ValidationError) -> tuple[str, str]:
    """The dotted path and message of the first validation failure."""
    first = error.errors()[0]
    return ".".join(str(part) for part in first["loc"]), first["msg"]


class WebhookPayloadModel(BaseModel):
    """Base for webhook payload schemas; unknown fields are ignored."""

    model_config = ConfigDict(extra="ignore")


class WebhookUser(WebhookPayloadModel):
    """GitHub user reference (sender, pull request author)."""

    login: str | None = Field(None, description="GitHub username")


class WebhookRepository(WebhookPayloadModel):
    """Repository metadata from the webhook payload."""

    full_name: str | None = Field(None, description="Owner/repo format")


class Pusher(WebhookPayloadModel):
    name: str | None = None


class HeadCommit(WebhookPayloadModel):
    message: str | None = None
    url: str | None = None


class PushEventPayload(WebhookPayloadModel):
    """Payload of a push event."""

    ref: str | None = Field(None, description="Full ref that was pushed, e.g. refs/heads/main")
    deleted: bool = Field(False, description="Whether the push deleted the ref")
    after: str | None = Field(None, description="SHA of the most recent commit after the push")
    pusher: Pusher | None = None
    head_commit: HeadCommit | None = None


class PullRequestRef(WebhookPayloadModel):
    ref: str | None = None


class PullRequest(WebhookPayloadModel):
    title: str | None = None
    html_url: str | None = None
    user: WebhookUser | None = None
    head: PullRequestRef | None = None
    base: PullRequestRef | None = None


class PullRequestEventPayload(WebhookPayloadModel):
    """Payload of a pull_request event."""

    action: str | None = Field(None, description="Event action type (e.g., 'opened', 'closed')")
    number: int | None = Field(None, description="Pull request number")
    pull_request: PullRequest | None = None


class WebhookEnvelope(WebhookPayloadModel):
    """Fields shared by every event payload."""

    repository: WebhookRepository | None = None
    sender: WebhookUser | None = None
