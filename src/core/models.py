from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ValidationError

from src.core.errors import BadRequestError
from src.webhooks.models import WebhookEnvelope, describe_validation_error

# Inputs sent with a workflow_dispatch call; GitHub only accepts strings.
DispatchInputs = dict[str, str]


class EventType(Enum):
    """GitHub event types that can trigger a workflow."""

    PUSH = "push"
    PULL_REQUEST = "pull_request"


class WebhookEvent:
    """
    A representation of an incoming webhook delivery, as received: the raw
    event name from the X-GitHub-Event header and the decoded JSON body.
    """

    def __init__(self, event_type: str, payload: dict[str, Any]):
        self.event_type = event_type
        self.payload = payload
        try:
            envelope = WebhookEnvelope.model_validate(payload)
        except ValidationError as e:
            field_path, reason = describe_validation_error(e)
            raise BadRequestError(
                "Invalid webhook payload",
                f"{field_path}: {reason}",
                field=field_path,
            ) from e
        self.repository = envelope.repository
        self.sender = envelope.sender

    @property
    def kind(self) -> EventType | None:
        """The supported event type, or None for events the relay ignores."""
        try:
            return EventType(self.event_type)
        except ValueError:
            return None

    @property
    def repo_full_name(self) -> str:
        """The full name of the repository (e.g., 'owner/repo')."""
        if self.repository is None:
            return ""
        return self.repository.full_name or ""

    @property
    def sender_login(self) -> str | None:
        """The login of the user who triggered the event, if a sender was sent."""
        if self.sender is None:
            return None
        return self.sender.login or "Unknown"


@dataclass(frozen=True)
class DispatchTarget:
    """The workflow to run and the branch of the automation repository to run it on."""

    owner: str
    repo: str
    workflow_filename: str
    branch: str

    @property
    def automation_repo(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class NormalizedEvent:
    """Event-specific dispatch inputs produced by a handler."""

    inputs: DispatchInputs
    source_branch: str


@dataclass
class SkippedEvent:
    """An accepted delivery that does not start a build."""

    message: str
    extra: dict[str, Any] = field(default_factory=dict)

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message, **self.extra}
