import json
from typing import Any

import structlog

from src.core.config import Config
from src.core.constants import PAYLOAD_EXCERPT_LENGTH
from src.core.errors import BadRequestError
from src.core.models import EventType, NormalizedEvent, SkippedEvent, WebhookEvent
from src.core.utils.timestamps import utc_timestamp
from src.integrations.github import GitHubClient
from src.webhooks.handlers.base import EventHandler
from src.webhooks.handlers.pull_request import PullRequestEventHandler
from src.webhooks.handlers.push import PushEventHandler
from src.webhooks.inputs import build_base_inputs, trim_inputs
from src.webhooks.resolver import TargetResolver

logger = structlog.get_logger()


class WebhookDispatcher:
    """
    Relays webhook events to automation workflows.

    Event types without a registered handler are acknowledged and ignored.
    The dispatcher holds no per-delivery state; everything a delivery needs is
    passed to dispatch().
    """

    def __init__(self):
        self._handlers: dict[EventType, EventHandler] = {}

    def register_handler(self, event_type: EventType, handler: EventHandler):
        """
        Registers a handler instance for a specific event type.

        Args:
            event_type: The EventType to handle (e.g., EventType.PULL_REQUEST).
            handler: An instance of a class that implements the EventHandler interface.
        """
        if event_type in self._handlers:
            logger.warning("handler_overridden", event_type=event_type.value)
        self._handlers[event_type] = handler
        logger.debug("handler_registered", event_type=event_type.value, handler=handler.__class__.__name__)

    def get_handler(self, event: WebhookEvent) -> EventHandler | None:
        if event.kind is None:
            return None
        return self._handlers.get(event.kind)

    async def dispatch(self, event: WebhookEvent, config: Config, client: GitHubClient | None = None) -> dict[str, Any]:
        """
        Resolve the target workflow for the event and trigger it.

        Args:
            event: The parsed webhook event.
            config: Validated configuration for this delivery.
            client: GitHub client; built from the configuration when omitted.

        Returns:
            The JSON body of the success response.

        Raises:
            RelayError: On the first failing stage.
        """
        client = client or GitHubClient(config.github.token, config.github.api_base_url)
        log = logger.bind(event_type=event.event_type, repo=event.repo_full_name)

        target = await TargetResolver(config.github, client).resolve(event.repo_full_name)
        inputs = build_base_inputs(event)

        handler = self.get_handler(event)
        if handler is None:
            log.info("event_ignored")
            return SkippedEvent(f"Ignored event: {event.event_type}").to_response()

        result: NormalizedEvent | SkippedEvent = handler.normalize(event)
        if isinstance(result, SkippedEvent):
            return result.to_response()

        inputs.update(result.inputs)
        if not inputs.get("branch"):
            log.error("branch_missing_after_normalization")
            raise BadRequestError(
                "Could not determine branch to build",
                event=event.event_type,
                payload_excerpt=json.dumps(event.payload)[:PAYLOAD_EXCERPT_LENGTH],
            )

        inputs = trim_inputs(inputs)

        log.info("workflow_triggering", workflow=target.workflow_filename, inputs=inputs)
        await client.dispatch_workflow(target, inputs)
        log.info("workflow_triggered", workflow=target.workflow_filename, branch=target.branch)

        return {
            "message": "Workflow triggered successfully",
            "event": event.event_type,
            "inputs": inputs,
            "automation_repo": target.automation_repo,
            "workflow_filename": target.workflow_filename,
            "workflow_branch": target.branch,
            "source_branch": result.source_branch,
            "timestamp": utc_timestamp(),
        }


def build_dispatcher() -> WebhookDispatcher:
    """Create a dispatcher with the push and pull request handlers registered."""
    instance = WebhookDispatcher()
    instance.register_handler(EventType.PUSH, PushEventHandler())
    instance.register_handler(EventType.PULL_REQUEST, PullRequestEventHandler())
    return instance


# Handlers are stateless, so one registry serves every delivery.
dispatcher = build_dispatcher()
