import structlog

from src.core.constants import BUILD_TRIGGERING_PR_ACTIONS
from src.core.errors import BadRequestError
from src.core.models import EventType, NormalizedEvent, SkippedEvent, WebhookEvent
from src.webhooks.handlers.base import EventHandler
from src.webhooks.models import PullRequestEventPayload

logger = structlog.get_logger()


class PullRequestEventHandler(EventHandler):
    """Handler for pull request webhook events."""

    event_type = EventType.PULL_REQUEST

    def normalize(self, event: WebhookEvent) -> NormalizedEvent | SkippedEvent:
        payload = self.parse_payload(PullRequestEventPayload, event.payload)
        log = logger.bind(
            event_type="pull_request",
            repo=event.repo_full_name,
            pr_number=payload.number,
            action=payload.action,
        )

        pull_request = payload.pull_request
        if not payload.action or pull_request is None:
            log.error("pr_fields_missing")
            raise BadRequestError("Invalid PR event payload: missing action or pull_request")

        # Only a fixed set of actions builds; the rest are acknowledged.
        if payload.action not in BUILD_TRIGGERING_PR_ACTIONS:
            log.info("pr_action_ignored")
            return SkippedEvent(
                f"PR action '{payload.action}' doesn't trigger a build",
                {"pr_number": payload.number, "pr_action": payload.action},
            )

        branch = (pull_request.head.ref if pull_request.head else None) or ""
        if not branch:
            log.error("pr_head_ref_missing")
            raise BadRequestError("Missing branch information in PR data")

        inputs = {
            "branch": branch,
            "pr_number": str(payload.number) if payload.number is not None else "",
            "pr_action": payload.action,
            "author": (pull_request.user.login if pull_request.user else None) or "Unknown",
            "pr_title": pull_request.title or "",
            "pr_url": pull_request.html_url or "",
            "target_branch": (pull_request.base.ref if pull_request.base else None) or "",
        }
        log.info("pr_normalized", branch=branch, target_branch=inputs["target_branch"])
        return NormalizedEvent(inputs=inputs, source_branch=branch)
