import structlog

from src.core.constants import BRANCH_REF_PREFIX
from src.core.errors import BadRequestError
from src.core.models import EventType, NormalizedEvent, SkippedEvent, WebhookEvent
from src.webhooks.handlers.base import EventHandler
from src.webhooks.models import PushEventPayload

logger = structlog.get_logger()


class PushEventHandler(EventHandler):
    """Handler for push webhook events."""

    event_type = EventType.PUSH

    def normalize(self, event: WebhookEvent) -> NormalizedEvent | SkippedEvent:
        payload = self.parse_payload(PushEventPayload, event.payload)
        log = logger.bind(event_type="push", repo=event.repo_full_name, ref=payload.ref)

        if payload.deleted:
            log.info("push_branch_deleted")
            return SkippedEvent("Branch deletion event, no build needed")

        if not payload.ref:
            log.error("push_ref_missing")
            raise BadRequestError("Invalid push event payload: missing ref")

        branch = payload.ref.removeprefix(BRANCH_REF_PREFIX)
        if not payload.ref.startswith(BRANCH_REF_PREFIX) or not branch:
            log.error("push_branch_unparseable")
            raise BadRequestError("Invalid branch reference format")

        head_commit = payload.head_commit
        inputs = {
            "branch": branch,
            "author": (payload.pusher.name if payload.pusher else None) or "Unknown",
            "commit_sha": payload.after or "",
            "commit_message": (head_commit.message if head_commit else None) or "",
            "commit_url": (head_commit.url if head_commit else None) or "",
        }
        log.info("push_normalized", branch=branch, commit_sha=inputs["commit_sha"])
        return NormalizedEvent(inputs=inputs, source_branch=branch)
