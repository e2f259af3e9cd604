"""
Workflow input assembly.

GitHub rejects a workflow_dispatch call carrying more than ten inputs, so the
assembled inputs are trimmed to a fixed set of essential keys when needed.
"""

import structlog

from src.core.constants import ESSENTIAL_INPUT_KEYS, MAX_DISPATCH_INPUTS
from src.core.models import DispatchInputs, WebhookEvent
from src.core.utils.timestamps import utc_timestamp

logger = structlog.get_logger()


def build_base_inputs(event: WebhookEvent, timestamp: str | None = None) -> DispatchInputs:
    """Inputs common to every event type."""
    inputs: DispatchInputs = {
        "event_type": event.event_type,
        "timestamp": timestamp or utc_timestamp(),
    }
    if event.repo_full_name:
        inputs["repository"] = event.repo_full_name
    if event.sender_login is not None:
        inputs["sender"] = event.sender_login
    return inputs


def trim_inputs(inputs: DispatchInputs) -> DispatchInputs:
    """
    Keep at most MAX_DISPATCH_INPUTS entries.

    Inputs within the limit are returned unchanged. Otherwise the essential
    keys are kept in priority order and everything else is dropped.
    """
    if len(inputs) <= MAX_DISPATCH_INPUTS:
        return inputs

    logger.warning("dispatch_inputs_over_limit", count=len(inputs), limit=MAX_DISPATCH_INPUTS)

    trimmed: DispatchInputs = {}
    for key in ESSENTIAL_INPUT_KEYS:
        if key in inputs:
            trimmed[key] = inputs[key]
            if len(trimmed) >= MAX_DISPATCH_INPUTS:
                break

    logger.info(
        "dispatch_inputs_trimmed",
        before=len(inputs),
        after=len(trimmed),
        dropped=sorted(set(inputs) - set(trimmed)),
    )
    return trimmed
