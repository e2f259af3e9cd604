import json
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.errors import create_error_response, create_unexpected_error_response, render_error
from src.core.config import Config, load_config
from src.core.constants import PARSE_ERROR_EXCERPT_LENGTH
from src.core.errors import BadRequestError, RelayError
from src.core.models import WebhookEvent
from src.webhooks.auth import verify_github_signature
from src.webhooks.dispatcher import WebhookDispatcher, dispatcher

logger = structlog.get_logger()
router = APIRouter()


# Dependency providers. Tests override these to inject configuration and
# dispatchers without touching the environment.
def get_config() -> Config:
    """Returns the configuration for this delivery, read from the environment."""
    return load_config()


def get_dispatcher() -> WebhookDispatcher:
    """Returns the shared WebhookDispatcher instance."""
    return dispatcher


def _create_event_from_request(event_name: str, body: bytes) -> WebhookEvent:
    """Factory function to create a WebhookEvent from raw request data."""
    try:
        payload = json.loads(body)
    except ValueError as e:
        logger.warning("webhook_payload_invalid", event_type=event_name, error=str(e))
        raise BadRequestError("Invalid JSON payload", str(e)[:PARSE_ERROR_EXCERPT_LENGTH]) from e

    if not isinstance(payload, dict):
        logger.warning("webhook_payload_not_object", event_type=event_name)
        raise BadRequestError("Invalid JSON payload", "Expected a JSON object")

    return WebhookEvent(event_type=event_name, payload=payload)


@router.post("/github", summary="Endpoint for GitHub repository webhooks")
async def github_webhook_endpoint(
    request: Request,
    config: Config = Depends(get_config),
    dispatcher_instance: WebhookDispatcher = Depends(get_dispatcher),
) -> Any:
    """
    Receives push and pull request webhooks from source repositories and
    triggers the mapped workflow in the automation repository.

    - It checks the event header and the service configuration.
    - It verifies the signature when a webhook secret is configured.
    - It parses the payload and hands the event to the dispatcher, which
      resolves the target workflow and triggers it.

    Every failure is answered with a JSON error body.
    """
    event_name = request.headers.get("X-GitHub-Event")

    try:
        if not event_name:
            raise BadRequestError("Missing GitHub event header")

        config.validate()

        body = await request.body()
        verify_github_signature(body, request.headers.get("X-Hub-Signature-256"), config.github.webhook_secret)

        event = _create_event_from_request(event_name, body)
        logger.info("webhook_received", event_type=event_name, repo=event.repo_full_name)

        return await dispatcher_instance.dispatch(event, config)
    except RelayError as e:
        logger.warning("webhook_rejected", event_type=event_name, status=e.status_code, error=e.error)
        response = create_error_response(e, include_stack=config.diagnostics_enabled)
        return JSONResponse(status_code=e.status_code, content=render_error(response))
    except Exception as e:
        logger.exception("webhook_processing_failed", event_type=event_name)
        response = create_unexpected_error_response(e, include_stack=config.diagnostics_enabled)
        return JSONResponse(status_code=500, content=render_error(response))
