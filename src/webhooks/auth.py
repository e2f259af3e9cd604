import hashlib
import hmac

import structlog

from src.core.errors import SignatureError

logger = structlog.get_logger()


def verify_github_signature(body: bytes, signature: str | None, secret: str) -> bool:
    """
    Verify the GitHub webhook signature of a delivery.

    Compares the 'X-Hub-Signature-256' header with an HMAC-SHA256 of the raw
    request body keyed with the webhook secret. Verification is skipped when
    no secret is configured.

    Raises:
        SignatureError: If a secret is configured and the signature is missing or invalid.

    Returns:
        True if the signature was checked and matched, False if it was skipped.
    """
    if not secret:
        return False

    if not signature:
        logger.warning("webhook_signature_missing")
        raise SignatureError("Missing GitHub webhook signature")

    mac = hmac.new(secret.encode(), msg=body, digestmod=hashlib.sha256)
    expected_signature = f"sha256={mac.hexdigest()}"

    # Header values may hold any latin-1 character; compare as bytes.
    if not hmac.compare_digest(signature.encode(), expected_signature.encode()):
        logger.error("webhook_signature_invalid")
        raise SignatureError("Invalid GitHub webhook signature")

    logger.debug("webhook_signature_verified")
    return True
