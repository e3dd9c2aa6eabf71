"""atoship Webhook Signature Verification.

Verifies that incoming webhook deliveries were sent by atoship using
HMAC-SHA256 over the raw request body, keyed with the webhook secret.
"""

import hashlib
import hmac
from typing import Optional, Union

from atoship.core.logger import setup_logger

logger = setup_logger(__name__)

SIGNATURE_HEADER = "X-Atoship-Signature"
SIGNATURE_PREFIX = "sha256="


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def compute_signature(request_body: Union[str, bytes], secret: str) -> str:
    """Return the hex HMAC-SHA256 digest of the body."""
    return hmac.new(
        _to_bytes(secret),
        _to_bytes(request_body),
        hashlib.sha256,
    ).hexdigest()


def verify_webhook_signature(
    request_body: Union[str, bytes],
    signature_header: Optional[str],
    secret: Optional[str],
) -> bool:
    """
    Verify an atoship webhook signature.

    Args:
        request_body: Raw request body (NOT parsed JSON)
        signature_header: Value of the X-Atoship-Signature header, with or
            without the "sha256=" prefix
        secret: Webhook secret returned when the webhook was created

    Returns:
        True if the signature matches
    """
    # Validate inputs
    if not signature_header:
        logger.warning("Webhook received without signature header")
        return False

    if not request_body:
        logger.warning("Missing request body for signature verification")
        return False

    if not secret:
        logger.error("No webhook secret configured, cannot verify signature")
        return False

    received = signature_header.strip()
    if received.lower().startswith(SIGNATURE_PREFIX):
        received = received[len(SIGNATURE_PREFIX):]

    expected = compute_signature(request_body, secret)

    # Compare using constant-time comparison
    if hmac.compare_digest(expected.encode("ascii"), received.lower().encode("utf-8", "replace")):
        logger.debug("Valid webhook signature")
        return True

    logger.warning(f"Invalid webhook signature. Got: {received[:16]}...")
    return False


def validate_webhook_request(
    raw_body: bytes,
    signature_header: Optional[str],
    secret: Optional[str],
) -> tuple[bool, Optional[str]]:
    """
    Full webhook validation: basic checks + signature verification.

    Returns:
        Tuple of (is_valid, error_message). If valid: (True, None)
    """
    try:
        body_str = raw_body.decode("utf-8")
    except UnicodeDecodeError as e:
        error = f"Invalid UTF-8 in request body: {e}"
        logger.error(error)
        return False, error

    # Body must not be empty
    if not body_str.strip():
        return False, "Empty request body"

    if not verify_webhook_signature(raw_body, signature_header, secret):
        return False, "Invalid webhook signature"

    return True, None
