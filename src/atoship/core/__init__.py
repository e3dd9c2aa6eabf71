"""Core module - Logging, exceptions and webhook signature verification."""

from atoship.core.logger import configure_logging, setup_logger
from atoship.core.signature import (
    compute_signature,
    validate_webhook_request,
    verify_webhook_signature,
)

__all__ = [
    "configure_logging",
    "setup_logger",
    "compute_signature",
    "verify_webhook_signature",
    "validate_webhook_request",
]
