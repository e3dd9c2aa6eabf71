"""Webhook event handling.

Verifies and parses webhook deliveries and dispatches them to callbacks
registered per event type. Serving the HTTP endpoint is left to the
application (any web framework can pass the raw body and header here).
"""

import inspect
import json
from typing import Awaitable, Callable, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from atoship.config.settings import Settings
from atoship.core.exceptions import ValidationError
from atoship.core.logger import setup_logger
from atoship.core.signature import validate_webhook_request
from atoship.models.webhook import WebhookEvent

logger = setup_logger(__name__)

WILDCARD = "*"

Callback = Callable[[WebhookEvent], Union[None, Awaitable[None]]]


def parse_webhook_event(raw_body: Union[str, bytes]) -> WebhookEvent:
    """Parse a raw delivery body into a WebhookEvent."""
    try:
        payload = json.loads(raw_body)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Webhook body is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise ValidationError("Webhook body must be a JSON object")

    try:
        return WebhookEvent.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid webhook event: {e}") from e


class WebhookHandler:
    """Dispatches verified webhook events to registered callbacks."""

    def __init__(self, secret: Optional[str] = None, verify: bool = True):
        """
        Args:
            secret: Webhook signing secret
            verify: Check the signature before dispatching
        """
        self.secret = secret
        self.verify = verify
        self._callbacks: Dict[str, List[Callback]] = {}

    @classmethod
    def from_env(cls, settings: Optional[Settings] = None) -> "WebhookHandler":
        """Handler keyed with ATOSHIP_WEBHOOK_SECRET."""
        settings = settings or Settings()
        if not settings.webhook_secret:
            logger.warning("ATOSHIP_WEBHOOK_SECRET not set, signatures will be rejected")
        return cls(secret=settings.webhook_secret)

    def on(self, event_type: str, callback: Optional[Callback] = None):
        """Register a callback for an event type ("*" for all events).

        Usable directly or as a decorator.
        """
        def register(fn: Callback) -> Callback:
            self._callbacks.setdefault(event_type, []).append(fn)
            return fn

        if callback is not None:
            return register(callback)
        return register

    def callbacks_for(self, event_type: str) -> List[Callback]:
        return self._callbacks.get(event_type, []) + self._callbacks.get(WILDCARD, [])

    async def dispatch(self, event: WebhookEvent) -> int:
        """
        Run every callback registered for the event.

        A failing callback is logged and does not stop the others.

        Returns:
            Number of callbacks that completed successfully
        """
        callbacks = self.callbacks_for(event.type)
        if not callbacks:
            logger.info(f"No handler registered for webhook event {event.type}")
            return 0

        succeeded = 0
        for callback in callbacks:
            try:
                result = callback(event)
                if inspect.isawaitable(result):
                    await result
                succeeded += 1
            except Exception as e:
                logger.error(f"Error in webhook handler for {event.type}: {e}", exc_info=True)

        return succeeded

    async def handle(self, raw_body: bytes, signature_header: Optional[str] = None) -> WebhookEvent:
        """
        Verify, parse and dispatch a webhook delivery.

        Raises:
            ValidationError: Invalid signature or malformed body
        """
        if self.verify:
            is_valid, error = validate_webhook_request(raw_body, signature_header, self.secret)
            if not is_valid:
                raise ValidationError(error or "Invalid webhook request")

        event = parse_webhook_event(raw_body)
        logger.info(f"Processing webhook: type={event.type}, id={event.id}")
        await self.dispatch(event)
        return event
