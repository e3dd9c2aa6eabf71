"""Handlers module - Incoming webhook event handling."""

from atoship.handlers.webhook import WebhookHandler, parse_webhook_event

__all__ = ["WebhookHandler", "parse_webhook_event"]
