"""Webhook registration management."""

from typing import Any, List, Mapping, Union

from atoship.api import endpoints
from atoship.api.endpoints import build_path
from atoship.core.logger import setup_logger
from atoship.models.requests import WebhookRequest
from atoship.models.response import ApiResponse
from atoship.models.webhook import Webhook
from atoship.services.base import BaseService
from atoship.utils.validation import validate_not_empty, validate_webhook_data

logger = setup_logger(__name__)


class WebhookService(BaseService):
    """Webhook endpoints."""

    async def create(self, webhook_data: Union[Mapping[str, Any], WebhookRequest]) -> ApiResponse[Webhook]:
        """Register a webhook. The response carries the signing secret."""
        payload = validate_webhook_data(webhook_data)
        logger.info(f"Creating webhook for {payload.get('url')}")
        return await self.http.post(endpoints.WEBHOOKS, payload, model=Webhook)

    async def list(self) -> ApiResponse[List[Webhook]]:
        return await self.http.get(endpoints.WEBHOOKS, model=Webhook, many=True)

    async def get(self, webhook_id: str) -> ApiResponse[Webhook]:
        webhook_id = validate_not_empty(webhook_id, "Webhook ID cannot be empty")
        return await self.http.get(build_path(endpoints.WEBHOOK_DETAIL, webhook_id=webhook_id), model=Webhook)

    async def update(self, webhook_id: str, webhook_data: Mapping[str, Any]) -> ApiResponse[Webhook]:
        webhook_id = validate_not_empty(webhook_id, "Webhook ID cannot be empty")
        return await self.http.put(
            build_path(endpoints.WEBHOOK_DETAIL, webhook_id=webhook_id),
            self._payload(webhook_data),
            model=Webhook,
        )

    async def delete(self, webhook_id: str) -> ApiResponse[None]:
        webhook_id = validate_not_empty(webhook_id, "Webhook ID cannot be empty")
        return await self.http.delete(build_path(endpoints.WEBHOOK_DETAIL, webhook_id=webhook_id))

    async def test(self, webhook_id: str) -> ApiResponse[Any]:
        """Ask the server to deliver a test event to the webhook."""
        webhook_id = validate_not_empty(webhook_id, "Webhook ID cannot be empty")
        return await self.http.post(build_path(endpoints.WEBHOOK_TEST, webhook_id=webhook_id))
