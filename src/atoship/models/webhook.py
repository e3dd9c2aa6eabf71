"""Pydantic models for webhooks."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from atoship.models.base import ApiModel


class Webhook(ApiModel):
    """Registered webhook endpoint."""

    id: str
    url: str
    events: List[str] = Field(default_factory=list)
    active: bool = True
    secret: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class WebhookEvent(ApiModel):
    """Event delivered by atoship to a webhook endpoint."""

    id: Optional[str] = Field(None, description="Unique delivery ID")
    type: str = Field(..., description="Event type, e.g. 'tracking.updated'")
    created_at: Optional[datetime] = Field(None, description="When the event occurred")
    data: Dict[str, Any] = Field(default_factory=dict, description="Event-specific data")

    def get_tracking_number(self) -> Optional[str]:
        """Extract tracking number from the payload, if any."""
        return self.data.get("trackingNumber") or self.data.get("tracking_number")

    def get_order_id(self) -> Optional[str]:
        """Extract order ID from the payload, if any."""
        return self.data.get("orderId") or self.data.get("order_id")
