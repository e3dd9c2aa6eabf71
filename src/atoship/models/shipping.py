"""Pydantic models for rates, labels and tracking."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from atoship.models.base import ApiModel

DELIVERED_STATUSES = {"DELIVERED"}


class ShippingRate(ApiModel):
    """Priced carrier/service offer for a package."""

    id: Optional[str] = None
    carrier: str
    service_code: Optional[str] = None
    service_name: Optional[str] = None
    amount: float
    currency: str = "USD"
    estimated_days: Optional[int] = None
    estimated_delivery_date: Optional[str] = None
    zone: Optional[str] = None


class ShippingLabel(ApiModel):
    """Purchased carrier label."""

    id: str
    order_id: Optional[str] = None
    rate_id: Optional[str] = None
    tracking_number: Optional[str] = None
    carrier: Optional[str] = None
    service_name: Optional[str] = None
    cost: float = 0.0
    currency: str = "USD"
    status: Optional[str] = None
    label_url: Optional[str] = None
    label_format: Optional[str] = None
    void_url: Optional[str] = None
    created_at: Optional[datetime] = None


class TrackingEvent(ApiModel):
    """Timestamped status update for a shipment."""

    timestamp: Optional[datetime] = None
    status: Optional[str] = None
    status_code: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None


class TrackingInfo(ApiModel):
    """Tracking status and history of a package."""

    tracking_number: str
    carrier: Optional[str] = None
    service_name: Optional[str] = None
    status: Optional[str] = None
    last_update: Optional[datetime] = None
    estimated_delivery: Optional[str] = None
    current_location: Optional[str] = None
    events: List[TrackingEvent] = Field(default_factory=list)

    @property
    def is_delivered(self) -> bool:
        return (self.status or "").upper() in DELIVERED_STATUSES

    @property
    def latest_event(self) -> Optional[TrackingEvent]:
        """Most recent event by timestamp (events without one sort first)."""
        if not self.events:
            return None
        return max(
            self.events,
            key=lambda e: e.timestamp.timestamp() if e.timestamp else float("-inf"),
        )
