"""Pydantic models for order data."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from atoship.models.address import Address
from atoship.models.base import ApiModel


class Dimensions(ApiModel):
    """Package or item dimensions."""

    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    unit: Optional[str] = None


class OrderItem(ApiModel):
    """Single line item of an order."""

    name: Optional[str] = None
    sku: Optional[str] = None
    quantity: int = 1
    unit_price: float = 0.0
    weight: Optional[float] = None
    weight_unit: Optional[str] = None
    dimensions: Optional[Dimensions] = None

    @property
    def total_price(self) -> float:
        return self.unit_price * self.quantity

    @property
    def total_weight(self) -> float:
        return (self.weight or 0.0) * self.quantity


class Order(ApiModel):
    """Order as returned by the API."""

    id: str
    order_number: Optional[str] = None
    status: Optional[str] = None

    recipient_name: Optional[str] = None
    recipient_email: Optional[str] = None
    recipient_phone: Optional[str] = None
    recipient_street1: Optional[str] = None
    recipient_street2: Optional[str] = None
    recipient_city: Optional[str] = None
    recipient_state: Optional[str] = None
    recipient_postal_code: Optional[str] = None
    recipient_country: Optional[str] = None

    sender_name: Optional[str] = None
    sender_street1: Optional[str] = None
    sender_street2: Optional[str] = None
    sender_city: Optional[str] = None
    sender_state: Optional[str] = None
    sender_postal_code: Optional[str] = None
    sender_country: Optional[str] = None

    items: List[OrderItem] = Field(default_factory=list)
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    custom_fields: Dict[str, Any] = Field(default_factory=dict)

    total_value: Optional[float] = None
    total_cost: Optional[float] = None
    shipping_status: Optional[str] = None
    labels_count: Optional[int] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def total_weight(self) -> float:
        return sum(item.total_weight for item in self.items)

    @property
    def items_value(self) -> float:
        return sum(item.total_price for item in self.items)

    @property
    def recipient_address(self) -> Address:
        return Address(
            name=self.recipient_name,
            email=self.recipient_email,
            phone=self.recipient_phone,
            street1=self.recipient_street1,
            street2=self.recipient_street2,
            city=self.recipient_city,
            state=self.recipient_state,
            postal_code=self.recipient_postal_code,
            country=self.recipient_country,
        )

    @property
    def sender_address(self) -> Address:
        return Address(
            name=self.sender_name,
            street1=self.sender_street1,
            street2=self.sender_street2,
            city=self.sender_city,
            state=self.sender_state,
            postal_code=self.sender_postal_code,
            country=self.sender_country,
        )
