"""Models module - API records, request schemas and response wrappers."""

from atoship.models.address import Address, AddressValidation
from atoship.models.order import Dimensions, Order, OrderItem
from atoship.models.requests import (
    AddressInput,
    CreateOrderRequest,
    LabelRequest,
    OrderItemInput,
    PackageInput,
    RateRequest,
    WebhookRequest,
)
from atoship.models.response import ApiResponse, PaginatedResponse, Pagination
from atoship.models.shipping import ShippingLabel, ShippingRate, TrackingEvent, TrackingInfo
from atoship.models.webhook import Webhook, WebhookEvent

__all__ = [
    "Address",
    "AddressValidation",
    "Dimensions",
    "Order",
    "OrderItem",
    "ShippingRate",
    "ShippingLabel",
    "TrackingEvent",
    "TrackingInfo",
    "Webhook",
    "WebhookEvent",
    "ApiResponse",
    "PaginatedResponse",
    "Pagination",
    "AddressInput",
    "CreateOrderRequest",
    "LabelRequest",
    "OrderItemInput",
    "PackageInput",
    "RateRequest",
    "WebhookRequest",
]
