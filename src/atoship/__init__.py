"""atoship shipping API client."""

from atoship.client import AtoshipSDK
from atoship.config.constants import SDK_VERSION as __version__
from atoship.config.settings import Configuration, ConfigurationBuilder, Settings
from atoship.core.exceptions import (
    AtoshipError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from atoship.core.logger import configure_logging
from atoship.handlers.webhook import WebhookHandler
from atoship.models import (
    Address,
    AddressValidation,
    ApiResponse,
    Order,
    OrderItem,
    PaginatedResponse,
    ShippingLabel,
    ShippingRate,
    TrackingEvent,
    TrackingInfo,
    Webhook,
    WebhookEvent,
)

__all__ = [
    "__version__",
    "AtoshipSDK",
    "Configuration",
    "ConfigurationBuilder",
    "Settings",
    "configure_logging",
    "WebhookHandler",
    "AtoshipError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "ConflictError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TimeoutError",
    "ValidationError",
    "Address",
    "AddressValidation",
    "ApiResponse",
    "Order",
    "OrderItem",
    "PaginatedResponse",
    "ShippingLabel",
    "ShippingRate",
    "TrackingEvent",
    "TrackingInfo",
    "Webhook",
    "WebhookEvent",
]
