"""Services module - One class per API resource."""

from atoship.services.account_service import AccountService
from atoship.services.address_service import AddressService
from atoship.services.order_service import OrderService
from atoship.services.platform_service import CarrierService, MonitoringService
from atoship.services.shipping_service import LabelService, RateService
from atoship.services.tracking_service import TrackingService
from atoship.services.webhook_service import WebhookService

__all__ = [
    "AccountService",
    "AddressService",
    "CarrierService",
    "LabelService",
    "MonitoringService",
    "OrderService",
    "RateService",
    "TrackingService",
    "WebhookService",
]
