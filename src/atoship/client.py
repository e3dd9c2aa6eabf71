"""atoship SDK entry point.

Example::

    async with AtoshipSDK("your-api-key") as sdk:
        response = await sdk.orders.create({...})
        if response.is_success():
            print(response.data.id)
"""

from typing import Any, Optional, Union

import httpx

from atoship.api.http_client import HttpClient
from atoship.config.settings import Configuration
from atoship.core.exceptions import AtoshipError
from atoship.core.logger import configure_logging, setup_logger
from atoship.services.account_service import AccountService
from atoship.services.address_service import AddressService
from atoship.services.order_service import OrderService
from atoship.services.platform_service import CarrierService, MonitoringService
from atoship.services.shipping_service import LabelService, RateService
from atoship.services.tracking_service import TrackingService
from atoship.services.webhook_service import WebhookService

logger = setup_logger(__name__)


class AtoshipSDK:
    """High-level client for the atoship API.

    Operations are grouped by resource: ``orders``, ``rates``, ``labels``,
    ``tracking``, ``addresses``, ``account``, ``webhooks``, ``carriers`` and
    ``monitoring``.
    """

    def __init__(
        self,
        api_key_or_config: Union[str, Configuration],
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **options: Any,
    ):
        """
        Args:
            api_key_or_config: API key string or a Configuration
            transport: Optional httpx transport, mainly for testing
            **options: Configuration options when an API key string is given
                (base_url, timeout, max_retries, debug, ...)

        Raises:
            AtoshipError: If the configuration is invalid
        """
        if isinstance(api_key_or_config, Configuration):
            self._config = api_key_or_config
        elif isinstance(api_key_or_config, str):
            self._config = Configuration(api_key_or_config, **options)
        else:
            raise AtoshipError(
                "Invalid configuration. Expected string API key or Configuration object."
            )

        if self._config.debug:
            configure_logging("DEBUG")

        self.http = HttpClient(self._config, transport=transport)

        self.orders = OrderService(self.http)
        self.rates = RateService(self.http)
        self.labels = LabelService(self.http)
        self.tracking = TrackingService(self.http)
        self.addresses = AddressService(self.http)
        self.account = AccountService(self.http)
        self.webhooks = WebhookService(self.http)
        self.carriers = CarrierService(self.http)
        self.monitoring = MonitoringService(self.http)

        logger.debug(f"SDK initialized: {self._config}")

    def get_configuration(self) -> Configuration:
        """Current configuration with the API key masked."""
        return self._config.with_masked_api_key()

    def update_configuration(self, config: Configuration) -> None:
        """Swap the configuration used by subsequent requests."""
        if not isinstance(config, Configuration):
            raise AtoshipError("Expected a Configuration object")
        self._config = config
        if config.debug:
            configure_logging("DEBUG")
        self.http.update_configuration(config)

    async def close(self) -> None:
        """Close HTTP client connections."""
        await self.http.close()

    async def __aenter__(self) -> "AtoshipSDK":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
