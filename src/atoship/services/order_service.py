"""Order service: create, read, update, delete and batch-create orders."""

from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Union

from atoship.api import endpoints
from atoship.api.endpoints import build_path
from atoship.config.constants import DEFAULT_PAGE_SIZE, MAX_BATCH_ORDERS
from atoship.core.exceptions import ValidationError
from atoship.core.logger import setup_logger
from atoship.models.order import Order
from atoship.models.requests import CreateOrderRequest
from atoship.models.response import ApiResponse, PaginatedResponse
from atoship.services.base import BaseService
from atoship.utils.validation import validate_not_empty, validate_order_data

logger = setup_logger(__name__)

OrderData = Union[Mapping[str, Any], CreateOrderRequest]


class OrderService(BaseService):
    """Order management endpoints."""

    async def create(self, order_data: OrderData) -> ApiResponse[Order]:
        """
        Create a new order.

        Raises:
            ValidationError: If the order data is invalid (nothing is sent)
        """
        payload = validate_order_data(order_data)
        logger.info(f"Creating order {payload.get('orderNumber') or payload.get('order_number')}")
        return await self.http.post(endpoints.ORDERS, payload, model=Order)

    async def get(self, order_id: str) -> ApiResponse[Order]:
        order_id = validate_not_empty(order_id, "Order ID cannot be empty")
        return await self.http.get(build_path(endpoints.ORDER_DETAIL, order_id=order_id), model=Order)

    async def list(self, **params: Any) -> PaginatedResponse[Order]:
        """List orders. Accepts filters such as page, limit, status."""
        return await self.http.get_paginated(endpoints.ORDERS, params, model=Order)

    async def iterate(self, page_size: int = DEFAULT_PAGE_SIZE, **params: Any) -> AsyncIterator[Order]:
        """Yield every order across all pages."""
        page = params.pop("page", 1)
        page_size = params.pop("limit", page_size)
        while True:
            result = await self.list(page=page, limit=page_size, **params)
            for order in result.data:
                yield order
            if not result.has_next or not result.data:
                break
            page += 1

    async def update(self, order_id: str, order_data: Mapping[str, Any]) -> ApiResponse[Order]:
        order_id = validate_not_empty(order_id, "Order ID cannot be empty")
        return await self.http.put(
            build_path(endpoints.ORDER_DETAIL, order_id=order_id),
            self._payload(order_data),
            model=Order,
        )

    async def delete(self, order_id: str) -> ApiResponse[None]:
        order_id = validate_not_empty(order_id, "Order ID cannot be empty")
        return await self.http.delete(build_path(endpoints.ORDER_DETAIL, order_id=order_id))

    async def create_batch(self, orders: List[OrderData]) -> ApiResponse[Dict[str, Any]]:
        """
        Create up to 100 orders in one request.

        Every order is validated first; the error names the failing index.
        """
        if not orders:
            raise ValidationError("At least one order is required for batch creation")

        if len(orders) > MAX_BATCH_ORDERS:
            raise ValidationError(f"Maximum {MAX_BATCH_ORDERS} orders allowed per batch")

        payloads: List[Dict[str, Any]] = []
        for index, order_data in enumerate(orders):
            try:
                payloads.append(validate_order_data(order_data))
            except ValidationError as e:
                details = {f"orders.{index}.{field}": msgs for field, msgs in e.details.items()}
                raise ValidationError(f"Order {index} validation failed: {e.message}", details=details) from e

        logger.info(f"Creating batch of {len(payloads)} orders")
        return await self.http.post(endpoints.ORDERS_BATCH, {"orders": payloads})
