"""Rate shopping and label management."""

from typing import Any, List, Mapping, Union

from atoship.api import endpoints
from atoship.api.endpoints import build_path
from atoship.core.logger import setup_logger
from atoship.models.requests import LabelRequest, RateRequest
from atoship.models.response import ApiResponse, PaginatedResponse
from atoship.models.shipping import ShippingLabel, ShippingRate
from atoship.services.base import BaseService
from atoship.utils.validation import (
    validate_label_request,
    validate_not_empty,
    validate_rate_request,
)

logger = setup_logger(__name__)


class RateService(BaseService):
    """Shipping rate endpoints."""

    async def get_rates(self, rate_request: Union[Mapping[str, Any], RateRequest]) -> ApiResponse[List[ShippingRate]]:
        """Get shipping rates for a package."""
        payload = validate_rate_request(rate_request)
        return await self.http.post(endpoints.RATES, payload, model=ShippingRate, many=True)

    async def compare(self, rate_request: Union[Mapping[str, Any], RateRequest]) -> ApiResponse[List[ShippingRate]]:
        """Compare rates across carriers."""
        payload = validate_rate_request(rate_request)
        return await self.http.post(endpoints.RATES_COMPARE, payload, model=ShippingRate, many=True)


class LabelService(BaseService):
    """Shipping label endpoints."""

    async def purchase(self, label_request: Union[Mapping[str, Any], LabelRequest]) -> ApiResponse[ShippingLabel]:
        """Purchase a shipping label."""
        payload = validate_label_request(label_request)
        logger.info(f"Purchasing label (rate={payload.get('rateId') or payload.get('rate_id')})")
        return await self.http.post(endpoints.LABELS, payload, model=ShippingLabel)

    async def get(self, label_id: str) -> ApiResponse[ShippingLabel]:
        label_id = validate_not_empty(label_id, "Label ID cannot be empty")
        return await self.http.get(build_path(endpoints.LABEL_DETAIL, label_id=label_id), model=ShippingLabel)

    async def list(self, **params: Any) -> PaginatedResponse[ShippingLabel]:
        return await self.http.get_paginated(endpoints.LABELS, params, model=ShippingLabel)

    async def cancel(self, label_id: str) -> ApiResponse[None]:
        label_id = validate_not_empty(label_id, "Label ID cannot be empty")
        logger.info(f"Cancelling label {label_id}")
        return await self.http.post(build_path(endpoints.LABEL_CANCEL, label_id=label_id))

    async def refund(self, label_id: str) -> ApiResponse[None]:
        label_id = validate_not_empty(label_id, "Label ID cannot be empty")
        logger.info(f"Requesting refund for label {label_id}")
        return await self.http.post(build_path(endpoints.LABEL_REFUND, label_id=label_id))
