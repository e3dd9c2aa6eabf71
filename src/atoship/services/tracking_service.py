"""Package tracking."""

from typing import Any, Dict, List, Optional

from atoship.api import endpoints
from atoship.api.endpoints import build_path
from atoship.config.constants import MAX_BATCH_TRACKING_NUMBERS
from atoship.core.exceptions import ValidationError
from atoship.models.response import ApiResponse
from atoship.models.shipping import TrackingInfo
from atoship.services.base import BaseService
from atoship.utils.validation import validate_not_empty


def normalize_tracking_number(tracking_number: str) -> str:
    """Carriers' tracking numbers are case-insensitive; the API uses upper case."""
    return tracking_number.strip().upper()


class TrackingService(BaseService):
    """Tracking endpoints."""

    async def track(self, tracking_number: str, carrier: Optional[str] = None) -> ApiResponse[TrackingInfo]:
        """Track a package, optionally hinting the carrier."""
        validate_not_empty(tracking_number, "Tracking number cannot be empty")
        path = build_path(endpoints.TRACKING, tracking_number=normalize_tracking_number(tracking_number))
        params = {"carrier": carrier.strip()} if carrier and carrier.strip() else None
        return await self.http.get(path, params=params, model=TrackingInfo)

    async def track_multiple(self, tracking_numbers: List[str]) -> ApiResponse[List[Dict[str, Any]]]:
        """Track up to 50 packages in one request."""
        if not tracking_numbers:
            raise ValidationError("At least one tracking number is required")

        if len(tracking_numbers) > MAX_BATCH_TRACKING_NUMBERS:
            raise ValidationError(
                f"Maximum {MAX_BATCH_TRACKING_NUMBERS} tracking numbers allowed per request"
            )

        for number in tracking_numbers:
            validate_not_empty(number, "Tracking number cannot be empty")

        return await self.http.post(
            endpoints.TRACKING_BATCH,
            {"trackingNumbers": [normalize_tracking_number(n) for n in tracking_numbers]},
        )
