"""Carrier catalogue, monitoring and service health."""

from typing import Any, Dict, List

from atoship.api import endpoints
from atoship.api.endpoints import build_path
from atoship.models.response import ApiResponse
from atoship.services.base import BaseService
from atoship.utils.validation import validate_not_empty


class CarrierService(BaseService):
    """Available carriers."""

    async def list(self) -> ApiResponse[List[Dict[str, Any]]]:
        return await self.http.get(endpoints.CARRIERS)

    async def get(self, carrier_code: str) -> ApiResponse[Dict[str, Any]]:
        carrier_code = validate_not_empty(carrier_code, "Carrier code cannot be empty")
        return await self.http.get(build_path(endpoints.CARRIER_DETAIL, carrier_code=carrier_code))


class MonitoringService(BaseService):
    """Metrics, analytics and API health."""

    async def get_metrics(self, **params: Any) -> ApiResponse[Dict[str, Any]]:
        """Monitoring metrics, optionally filtered by date range (start_date, end_date)."""
        return await self.http.get(endpoints.MONITORING_METRICS, params=params)

    async def get_performance(self) -> ApiResponse[Dict[str, Any]]:
        return await self.http.get(endpoints.MONITORING_PERFORMANCE)

    async def get_analytics(self, **params: Any) -> ApiResponse[Dict[str, Any]]:
        return await self.http.get(endpoints.ANALYTICS, params=params)

    async def health_check(self) -> ApiResponse[Dict[str, Any]]:
        return await self.http.get(endpoints.HEALTH)

    async def get_system_status(self) -> ApiResponse[Dict[str, Any]]:
        return await self.http.get(endpoints.STATUS)
