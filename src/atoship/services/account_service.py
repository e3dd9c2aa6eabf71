"""Account, profile and API key management."""

from typing import Any, Dict, List, Mapping

from atoship.api import endpoints
from atoship.api.endpoints import build_path
from atoship.models.response import ApiResponse
from atoship.services.base import BaseService
from atoship.utils.validation import validate_not_empty


class AccountService(BaseService):
    """User profile, usage, billing and API keys."""

    async def get_profile(self) -> ApiResponse[Dict[str, Any]]:
        return await self.http.get(endpoints.PROFILE)

    async def update_profile(self, profile_data: Mapping[str, Any]) -> ApiResponse[Dict[str, Any]]:
        return await self.http.put(endpoints.PROFILE, self._payload(profile_data))

    async def get_usage(self) -> ApiResponse[Dict[str, Any]]:
        """Usage statistics for the current billing period."""
        return await self.http.get(endpoints.ACCOUNT_USAGE)

    async def get_billing(self) -> ApiResponse[Dict[str, Any]]:
        return await self.http.get(endpoints.ACCOUNT_BILLING)

    async def create_api_key(self, key_data: Mapping[str, Any]) -> ApiResponse[Dict[str, Any]]:
        """Create an API key. The secret is only returned by this call."""
        return await self.http.post(endpoints.API_KEYS, self._payload(key_data))

    async def list_api_keys(self) -> ApiResponse[List[Dict[str, Any]]]:
        return await self.http.get(endpoints.API_KEYS)

    async def revoke_api_key(self, key_id: str) -> ApiResponse[None]:
        key_id = validate_not_empty(key_id, "API key ID cannot be empty")
        return await self.http.delete(build_path(endpoints.API_KEY_DETAIL, key_id=key_id))
