"""Address validation, suggestions and address book."""

from typing import Any, Dict, List, Mapping, Union

from atoship.api import endpoints
from atoship.api.endpoints import build_path
from atoship.models.address import Address, AddressValidation
from atoship.models.requests import AddressInput
from atoship.models.response import ApiResponse, PaginatedResponse
from atoship.services.base import BaseService
from atoship.utils.validation import validate_address_data, validate_not_empty

AddressData = Union[Mapping[str, Any], AddressInput]


class AddressService(BaseService):
    """Address endpoints."""

    async def validate(self, address_data: AddressData) -> ApiResponse[AddressValidation]:
        """Check an address against carrier address databases."""
        payload = validate_address_data(address_data)
        return await self.http.post(endpoints.ADDRESS_VALIDATE, payload, model=AddressValidation)

    async def suggest(self, query: str, country: str = "US") -> ApiResponse[List[Dict[str, Any]]]:
        """Autocomplete suggestions for a partial address."""
        query = validate_not_empty(query, "Query cannot be empty")
        return await self.http.get(endpoints.ADDRESS_SUGGEST, params={"q": query, "country": country})

    async def save(self, address_data: AddressData) -> ApiResponse[Address]:
        """Save an address to the address book."""
        payload = validate_address_data(address_data)
        return await self.http.post(endpoints.ADDRESSES, payload, model=Address)

    async def list(self, **params: Any) -> PaginatedResponse[Address]:
        return await self.http.get_paginated(endpoints.ADDRESSES, params, model=Address)

    async def get(self, address_id: str) -> ApiResponse[Address]:
        address_id = validate_not_empty(address_id, "Address ID cannot be empty")
        return await self.http.get(build_path(endpoints.ADDRESS_DETAIL, address_id=address_id), model=Address)

    async def update(self, address_id: str, address_data: Mapping[str, Any]) -> ApiResponse[Address]:
        address_id = validate_not_empty(address_id, "Address ID cannot be empty")
        return await self.http.put(
            build_path(endpoints.ADDRESS_DETAIL, address_id=address_id),
            self._payload(address_data),
            model=Address,
        )

    async def delete(self, address_id: str) -> ApiResponse[None]:
        address_id = validate_not_empty(address_id, "Address ID cannot be empty")
        return await self.http.delete(build_path(endpoints.ADDRESS_DETAIL, address_id=address_id))
