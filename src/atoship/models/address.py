"""Pydantic models for addresses."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from atoship.models.base import ApiModel


class Address(ApiModel):
    """Postal address, either saved in the address book or inline."""

    id: Optional[str] = None
    name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    street1: Optional[str] = None
    street2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    residential: Optional[bool] = None
    is_validated: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def one_line(self) -> str:
        """Single-line rendering, skipping empty parts."""
        locality = " ".join(p for p in (self.state, self.postal_code) if p)
        parts = [self.street1, self.street2, self.city, locality, self.country]
        return ", ".join(p for p in parts if p)


class AddressValidation(ApiModel):
    """Result of an address validation request."""

    is_valid: bool = False
    address: Optional[Address] = None
    suggestions: List[Address] = Field(default_factory=list)
    messages: List[str] = Field(default_factory=list)

    @property
    def has_suggestions(self) -> bool:
        return bool(self.suggestions)
