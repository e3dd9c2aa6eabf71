"""Request payload schemas.

These models describe the shape the API accepts. They back the declarative
validation in ``atoship.utils.validation`` and can also be passed directly
to the services instead of plain dicts.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
COUNTRY_PATTERN = r"^[A-Za-z]{2}$"


class RequestModel(BaseModel):
    """Base for request schemas: camelCase aliases, extra fields passed through."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DimensionsInput(RequestModel):
    length: Optional[float] = Field(None, gt=0)
    width: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = None


class OrderItemInput(RequestModel):
    name: str = Field(..., min_length=1)
    sku: Optional[str] = None
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., ge=0)
    weight: Optional[float] = Field(None, gt=0)
    weight_unit: Optional[str] = None
    dimensions: Optional[DimensionsInput] = None


class CreateOrderRequest(RequestModel):
    order_number: str = Field(..., min_length=1)

    recipient_name: str = Field(..., min_length=1)
    recipient_email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    recipient_phone: Optional[str] = None
    recipient_street1: str = Field(..., min_length=1)
    recipient_street2: Optional[str] = None
    recipient_city: str = Field(..., min_length=1)
    recipient_state: str = Field(..., min_length=1)
    recipient_postal_code: str = Field(..., min_length=1)
    recipient_country: str = Field(..., pattern=COUNTRY_PATTERN)

    sender_name: Optional[str] = None
    sender_street1: Optional[str] = None
    sender_street2: Optional[str] = None
    sender_city: Optional[str] = None
    sender_state: Optional[str] = None
    sender_postal_code: Optional[str] = None
    sender_country: Optional[str] = Field(None, pattern=COUNTRY_PATTERN)

    items: List[OrderItemInput] = Field(..., min_length=1)
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    custom_fields: Dict[str, Any] = Field(default_factory=dict)


class AddressInput(RequestModel):
    name: Optional[str] = None
    company: Optional[str] = None
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    phone: Optional[str] = None
    street1: str = Field(..., min_length=1)
    street2: Optional[str] = None
    city: str = Field(..., min_length=1)
    state: Optional[str] = None
    postal_code: str = Field(..., min_length=1)
    country: str = Field(..., pattern=COUNTRY_PATTERN)
    residential: Optional[bool] = None


class PackageInput(RequestModel):
    weight: float = Field(..., gt=0)
    length: Optional[float] = Field(None, gt=0)
    width: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    weight_unit: Optional[str] = None
    dimension_unit: Optional[str] = None


class RateRequest(RequestModel):
    from_address: AddressInput
    to_address: AddressInput
    package: PackageInput
    carrier: Optional[str] = None
    options: Dict[str, Any] = Field(default_factory=dict)


class LabelRequest(RequestModel):
    order_id: Optional[str] = None
    rate_id: Optional[str] = None
    from_address: Optional[AddressInput] = None
    to_address: Optional[AddressInput] = None
    package: Optional[PackageInput] = None
    options: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _rate_or_shipment(self) -> "LabelRequest":
        if self.rate_id:
            return self
        if self.from_address and self.to_address and self.package:
            return self
        raise ValueError(
            "Either rateId or fromAddress, toAddress and package are required"
        )


class WebhookRequest(RequestModel):
    url: str = Field(..., pattern=r"^https?://\S+$")
    events: List[str] = Field(..., min_length=1)
    description: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("events")
    @classmethod
    def _events_not_blank(cls, value: List[str]) -> List[str]:
        if any(not event.strip() for event in value):
            raise ValueError("Event names cannot be empty")
        return value
