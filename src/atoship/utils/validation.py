#!/usr/bin/env python3
"""
Request validation helpers.

Checks request payloads against the schemas in ``atoship.models.requests``
before anything is sent, collecting every failing field into a single
ValidationError.
"""

from typing import Any, Dict, List, Mapping, Type, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from atoship.core.exceptions import ValidationError
from atoship.models.requests import (
    AddressInput,
    CreateOrderRequest,
    LabelRequest,
    RateRequest,
    RequestModel,
    WebhookRequest,
)

Payload = Union[Mapping[str, Any], RequestModel]


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "request"


def _error_message(error: Dict[str, Any]) -> str:
    ctx_error = error.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    return error["msg"]


def collect_errors(exc: PydanticValidationError) -> Dict[str, List[str]]:
    """Group pydantic errors by dotted field path."""
    details: Dict[str, List[str]] = {}
    for error in exc.errors():
        details.setdefault(_field_path(error["loc"]), []).append(_error_message(error))
    return details


def validate_payload(data: Payload, schema: Type[RequestModel], label: str) -> Dict[str, Any]:
    """
    Validate a request payload against a schema.

    Args:
        data: Plain dict or an instance of ``schema``
        schema: Request model describing the accepted shape
        label: Human name used in the error message (e.g. "Order")

    Returns:
        The JSON payload to send. Dicts are returned unchanged, models are
        serialized by alias.

    Raises:
        ValidationError: with ``details`` keyed by field path
    """
    if isinstance(data, BaseModel):
        if not isinstance(data, schema):
            raise ValidationError(f"{label} data must be a {schema.__name__}")
        return data.to_payload()

    if not isinstance(data, Mapping):
        raise ValidationError(f"{label} data must be a mapping")

    try:
        schema.model_validate(dict(data))
    except PydanticValidationError as e:
        details = collect_errors(e)
        summary = "; ".join(f"{field}: {', '.join(msgs)}" for field, msgs in details.items())
        raise ValidationError(f"Invalid {label.lower()} data: {summary}", details=details) from e

    return dict(data)


def validate_not_empty(value: Any, message: str) -> str:
    """Ensure an identifier is a non-blank string."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def validate_order_data(data: Payload) -> Dict[str, Any]:
    return validate_payload(data, CreateOrderRequest, "Order")


def validate_address_data(data: Payload) -> Dict[str, Any]:
    return validate_payload(data, AddressInput, "Address")


def validate_rate_request(data: Payload) -> Dict[str, Any]:
    return validate_payload(data, RateRequest, "Rate request")


def validate_label_request(data: Payload) -> Dict[str, Any]:
    return validate_payload(data, LabelRequest, "Label request")


def validate_webhook_data(data: Payload) -> Dict[str, Any]:
    return validate_payload(data, WebhookRequest, "Webhook")
