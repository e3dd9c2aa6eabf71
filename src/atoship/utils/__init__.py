"""Utilities - request validation and rate selection helpers."""

from atoship.utils.rate_selection import select_rate
from atoship.utils.validation import validate_not_empty

__all__ = ["select_rate", "validate_not_empty"]
