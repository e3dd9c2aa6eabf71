"""atoship API transport module."""

from .http_client import HttpClient

__all__ = ["HttpClient"]
