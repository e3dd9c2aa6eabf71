"""Shared base for API services."""

from typing import Any, Dict, Optional

from atoship.api.http_client import HttpClient
from atoship.core.logger import setup_logger
from atoship.models.requests import RequestModel

logger = setup_logger(__name__)


class BaseService:
    """Groups the operations of one API resource around a shared HttpClient."""

    def __init__(self, http: HttpClient):
        """Initialize service with HTTP client."""
        self.http = http

    @staticmethod
    def _payload(data: Any) -> Optional[Dict[str, Any]]:
        """Serialize request models; pass dicts through unchanged."""
        if data is None:
            return None
        if isinstance(data, RequestModel):
            return data.to_payload()
        return dict(data)
