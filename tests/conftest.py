"""Pytest configuration and shared fixtures."""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from atoship import AtoshipSDK, Configuration

API_KEY = "test_key_1234567890"

Reply = Union[httpx.Response, Callable[[httpx.Request], httpx.Response], Exception]


class FakeAPI:
    """Scripted stand-in for the atoship API, mounted via httpx.MockTransport.

    Each route holds a queue of replies; the last reply repeats once the
    queue is drained. Every request is recorded.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], List[Reply]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, *replies: Reply) -> "FakeAPI":
        self.routes.setdefault((method.upper(), path), []).extend(replies)
        return self

    def json(self, method: str, path: str, body: Any, status: int = 200, **kwargs) -> "FakeAPI":
        return self.add(method, path, httpx.Response(status, json=body, **kwargs))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        replies = self.routes.get(key)
        if not replies:
            return httpx.Response(404, json={"success": False, "error": f"No route for {key}"})

        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return reply

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def config() -> Configuration:
    return Configuration(API_KEY, base_url="https://api.test.atoship.com", max_retries=2, retry_backoff=0)


@pytest.fixture
async def sdk(api, config):
    client = AtoshipSDK(config, transport=api.transport())
    yield client
    await client.close()


def envelope(data: Any, **extra) -> Dict[str, Any]:
    return {"success": True, "data": data, **extra}


@pytest.fixture
def order_data() -> Dict[str, Any]:
    return {
        "orderNumber": "ORDER-001",
        "recipientName": "Bob Smith",
        "recipientEmail": "bob@example.com",
        "recipientStreet1": "456 Pine Street",
        "recipientCity": "Seattle",
        "recipientState": "WA",
        "recipientPostalCode": "98101",
        "recipientCountry": "US",
        "senderName": "Example Store",
        "senderStreet1": "789 Market Blvd",
        "senderCity": "Portland",
        "senderState": "OR",
        "senderPostalCode": "97201",
        "senderCountry": "US",
        "items": [
            {
                "name": "Programming Guide",
                "sku": "BOOK-001",
                "quantity": 1,
                "unitPrice": 54.99,
                "weight": 1.3,
                "weightUnit": "lb",
            },
            {
                "name": "Stickers",
                "sku": "STICKERS-001",
                "quantity": 5,
                "unitPrice": 3.99,
                "weight": 0.1,
                "weightUnit": "lb",
            },
        ],
        "tags": ["books"],
    }


@pytest.fixture
def order_json(order_data) -> Dict[str, Any]:
    return {
        **order_data,
        "id": "ord_123",
        "status": "pending",
        "totalValue": 74.94,
        "createdAt": "2024-05-01T12:00:00Z",
    }


@pytest.fixture
def address() -> Dict[str, Any]:
    return {
        "street1": "123 Main St",
        "city": "Seattle",
        "state": "WA",
        "postalCode": "98101",
        "country": "US",
    }


@pytest.fixture
def rate_request(address) -> Dict[str, Any]:
    return {
        "fromAddress": {**address, "street1": "789 Market Blvd", "city": "Portland", "postalCode": "97201"},
        "toAddress": address,
        "package": {"weight": 2.0, "length": 12.0, "width": 9.0, "height": 6.0, "weightUnit": "lb"},
    }


@pytest.fixture
def rates_json() -> List[Dict[str, Any]]:
    return [
        {"id": "rate_1", "carrier": "USPS", "serviceName": "Priority", "amount": 8.5, "estimatedDays": 3},
        {"id": "rate_2", "carrier": "UPS", "serviceName": "Ground", "amount": 12.0, "estimatedDays": 2},
        {"id": "rate_3", "carrier": "FedEx", "serviceName": "Overnight", "amount": 35.0, "estimatedDays": 1},
    ]


def error_reply(status: int, message: str, headers: Optional[Dict[str, str]] = None, **body) -> httpx.Response:
    return httpx.Response(status, json={"success": False, "error": message, **body}, headers=headers)
