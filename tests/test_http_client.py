"""Tests for request dispatch, retries, error mapping and response parsing."""

import httpx
import pytest

from atoship import (
    AtoshipError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from atoship.api.http_client import HttpClient, _clean_params
from atoship.models.order import Order
from conftest import API_KEY, envelope, error_reply


@pytest.fixture
async def http(api, config):
    client = HttpClient(config, transport=api.transport())
    yield client
    await client.close()


class TestRequestBuilding:

    async def test_sends_auth_and_json_headers(self, api, http):
        api.json("GET", "/api/health", {"status": "ok"})
        await http.get("/api/health")
        request = api.last_request
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"].startswith("atoship-Python-SDK/")
        assert str(request.url).startswith("https://api.test.atoship.com/api/health")

    async def test_query_params_cleaned(self, api, http):
        api.json("GET", "/api/analytics", envelope({}))
        await http.get("/api/analytics", params={"period": "30d", "carrier": None, "detailed": True})
        params = api.last_request.url.params
        assert params["period"] == "30d"
        assert params["detailed"] == "true"
        assert "carrier" not in params

    def test_clean_params_empty(self):
        assert _clean_params({}) is None
        assert _clean_params({"a": None}) is None
        assert _clean_params({"flag": False}) == {"flag": "false"}


class TestResponseParsing:

    async def test_envelope_unwrapped_into_model(self, api, http, order_json):
        api.json("GET", "/api/orders/ord_123", envelope(order_json), headers={"X-Request-ID": "req_1"})
        response = await http.get("/api/orders/ord_123", model=Order)
        assert response.is_success()
        assert isinstance(response.data, Order)
        assert response.data.id == "ord_123"
        assert response.request_id == "req_1"
        assert response.status_code == 200

    async def test_bare_body_is_data(self, api, http, order_json):
        api.json("GET", "/api/orders/ord_123", order_json)
        response = await http.get("/api/orders/ord_123", model=Order)
        assert response.data.order_number == "ORDER-001"

    async def test_unsuccessful_envelope_does_not_raise(self, api, http):
        api.json("POST", "/api/orders", {"success": False, "error": "Duplicate order number"})
        response = await http.post("/api/orders", {"x": 1}, model=Order)
        assert response.success is False
        assert response.error == "Duplicate order number"
        assert response.data is None
        with pytest.raises(AtoshipError, match="Duplicate order number"):
            response.raise_for_error()

    async def test_empty_body(self, api, http):
        api.add("DELETE", "/api/orders/ord_123", httpx.Response(204))
        response = await http.delete("/api/orders/ord_123")
        assert response.success is True
        assert response.data is None

    async def test_list_nested_under_key(self, api, http, order_json):
        api.json("GET", "/api/orders/list", envelope({"items": [order_json, order_json]}))
        response = await http.get("/api/orders/list", model=Order, many=True)
        assert len(response.data) == 2

    async def test_malformed_payload_raises(self, api, http):
        api.json("GET", "/api/orders/ord_123", envelope({"orderNumber": "no id"}))
        with pytest.raises(AtoshipError, match="Unexpected Order payload"):
            await http.get("/api/orders/ord_123", model=Order)

    async def test_expected_list_got_object(self, api, http):
        api.json("GET", "/api/orders", envelope({"unexpected": True}))
        with pytest.raises(AtoshipError, match="Expected a list"):
            await http.get("/api/orders", model=Order, many=True)


class TestPagination:

    async def test_top_level_pagination(self, api, http, order_json):
        api.json(
            "GET",
            "/api/orders",
            envelope([order_json], pagination={"page": 1, "limit": 1, "total": 3, "totalPages": 3}),
        )
        page = await http.get_paginated("/api/orders", {"page": 1}, model=Order)
        assert [o.id for o in page.items] == ["ord_123"]
        assert page.pagination.total == 3
        assert page.has_next is True

    async def test_nested_pagination(self, api, http, order_json):
        api.json(
            "GET",
            "/api/orders",
            envelope({"items": [order_json], "pagination": {"page": 2, "limit": 1, "total": 2, "totalPages": 2}}),
        )
        page = await http.get_paginated("/api/orders", model=Order)
        assert page.pagination.page == 2
        assert page.has_next is False

    async def test_missing_pagination_defaults_to_single_page(self, api, http, order_json):
        api.json("GET", "/api/orders", envelope([order_json]))
        page = await http.get_paginated("/api/orders", model=Order)
        assert page.pagination.total == 1
        assert page.has_next is False

    @pytest.mark.parametrize("pagination", [{"page": "first"}, "page 1 of 3"])
    async def test_malformed_pagination_raises(self, api, http, order_json, pagination):
        api.json("GET", "/api/orders", envelope([order_json], pagination=pagination))
        with pytest.raises(AtoshipError, match="Unexpected pagination payload from /api/orders"):
            await http.get_paginated("/api/orders", model=Order)


class TestErrorMapping:

    @pytest.mark.parametrize(
        "status, error_type",
        [
            (400, ValidationError),
            (422, ValidationError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (409, ConflictError),
            (418, AtoshipError),
        ],
    )
    async def test_status_maps_to_exception(self, api, http, status, error_type):
        api.add("GET", "/api/orders/x", error_reply(status, "Nope", code="E_TEST"))
        with pytest.raises(error_type) as exc_info:
            await http.get("/api/orders/x")
        assert exc_info.value.status_code == status
        assert exc_info.value.message == "Nope"
        assert exc_info.value.error_code == "E_TEST"
        # 4xx is never retried
        assert len(api.requests) == 1

    async def test_validation_details(self, api, http):
        api.add(
            "POST",
            "/api/orders",
            httpx.Response(
                422,
                json={
                    "error": {
                        "code": "VALIDATION_FAILED",
                        "message": "Invalid order",
                        "details": {"recipientCity": ["is required"], "items": "cannot be empty"},
                    }
                },
            ),
        )
        with pytest.raises(ValidationError) as exc_info:
            await http.post("/api/orders", {})
        error = exc_info.value
        assert error.error_code == "VALIDATION_FAILED"
        assert error.has_details()
        assert error.details == {"recipientCity": ["is required"], "items": ["cannot be empty"]}

    async def test_list_style_details(self, api, http):
        api.add(
            "POST",
            "/api/orders",
            httpx.Response(400, json={"message": "Bad", "errors": [{"field": "items.0.sku", "message": "taken"}]}),
        )
        with pytest.raises(ValidationError) as exc_info:
            await http.post("/api/orders", {})
        assert exc_info.value.details == {"items.0.sku": ["taken"]}

    async def test_plain_text_error_body(self, api, http):
        api.add("GET", "/api/orders/x", httpx.Response(401, text="Unauthorized key"))
        with pytest.raises(AuthenticationError, match="Unauthorized key"):
            await http.get("/api/orders/x")


class TestRetries:

    async def test_retries_server_errors_then_succeeds(self, api, http):
        api.add(
            "GET",
            "/api/health",
            error_reply(503, "unavailable"),
            error_reply(502, "bad gateway"),
            httpx.Response(200, json={"status": "ok"}),
        )
        response = await http.get("/api/health")
        assert response.data == {"status": "ok"}
        assert len(api.requests) == 3

    async def test_server_error_after_retries_exhausted(self, api, http):
        api.add("GET", "/api/health", error_reply(500, "boom"))
        with pytest.raises(ServerError, match="boom"):
            await http.get("/api/health")
        # max_retries=2 -> 3 attempts
        assert len(api.requests) == 3

    async def test_rate_limit_exposes_retry_after(self, api, http):
        api.add("GET", "/api/health", error_reply(429, "slow down", headers={"Retry-After": "0"}))
        with pytest.raises(RateLimitError) as exc_info:
            await http.get("/api/health")
        assert exc_info.value.retry_after == 0.0
        assert len(api.requests) == 3

    async def test_network_error_retried(self, api, http):
        api.add(
            "GET",
            "/api/health",
            httpx.ConnectError("connection refused"),
            httpx.Response(200, json={"status": "ok"}),
        )
        response = await http.get("/api/health")
        assert response.data == {"status": "ok"}
        assert len(api.requests) == 2

    async def test_network_error_exhausted(self, api, http):
        api.add("GET", "/api/health", httpx.ConnectError("connection refused"))
        with pytest.raises(NetworkError, match="Network error"):
            await http.get("/api/health")
        assert len(api.requests) == 3

    async def test_timeout_raises_timeout_error(self, api, http):
        api.add("GET", "/api/health", httpx.ReadTimeout("too slow"))
        with pytest.raises(TimeoutError):
            await http.get("/api/health")

    async def test_no_retries_when_disabled(self, api):
        from atoship import Configuration

        client = HttpClient(
            Configuration(API_KEY, base_url="https://api.test.atoship.com", max_retries=0),
            transport=api.transport(),
        )
        api.add("GET", "/api/health", error_reply(500, "boom"))
        with pytest.raises(ServerError):
            await client.get("/api/health")
        assert len(api.requests) == 1
        await client.close()

    async def test_backoff_delays(self, api, config, monkeypatch):
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr("atoship.api.http_client.asyncio.sleep", fake_sleep)
        client = HttpClient(config.model_copy(update={"retry_backoff": 0.5}), transport=api.transport())
        api.add("GET", "/api/health", error_reply(500, "boom"))
        with pytest.raises(ServerError):
            await client.get("/api/health")
        assert delays == [0.5, 1.0]
        await client.close()

    async def test_retry_after_overrides_backoff(self, api, config, monkeypatch):
        delays = []

        async def fake_sleep(seconds):
            delays.append(seconds)

        monkeypatch.setattr("atoship.api.http_client.asyncio.sleep", fake_sleep)
        client = HttpClient(config, transport=api.transport())
        api.add(
            "GET",
            "/api/health",
            error_reply(429, "slow down", headers={"Retry-After": "7"}),
            httpx.Response(200, json={"status": "ok"}),
        )
        await client.get("/api/health")
        assert delays == [7.0]
        await client.close()
