"""Tests for API models and response wrappers."""

import pytest

from atoship import (
    Address,
    ApiResponse,
    AtoshipError,
    Order,
    OrderItem,
    PaginatedResponse,
    TrackingInfo,
)
from atoship.core.exceptions import RateLimitError, ValidationError
from atoship.models.response import Pagination


class TestOrderModel:

    def test_from_camel_case_json(self, order_json):
        order = Order.model_validate(order_json)
        assert order.order_number == "ORDER-001"
        assert order.recipient_postal_code == "98101"
        assert order.created_at.year == 2024
        assert order.tags == ["books"]

    def test_derived_totals(self, order_json):
        order = Order.model_validate(order_json)
        assert order.total_weight == pytest.approx(1.3 + 0.5)
        assert order.items[1].total_price == pytest.approx(19.95)

    def test_addresses(self, order_json):
        order = Order.model_validate(order_json)
        assert order.recipient_address.one_line() == "456 Pine Street, Seattle, WA 98101, US"
        assert order.sender_address.city == "Portland"

    def test_numeric_identifiers_become_strings(self):
        order = Order.model_validate({"id": 42, "recipientPostalCode": 98101})
        assert order.id == "42"
        assert order.recipient_postal_code == "98101"

    def test_unknown_fields_kept(self):
        order = Order.model_validate({"id": "ord_1", "warehouseId": "wh_9"})
        assert order.model_extra == {"warehouseId": "wh_9"}

    def test_to_api_round_trips_aliases(self):
        item = OrderItem(name="Mug", quantity=2, unit_price=4.5)
        assert item.to_api() == {"name": "Mug", "quantity": 2, "unitPrice": 4.5}

    def test_frozen(self):
        with pytest.raises(Exception):
            Address(city="Seattle").city = "Portland"


class TestTrackingModel:

    def test_delivered(self):
        assert TrackingInfo(tracking_number="TN1", status="Delivered").is_delivered is True
        assert TrackingInfo(tracking_number="TN1", status="in_transit").is_delivered is False
        assert TrackingInfo(tracking_number="TN1").is_delivered is False

    def test_latest_event(self):
        info = TrackingInfo.model_validate(
            {
                "trackingNumber": "TN1",
                "events": [
                    {"status": "unknown"},
                    {"timestamp": "2024-05-03T10:00:00Z", "status": "delivered"},
                    {"timestamp": "2024-05-01T10:00:00Z", "status": "picked_up"},
                ],
            }
        )
        assert info.latest_event.status == "delivered"
        assert TrackingInfo(tracking_number="TN1").latest_event is None


class TestResponses:

    def test_raise_for_error(self):
        ok = ApiResponse(data={"a": 1})
        assert ok.raise_for_error() is ok
        failed = ApiResponse(success=False, error="Nope", status_code=200)
        with pytest.raises(AtoshipError, match="Nope"):
            failed.raise_for_error()

    def test_pagination(self):
        page = PaginatedResponse(data=[1, 2], pagination=Pagination(page=1, limit=2, total=3, total_pages=2))
        assert page.items == [1, 2]
        assert page.has_next is True
        assert Pagination().has_next is False


class TestExceptions:

    def test_str_includes_status(self):
        assert str(AtoshipError("Nope", status_code=404)) == "[404] Nope"
        assert str(AtoshipError("Nope")) == "Nope"

    def test_validation_details(self):
        assert ValidationError("bad").has_details() is False
        assert ValidationError("bad", details={"a": ["x"]}).has_details() is True

    def test_rate_limit_is_atoship_error(self):
        error = RateLimitError("slow", retry_after=3.0, status_code=429)
        assert isinstance(error, AtoshipError)
        assert error.retry_after == 3.0
