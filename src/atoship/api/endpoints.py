"""atoship API endpoint paths."""

from urllib.parse import quote

# Orders
ORDERS = "/api/orders"
ORDER_DETAIL = "/api/orders/{order_id}"
ORDERS_BATCH = "/api/orders/batch"

# Shipping
RATES = "/api/shipping/rates"
RATES_COMPARE = "/api/shipping/rates/compare"
LABELS = "/api/shipping/labels"
LABEL_DETAIL = "/api/shipping/labels/{label_id}"
LABEL_CANCEL = "/api/shipping/labels/{label_id}/cancel"
LABEL_REFUND = "/api/shipping/labels/{label_id}/refund"

# Tracking
TRACKING = "/api/tracking/{tracking_number}"
TRACKING_BATCH = "/api/tracking/batch"

# Addresses
ADDRESSES = "/api/addresses"
ADDRESS_DETAIL = "/api/addresses/{address_id}"
ADDRESS_VALIDATE = "/api/addresses/validate"
ADDRESS_SUGGEST = "/api/addresses/suggest"

# Account
PROFILE = "/api/profile"
ACCOUNT_USAGE = "/api/account/usage"
ACCOUNT_BILLING = "/api/account/billing"
API_KEYS = "/api/keys"
API_KEY_DETAIL = "/api/keys/{key_id}"

# Webhooks
WEBHOOKS = "/api/webhooks"
WEBHOOK_DETAIL = "/api/webhooks/{webhook_id}"
WEBHOOK_TEST = "/api/webhooks/{webhook_id}/test"

# Carriers
CARRIERS = "/api/carriers"
CARRIER_DETAIL = "/api/carriers/{carrier_code}"

# Monitoring
MONITORING_METRICS = "/api/monitoring/metrics"
MONITORING_PERFORMANCE = "/api/monitoring/performance"
ANALYTICS = "/api/analytics"
HEALTH = "/api/health"
STATUS = "/api/status"


def build_path(template: str, **params: str) -> str:
    """Fill a path template, escaping each value as a single path segment."""
    return template.format(**{key: quote(str(value), safe="") for key, value in params.items()})
