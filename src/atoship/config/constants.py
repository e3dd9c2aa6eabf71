"""
Centralized SDK constants.

Single point of truth for defaults and API limits shared by the
configuration, HTTP client and services.
"""

SDK_VERSION = "1.0.0"

# ==============================================================================
# CONNECTION DEFAULTS
# ==============================================================================

DEFAULT_BASE_URL = "https://api.atoship.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

# Base delay in seconds, doubled on every retry (1s, 2s, 4s)
DEFAULT_RETRY_BACKOFF = 1.0

DEFAULT_USER_AGENT = f"atoship-Python-SDK/{SDK_VERSION}"

# ==============================================================================
# RETRY POLICY
# ==============================================================================

# 429 plus every 5xx is retried; other 4xx are final
TOO_MANY_REQUESTS = 429

# Upper bound for a server supplied Retry-After (seconds)
MAX_RETRY_AFTER_SECONDS = 60.0

# ==============================================================================
# API LIMITS
# ==============================================================================

MAX_BATCH_ORDERS = 100
MAX_BATCH_TRACKING_NUMBERS = 50

DEFAULT_PAGE_SIZE = 20

# ==============================================================================
# RATE SELECTION
# ==============================================================================

PREMIUM_CARRIERS = ("FedEx", "UPS")

BALANCED_COST_WEIGHT = 0.6
BALANCED_SPEED_WEIGHT = 0.4
