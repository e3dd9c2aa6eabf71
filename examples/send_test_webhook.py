#!/usr/bin/env python3
"""Send a signed test webhook event to a local endpoint."""

import json
import os
import time

import requests
from dotenv import load_dotenv

from atoship.core.signature import SIGNATURE_HEADER, SIGNATURE_PREFIX, compute_signature

load_dotenv()

WEBHOOK_SECRET = os.getenv("ATOSHIP_WEBHOOK_SECRET")
WEBHOOK_URL = os.getenv("TEST_WEBHOOK_URL", "http://localhost:8000/webhooks/atoship")

# Load test data from environment or use placeholders
TRACKING_NUMBER = os.getenv("TEST_TRACKING_NUMBER", "1Z999AA10123456784")
ORDER_ID = os.getenv("TEST_ORDER_ID", "ord_test_123")

if not WEBHOOK_SECRET:
    raise SystemExit("ATOSHIP_WEBHOOK_SECRET is not set")

payload = {
    "id": f"evt_test_{int(time.time())}",
    "type": "tracking.updated",
    "createdAt": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
    "data": {
        "trackingNumber": TRACKING_NUMBER,
        "orderId": ORDER_ID,
        "status": "in_transit",
    },
}

# Sign the exact bytes that are sent
body = json.dumps(payload).encode("utf-8")
signature = SIGNATURE_PREFIX + compute_signature(body, WEBHOOK_SECRET)

print("=" * 80)
print("SENDING TEST WEBHOOK")
print("=" * 80)
print(f"\nTarget: {WEBHOOK_URL}")
print(f"Event: {payload['type']} ({payload['id']})")
print(f"Payload:\n{json.dumps(payload, indent=2)}")
print(f"\nSignature: {signature[:39]}...")

try:
    response = requests.post(
        WEBHOOK_URL,
        data=body,
        headers={"Content-Type": "application/json", SIGNATURE_HEADER: signature},
        timeout=10,
    )
except requests.RequestException as e:
    raise SystemExit(f"\nError: {e}")

print(f"\n{'=' * 80}")
print(f"RESPONSE: {response.status_code}")
print(f"{'=' * 80}")
print(f"Body: {response.text or '(empty)'}")

if response.ok:
    print("\nWebhook accepted")
else:
    print("\nWebhook rejected")
