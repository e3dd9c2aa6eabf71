#!/usr/bin/env python3
"""Create an order, shop rates, buy the best label and track it.

Reads ATOSHIP_API_KEY (and the other ATOSHIP_* settings) from the
environment or a .env file.
"""

import asyncio

from dotenv import load_dotenv

from atoship import AtoshipError, AtoshipSDK, Configuration, ValidationError
from atoship.utils import select_rate

load_dotenv()

ORDER = {
    "orderNumber": "ORDER-001",
    "recipientName": "Bob Smith",
    "recipientEmail": "bob@example.com",
    "recipientStreet1": "456 Pine Street",
    "recipientCity": "Seattle",
    "recipientState": "WA",
    "recipientPostalCode": "98101",
    "recipientCountry": "US",
    "items": [
        {"name": "Programming Guide", "sku": "BOOK-001", "quantity": 1, "unitPrice": 54.99, "weight": 1.3},
    ],
}

FROM_ADDRESS = {
    "name": "Example Store",
    "street1": "789 Market Blvd",
    "city": "Portland",
    "state": "OR",
    "postalCode": "97201",
    "country": "US",
}


async def main() -> None:
    async with AtoshipSDK(Configuration.from_env()) as sdk:
        print(f"Using {sdk.get_configuration()}")

        order = (await sdk.orders.create(ORDER)).raise_for_error().data
        print(f"Created order {order.id} ({order.order_number})")

        rates = (
            await sdk.rates.get_rates(
                {
                    "fromAddress": FROM_ADDRESS,
                    "toAddress": order.recipient_address.to_api(),
                    "package": {"weight": order.total_weight or 1.0, "weightUnit": "lb"},
                }
            )
        ).raise_for_error().data
        for rate in rates:
            print(f"  {rate.carrier:<8} {rate.service_name or '':<20} {rate.amount:>8.2f} {rate.currency}")

        best = select_rate(rates, strategy="balanced")
        print(f"Selected {best.carrier} {best.service_name} at {best.amount:.2f}")

        label = (await sdk.labels.purchase({"orderId": order.id, "rateId": best.id})).raise_for_error().data
        print(f"Label {label.id}: {label.tracking_number} -> {label.label_url}")

        tracking = (await sdk.tracking.track(label.tracking_number, carrier=label.carrier)).data
        print(f"Tracking status: {tracking.status}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except ValidationError as e:
        print(f"Invalid data: {e.message}")
        for field, messages in e.details.items():
            print(f"  {field}: {', '.join(messages)}")
    except AtoshipError as e:
        print(f"API error: {e} (request id: {e.request_id})")
