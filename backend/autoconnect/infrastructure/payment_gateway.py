"""Stripe Checkout Gateway - creates hosted payment-mode checkout sessions.

Invariants:
    - One session = one line item, quantity 1, card only, in the configured currency
    - unit_amount is already in minor units when it reaches this module
    - Product metadata values are stringified (Stripe metadata is string-only)
    - Every stripe.StripeError becomes PaymentSessionError carrying Stripe's user-facing message

Design Decisions:
    - StripeClient injected at construction: tests pass a fake exposing the same
      `v1.checkout.sessions.create_async` surface
    - Async calls go through stripe's HTTPXClient so no worker thread is needed
"""

import logging
from dataclasses import dataclass
from typing import Any

import stripe

from autoconnect.core.errors import PaymentSessionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckoutSession:
    id: str
    url: str | None


def build_session_params(
    *,
    unit_amount: int,
    currency: str,
    product_name: str,
    success_url: str,
    cancel_url: str,
    metadata: dict[str, Any] | None = None,
) -> dict[str, Any]:
    product_data: dict[str, Any] = {"name": product_name}
    if metadata:
        product_data["metadata"] = {k: str(v) for k, v in metadata.items()}
    return {
        "mode": "payment",
        "payment_method_types": ["card"],
        "line_items": [{
            "price_data": {
                "currency": currency,
                "product_data": product_data,
                "unit_amount": unit_amount,
            },
            "quantity": 1,
        }],
        "success_url": success_url,
        "cancel_url": cancel_url,
    }


class StripeCheckoutGateway:
    """Hosted checkout session factory bound to one Stripe account."""

    def __init__(self, client: stripe.StripeClient, currency: str = "lkr"):
        self.client = client
        self.currency = currency

    @classmethod
    def from_secret_key(
        cls,
        secret_key: str,
        api_base: str = "https://api.stripe.com",
        currency: str = "lkr",
        timeout_seconds: float = 30.0,
    ) -> "StripeCheckoutGateway":
        client = stripe.StripeClient(
            secret_key,
            base_addresses={"api": api_base.rstrip("/")},
            http_client=stripe.HTTPXClient(timeout=timeout_seconds),
        )
        return cls(client, currency)

    async def create_session(
        self,
        *,
        unit_amount: int,
        product_name: str,
        success_url: str,
        cancel_url: str,
        metadata: dict[str, Any] | None = None,
    ) -> CheckoutSession:
        params = build_session_params(
            unit_amount=unit_amount,
            currency=self.currency,
            product_name=product_name,
            success_url=success_url,
            cancel_url=cancel_url,
            metadata=metadata,
        )
        try:
            session = await self.client.v1.checkout.sessions.create_async(
                params=params,
            )
        except stripe.StripeError as e:
            message = e.user_message or str(e)
            logger.error(
                f"Stripe session error: {message}",
                extra={"status_code": e.http_status},
            )
            raise PaymentSessionError(message)
        return CheckoutSession(id=session.id, url=session.url)
