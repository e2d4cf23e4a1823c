"""Payment Service - validates checkout amounts and builds redirect targets per purpose.

Invariants:
    - Amount validated before any processor call (InvalidAmountError on failure)
    - Processor receives amount * 100 (minor units)
    - success_url always carries the {CHECKOUT_SESSION_ID} placeholder for the processor to fill
"""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from autoconnect.core.domain_types import CheckoutPurpose
from autoconnect.core.request_contract import coerce_amount
from autoconnect.infrastructure.payment_gateway import CheckoutSession

logger = logging.getLogger(__name__)

MINOR_UNITS_PER_MAJOR = 100
LISTING_FEE_PRODUCT = "Vehicle Listing Fee"


@dataclass(frozen=True)
class RedirectTargets:
    success_path: str
    cancel_path: str


_REDIRECTS: dict[CheckoutPurpose, RedirectTargets] = {
    CheckoutPurpose.LISTING_FEE: RedirectTargets(
        success_path="/payment-success?session_id={CHECKOUT_SESSION_ID}",
        cancel_path="/marketplace/sell?canceled=true",
    ),
    CheckoutPurpose.AD_PROMOTION: RedirectTargets(
        success_path="/promotion-payment-success?session_id={CHECKOUT_SESSION_ID}",
        cancel_path="/marketplace/my-ads?promo=canceled",
    ),
}


class CheckoutGateway(Protocol):
    async def create_session(
        self,
        *,
        unit_amount: int,
        product_name: str,
        success_url: str,
        cancel_url: str,
        metadata: dict[str, Any] | None = None,
    ) -> CheckoutSession: ...


def to_minor_units(amount: int) -> int:
    return amount * MINOR_UNITS_PER_MAJOR


async def create_checkout_session(
    gateway: CheckoutGateway,
    raw_amount: Any,
    *,
    purpose: CheckoutPurpose,
    frontend_url: str,
    product_name: str = LISTING_FEE_PRODUCT,
    metadata: dict[str, Any] | None = None,
) -> CheckoutSession:
    amount = coerce_amount(raw_amount)
    redirects = _REDIRECTS[purpose]
    base = frontend_url.rstrip("/")
    session = await gateway.create_session(
        unit_amount=to_minor_units(amount),
        product_name=product_name,
        success_url=f"{base}{redirects.success_path}",
        cancel_url=f"{base}{redirects.cancel_path}",
        metadata=metadata,
    )
    logger.info(
        f"Checkout session created for {purpose.value}",
        extra={"resource_id": session.id},
    )
    return session
