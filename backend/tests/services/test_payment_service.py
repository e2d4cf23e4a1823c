"""Payment Service - amount validation, minor units, and redirect targets per purpose."""

import pytest

from autoconnect.core.domain_types import CheckoutPurpose
from autoconnect.core.errors import InvalidAmountError
from autoconnect.services.payment_service import (
    LISTING_FEE_PRODUCT, create_checkout_session, to_minor_units,
)
from tests.fakes import FakeGateway

FRONTEND = "http://localhost:3001"


def test_to_minor_units():
    assert to_minor_units(1500) == 150000


@pytest.mark.parametrize("amount", [0, -100, 15.5, "abc", True, None])
async def test_invalid_amount_never_reaches_gateway(amount):
    gateway = FakeGateway()
    with pytest.raises(InvalidAmountError):
        await create_checkout_session(
            gateway, amount,
            purpose=CheckoutPurpose.LISTING_FEE, frontend_url=FRONTEND,
        )
    assert gateway.calls == []


async def test_listing_fee_session():
    gateway = FakeGateway()
    session = await create_checkout_session(
        gateway, 1500, purpose=CheckoutPurpose.LISTING_FEE, frontend_url=FRONTEND,
    )

    assert session.id == "cs_test_123"
    call = gateway.calls[0]
    assert call["unit_amount"] == 150000
    assert call["product_name"] == LISTING_FEE_PRODUCT
    assert call["success_url"] == (
        "http://localhost:3001/payment-success?session_id={CHECKOUT_SESSION_ID}"
    )
    assert call["cancel_url"] == "http://localhost:3001/marketplace/sell?canceled=true"
    assert call["metadata"] is None


async def test_promotion_session_redirects_and_metadata():
    gateway = FakeGateway()
    await create_checkout_session(
        gateway, "500",
        purpose=CheckoutPurpose.AD_PROMOTION,
        frontend_url=FRONTEND + "/",
        product_name="Ad Bump Promotion",
        metadata={"adId": "42"},
    )

    call = gateway.calls[0]
    assert call["unit_amount"] == 50000
    assert call["success_url"] == (
        "http://localhost:3001/promotion-payment-success?session_id={CHECKOUT_SESSION_ID}"
    )
    assert call["cancel_url"] == "http://localhost:3001/marketplace/my-ads?promo=canceled"
    assert call["metadata"] == {"adId": "42"}
