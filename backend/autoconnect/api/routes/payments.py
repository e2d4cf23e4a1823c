"""Checkout Routes - hosted payment sessions for listing fees and ad promotions.

Invariants:
    - The amount is validated before the processor is contacted (400 "Invalid amount value")
    - Both endpoints answer 200 {sessionId, sessionUrl}
    - Promotion metadata is forwarded to the processor with every value stringified
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from autoconnect.api.contract import parse_body
from autoconnect.api.dependencies import get_payment_gateway
from autoconnect.config import get_settings
from autoconnect.core.domain_types import CheckoutPurpose
from autoconnect.infrastructure.payment_gateway import (
    CheckoutSession, StripeCheckoutGateway,
)
from autoconnect.schemas.payment import (
    CheckoutRequest, CheckoutSessionResponse, PromotionCheckoutRequest,
)
from autoconnect.services.payment_service import create_checkout_session

logger = logging.getLogger(__name__)
router = APIRouter(tags=["payments"])


def _session_body(session: CheckoutSession) -> dict:
    return CheckoutSessionResponse(
        session_id=session.id, session_url=session.url,
    ).model_dump(by_alias=True)


@router.post("/api/v1/payments/create-session")
async def create_listing_session(
    body: dict[str, Any] = Body(...),
    gateway: StripeCheckoutGateway = Depends(get_payment_gateway),
):
    """Checkout for the vehicle listing fee."""
    request = parse_body(CheckoutRequest, body)
    session = await create_checkout_session(
        gateway,
        request.amount,
        purpose=CheckoutPurpose.LISTING_FEE,
        frontend_url=get_settings().frontend_url,
    )
    return _session_body(session)


@router.post("/api/v1/promotion-payments/create-session")
async def create_promotion_session(
    body: dict[str, Any] = Body(...),
    gateway: StripeCheckoutGateway = Depends(get_payment_gateway),
):
    """Checkout for bumping an existing ad."""
    request = parse_body(PromotionCheckoutRequest, body)
    session = await create_checkout_session(
        gateway,
        request.amount,
        purpose=CheckoutPurpose.AD_PROMOTION,
        frontend_url=get_settings().frontend_url,
        product_name=request.product_name,
        metadata=request.metadata,
    )
    return _session_body(session)
