"""Inquiry Route - buyer asks a seller about a listing; both sides get an email.

Invariants:
    - Required fields checked before any mail is attempted
    - 200 only when the seller mail was delivered; the buyer copy is reported, not required
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from autoconnect.api.contract import validate_write
from autoconnect.api.dependencies import get_mail_transport
from autoconnect.core.request_contract import INQUIRY_REQUIRED_FIELDS
from autoconnect.infrastructure.mail_transport import SMTPTransport
from autoconnect.schemas.inquiry import InquiryCreate, InquiryResponse
from autoconnect.services.inquiry_service import send_inquiry

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/inquiries", tags=["inquiries"])


@router.post("")
async def create_inquiry(
    body: dict[str, Any] = Body(...),
    transport: SMTPTransport = Depends(get_mail_transport),
):
    inquiry = validate_write(InquiryCreate, body, INQUIRY_REQUIRED_FIELDS)
    outcome = await send_inquiry(transport, inquiry)
    return InquiryResponse(
        message="Inquiry sent successfully",
        seller_email=outcome.seller_email,
        buyer_email=outcome.buyer_email,
        confirmation_sent=outcome.confirmation_sent,
    ).model_dump(by_alias=True)
