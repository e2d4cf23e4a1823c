"""Inquiry Service - relays a buyer's ad inquiry to the seller by email.

Invariants:
    - Seller mail goes first, with Reply-To set to the buyer and the buyer on Cc
    - A failed seller mail raises MailDeliveryError; nothing else is sent
    - The buyer confirmation is best-effort: its result is reported, never raised
    - All buyer-supplied text is HTML-escaped before it enters a template
    - Buyer-supplied text placed in a header (subject, Reply-To name) is folded to one line
"""

import html
import logging
from dataclasses import dataclass

from autoconnect.core.errors import MailDeliveryError
from autoconnect.schemas.inquiry import InquiryCreate
from autoconnect.services import email_service
from autoconnect.services.email_service import MailTransport

logger = logging.getLogger(__name__)


def _one_line(value: str) -> str:
    """Collapse CR/LF and runs of whitespace so the value is safe in a mail header."""
    return " ".join(value.split())


@dataclass(frozen=True)
class InquiryOutcome:
    seller_email: str
    buyer_email: str
    confirmation_sent: bool


def _seller_html(inquiry: InquiryCreate) -> str:
    title = html.escape(inquiry.listing_title)
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 640px; margin: 0 auto;">'
        '<h2 style="margin:0 0 12px;">You have a new inquiry</h2>'
        f"<p>Your listing: <strong>{title}</strong></p>"
        '<hr style="border:none;border-top:1px solid #eee;margin:16px 0;">'
        '<p style="margin:0 0 8px;"><strong>Message from buyer:</strong></p>'
        f'<p style="white-space:pre-line">{html.escape(inquiry.enquiry)}</p>'
        '<hr style="border:none;border-top:1px solid #eee;margin:16px 0;">'
        '<p style="margin:0 0 4px;"><strong>Buyer details</strong></p>'
        f'<p style="margin:0;">Name: {html.escape(inquiry.name)}</p>'
        f'<p style="margin:0;">Email: {html.escape(inquiry.email)}</p>'
        f'<p style="margin:0;">Phone: {html.escape(inquiry.phone)}</p>'
        '<p style="margin:12px 0 0;">Reply directly to this email to contact the buyer.</p>'
        "</div>"
    )


def _seller_text(inquiry: InquiryCreate) -> str:
    return (
        f'New inquiry for your listing "{inquiry.listing_title}".\n\n'
        f"Message:\n{inquiry.enquiry}\n\n"
        f"Buyer:\nName: {inquiry.name}\nEmail: {inquiry.email}\n"
        f"Phone: {inquiry.phone}\n\n"
        "Reply to this email to contact the buyer."
    )


def _buyer_html(inquiry: InquiryCreate) -> str:
    return (
        '<div style="font-family: Arial, sans-serif; max-width: 640px; margin: 0 auto;">'
        f"<h2>Thanks, {html.escape(inquiry.name)}!</h2>"
        "<p>Your inquiry about "
        f"<strong>{html.escape(inquiry.listing_title)}</strong> was sent to the seller.</p>"
        "<p>The seller can reply directly to your email. Keep an eye on your inbox.</p>"
        "</div>"
    )


async def send_inquiry(
    transport: MailTransport, inquiry: InquiryCreate,
) -> InquiryOutcome:
    title = _one_line(inquiry.listing_title)
    seller = await email_service.send(
        transport,
        [inquiry.seller_email],
        f"New inquiry for your listing: {title}",
        _seller_html(inquiry),
        _seller_text(inquiry),
        reply_to=f"{_one_line(inquiry.name)} <{inquiry.email}>",
        cc=inquiry.email,
    )
    if not seller.delivered:
        raise MailDeliveryError(
            seller.error or "Seller notification was not delivered",
            public_message="Failed to send inquiry",
        )

    buyer = await email_service.send(
        transport,
        [inquiry.email],
        f"Your inquiry has been sent: {title}",
        _buyer_html(inquiry),
        f"Your inquiry about {title} was sent to the seller.",
    )
    if not buyer.delivered:
        logger.warning(
            "Buyer confirmation not delivered", extra={"recipients": inquiry.email},
        )
    return InquiryOutcome(
        seller_email=inquiry.seller_email,
        buyer_email=inquiry.email,
        confirmation_sent=buyer.delivered,
    )
