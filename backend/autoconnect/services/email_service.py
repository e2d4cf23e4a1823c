"""Email Service - best-effort mail sending with an explicit delivery result.

Invariants:
    - send() never raises for transport failures or malformed headers (ValueError from
      message construction): it logs and returns EmailResult(delivered=False)
    - The transport is always called with from, to, subject, text, html
    - `to` is the receivers joined with ", "; `from` is the transport's sender

Design Decisions:
    - Result value instead of a silent None: callers choose whether a failed
      notification matters (see inquiry_service)
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from aiosmtplib import SMTPException

from autoconnect.infrastructure.mail_transport import MailReceipt

logger = logging.getLogger(__name__)


class MailTransport(Protocol):
    @property
    def sender(self) -> str: ...

    async def send_mail(
        self,
        *,
        from_: str,
        to: str,
        subject: str,
        text: str,
        html: str,
        reply_to: str | None = None,
        cc: str | None = None,
    ) -> MailReceipt: ...


@dataclass(frozen=True)
class EmailResult:
    delivered: bool
    message_id: str | None = None
    response: str | None = None
    error: str | None = None


async def send(
    transport: MailTransport,
    receivers: list[str],
    subject: str,
    html: str,
    text: str,
    *,
    reply_to: str | None = None,
    cc: str | None = None,
) -> EmailResult:
    to = ", ".join(receivers)
    try:
        receipt = await transport.send_mail(
            from_=transport.sender,
            to=to,
            subject=subject,
            text=text,
            html=html,
            reply_to=reply_to,
            cc=cc,
        )
    except (SMTPException, OSError, ValueError) as e:
        logger.error(
            f"Failed to send email: {e}",
            extra={"recipients": to},
        )
        return EmailResult(delivered=False, error=str(e))

    logger.info(
        "Email sent successfully",
        extra={"recipients": to},
    )
    return EmailResult(
        delivered=True,
        message_id=receipt.message_id,
        response=receipt.response,
    )
