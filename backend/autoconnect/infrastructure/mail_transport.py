"""SMTP Mail Transport - builds multipart messages and hands them to aiosmtplib.

Invariants:
    - One SMTP conversation per send_mail() call (connect, send, quit)
    - Messages always carry a text part and an HTML alternative
    - Failures propagate as aiosmtplib.SMTPException / OSError; callers decide policy

Design Decisions:
    - Connection settings fixed at construction; the same transport serves the whole process
    - sender formatted as "<smtp user> <<smtp email>>"
"""

import logging
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailReceipt:
    message_id: str
    response: str


class SMTPTransport:
    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        email: str,
        password: str,
        use_tls: bool = True,
        timeout_seconds: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.email = email
        self.password = password
        self.use_tls = use_tls
        self.timeout_seconds = timeout_seconds

    @property
    def sender(self) -> str:
        return f"{self.username} <{self.email}>"

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
    ) -> MailReceipt:
        message = build_message(
            from_=from_, to=to, subject=subject, text=text, html=html,
            reply_to=reply_to, cc=cc,
        )
        _, response = await aiosmtplib.send(
            message,
            hostname=self.host,
            port=self.port,
            username=self.email or None,
            password=self.password or None,
            use_tls=self.use_tls,
            timeout=self.timeout_seconds,
        )
        return MailReceipt(message_id=message["Message-ID"], response=response)


def build_message(
    *,
    from_: str,
    to: str,
    subject: str,
    text: str,
    html: str,
    reply_to: str | None = None,
    cc: str | None = None,
) -> EmailMessage:
    message = EmailMessage()
    message["From"] = from_
    message["To"] = to
    message["Subject"] = subject
    message["Message-ID"] = make_msgid(domain="autoconnect.lk")
    if reply_to:
        message["Reply-To"] = reply_to
    if cc:
        message["Cc"] = cc
    message.set_content(text or "")
    message.add_alternative(html or "", subtype="html")
    return message
