"""Fake Adapters - in-process stand-ins for the vision, LLM, payment and mail clients.

Invariants:
    - Each fake records every call it receives (for assertions)
    - A fake configured with `error` raises it instead of answering
    - Signatures match the real clients so routes and services cannot tell them apart

Design Decisions:
    - Flat classes (no inheritance), no network: tests stay fast and deterministic
"""

from aiosmtplib import SMTPException

from autoconnect.infrastructure.mail_transport import MailReceipt
from autoconnect.infrastructure.payment_gateway import CheckoutSession


class FakeVision:
    def __init__(self, lines=None, error=None):
        self.lines = ["Item 1", "Item 2"] if lines is None else lines
        self.error = error
        self.calls = []

    async def extract_text(self, image):
        self.calls.append(image)
        if self.error:
            raise self.error
        return list(self.lines)


class FakeLLM:
    def __init__(self, result=None, error=None):
        self.result = {"issuer": "Cargills", "total": 1500} if result is None else result
        self.error = error
        self.calls = []

    async def complete_json(self, user_content, system_prompt):
        self.calls.append((user_content, system_prompt))
        if self.error:
            raise self.error
        return self.result


class FakeGateway:
    def __init__(self, session=None, error=None):
        self.session = session or CheckoutSession(
            id="cs_test_123", url="https://checkout.stripe.com/c/pay/cs_test_123",
        )
        self.error = error
        self.calls = []

    async def create_session(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return self.session


class FakeMailTransport:
    """Records messages; raises SMTPException for any `to` listed in fail_for."""

    sender = "AutoConnect <noreply@autoconnect.lk>"

    def __init__(self, fail_for=()):
        self.fail_for = set(fail_for)
        self.sent = []

    async def send_mail(self, **kwargs):
        if kwargs["to"] in self.fail_for:
            raise SMTPException("Send failed")
        self.sent.append(kwargs)
        return MailReceipt(
            message_id=f"<{len(self.sent)}@autoconnect.lk>",
            response="250 2.0.0 OK",
        )
