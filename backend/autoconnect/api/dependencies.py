"""Adapter Dependencies - hand route handlers the clients built at startup.

Invariants:
    - Every adapter is constructed once in the lifespan and stored on app.state
    - Routes receive adapters only through these providers, so tests swap them
      with app.dependency_overrides
"""

from fastapi import Request

from autoconnect.infrastructure.llm_client import JSONCompletionClient
from autoconnect.infrastructure.mail_transport import SMTPTransport
from autoconnect.infrastructure.payment_gateway import StripeCheckoutGateway
from autoconnect.infrastructure.vision_client import VisionReadClient


def _state_attr(request: Request, name: str):
    client = getattr(request.app.state, name, None)
    if client is None:
        raise RuntimeError(f"{name} not initialized")
    return client


def get_vision_client(request: Request) -> VisionReadClient:
    return _state_attr(request, "vision_client")


def get_llm_client(request: Request) -> JSONCompletionClient:
    return _state_attr(request, "llm_client")


def get_payment_gateway(request: Request) -> StripeCheckoutGateway:
    return _state_attr(request, "payment_gateway")


def get_mail_transport(request: Request) -> SMTPTransport:
    return _state_attr(request, "mail_transport")
