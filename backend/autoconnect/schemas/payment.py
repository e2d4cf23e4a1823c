"""Payment Schemas - checkout session request/response contracts.

Invariants:
    - amount is accepted as any JSON value here; coerce_amount() decides validity so
      every bad amount yields the same "Invalid amount value" error
    - metadata values may be any scalar; they are stringified before leaving the process
"""

from typing import Any

from pydantic import Field

from autoconnect.schemas.account import CamelModel

DEFAULT_PROMOTION_PRODUCT = "Ad Bump Promotion"


class CheckoutRequest(CamelModel):
    amount: Any = None


class PromotionCheckoutRequest(CheckoutRequest):
    product_name: str = Field(DEFAULT_PROMOTION_PRODUCT, min_length=1, max_length=200)
    metadata: dict[str, Any] = Field(default_factory=dict)


class CheckoutSessionResponse(CamelModel):
    session_id: str
    session_url: str | None = None
