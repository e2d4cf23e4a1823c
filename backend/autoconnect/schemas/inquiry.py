"""Inquiry Schemas - buyer-to-seller ad inquiry."""

from pydantic import Field

from autoconnect.schemas.account import CamelModel


class InquiryCreate(CamelModel):
    listing_title: str = Field(min_length=1, max_length=200)
    seller_email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(min_length=1, max_length=40)
    enquiry: str = Field(min_length=1, max_length=5000)


class InquiryResponse(CamelModel):
    message: str
    seller_email: str
    buyer_email: str
    confirmation_sent: bool
