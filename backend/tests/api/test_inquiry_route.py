"""Inquiry Route - required fields, delivery outcome, seller-mail failure."""

SELLER = "seller@example.com"
BUYER = "buyer@example.com"


def _body(**overrides):
    body = {
        "listingTitle": "Honda Vezel 2017",
        "sellerEmail": SELLER,
        "name": "Kasun Silva",
        "email": BUYER,
        "phone": "0771234567",
        "enquiry": "Can I see the car this weekend?",
    }
    body.update(overrides)
    return body


async def test_inquiry_sent(client, fake_mail):
    res = await client.post("/api/v1/inquiries", json=_body())

    assert res.status_code == 200
    assert res.json() == {
        "message": "Inquiry sent successfully",
        "sellerEmail": SELLER,
        "buyerEmail": BUYER,
        "confirmationSent": True,
    }
    assert [m["to"] for m in fake_mail.sent] == [SELLER, BUYER]


async def test_missing_phone_returns_400(client, fake_mail):
    body = _body()
    del body["phone"]
    res = await client.post("/api/v1/inquiries", json=body)
    assert res.status_code == 400
    assert res.json()["error"] == "Required fields missing"
    assert fake_mail.sent == []


async def test_invalid_email_returns_400(client, fake_mail):
    res = await client.post("/api/v1/inquiries", json=_body(sellerEmail="not-an-email"))
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data"
    assert fake_mail.sent == []


async def test_seller_mail_failure_returns_502(client, fake_mail):
    fake_mail.fail_for = {SELLER}
    res = await client.post("/api/v1/inquiries", json=_body())
    assert res.status_code == 502
    assert res.json() == {
        "message": "Failed to send inquiry",
        "status": "error",
        "error": "Send failed",
    }


async def test_buyer_confirmation_failure_still_200(client, fake_mail):
    fake_mail.fail_for = {BUYER}
    res = await client.post("/api/v1/inquiries", json=_body())
    assert res.status_code == 200
    assert res.json()["confirmationSent"] is False


async def test_multiline_listing_title_still_sends(client, fake_mail):
    res = await client.post(
        "/api/v1/inquiries", json=_body(listingTitle="Honda Vezel\n2017"),
    )
    assert res.status_code == 200
    assert res.json()["confirmationSent"] is True
    assert fake_mail.sent[0]["subject"] == "New inquiry for your listing: Honda Vezel 2017"
