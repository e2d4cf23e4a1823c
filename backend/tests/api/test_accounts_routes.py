"""Bank Account Routes - full request/response contract over HTTP.

Invariants:
    - Missing/blank required field -> 400 exact envelope, nothing persisted
    - Enum outside the set -> 400 "Invalid request data", nothing persisted
    - NaN or Infinity balance -> 400 "Invalid request data", nothing written
    - Valid body -> 201 {message, account} with required fields verbatim and defaults applied
    - Unknown id -> 404 "Bank account not found"; malformed id -> 400
"""

import json
from uuid import uuid4

import pytest

from autoconnect.core.request_contract import BANK_ACCOUNT_REQUIRED_FIELDS

MISSING_FIELDS_BODY = {
    "message": "All required fields must be provided",
    "status": "error",
    "error": "Required fields missing",
}


def _body(**overrides):
    body = {
        "userId": str(uuid4()),
        "bankName": "HNB (Hatton National Bank)",
        "branchName": "Kandy",
        "accountNumber": "0091234567",
        "cardNumber": "5500000000000004",
        "accountType": "Current",
    }
    body.update(overrides)
    return body


async def _create(client, **overrides):
    res = await client.post("/api/accounts/add-account", json=_body(**overrides))
    assert res.status_code == 201
    return res.json()["account"]


# --- create -----------------------------------------------------------------


async def test_create_returns_201_with_saved_record(client):
    body = _body()
    res = await client.post("/api/accounts/add-account", json=body)

    assert res.status_code == 201
    data = res.json()
    assert data["message"] == "Bank account added successfully"
    account = data["account"]
    for field in BANK_ACCOUNT_REQUIRED_FIELDS:
        assert account[field] == body[field]
    assert account["status"] == "Active"
    assert account["balance"] == 0
    assert account["id"]


@pytest.mark.parametrize("field", BANK_ACCOUNT_REQUIRED_FIELDS)
async def test_create_missing_field_returns_400(client, field):
    body = _body()
    del body[field]
    res = await client.post("/api/accounts/add-account", json=body)
    assert res.status_code == 400
    assert res.json() == MISSING_FIELDS_BODY


async def test_create_blank_field_returns_400(client):
    res = await client.post("/api/accounts/add-account", json=_body(branchName="   "))
    assert res.status_code == 400
    assert res.json() == MISSING_FIELDS_BODY


async def test_invalid_enum_rejected_and_not_persisted(client):
    res = await client.post(
        "/api/accounts/add-account", json=_body(bankName="Bank of Atlantis"),
    )
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid request data"
    assert body["status"] == "error"
    assert "bankName" in body["error"]

    listing = await client.get("/api/accounts")
    assert listing.json() == []


async def test_invalid_user_id_rejected(client):
    res = await client.post("/api/accounts/add-account", json=_body(userId="user-1"))
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data"


async def test_non_object_body_rejected(client):
    res = await client.post("/api/accounts/add-account", json=["not", "an", "object"])
    assert res.status_code == 400
    assert res.json()["status"] == "error"


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
async def test_non_finite_balance_rejected_on_create(client, literal):
    raw = json.dumps(_body())[:-1] + f', "balance": {literal}}}'
    res = await client.post(
        "/api/accounts/add-account",
        content=raw,
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data"
    assert "balance" in res.json()["error"]

    listing = await client.get("/api/accounts")
    assert listing.json() == []


async def test_non_finite_balance_rejected_on_update(client):
    created = await _create(client, balance=100)
    res = await client.put(
        f"/api/accounts/{created['id']}",
        content='{"balance": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data"

    res = await client.get(f"/api/accounts/{created['id']}")
    assert res.json()["balance"] == 100


# --- read -------------------------------------------------------------------


async def test_list_returns_array_filtered_by_user(client):
    owner = str(uuid4())
    await _create(client, userId=owner)
    await _create(client)

    res = await client.get("/api/accounts")
    assert res.status_code == 200
    assert len(res.json()) == 2

    res = await client.get("/api/accounts", params={"userId": owner})
    assert [a["userId"] for a in res.json()] == [owner]


async def test_get_returns_object(client):
    created = await _create(client)
    res = await client.get(f"/api/accounts/{created['id']}")
    assert res.status_code == 200
    assert res.json() == created


async def test_get_unknown_id_returns_404(client):
    missing = uuid4()
    res = await client.get(f"/api/accounts/{missing}")
    assert res.status_code == 404
    assert res.json() == {
        "message": "Bank account not found",
        "status": "error",
        "error": f"Bank account '{missing}' not found",
    }


async def test_get_malformed_id_returns_400(client):
    res = await client.get("/api/accounts/not-a-uuid")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid request data"


# --- update / delete --------------------------------------------------------


async def test_update_returns_merged_object(client):
    created = await _create(client)
    res = await client.put(
        f"/api/accounts/{created['id']}", json={"status": "Frozen", "balance": 2500},
    )
    assert res.status_code == 200
    updated = res.json()
    assert updated["status"] == "Frozen"
    assert updated["balance"] == 2500
    assert updated["branchName"] == created["branchName"]
    assert updated["id"] == created["id"]


async def test_update_rejects_null_and_bad_enum(client):
    created = await _create(client)
    res = await client.put(f"/api/accounts/{created['id']}", json={"status": None})
    assert res.status_code == 400
    res = await client.put(f"/api/accounts/{created['id']}", json={"accountType": "Crypto"})
    assert res.status_code == 400

    res = await client.get(f"/api/accounts/{created['id']}")
    assert res.json()["status"] == "Active"


async def test_update_unknown_id_returns_404(client):
    res = await client.put(f"/api/accounts/{uuid4()}", json={"status": "Closed"})
    assert res.status_code == 404


async def test_delete_returns_confirmation(client):
    created = await _create(client)
    res = await client.delete(f"/api/accounts/{created['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Bank account deleted successfully"}

    res = await client.get(f"/api/accounts/{created['id']}")
    assert res.status_code == 404
