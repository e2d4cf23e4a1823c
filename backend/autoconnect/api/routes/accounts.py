"""Bank Account Routes - create, list, fetch, update and delete linked bank accounts.

Invariants:
    - Create runs the two-step body contract (required fields, then schema) before any write
    - Create answers 201 {message, account}; update answers the merged account object
    - Unknown ids answer 404 "Bank account not found"; malformed ids answer 400
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from autoconnect.api.contract import parse_body, validate_write
from autoconnect.core.request_contract import BANK_ACCOUNT_REQUIRED_FIELDS
from autoconnect.infrastructure.database import get_db
from autoconnect.models.bank_account import BankAccount
from autoconnect.schemas.account import (
    BankAccountCreate, BankAccountResponse, BankAccountUpdate,
)
from autoconnect.services import accounts_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/accounts", tags=["accounts"])


def _serialize(account: BankAccount) -> dict:
    return BankAccountResponse.model_validate(account).model_dump(
        mode="json", by_alias=True,
    )


@router.post("/add-account", status_code=status.HTTP_201_CREATED)
async def add_account(
    body: dict[str, Any] = Body(...), db: AsyncSession = Depends(get_db),
):
    payload = validate_write(
        BankAccountCreate, body, BANK_ACCOUNT_REQUIRED_FIELDS,
    )
    account = await accounts_service.create_bank_account(db, payload)
    return {
        "message": "Bank account added successfully",
        "account": _serialize(account),
    }


@router.get("")
async def list_accounts(
    user_id: UUID | None = Query(None, alias="userId"),
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    accounts = await accounts_service.list_bank_accounts(
        db, user_id=user_id, limit=limit, offset=offset,
    )
    return [_serialize(a) for a in accounts]


@router.get("/{account_id}")
async def get_account(account_id: UUID, db: AsyncSession = Depends(get_db)):
    return _serialize(await accounts_service.get_bank_account(db, account_id))


@router.put("/{account_id}")
async def update_account(
    account_id: UUID,
    body: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """Merge the supplied fields into the stored account."""
    changes = parse_body(BankAccountUpdate, body)
    account = await accounts_service.update_bank_account(db, account_id, changes)
    return _serialize(account)


@router.delete("/{account_id}")
async def delete_account(account_id: UUID, db: AsyncSession = Depends(get_db)):
    await accounts_service.delete_bank_account(db, account_id)
    return {"message": "Bank account deleted successfully"}
