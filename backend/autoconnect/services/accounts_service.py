"""Bank Account Service - CRUD against the bank_accounts table.

Invariants:
    - Exactly one write (commit) per create/update/delete call; no retries
    - Every SQLAlchemy failure surfaces as PersistenceError (via translate_db_errors)
    - Missing ids raise ResourceNotFoundError("Bank account", id)
    - Update applies only the fields the caller supplied (merge, not replace)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from autoconnect.core.errors import ResourceNotFoundError
from autoconnect.infrastructure.database import translate_db_errors
from autoconnect.models.bank_account import BankAccount
from autoconnect.schemas.account import BankAccountCreate, BankAccountUpdate

logger = logging.getLogger(__name__)

RESOURCE = "Bank account"


async def create_bank_account(
    db: AsyncSession, payload: BankAccountCreate,
) -> BankAccount:
    account = BankAccount(**payload.model_dump())
    async with translate_db_errors(db, "insert"):
        db.add(account)
        await db.commit()
        await db.refresh(account)
    logger.info(
        "Bank account created", extra={"resource_id": str(account.id)},
    )
    return account


async def list_bank_accounts(
    db: AsyncSession,
    user_id: UUID | None = None,
    limit: int = 50,
    offset: int = 0,
) -> list[BankAccount]:
    query = select(BankAccount).order_by(BankAccount.created_at.desc())
    if user_id is not None:
        query = query.where(BankAccount.user_id == user_id)
    query = query.limit(limit).offset(offset)
    async with translate_db_errors(db, "select"):
        result = await db.execute(query)
        return list(result.scalars().all())


async def get_bank_account(db: AsyncSession, account_id: UUID) -> BankAccount:
    async with translate_db_errors(db, "select"):
        account = await db.get(BankAccount, account_id)
    if account is None:
        raise ResourceNotFoundError(RESOURCE, str(account_id))
    return account


async def update_bank_account(
    db: AsyncSession, account_id: UUID, changes: BankAccountUpdate,
) -> BankAccount:
    account = await get_bank_account(db, account_id)
    for field, value in changes.changes().items():
        setattr(account, field, value)
    async with translate_db_errors(db, "update"):
        await db.commit()
        await db.refresh(account)
    logger.info(
        "Bank account updated", extra={"resource_id": str(account_id)},
    )
    return account


async def delete_bank_account(db: AsyncSession, account_id: UUID) -> None:
    account = await get_bank_account(db, account_id)
    async with translate_db_errors(db, "delete"):
        await db.delete(account)
        await db.commit()
    logger.info(
        "Bank account deleted", extra={"resource_id": str(account_id)},
    )
