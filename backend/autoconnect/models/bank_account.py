"""BankAccount ORM - a user's linked bank account.

Invariants:
    - id is UUID primary key (generated on insert)
    - user_id, bank_name, branch_name, account_number, card_number, account_type are non-nullable
    - bank_name, account_type, status only hold values of their Enum; anything else fails at flush
    - status defaults to "Active", balance defaults to 0

Design Decisions:
    - user_id is indexed but not foreign-keyed: users live outside this service
    - Enum columns stored as VARCHAR (native_enum=False) so SQLite and Postgres behave alike
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Enum as SAEnum, Float, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Uuid

from autoconnect.core.domain_types import AccountStatus, AccountType, BankName
from autoconnect.db.base import Base


def _enum_column(enum_cls: type, name: str, length: int) -> SAEnum:
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        length=length,
        validate_strings=True,
        values_callable=lambda members: [m.value for m in members],
    )


class BankAccount(Base):
    """Bank account linked by a marketplace user."""
    __tablename__ = "bank_accounts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    bank_name: Mapped[BankName] = mapped_column(
        _enum_column(BankName, "bank_name", 60), nullable=False,
    )
    branch_name: Mapped[str] = mapped_column(String(120), nullable=False)
    account_number: Mapped[str] = mapped_column(String(40), nullable=False)
    card_number: Mapped[str] = mapped_column(String(40), nullable=False)
    account_type: Mapped[AccountType] = mapped_column(
        _enum_column(AccountType, "account_type", 20), nullable=False,
    )
    status: Mapped[AccountStatus] = mapped_column(
        _enum_column(AccountStatus, "account_status", 20),
        nullable=False, default=AccountStatus.ACTIVE,
    )
    balance: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
