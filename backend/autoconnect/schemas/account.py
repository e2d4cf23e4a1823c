"""Bank Account Schemas - closed request/response contracts at the API boundary.

Invariants:
    - Wire names are camelCase (userId, bankName, ...); Python names are snake_case
    - bankName, accountType, status only accept their Enum values
    - Omitted status/balance default to "Active"/0; balance must be finite (no NaN/Infinity)
    - An update may omit any field but may not null one out
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, model_validator
from pydantic.alias_generators import to_camel

from autoconnect.core.domain_types import AccountStatus, AccountType, BankName


class CamelModel(BaseModel):
    """Base for contracts exchanged with the SPA in camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class BankAccountCreate(CamelModel):
    user_id: UUID
    bank_name: BankName
    branch_name: str = Field(min_length=1, max_length=120)
    account_number: str = Field(min_length=1, max_length=40)
    card_number: str = Field(min_length=1, max_length=40)
    account_type: AccountType
    status: AccountStatus = AccountStatus.ACTIVE
    balance: FiniteFloat = 0


class BankAccountUpdate(CamelModel):
    """Partial update: only fields present in the body are applied."""
    bank_name: BankName | None = None
    branch_name: str | None = Field(None, min_length=1, max_length=120)
    account_number: str | None = Field(None, min_length=1, max_length=40)
    card_number: str | None = Field(None, min_length=1, max_length=40)
    account_type: AccountType | None = None
    status: AccountStatus | None = None
    balance: FiniteFloat | None = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class BankAccountResponse(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: UUID
    user_id: UUID
    bank_name: BankName
    branch_name: str
    account_number: str
    card_number: str
    account_type: AccountType
    status: AccountStatus
    balance: float
    created_at: datetime
    updated_at: datetime
