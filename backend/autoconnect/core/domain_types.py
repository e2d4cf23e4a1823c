"""Domain Types - closed value sets for bank-account fields.

Invariants:
    - Every enumerated column has exactly one Enum here; no raw string lists elsewhere
    - Enum values are the exact strings clients send and receive

Design Decisions:
    - str Enums: serialize to JSON without custom encoders, compare equal to their value
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", UUID)
CategoryId = NewType("CategoryId", UUID)
UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class BankName(str, Enum):
    """Licensed commercial and specialised banks accepted for linking."""
    BOC = "BOC (Bank of Ceylon)"
    PEOPLES = "People's Bank"
    COMMERCIAL = "Commercial Bank"
    HNB = "HNB (Hatton National Bank)"
    SAMPATH = "Sampath Bank"
    SEYLAN = "Seylan Bank"
    NSB = "NSB (National Savings Bank)"
    NDB = "NDB (National Development Bank)"
    DFCC = "DFCC Bank"
    NATIONS_TRUST = "Nations Trust Bank"
    PAN_ASIA = "Pan Asia Bank"
    UNION = "Union Bank"


class AccountType(str, Enum):
    SAVINGS = "Savings"
    CURRENT = "Current"
    FIXED_DEPOSIT = "Fixed Deposit"
    JOINT = "Joint"


class AccountStatus(str, Enum):
    """Account lifecycle states - maps to DB `status` column."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    FROZEN = "Frozen"
    CLOSED = "Closed"


class CheckoutPurpose(str, Enum):
    """What a hosted checkout session is paying for."""
    LISTING_FEE = "listing_fee"
    AD_PROMOTION = "ad_promotion"
