"""ORM Models - SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all/autogenerate
"""

from autoconnect.models.bank_account import BankAccount  # noqa: F401
from autoconnect.models.category import Category  # noqa: F401
