"""Request Contract - pure checks applied to raw request bodies before any write.

Invariants:
    - A field is missing when absent, None, a blank string, or an empty collection
    - Zero and False are values, not missing
    - require_fields raises before any persistence is attempted
    - coerce_amount accepts only positive whole numbers (int, integral float, numeric string)
"""

from collections.abc import Iterable, Mapping
from typing import Any

from autoconnect.core.errors import InvalidAmountError, RequiredFieldsMissingError

BANK_ACCOUNT_REQUIRED_FIELDS = (
    "userId", "bankName", "branchName",
    "accountNumber", "cardNumber", "accountType",
)
CATEGORY_REQUIRED_FIELDS = ("categoryid", "name", "type", "color", "icon")
INQUIRY_REQUIRED_FIELDS = (
    "listingTitle", "sellerEmail", "name", "email", "phone", "enquiry",
)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def missing_fields(body: Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Return required field names that are absent or empty, in declaration order."""
    return [name for name in required if is_blank(body.get(name))]


def require_fields(body: Mapping[str, Any], required: Iterable[str]) -> None:
    missing = missing_fields(body, required)
    if missing:
        raise RequiredFieldsMissingError(missing)


def _parse_whole_number(text: str) -> int:
    # int() first keeps digit strings exact beyond float precision
    try:
        return int(text)
    except ValueError:
        pass
    try:
        parsed = float(text)
    except ValueError:
        raise InvalidAmountError()
    if not parsed.is_integer():
        raise InvalidAmountError()
    return int(parsed)


def coerce_amount(raw: Any) -> int:
    """Normalize a checkout amount to a positive int or raise InvalidAmountError.

    Mirrors numeric coercion of form/JSON input: "1500" and 1500.0 are
    accepted, 15.5, "abc", booleans and non-positive numbers are not.
    """
    if isinstance(raw, bool) or raw is None:
        raise InvalidAmountError()
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidAmountError()
        value = int(raw)
    elif isinstance(raw, str):
        value = _parse_whole_number(raw.strip())
    else:
        raise InvalidAmountError()
    if value <= 0:
        raise InvalidAmountError()
    return value
