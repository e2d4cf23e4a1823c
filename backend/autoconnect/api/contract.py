"""Body Contract - the two-step check every write controller runs before persistence.

Invariants:
    - Step 1: required fields present and non-empty, else RequiredFieldsMissingError (400)
    - Step 2: body parsed into a closed pydantic schema, else InvalidFieldError (400)
    - Neither step touches the database
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from autoconnect.api.error_handlers import format_validation_errors
from autoconnect.core.errors import InvalidFieldError
from autoconnect.core.request_contract import require_fields

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_body(schema: type[SchemaT], body: Mapping[str, Any]) -> SchemaT:
    try:
        return schema.model_validate(body)
    except ValidationError as e:
        errors = e.errors()
        raise InvalidFieldError(
            format_validation_errors(errors),
            [".".join(str(p) for p in err["loc"]) for err in errors],
        )


def validate_write(
    schema: type[SchemaT],
    body: Mapping[str, Any],
    required: Iterable[str] = (),
) -> SchemaT:
    require_fields(body, required)
    return parse_body(schema, body)
