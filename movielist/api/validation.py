"""
Explicit request body validation.

Bodies are received as raw JSON and checked against a pydantic schema here,
so structural failures surface as a 400 carrying one human-readable message
per problem instead of FastAPI's default 422.
"""

from typing import Any, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from movielist.errors import BadRequestError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def format_errors(errors: Iterable[dict], strip_prefix: str | None = None) -> List[str]:
    """
    Turn pydantic error dicts into messages like "firstName: Field required".

    Args:
        errors: Output of ValidationError.errors() or RequestValidationError.errors()
        strip_prefix: Leading location element to drop (e.g. "body")
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if strip_prefix is not None and loc and loc[0] == strip_prefix:
            loc = loc[1:]
        msg = error.get("msg", "Invalid value")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return messages


def validate_body(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """
    Validate a decoded JSON body against a schema.

    Raises:
        BadRequestError: With the list of validation messages
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise BadRequestError(format_errors(e.errors()))
