"""Typed JSON deserialization backed by pydantic."""

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from jslib.config import get_settings
from jslib.errors import ParseJson
from jslib.result import Err, Ok, Result

T = TypeVar("T")


def from_json(
    text: str | bytes,
    target: type[T] | Any,
    *,
    strict: bool | None = None,
) -> Result[T]:
    """Deserialize a JSON string into a value of type `target`.

    `target` can be anything pydantic can validate: builtin containers
    (``list[str]``), models, dataclasses, TypedDicts, unions.

    Example:
        >>> from_json('["1","2","3"]', list[str]).unwrap()
        ['1', '2', '3']

    Args:
        text: The JSON document.
        target: The type to decode into.
        strict: Reject values of the wrong JSON kind (``"1"`` is not an int).
            Defaults to the JSLIB_STRICT_JSON setting, which is on. Pass
            False to let pydantic coerce.

    Returns:
        Ok(value), or Err(ParseJson) on a syntax error or shape mismatch.
    """
    if strict is None:
        strict = get_settings().strict_json

    adapter: TypeAdapter[T] = TypeAdapter(target)
    try:
        return Ok(adapter.validate_json(text, strict=strict))
    except ValidationError as e:
        return Err(ParseJson(e))
