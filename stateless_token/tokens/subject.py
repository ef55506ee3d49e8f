"""
Subject payload encoding.

Subjects travel inside the ``sub`` claim as a JSON string. Decoding takes an
explicit shape: a dataclass, a pydantic model, or a parameterized alias such
as ``dict[str, Any]``.
"""

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError, to_json

from shared.errors import SerializationError


def encode_subject(subject: Any) -> str:
    try:
        return to_json(subject).decode("utf-8")
    except PydanticSerializationError as e:
        raise SerializationError(
            f"Cannot serialize token subject of type {type(subject).__name__}",
            details={"subject_type": type(subject).__name__, "error": str(e)},
        ) from e


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def decode_subject(raw: str, shape: Any) -> Any:
    """Validate ``raw`` JSON into ``shape``; raises ``pydantic.ValidationError`` on mismatch."""
    return _adapter(shape).validate_json(raw)
