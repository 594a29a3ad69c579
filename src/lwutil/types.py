"""Validated unsigned integer types.

The checked parts of lwutil (varint codec, hex formatting) validate their
integer inputs through pydantic so that the accepted ranges are declared once,
as type metadata, rather than repeated as ad-hoc comparisons.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import ConfigDict, Field, TypeAdapter, ValidationError

from .exceptions import InvalidArgumentError

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF

# Buffers: bytearray, memoryview, array.array, mmap, bytes (load only), ...
Buffer = Any

U8 = Annotated[int, Field(ge=0, le=U8_MAX)]
U16 = Annotated[int, Field(ge=0, le=U16_MAX)]
U32 = Annotated[int, Field(ge=0, le=U32_MAX)]

# Strict: no coercion from str/float/bool
_STRICT = ConfigDict(strict=True)

U8_ADAPTER: TypeAdapter[int] = TypeAdapter(U8, config=_STRICT)
U16_ADAPTER: TypeAdapter[int] = TypeAdapter(U16, config=_STRICT)
U32_ADAPTER: TypeAdapter[int] = TypeAdapter(U32, config=_STRICT)

_ADAPTERS = {8: U8_ADAPTER, 16: U16_ADAPTER, 32: U32_ADAPTER}


def check_uint(value: object, bits: int, name: str = "value") -> int:
    """Validate that value is an unsigned integer of the given width.

    Args:
        value: Candidate value
        bits: Width in bits (8, 16 or 32)
        name: Argument name used in the error message

    Returns:
        The validated integer

    Raises:
        InvalidArgumentError: If value is not an int in 0..2**bits - 1
    """
    adapter = _ADAPTERS.get(bits)
    if adapter is None:
        raise InvalidArgumentError(f"Unsupported width: {bits} bits (expected 8, 16 or 32)")

    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise InvalidArgumentError(
            f"{name} must be an unsigned {bits}-bit integer, got {value!r}"
        ) from e
