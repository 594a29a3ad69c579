"""Variable-length unsigned 32-bit integers (varints).

Each byte carries 7 data bits in its low bits and a continuation flag in bit 7
(0x80). Groups are emitted least-significant first, so a 32-bit value needs
between 1 and 5 bytes:

    0 .. 127                  -> 1 byte
    128 .. 16,383             -> 2 bytes
    16,384 .. 2,097,151       -> 3 bytes
    2,097,152 .. 268,435,455  -> 4 bytes
    268,435,456 .. 2^32 - 1   -> 5 bytes

Example: 150 = 0b1_0010110

    low 7 bits  0010110 = 0x16, more to come -> 0x96
    next 7 bits 0000001 = 0x01, last         -> 0x01

    Encoded: [0x96, 0x01]

Unlike the raw fixed-width codec, every function here validates its arguments
and never reads or writes past the given length.
"""

from __future__ import annotations

import logging

from ..exceptions import (
    BufferTooSmallError,
    InvalidArgumentError,
    TruncatedVarintError,
    VarintOverflowError,
)
from ..types import U32_MAX, Buffer, check_uint

logger = logging.getLogger(__name__)

VARINT_CONTINUATION_BIT = 0x80
VARINT_DATA_MASK = 0x7F
VARINT_MAX_BYTES = 5


def _check_length(buffer: Buffer, buffer_len: int | None) -> int:
    if buffer is None:
        raise InvalidArgumentError("buffer must not be None")

    available = len(buffer)
    if buffer_len is None:
        buffer_len = available
    else:
        buffer_len = check_uint(buffer_len, 32, "buffer_len")

    if buffer_len <= 0:
        raise InvalidArgumentError(f"buffer length must be positive, got {buffer_len}")
    if buffer_len > available:
        raise InvalidArgumentError(
            f"buffer length {buffer_len} exceeds buffer size {available}"
        )
    return buffer_len


def varint_size(value: int) -> int:
    """Return the number of bytes needed to encode value as a varint.

    Args:
        value: Unsigned 32-bit integer

    Returns:
        Canonical encoded length (1-5)

    Raises:
        InvalidArgumentError: If value is not an unsigned 32-bit integer
    """
    value = check_uint(value, 32)

    size = 1
    while value > VARINT_DATA_MASK:
        value >>= 7
        size += 1
    return size


def store_u32_varint(value: int, buffer: Buffer, buffer_len: int | None = None) -> int:
    """Store an unsigned 32-bit integer into buffer as a varint.

    Bytes are written one at a time starting at index 0. If the buffer runs
    out before the value is fully consumed the encoding is incomplete and the
    bytes already written are undefined.

    Args:
        value: Value to encode (0 to 2^32-1)
        buffer: Writable buffer (bytearray, memoryview, ...)
        buffer_len: Number of bytes that may be written (default: len(buffer))

    Returns:
        Number of bytes written (1-5)

    Raises:
        InvalidArgumentError: If buffer is None, buffer_len is not an int in
            1..len(buffer), or value is out of range
        BufferTooSmallError: If the encoding does not fit in buffer_len bytes

    Example:
        >>> buf = bytearray(10)
        >>> store_u32_varint(150, buf)
        2
        >>> bytes(buf[:2])
        b'\\x96\\x01'
    """
    value = check_uint(value, 32)
    buffer_len = _check_length(buffer, buffer_len)

    remaining = value
    count = 0
    while True:
        byte = remaining & VARINT_DATA_MASK
        remaining >>= 7
        if remaining:
            byte |= VARINT_CONTINUATION_BIT

        buffer[count] = byte
        count += 1

        if not remaining:
            return count
        if count >= buffer_len:
            needed = varint_size(value)
            logger.debug("varint %d needs %d bytes, only %d available", value, needed, buffer_len)
            raise BufferTooSmallError(needed, buffer_len)


def load_u32_varint(buffer: Buffer, buffer_len: int | None = None) -> tuple[int, int]:
    """Load an unsigned 32-bit varint from the start of buffer.

    Decoding stops at the first byte without the continuation bit. At most
    min(buffer_len, 5) bytes are examined; bytes past buffer_len are never
    read, even if the buffer itself is longer.

    Args:
        buffer: Bytes-like object to decode from
        buffer_len: Number of bytes that may be read (default: len(buffer))

    Returns:
        Tuple of (value, bytes_consumed), bytes_consumed being 1-5

    Raises:
        InvalidArgumentError: If buffer is None or buffer_len is not an int
            in 1..len(buffer)
        TruncatedVarintError: If buffer_len bytes were read and the last one
            still had its continuation bit set
        VarintOverflowError: If the varint encodes a value that does not fit
            in 32 bits (continuation bit on the 5th byte, or excess bits in it)

    Example:
        >>> load_u32_varint(b"\\x9e\\xa7\\x05")
        (86942, 3)
    """
    buffer_len = _check_length(buffer, buffer_len)
    limit = min(buffer_len, VARINT_MAX_BYTES)

    value = 0
    for index in range(limit):
        byte = buffer[index]
        value |= (byte & VARINT_DATA_MASK) << (7 * index)

        if not byte & VARINT_CONTINUATION_BIT:
            if value > U32_MAX:
                logger.debug("varint overflows 32 bits after %d bytes", index + 1)
                raise VarintOverflowError(
                    f"Varint value {value} exceeds 32 bits", consumed=index + 1
                )
            return value, index + 1

    if limit == VARINT_MAX_BYTES:
        logger.debug("varint continuation bit set on byte %d", VARINT_MAX_BYTES)
        raise VarintOverflowError(
            f"Varint longer than {VARINT_MAX_BYTES} bytes", consumed=VARINT_MAX_BYTES
        )

    logger.debug("varint truncated after %d bytes", limit)
    raise TruncatedVarintError(
        f"Truncated varint: no terminating byte in {limit} bytes", consumed=limit
    )


def encode_varint(value: int) -> bytes:
    """Encode value as a canonical varint.

    Args:
        value: Unsigned 32-bit integer

    Returns:
        Encoded bytes (1-5)

    Raises:
        InvalidArgumentError: If value is not an unsigned 32-bit integer
    """
    buffer = bytearray(varint_size(value))
    store_u32_varint(value, buffer)
    return bytes(buffer)


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a varint starting at data[offset].

    Args:
        data: Bytes-like object containing the varint
        offset: Starting position in data

    Returns:
        Tuple of (value, bytes_consumed)

    Raises:
        InvalidArgumentError: If data is None or empty, or offset is not an
            int inside data
        TruncatedVarintError: If data ends inside the varint
        VarintOverflowError: If the varint does not fit in 32 bits
    """
    if data is None:
        raise InvalidArgumentError("data must not be None")
    if len(data) == 0:
        raise InvalidArgumentError("data must not be empty")

    offset = check_uint(offset, 32, "offset")
    if offset >= len(data):
        raise InvalidArgumentError(f"offset {offset} outside data of length {len(data)}")

    return load_u32_varint(memoryview(data)[offset:])
