"""Exception hierarchy for lwutil.

All exceptions inherit from LwutilError so callers can catch any lwutil-specific
error in one place. Only the checked codecs raise these; the raw fixed-width
codec performs no validation of its own.
"""

from __future__ import annotations


class LwutilError(Exception):
    """Base exception for all lwutil errors."""

    pass


class InvalidArgumentError(LwutilError, ValueError):
    """Raised when a checked operation receives an unusable argument.

    Examples:
        - Missing buffer (None)
        - Zero or negative buffer length
        - Buffer length larger than the buffer itself
        - Value outside the unsigned range of the target width
    """

    pass


class EncodeError(LwutilError):
    """Raised when a value cannot be encoded into the supplied buffer."""

    pass


class DecodeError(LwutilError):
    """Raised when a byte sequence cannot be decoded.

    Attributes:
        consumed: Number of bytes examined before the failure was detected
    """

    def __init__(self, message: str, consumed: int = 0) -> None:
        super().__init__(message)
        self.consumed = consumed


class BufferTooSmallError(EncodeError):
    """Raised when a varint does not fit into the supplied buffer capacity.

    Bytes already written to the buffer are undefined and must not be used.

    Attributes:
        needed: Number of bytes the canonical encoding requires
        capacity: Number of bytes that were available
    """

    def __init__(self, needed: int, capacity: int) -> None:
        super().__init__(f"Varint needs {needed} bytes, buffer has {capacity}")
        self.needed = needed
        self.capacity = capacity


class TruncatedVarintError(DecodeError):
    """Raised when the input ends before a terminating varint byte is seen."""

    pass


class VarintOverflowError(DecodeError):
    """Raised when a varint does not fit into an unsigned 32-bit integer.

    Examples:
        - Continuation bit still set on the 5th byte
        - 5th byte carries more than the 4 remaining value bits
    """

    pass
