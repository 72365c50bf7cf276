from __future__ import annotations

from libotp.errors import MovingFactorRangeError

MOVING_FACTOR_SIZE = 8
MAX_MOVING_FACTOR = (1 << (MOVING_FACTOR_SIZE * 8)) - 1


def int_to_bytes(value: int, size: int | None = MOVING_FACTOR_SIZE) -> bytes:
    """
    encode non-negative integer as big-endian bytes.

    if <size> is None, the minimal number of bytes (at least one) is used.
    """
    if value < 0:
        raise MovingFactorRangeError(f"value must be >= 0, got {value}")
    if size is None:
        size = max(1, (value.bit_length() + 7) // 8)
    try:
        return value.to_bytes(size, "big")
    except OverflowError as err:
        msg = f"value {value} does not fit into {size} bytes"
        raise MovingFactorRangeError(msg) from err


def uint32_be(data: bytes) -> int:
    """read unsigned 32 bit big-endian integer from the first 4 bytes of <data>"""
    return int.from_bytes(data[:4], "big")
