"""32-bit arithmetic on four-octet addresses."""

from __future__ import annotations

Address = tuple[int, int, int, int]

ALL_ONES = 0xffffffff


def address_to_int(address: Address) -> int:
    """Convert four octets (most significant first) to a 32-bit integer.

    >>> address_to_int((192, 0, 2, 1))
    3221225985
    >>> address_to_int((0, 0, 0, 0))
    0
    """
    value = 0
    for octet in address:
        value = (value << 8) | octet
    return value


def int_to_address(value: int) -> Address:
    """Convert a 32-bit integer back to four octets.

    >>> int_to_address(3221225985)
    (192, 0, 2, 1)
    """
    if not 0 <= value <= ALL_ONES:
        raise ValueError(f"Not a 32-bit value: {value!r}")
    return (
        (value >> 24) & 0xff,
        (value >> 16) & 0xff,
        (value >> 8) & 0xff,
        value & 0xff,
    )


def host_mask(prefix_length: int) -> int:
    """Return the 32-bit value with the low (32 - prefix_length) bits set.

    These are the host bits not covered by the prefix.

    >>> hex(host_mask(24))
    '0xff'
    >>> host_mask(32)
    0
    >>> hex(host_mask(0))
    '0xffffffff'
    """
    if not 0 <= prefix_length <= 32:
        raise ValueError(f"Prefix length out of range: {prefix_length!r}")
    return (1 << (32 - prefix_length)) - 1


def mask_to_prefix(mask: Address) -> int:
    """Count the leading one bits of a contiguous subnet mask.

    >>> mask_to_prefix((255, 255, 255, 0))
    24
    >>> mask_to_prefix((255, 255, 128, 0))
    17
    """
    value = address_to_int(mask)
    inverted = ~value & ALL_ONES
    if inverted & (inverted + 1):
        raise ValueError(f"Not a contiguous mask: {mask!r}")
    return 32 - inverted.bit_length()
