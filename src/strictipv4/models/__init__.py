"""Value types produced and consumed by the grammar."""

from strictipv4.models.addressing import (
    Address,
    address_to_int,
    host_mask,
    int_to_address,
    mask_to_prefix,
)
from strictipv4.models.outcome import ParseFailure, ParseOutcome, ParseSuccess

__all__ = [
    "Address",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "address_to_int",
    "host_mask",
    "int_to_address",
    "mask_to_prefix",
]
