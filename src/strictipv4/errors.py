"""Diagnostic taxonomy for rejected input."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from strictipv4.models.outcome import ParseFailure


class Diagnostic(enum.Enum):
    """Why a rule refused an input.

    The value is a machine-readable code; ``message`` is the text shown
    to users.
    """

    OCTET_OUT_OF_RANGE = "octet_out_of_range"
    PREFIX_LENGTH_OUT_OF_RANGE = "prefix_length_out_of_range"
    WHITESPACE_IN_OCTET = "whitespace_in_octet"
    POSSIBLE_HEX_IN_OCTET = "possible_hex_in_octet"
    POSSIBLE_HEX_IN_LAST_OCTET = "possible_hex_in_last_octet"
    LEADING_ZERO_AMBIGUOUS = "leading_zero_ambiguous"
    ADDRESS_DOES_NOT_CONFORM_TO_MASK = "address_does_not_conform_to_mask"
    ADDRESS_DOES_NOT_CONFORM_TO_PREFIX = "address_does_not_conform_to_prefix"
    NO_MATCH = "no_match"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Diagnostic.OCTET_OUT_OF_RANGE: "Octet out of range",
    Diagnostic.PREFIX_LENGTH_OUT_OF_RANGE: "Prefix length out of range",
    Diagnostic.WHITESPACE_IN_OCTET: "Whitespace in octet",
    Diagnostic.POSSIBLE_HEX_IN_OCTET: "Possible hexadecimal digit in octet",
    Diagnostic.POSSIBLE_HEX_IN_LAST_OCTET: (
        "Possible hexadecimal digit after last octet"
    ),
    Diagnostic.LEADING_ZERO_AMBIGUOUS: (
        "Leading zero is ambiguous (octal or decimal)"
    ),
    Diagnostic.ADDRESS_DOES_NOT_CONFORM_TO_MASK: (
        "Address does not conform to netmask"
    ),
    Diagnostic.ADDRESS_DOES_NOT_CONFORM_TO_PREFIX: (
        "Address does not conform to CIDR prefix length"
    ),
    Diagnostic.NO_MATCH: "No match",
}


class ParseError(ValueError):
    """Raised by ``parse_or_raise`` when an input is rejected.

    Attributes:
        failure: The ParseFailure describing the rejection.
    """

    def __init__(self, failure: ParseFailure) -> None:
        super().__init__(str(failure))
        self.failure = failure

    @property
    def diagnostic(self) -> Diagnostic:
        return self.failure.diagnostic
