"""Cursor over one input string: octets, prefix lengths, dotted quads.

Guards run in a fixed order for every field: padding, leading zero,
hexadecimal look-alikes, then range. The first one violated decides the
diagnostic, so the message never depends on which alternative a
recognizer tried first.
"""

from __future__ import annotations

from strictipv4.config import GrammarConfig
from strictipv4.errors import Diagnostic
from strictipv4.grammar.guards import DIGITS, HexGuard, Separator, interior_hex
from strictipv4.models.addressing import Address

OCTET_DIGITS = 3
PREFIX_DIGITS = 2
MAX_PREFIX_LENGTH = 32


class Mismatch(Exception):
    """A recognizer refused the input at ``offset``.

    Internal to the grammar package; parse() turns it into a
    ParseFailure.
    """

    def __init__(self, diagnostic: Diagnostic, offset: int) -> None:
        super().__init__(f"{diagnostic.message} at offset {offset}")
        self.diagnostic = diagnostic
        self.offset = offset


class Scanner:
    """Recognizers sharing a position in ``text``.

    Each method consumes one grammar element and advances ``pos``, or
    raises Mismatch and leaves ``pos`` where the failing element began.
    """

    def __init__(self, text: str, config: GrammarConfig, pos: int = 0) -> None:
        self.text = text
        self.config = config
        self.pos = pos

    def fail(self, diagnostic: Diagnostic, offset: int | None = None) -> Mismatch:
        return Mismatch(diagnostic, self.pos if offset is None else offset)

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    # -- fields -------------------------------------------------------------

    def _digits(
        self,
        max_digits: int,
        hex_guard: HexGuard,
        hex_diagnostic: Diagnostic,
        range_diagnostic: Diagnostic,
    ) -> tuple[int, int]:
        """Consume a guarded run of 1..max_digits decimal digits.

        Returns (start offset of the digits, value).
        """
        text = self.text
        skip = self.config.padding(text, self.pos)
        if skip is None:
            raise self.fail(Diagnostic.WHITESPACE_IN_OCTET)
        start = self.pos + skip
        if text[start:start + 1] not in DIGITS:
            raise self.fail(Diagnostic.NO_MATCH, start)

        if not self.config.leading_zero(text, start):
            raise self.fail(Diagnostic.LEADING_ZERO_AMBIGUOUS, start)

        end = start
        while end < len(text) and end - start < max_digits and text[end] in DIGITS:
            end += 1

        if not hex_guard(text, end):
            raise self.fail(hex_diagnostic, end)

        if text[end:end + 1] in DIGITS:
            # Longer than the field allows. Past the digit cap a leading
            # zero cannot be out of range, only malformed.
            if text[start] == "0":
                raise self.fail(Diagnostic.NO_MATCH, end)
            raise self.fail(range_diagnostic, start)

        value = int(text[start:end])
        self.pos = end
        return start, value

    def octet(self, last: bool = True) -> int:
        """Consume one octet (0-255).

        ``last`` selects the trailing hex guard from the config; interior
        octets of a dotted quad always use the strict interior guard.
        """
        if last:
            hex_guard = self.config.trailing_hex
            hex_diagnostic = Diagnostic.POSSIBLE_HEX_IN_LAST_OCTET
        else:
            hex_guard = interior_hex
            hex_diagnostic = Diagnostic.POSSIBLE_HEX_IN_OCTET
        begin = self.pos
        start, value = self._digits(
            OCTET_DIGITS, hex_guard, hex_diagnostic, Diagnostic.OCTET_OUT_OF_RANGE,
        )
        if value > 255:
            self.pos = begin
            raise self.fail(Diagnostic.OCTET_OUT_OF_RANGE, start)
        return value

    def prefix_length(self) -> int:
        """Consume a prefix length (0-32)."""
        begin = self.pos
        start, value = self._digits(
            PREFIX_DIGITS,
            self.config.trailing_hex,
            Diagnostic.POSSIBLE_HEX_IN_LAST_OCTET,
            Diagnostic.PREFIX_LENGTH_OUT_OF_RANGE,
        )
        if value > MAX_PREFIX_LENGTH:
            self.pos = begin
            raise self.fail(Diagnostic.PREFIX_LENGTH_OUT_OF_RANGE, start)
        return value

    def detached_prefix_length(self) -> int:
        """Consume a prefix length, optionally preceded by the cidr separator."""
        end = self.config.cidr(self.text, self.pos)
        if end is not None:
            self.pos = end
        return self.prefix_length()

    # -- structure ----------------------------------------------------------

    def separator(self, sep: Separator) -> None:
        """Consume a separator or fail with NoMatch."""
        end = sep(self.text, self.pos)
        if end is None:
            raise self.fail(Diagnostic.NO_MATCH)
        self.pos = end

    def dotted(self) -> Address:
        """Consume four octets joined by the dot separator."""
        first = self.octet(last=False)
        self.separator(self.config.dot)
        second = self.octet(last=False)
        self.separator(self.config.dot)
        third = self.octet(last=False)
        self.separator(self.config.dot)
        fourth = self.octet(last=True)
        return (first, second, third, fourth)
