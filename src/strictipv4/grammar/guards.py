"""Ambiguity guards and separator tokens.

Every guard is a pure function of ``(text, pos)``: it inspects the input
around ``pos`` and reports pass or fail without moving any cursor. The
grammar variants in strictipv4.config are built by swapping these
callables; anything with the same call signature can stand in for them.

Guard kinds:
    padding       (text, pos) -> int | None
                  Whitespace characters to skip before a field's digits,
                  or None to reject the whitespace found there.
    leading_zero  (text, pos) -> bool
                  pos is the first digit of a field.
    hex           (text, pos) -> bool
                  pos is just past the last digit of a field.
    separator     (text, pos) -> int | None
                  End offset of the separator starting at pos, or None
                  when no separator is present.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

PaddingGuard = Callable[[str, int], Optional[int]]
LeadingZeroGuard = Callable[[str, int], bool]
HexGuard = Callable[[str, int], bool]
Separator = Callable[[str, int], Optional[int]]

DIGITS = frozenset("0123456789")
HEX_LETTERS = frozenset("abcdefABCDEF")
WHITESPACE = frozenset(" \t\r\n\f\v")


def _whitespace_run(text: str, pos: int) -> int:
    end = pos
    while end < len(text) and text[end] in WHITESPACE:
        end += 1
    return end - pos


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Padding:
    """Accept up to ``limit`` whitespace characters before a field.

    >>> Padding()("10. 1", 3)
    >>> Padding(limit=2)("10. 1", 3)
    1
    >>> Padding()("10.1", 3)
    0
    """

    limit: int = 0

    def __call__(self, text: str, pos: int) -> int | None:
        run = _whitespace_run(text, pos)
        if run > self.limit:
            return None
        return run


# ---------------------------------------------------------------------------
# Leading zeros
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LeadingZero:
    """Reject a field whose digits start with ``0`` followed by a digit.

    Such fields are octal under some conventions and decimal under
    others. With ``allow=True`` the digits are read as decimal.

    >>> LeadingZero()("012", 0)
    False
    >>> LeadingZero()("0.1", 0)
    True
    >>> LeadingZero(allow=True)("012", 0)
    True
    """

    allow: bool = False

    def __call__(self, text: str, pos: int) -> bool:
        if self.allow:
            return True
        return not (
            text[pos:pos + 1] == "0"
            and text[pos + 1:pos + 2] in DIGITS
        )


# ---------------------------------------------------------------------------
# Hexadecimal look-alikes
# ---------------------------------------------------------------------------

def looks_hexadecimal(text: str, pos: int) -> bool:
    """Check whether the digits ending at pos continue as something hex.

    True when the next character is a hex letter, when ``0x``/``0X``
    follows, or when the field itself ended in ``0`` and ``x``/``X``
    follows.

    >>> looks_hexadecimal("10.2A", 4)
    True
    >>> looks_hexadecimal("0x1", 1)
    True
    >>> looks_hexadecimal("10.2", 4)
    False
    >>> looks_hexadecimal("10.2.", 4)
    False
    """
    following = text[pos:pos + 1]
    if following in HEX_LETTERS:
        return True
    if text[pos:pos + 2] in ("0x", "0X"):
        return True
    return following in ("x", "X") and pos > 0 and text[pos - 1] == "0"


def interior_hex(text: str, pos: int) -> bool:
    """Hex guard for the first three octets of a dotted quad.

    Always active: a hex digit inside a dotted quad parses unambiguously
    but contradicts the decimal type of the field.
    """
    return not looks_hexadecimal(text, pos)


@dataclass(frozen=True)
class TrailingHex:
    """Hex guard for the last octet of a dotted quad and prefix lengths.

    >>> TrailingHex()("0.0.0.0A", 7)
    False
    >>> TrailingHex(allow=True)("0.0.0.0A", 7)
    True
    """

    allow: bool = False

    def __call__(self, text: str, pos: int) -> bool:
        if self.allow:
            return True
        return not looks_hexadecimal(text, pos)


# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    """Match an exact token.

    >>> Literal("/")("10.0.0.0/8", 8)
    9
    >>> Literal("/")("10.0.0.0 8", 8)
    """

    token: str

    def __call__(self, text: str, pos: int) -> int | None:
        if self.token and text.startswith(self.token, pos):
            return pos + len(self.token)
        return None

    def __str__(self) -> str:
        return repr(self.token)


@dataclass(frozen=True)
class Whitespace:
    """Match one or more whitespace characters.

    >>> Whitespace()("10.0.0.0  255.0.0.0", 8)
    10
    >>> Whitespace()("10.0.0.0/8", 8)
    """

    def __call__(self, text: str, pos: int) -> int | None:
        run = _whitespace_run(text, pos)
        if run == 0:
            return None
        return pos + run

    def __str__(self) -> str:
        return "whitespace"


@dataclass(frozen=True)
class AnyOf:
    """Match the first of several separators that matches.

    >>> sep = AnyOf((Literal("/"), Whitespace()))
    >>> sep("10.0.0.0/8", 8), sep("10.0.0.0 8", 8)
    (9, 9)
    """

    choices: tuple[Separator, ...]

    def __call__(self, text: str, pos: int) -> int | None:
        for choice in self.choices:
            end = choice(text, pos)
            if end is not None:
                return end
        return None

    def __str__(self) -> str:
        return " | ".join(str(c) for c in self.choices)


def separator(tokens: str | list[str] | tuple[str, ...]) -> Separator:
    """Build a separator from a token or a list of tokens.

    The token ``"whitespace"`` stands for one or more whitespace
    characters; anything else is matched literally.

    >>> separator("/")
    Literal(token='/')
    >>> separator("whitespace")
    Whitespace()
    >>> separator(["/", "whitespace"])
    AnyOf(choices=(Literal(token='/'), Whitespace()))
    """
    if isinstance(tokens, str):
        if tokens == "whitespace":
            return Whitespace()
        if not tokens:
            raise ValueError("Separator token must not be empty")
        return Literal(tokens)
    choices = tuple(separator(t) for t in tokens)
    if not choices:
        raise ValueError("Separator list must not be empty")
    if len(choices) == 1:
        return choices[0]
    return AnyOf(choices)
