"""Discriminated result of a single parse call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from strictipv4.errors import Diagnostic


@dataclass(frozen=True)
class ParseSuccess:
    """A rule matched.

    Attributes:
        rule: Name of the rule that matched.
        value: Whatever the AST builder produced for the match.
        span: (start, end) offsets of the matched text.
    """

    rule: str
    value: Any
    span: tuple[int, int]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    """A rule refused its input.

    Attributes:
        rule: Name of the rule that was attempted.
        diagnostic: The first violated condition.
        offset: Input offset where the deciding check fired, if known.
        text: The input that was rejected.
    """

    rule: str
    diagnostic: Diagnostic
    offset: int | None = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        loc = f" at offset {self.offset}" if self.offset is not None else ""
        return f"{self.message}{loc} in {self.text!r}"


ParseOutcome = Union[ParseSuccess, ParseFailure]
