"""Top-level entry point: parse text with a named rule.

parse() is a pure function of (text, rule, config). It never raises for
bad input; callers branch on the returned ParseSuccess / ParseFailure.
"""

from __future__ import annotations

import enum
from typing import Any, Callable

from strictipv4.builders import Builder, tuple_builder
from strictipv4.config import STRICT, GrammarConfig
from strictipv4.errors import Diagnostic, ParseError
from strictipv4.grammar import composite
from strictipv4.grammar.masks import ace_mask, subnet_mask
from strictipv4.grammar.scanner import Mismatch, Scanner
from strictipv4.models.outcome import ParseFailure, ParseOutcome, ParseSuccess


class RuleName(str, enum.Enum):
    """Rules that parse() can be asked to match."""

    OCTET = "octet"
    PREFIX_LENGTH = "prefix_length"
    PREFIX = "prefix"
    DOTTED = "dotted"
    SUBNET_MASK = "subnet_mask"
    ACENET_MASK = "acenet_mask"
    CIDR = "cidr"
    SUBNET = "subnet"
    ACENET = "acenet"
    CIDRSTA = "cidrsta"
    SUBSTA = "substa"
    ACESTA = "acesta"
    FILTER = "filter"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, rule: RuleName | str) -> RuleName:
        """Accept a RuleName or its string value."""
        try:
            return cls(rule)
        except ValueError:
            known = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown rule {rule!r} (known: {known})") from None


_RULES: dict[RuleName, Callable[[Scanner], Any]] = {
    RuleName.OCTET: Scanner.octet,
    RuleName.PREFIX_LENGTH: Scanner.prefix_length,
    RuleName.PREFIX: Scanner.detached_prefix_length,
    RuleName.DOTTED: Scanner.dotted,
    RuleName.SUBNET_MASK: subnet_mask,
    RuleName.ACENET_MASK: ace_mask,
    RuleName.CIDR: composite.CIDR,
    RuleName.SUBNET: composite.SUBNET,
    RuleName.ACENET: composite.ACENET,
    RuleName.CIDRSTA: composite.CIDRSTA,
    RuleName.SUBSTA: composite.SUBSTA,
    RuleName.ACESTA: composite.ACESTA,
    RuleName.FILTER: composite.FILTER,
}


def parse(
    text: str,
    rule: RuleName | str,
    config: GrammarConfig = STRICT,
    builder: Builder = tuple_builder,
    partial: bool = False,
) -> ParseOutcome:
    """Match ``text`` against a rule.

    The whole input must match unless ``partial`` is set, in which case
    a match of a leading part of the input succeeds and the span says
    how much was consumed.

    >>> parse("192.0.2.0/25", "cidr").value
    ((192, 0, 2, 0), 25)
    >>> parse("10.02.30.40", "dotted").message
    'Leading zero is ambiguous (octal or decimal)'
    """
    rule = RuleName.lookup(rule)
    scanner = Scanner(text, config)
    try:
        value = _RULES[rule](scanner)
        if not partial and not scanner.at_end:
            raise scanner.fail(Diagnostic.NO_MATCH)
    except Mismatch as e:
        return ParseFailure(
            rule=rule.value,
            diagnostic=e.diagnostic,
            offset=e.offset,
            text=text,
        )
    return ParseSuccess(
        rule=rule.value,
        value=builder(rule, value),
        span=(0, scanner.pos),
    )


def parse_or_raise(
    text: str,
    rule: RuleName | str,
    config: GrammarConfig = STRICT,
    builder: Builder = tuple_builder,
) -> Any:
    """Like parse(), but return the built value or raise ParseError."""
    outcome = parse(text, rule, config, builder)
    if isinstance(outcome, ParseFailure):
        raise ParseError(outcome)
    return outcome.value
