"""Batch validation: run one rule over many lines and collect failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from strictipv4.config import STRICT, GrammarConfig
from strictipv4.models.outcome import ParseFailure, ParseSuccess
from strictipv4.parser import RuleName, parse


@dataclass(frozen=True)
class LineViolation:
    """A rejected line with context.

    Attributes:
        line_number: 1-based line number within the input.
        failure: The ParseFailure for the line's text.
        source: Optional name of the input (e.g. a file path).
    """

    line_number: int
    failure: ParseFailure
    source: str = ""

    def __str__(self) -> str:
        loc = f"{self.source}:{self.line_number}" if self.source else f"line {self.line_number}"
        return f"{loc}: {self.failure}"


@dataclass
class ValidationResult:
    """Aggregated result of validating many lines.

    Collects every rejected line and the values of accepted ones.
    """

    failures: list[LineViolation]
    matches: list[ParseSuccess]

    def __init__(self) -> None:
        self.failures = []
        self.matches = []

    def add(self, violation: LineViolation) -> None:
        self.failures.append(violation)

    @property
    def checked(self) -> int:
        return len(self.failures) + len(self.matches)

    @property
    def is_valid(self) -> bool:
        return not self.failures

    def report(self) -> str:
        """Generate a human-readable report of all rejected lines."""
        if not self.failures:
            return f"All {self.checked} line(s) valid."

        lines = [f"{len(self.failures)} of {self.checked} line(s) rejected:"]
        for v in self.failures:
            lines.append(f"  {v}")
        return "\n".join(lines)


def validate_lines(
    lines: Iterable[str],
    rule: RuleName | str,
    config: GrammarConfig = STRICT,
    source: str = "",
) -> ValidationResult:
    """Parse each line with ``rule``.

    Line endings are stripped; nothing else is, so stray whitespace is
    still reported. Blank lines and lines starting with ``#`` are
    skipped.
    """
    rule = RuleName.lookup(rule)
    result = ValidationResult()

    for number, raw in enumerate(lines, start=1):
        text = raw.rstrip("\r\n")
        if not text.strip() or text.lstrip().startswith("#"):
            continue
        outcome = parse(text, rule, config)
        if isinstance(outcome, ParseFailure):
            result.add(LineViolation(line_number=number, failure=outcome, source=source))
        else:
            result.matches.append(outcome)

    return result
