"""Grammar variants: which guards and separators a parse uses.

A GrammarConfig is built once and never mutated. Derived variants are
made by overriding named entries of an existing config, either in code
with GrammarConfig.override() or from a TOML file with load_config().
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

from strictipv4.grammar.guards import (
    AnyOf,
    HexGuard,
    LeadingZero,
    LeadingZeroGuard,
    Literal,
    Padding,
    PaddingGuard,
    Separator,
    TrailingHex,
    Whitespace,
    separator,
)

SEPARATOR_RULES = (
    "cidr", "subnet", "acenet", "cidrsta", "substa", "acesta", "filter",
)
GUARD_KEYS = ("padding", "leading_zero", "trailing_hex")


@dataclass(frozen=True)
class GrammarConfig:
    """Replaceable guards and separator tokens for one grammar variant.

    Attributes:
        padding: Whitespace allowed before the digits of a field.
        leading_zero: Guard against octal-looking digit runs.
        trailing_hex: Guard against hex letters after the last octet or
            after a prefix length.
        dot: Separator between the octets of a dotted quad.
        cidr, subnet, acenet, cidrsta, substa, acesta, filter: Separator
            between the two halves of each composite rule.
    """

    padding: PaddingGuard = field(default_factory=Padding)
    leading_zero: LeadingZeroGuard = field(default_factory=LeadingZero)
    trailing_hex: HexGuard = field(default_factory=TrailingHex)
    dot: Separator = field(default_factory=lambda: Literal("."))
    cidr: Separator = field(default_factory=lambda: Literal("/"))
    subnet: Separator = field(default_factory=Whitespace)
    acenet: Separator = field(default_factory=Whitespace)
    cidrsta: Separator = field(default_factory=lambda: Literal("/"))
    substa: Separator = field(default_factory=Whitespace)
    acesta: Separator = field(default_factory=Whitespace)
    filter: Separator = field(default_factory=lambda: Literal("/"))

    @classmethod
    def rule_names(cls) -> tuple[str, ...]:
        """Names accepted by override()."""
        return tuple(f.name for f in fields(cls))

    def override(self, **rules) -> GrammarConfig:
        """Return a copy with the named guards or separators replaced.

        >>> GrammarConfig().override(cidr=Literal(" ")).cidr
        Literal(token=' ')
        """
        unknown = sorted(set(rules) - set(self.rule_names()))
        if unknown:
            raise ValueError(f"Unknown grammar rule(s): {', '.join(unknown)}")
        for name, rule in rules.items():
            if not callable(rule):
                raise TypeError(f"Grammar rule {name!r} must be callable, got {rule!r}")
        return replace(self, **rules)

    def separator_for(self, rule: str) -> Separator:
        """Return the separator used by a composite rule."""
        if rule not in SEPARATOR_RULES:
            raise ValueError(f"Rule {rule!r} has no separator")
        return getattr(self, rule)

    def describe(self) -> list[tuple[str, str]]:
        """Return (name, description) pairs for display."""
        return [(name, str(getattr(self, name))) for name in self.rule_names()]


def _relaxed_separators() -> dict[str, Separator]:
    either = AnyOf((Literal("/"), Whitespace()))
    return {name: either for name in SEPARATOR_RULES}


STRICT = GrammarConfig()
LENIENT = STRICT.override(trailing_hex=TrailingHex(allow=True), **_relaxed_separators())
PADDED = STRICT.override(padding=Padding(limit=3))
UNSAFE = STRICT.override(leading_zero=LeadingZero(allow=True))
INSANE = LENIENT.override(
    padding=Padding(limit=3),
    leading_zero=LeadingZero(allow=True),
)

VARIANTS: dict[str, GrammarConfig] = {
    "strict": STRICT,
    "lenient": LENIENT,
    "padded": PADDED,
    "unsafe": UNSAFE,
    "insane": INSANE,
}


def variant(name: str) -> GrammarConfig:
    """Look up a named grammar variant.

    >>> variant("unsafe").leading_zero
    LeadingZero(allow=True)
    """
    try:
        return VARIANTS[name.lower()]
    except KeyError:
        known = ", ".join(VARIANTS)
        raise ValueError(f"Unknown grammar variant {name!r} (known: {known})") from None


def _build_guards(data: dict) -> dict:
    """Build guard overrides from the [guards] table."""
    section = _table(data, "guards")
    unknown = sorted(set(section) - set(GUARD_KEYS))
    if unknown:
        raise ValueError(f"Unknown guard(s) in [guards]: {', '.join(unknown)}")
    guards: dict = {}
    if "padding" in section:
        limit = section["padding"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValueError(f"guards.padding must be a non-negative integer, got {limit!r}")
        guards["padding"] = Padding(limit=limit)
    if "leading_zero" in section:
        guards["leading_zero"] = LeadingZero(allow=not _flag(section, "leading_zero"))
    if "trailing_hex" in section:
        guards["trailing_hex"] = TrailingHex(allow=not _flag(section, "trailing_hex"))
    return guards


def _table(data: dict, name: str) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {section!r}")
    return section


def _flag(section: dict, name: str) -> bool:
    value = section[name]
    if not isinstance(value, bool):
        raise ValueError(f"guards.{name} must be true or false, got {value!r}")
    return value


def _build_separators(data: dict) -> dict:
    """Build separator overrides from the [separators] table."""
    section = _table(data, "separators")
    separators: dict = {}
    for name, tokens in section.items():
        if isinstance(tokens, list):
            valid = bool(tokens) and all(isinstance(t, str) for t in tokens)
        else:
            valid = isinstance(tokens, str)
        if not valid:
            raise ValueError(
                f"separators.{name} must be a string or a list of strings, got {tokens!r}"
            )
        separators[name] = separator(tokens)
    return separators


def load_config(config_path: Path | str) -> GrammarConfig:
    """Load a grammar variant from a TOML file.

    The optional top-level ``base`` key names the variant to start from
    (default "strict"). A [guards] table switches guards on or off
    (``true`` keeps the guard active) or sets the padding limit; a
    [separators] table replaces separator tokens by rule name.
    """
    with open(Path(config_path), "rb") as f:
        data = tomllib.load(f)

    base_name = data.get("base", "strict")
    if not isinstance(base_name, str):
        raise ValueError(f"base must be a variant name, got {base_name!r}")
    base = variant(base_name)
    return base.override(**_build_guards(data), **_build_separators(data))
