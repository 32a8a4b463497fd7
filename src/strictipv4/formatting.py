"""Text emitters: turn a parsed value back into text.

The grammar never builds output text itself; format_value() hands the
value to an emitter. TemplateEmitter renders one Jinja2 template per
rule using canonical separators, so its output parses back to the same
value under the strict grammar.
"""

from __future__ import annotations

from typing import Any, Protocol

import jinja2

from strictipv4.parser import RuleName

DEFAULT_SEPARATORS: dict[str, str] = {
    "cidr": "/",
    "cidrsta": "/",
    "filter": "/",
    "subnet": " ",
    "substa": " ",
    "acenet": " ",
    "acesta": " ",
}

_ENV = jinja2.Environment(autoescape=False, keep_trailing_newline=False)
_ENV.filters["dotted"] = lambda octets: ".".join(str(int(o)) for o in octets)

_SCALAR = _ENV.from_string("{{ value | int }}")
_ADDRESS = _ENV.from_string("{{ value | dotted }}")
_PREFIXED = _ENV.from_string("/{{ value | int }}")
_WITH_PREFIX = _ENV.from_string("{{ value[0] | dotted }}{{ sep }}{{ value[1] | int }}")
_WITH_ADDRESS = _ENV.from_string("{{ value[0] | dotted }}{{ sep }}{{ value[1] | dotted }}")

_TEMPLATES: dict[RuleName, jinja2.Template] = {
    RuleName.OCTET: _SCALAR,
    RuleName.PREFIX_LENGTH: _SCALAR,
    RuleName.PREFIX: _PREFIXED,
    RuleName.DOTTED: _ADDRESS,
    RuleName.SUBNET_MASK: _ADDRESS,
    RuleName.ACENET_MASK: _ADDRESS,
    RuleName.CIDR: _WITH_PREFIX,
    RuleName.CIDRSTA: _WITH_PREFIX,
    RuleName.SUBNET: _WITH_ADDRESS,
    RuleName.SUBSTA: _WITH_ADDRESS,
    RuleName.ACENET: _WITH_ADDRESS,
    RuleName.ACESTA: _WITH_ADDRESS,
    RuleName.FILTER: _WITH_ADDRESS,
}


class Emitter(Protocol):
    """Protocol for text emitters.

    Takes a rule name and a value in the shape tuple_builder produces
    and returns the text for it.
    """

    def emit(self, rule: RuleName, value: Any) -> str:
        """Render value as text for rule."""
        ...


class TemplateEmitter:
    """Emit canonical text with per-rule Jinja2 templates.

    Octets are written without leading zeros. ``separators`` replaces
    entries of DEFAULT_SEPARATORS by rule name.

    >>> TemplateEmitter().emit(RuleName.CIDR, ((192, 0, 2, 0), 25))
    '192.0.2.0/25'
    >>> TemplateEmitter({"subnet": "\\t"}).emit(
    ...     RuleName.SUBNET, ((10, 0, 0, 0), (255, 0, 0, 0)))
    '10.0.0.0\\t255.0.0.0'
    """

    def __init__(self, separators: dict[str, str] | None = None) -> None:
        self.separators = dict(DEFAULT_SEPARATORS)
        if separators:
            unknown = sorted(set(separators) - set(DEFAULT_SEPARATORS))
            if unknown:
                raise ValueError(f"No separator for rule(s): {', '.join(unknown)}")
            self.separators.update(separators)

    def emit(self, rule: RuleName, value: Any) -> str:
        rule = RuleName.lookup(rule)
        return _TEMPLATES[rule].render(
            value=value,
            sep=self.separators.get(rule.value, ""),
        )


DEFAULT_EMITTER = TemplateEmitter()


def format_value(value: Any, rule: RuleName | str, emitter: Emitter | None = None) -> str:
    """Render a parsed value as text for the given rule.

    >>> format_value((0, 0, 0, 255), "acenet_mask")
    '0.0.0.255'
    """
    if emitter is None:
        emitter = DEFAULT_EMITTER
    return emitter.emit(RuleName.lookup(rule), value)
