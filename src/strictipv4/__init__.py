"""Strict validating parser for textual IPv4 addresses, masks and prefixes."""

from strictipv4.config import (
    INSANE,
    LENIENT,
    PADDED,
    STRICT,
    UNSAFE,
    GrammarConfig,
    load_config,
    variant,
)
from strictipv4.errors import Diagnostic, ParseError
from strictipv4.formatting import format_value
from strictipv4.models.outcome import ParseFailure, ParseOutcome, ParseSuccess
from strictipv4.parser import RuleName, parse, parse_or_raise

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "GrammarConfig",
    "INSANE",
    "LENIENT",
    "PADDED",
    "ParseError",
    "ParseFailure",
    "ParseOutcome",
    "ParseSuccess",
    "RuleName",
    "STRICT",
    "UNSAFE",
    "format_value",
    "load_config",
    "parse",
    "parse_or_raise",
    "variant",
]
