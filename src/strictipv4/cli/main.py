"""CLI entry point for strictipv4.

Subcommands:
    parse      Parse each argument with a rule and print the value.
    check      Validate a file line by line with a rule.
    normalize  Parse each argument and print its canonical text.
    rules      List the rule names.
    info       Show the effective grammar configuration.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _load_grammar(args: argparse.Namespace):
    """Resolve --config / --grammar to a GrammarConfig, handling errors."""
    from strictipv4.config import load_config, variant

    try:
        if args.config:
            return load_config(args.config)
        return variant(args.grammar)
    except FileNotFoundError:
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _lookup_rule(name: str):
    from strictipv4.parser import RuleName

    try:
        return RuleName.lookup(name)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


# ---------------------------------------------------------------------------
# Subcommand: parse
# ---------------------------------------------------------------------------

def cmd_parse(args: argparse.Namespace) -> int:
    """Parse each input and print the value or the diagnostic."""
    from strictipv4.builders import ipaddress_builder, tuple_builder
    from strictipv4.models.outcome import ParseFailure
    from strictipv4.parser import parse

    config = _load_grammar(args)
    rule = _lookup_rule(args.rule)
    builder = ipaddress_builder if args.ipaddress else tuple_builder

    failures = 0
    for text in args.inputs:
        outcome = parse(text, rule, config, builder)
        if isinstance(outcome, ParseFailure):
            print(f"{text!r}: {outcome.message} (offset {outcome.offset})", file=sys.stderr)
            failures += 1
        else:
            print(f"{text!r}: {outcome.value!r}")

    return 1 if failures else 0


# ---------------------------------------------------------------------------
# Subcommand: check
# ---------------------------------------------------------------------------

def cmd_check(args: argparse.Namespace) -> int:
    """Validate a file line by line."""
    from strictipv4.validators import validate_lines

    config = _load_grammar(args)
    rule = _lookup_rule(args.rule)

    path = Path(args.file)
    try:
        text = path.read_text()
    except FileNotFoundError:
        print(f"Error: input file not found: {path}", file=sys.stderr)
        return 1

    result = validate_lines(text.splitlines(), rule, config, source=str(path))
    print(result.report())
    return 0 if result.is_valid else 1


# ---------------------------------------------------------------------------
# Subcommand: normalize
# ---------------------------------------------------------------------------

def cmd_normalize(args: argparse.Namespace) -> int:
    """Parse each input and print its canonical form."""
    from strictipv4.formatting import format_value
    from strictipv4.models.outcome import ParseFailure
    from strictipv4.parser import parse

    config = _load_grammar(args)
    rule = _lookup_rule(args.rule)

    failures = 0
    for text in args.inputs:
        outcome = parse(text, rule, config)
        if isinstance(outcome, ParseFailure):
            print(f"{text!r}: {outcome.message} (offset {outcome.offset})", file=sys.stderr)
            failures += 1
        else:
            print(format_value(outcome.value, rule))

    return 1 if failures else 0


# ---------------------------------------------------------------------------
# Subcommands: rules, info
# ---------------------------------------------------------------------------

def cmd_rules(args: argparse.Namespace) -> int:
    """List rule names."""
    from strictipv4.parser import RuleName

    for rule in RuleName:
        print(rule.value)
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Show the effective grammar configuration."""
    config = _load_grammar(args)

    source = args.config or f"variant {args.grammar!r}"
    print(f"Grammar: {source}")
    print()
    for name, description in config.describe():
        print(f"  {name:<13} {description}")
    return 0


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="strictipv4",
        description="Strictly validate IPv4 addresses, masks and prefixes.",
    )
    parser.add_argument(
        "-g", "--grammar", default="strict",
        help="Grammar variant: strict, lenient, padded, unsafe, insane (default: strict)",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a grammar TOML file (overrides --grammar)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # parse
    parse_parser = subparsers.add_parser("parse", help="Parse inputs with a rule")
    parse_parser.add_argument("rule", help="Rule name (see 'rules')")
    parse_parser.add_argument("inputs", nargs="+", help="Text to parse")
    parse_parser.add_argument(
        "--ipaddress", action="store_true",
        help="Print ipaddress objects instead of tuples",
    )

    # check
    check_parser = subparsers.add_parser("check", help="Validate a file line by line")
    check_parser.add_argument("rule", help="Rule name (see 'rules')")
    check_parser.add_argument("file", help="File with one input per line")

    # normalize
    norm_parser = subparsers.add_parser("normalize", help="Print canonical text for inputs")
    norm_parser.add_argument("rule", help="Rule name (see 'rules')")
    norm_parser.add_argument("inputs", nargs="+", help="Text to normalize")

    # rules
    subparsers.add_parser("rules", help="List rule names")

    # info
    subparsers.add_parser("info", help="Show grammar configuration")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "parse": cmd_parse,
        "check": cmd_check,
        "normalize": cmd_normalize,
        "rules": cmd_rules,
        "info": cmd_info,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
