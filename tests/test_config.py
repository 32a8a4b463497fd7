"""Tests for grammar variants and TOML loading."""

import dataclasses

import pytest

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
from strictipv4.grammar.guards import AnyOf, LeadingZero, Literal, Padding, TrailingHex, Whitespace


class TestGrammarConfig:
    def test_default_is_strict(self):
        assert GrammarConfig() == STRICT
        assert STRICT.padding == Padding(limit=0)
        assert STRICT.leading_zero == LeadingZero(allow=False)
        assert STRICT.trailing_hex == TrailingHex(allow=False)

    def test_default_separators(self):
        assert STRICT.dot == Literal(".")
        assert STRICT.cidr == Literal("/")
        assert STRICT.cidrsta == Literal("/")
        assert STRICT.filter == Literal("/")
        for name in ("subnet", "acenet", "substa", "acesta"):
            assert STRICT.separator_for(name) == Whitespace()

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            STRICT.padding = Padding(limit=1)  # type: ignore[misc]

    def test_override_returns_copy(self):
        derived = STRICT.override(subnet=Literal("/"))
        assert derived.subnet == Literal("/")
        assert STRICT.subnet == Whitespace()
        assert derived.cidr == STRICT.cidr

    def test_override_accepts_any_callable(self):
        def never(text, pos):
            return False

        assert STRICT.override(trailing_hex=never).trailing_hex is never

    def test_override_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown grammar rule"):
            STRICT.override(interior_hex=TrailingHex(allow=True))

    def test_override_not_callable(self):
        with pytest.raises(TypeError, match="callable"):
            STRICT.override(cidr="/")

    def test_separator_for_non_composite(self):
        with pytest.raises(ValueError):
            STRICT.separator_for("dotted")

    def test_describe(self):
        described = dict(STRICT.describe())
        assert described["cidr"] == "'/'"
        assert described["subnet"] == "whitespace"
        assert "padding" in described


class TestVariants:
    def test_lenient(self):
        assert LENIENT.trailing_hex == TrailingHex(allow=True)
        assert LENIENT.subnet == AnyOf((Literal("/"), Whitespace()))
        assert LENIENT.leading_zero == STRICT.leading_zero

    def test_padded(self):
        assert PADDED.padding == Padding(limit=3)

    def test_unsafe(self):
        assert UNSAFE.leading_zero == LeadingZero(allow=True)
        assert UNSAFE.padding == STRICT.padding

    def test_insane_combines_all(self):
        assert INSANE.padding == PADDED.padding
        assert INSANE.leading_zero == UNSAFE.leading_zero
        assert INSANE.trailing_hex == LENIENT.trailing_hex
        assert INSANE.cidr == LENIENT.cidr

    def test_lookup(self):
        assert variant("strict") is STRICT
        assert variant("INSANE") is INSANE

    def test_lookup_unknown(self):
        with pytest.raises(ValueError, match="Unknown grammar variant"):
            variant("reckless")


class TestLoadConfig:
    def test_empty_file_is_strict(self, grammar_file):
        assert load_config(grammar_file("")) == STRICT

    def test_base(self, grammar_file):
        assert load_config(grammar_file('base = "unsafe"\n')) == UNSAFE

    def test_guards(self, grammar_file):
        config = load_config(grammar_file("""\
            [guards]
            padding = 2
            leading_zero = false
            trailing_hex = true
        """))
        assert config.padding == Padding(limit=2)
        assert config.leading_zero == LeadingZero(allow=True)
        assert config.trailing_hex == TrailingHex(allow=False)

    def test_separators(self, grammar_file):
        config = load_config(grammar_file("""\
            [separators]
            subnet = "/"
            filter = ["whitespace", "/"]
        """))
        assert config.subnet == Literal("/")
        assert config.filter == AnyOf((Whitespace(), Literal("/")))
        assert config.cidr == STRICT.cidr

    def test_accepts_str_path(self, grammar_file):
        path = grammar_file('base = "padded"\n')
        assert load_config(str(path)) == PADDED

    def test_invalid_padding(self, grammar_file):
        with pytest.raises(ValueError, match="padding"):
            load_config(grammar_file("[guards]\npadding = -1\n"))
        with pytest.raises(ValueError, match="padding"):
            load_config(grammar_file("[guards]\npadding = true\n"))

    def test_invalid_flag(self, grammar_file):
        with pytest.raises(ValueError, match="leading_zero"):
            load_config(grammar_file('[guards]\nleading_zero = "no"\n'))

    def test_unknown_separator_rule(self, grammar_file):
        with pytest.raises(ValueError, match="Unknown grammar rule"):
            load_config(grammar_file('[separators]\nnetmask = "/"\n'))

    def test_unknown_base(self, grammar_file):
        with pytest.raises(ValueError, match="Unknown grammar variant"):
            load_config(grammar_file('base = "loose"\n'))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")


class TestLoadConfigValueTypes:
    def test_base_must_be_string(self, grammar_file):
        with pytest.raises(ValueError, match="base"):
            load_config(grammar_file("base = 5\n"))

    def test_separator_tokens_must_be_strings(self, grammar_file):
        with pytest.raises(ValueError, match="separators.cidr"):
            load_config(grammar_file("[separators]\ncidr = [1]\n"))
        with pytest.raises(ValueError, match="separators.cidr"):
            load_config(grammar_file("[separators]\ncidr = 1\n"))
        with pytest.raises(ValueError, match="separators.cidr"):
            load_config(grammar_file("[separators]\ncidr = []\n"))

    def test_unknown_guard(self, grammar_file):
        with pytest.raises(ValueError, match="paddding"):
            load_config(grammar_file("[guards]\npaddding = 2\n"))

    def test_sections_must_be_tables(self, grammar_file):
        with pytest.raises(ValueError, match="guards"):
            load_config(grammar_file('guards = "strict"\n'))
        with pytest.raises(ValueError, match="separators"):
            load_config(grammar_file('separators = ["/"]\n'))

    def test_malformed_toml_is_value_error(self, grammar_file):
        with pytest.raises(ValueError):
            load_config(grammar_file("[guards\n"))
