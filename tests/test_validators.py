"""Tests for batch validation."""

from strictipv4.config import UNSAFE
from strictipv4.errors import Diagnostic
from strictipv4.validators import validate_lines


class TestValidateLines:
    def test_all_valid(self):
        result = validate_lines(["10.0.0.0/8", "192.0.2.0/24"], "cidr")
        assert result.is_valid
        assert result.checked == 2
        assert [m.value for m in result.matches] == [((10, 0, 0, 0), 8), ((192, 0, 2, 0), 24)]
        assert "All 2 line(s) valid" in result.report()

    def test_skips_blank_and_comment_lines(self):
        result = validate_lines(["# networks", "", "   ", "10.0.0.0/8\n"], "cidr")
        assert result.checked == 1
        assert result.is_valid

    def test_collects_failures_with_line_numbers(self):
        lines = ["10.0.0.0/8", "10.0.0.1/8", "10.0.0.0/33"]
        result = validate_lines(lines, "cidr", source="nets.txt")
        assert not result.is_valid
        assert [v.line_number for v in result.failures] == [2, 3]
        assert result.failures[0].failure.diagnostic is Diagnostic.ADDRESS_DOES_NOT_CONFORM_TO_PREFIX
        assert result.failures[1].failure.diagnostic is Diagnostic.PREFIX_LENGTH_OUT_OF_RANGE

    def test_report(self):
        result = validate_lines(["10.0.0.1/8"], "cidr", source="nets.txt")
        report = result.report()
        assert "1 of 1 line(s) rejected" in report
        assert "nets.txt:1: Address does not conform to CIDR prefix length" in report

    def test_violation_str_without_source(self):
        result = validate_lines(["1.2.3.04"], "dotted")
        assert str(result.failures[0]).startswith("line 1: Leading zero")

    def test_config(self):
        assert validate_lines(["1.2.3.04"], "dotted", UNSAFE).is_valid

    def test_trailing_whitespace_reported(self):
        result = validate_lines(["10.0.0.0/8 \n"], "cidr")
        assert not result.is_valid
