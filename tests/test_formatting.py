"""Tests for text emitters."""

import pytest

from strictipv4.formatting import DEFAULT_SEPARATORS, TemplateEmitter, format_value
from strictipv4.parser import RuleName


class TestTemplateEmitter:
    def test_scalars(self):
        emitter = TemplateEmitter()
        assert emitter.emit(RuleName.OCTET, 7) == "7"
        assert emitter.emit(RuleName.PREFIX_LENGTH, 32) == "32"
        assert emitter.emit(RuleName.PREFIX, 0) == "/0"

    def test_address(self):
        assert TemplateEmitter().emit(RuleName.DOTTED, (192, 0, 2, 1)) == "192.0.2.1"

    def test_canonical_separators(self):
        emitter = TemplateEmitter()
        assert emitter.emit(RuleName.CIDR, ((10, 0, 0, 0), 8)) == "10.0.0.0/8"
        assert emitter.emit(RuleName.SUBNET, ((10, 0, 0, 0), (255, 0, 0, 0))) == "10.0.0.0 255.0.0.0"
        assert emitter.emit(RuleName.ACESTA, ((10, 0, 0, 1), (0, 0, 0, 255))) == "10.0.0.1 0.0.0.255"
        assert emitter.emit(RuleName.FILTER, ((10, 0, 0, 1), (0, 0, 0, 255))) == "10.0.0.1/0.0.0.255"

    def test_separator_override(self):
        emitter = TemplateEmitter({"subnet": "/"})
        assert emitter.emit(RuleName.SUBNET, ((10, 0, 0, 0), (255, 0, 0, 0))) == "10.0.0.0/255.0.0.0"
        assert emitter.separators["cidr"] == DEFAULT_SEPARATORS["cidr"]

    def test_unknown_separator(self):
        with pytest.raises(ValueError, match="dotted"):
            TemplateEmitter({"dotted": ":"})

    def test_accepts_rule_string(self):
        assert TemplateEmitter().emit("cidr", ((10, 0, 0, 0), 8)) == "10.0.0.0/8"


class TestFormatValue:
    def test_default_emitter(self):
        assert format_value((0, 0, 0, 255), "acenet_mask") == "0.0.0.255"

    def test_delegates_to_emitter(self):
        class Recorder:
            def __init__(self):
                self.calls = []

            def emit(self, rule, value):
                self.calls.append((rule, value))
                return "emitted"

        recorder = Recorder()
        assert format_value(8, "prefix_length", recorder) == "emitted"
        assert recorder.calls == [(RuleName.PREFIX_LENGTH, 8)]

    def test_unknown_rule(self):
        with pytest.raises(ValueError, match="Unknown rule"):
            format_value(1, "hostname")
