"""Shared test fixtures for strictipv4."""

import textwrap

import pytest


@pytest.fixture
def grammar_file(tmp_path):
    """Write a grammar TOML file and return its path."""
    def _write(body: str, name: str = "grammar.toml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(body))
        return path
    return _write
