"""Command-line interface for strictipv4."""
