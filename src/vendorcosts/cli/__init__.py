"""Command-line interface for vendorcosts."""
