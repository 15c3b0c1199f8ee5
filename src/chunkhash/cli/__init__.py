"""Command-line interface for chunkhash."""
