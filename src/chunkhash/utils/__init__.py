"""Utility functions for chunkhash."""

from chunkhash.utils.formatting import format_digest, parse_seed

__all__ = ["format_digest", "parse_seed"]
