"""Digest and seed formatting helpers."""

from __future__ import annotations

from chunkhash.core.primitive import MASK64

DIGEST_FORMATS = ("hex", "int")


def format_digest(value: int, fmt: str = "hex") -> str:
    """Render a 64-bit digest.

    Args:
        value: Unsigned 64-bit digest.
        fmt: ``hex`` (16 zero-padded lowercase digits) or ``int`` (decimal).

    Returns:
        Formatted digest string.
    """
    if fmt == "hex":
        return f"{value & MASK64:016x}"
    if fmt == "int":
        return str(value & MASK64)
    raise ValueError(f"Unknown digest format: {fmt!r} (expected one of {DIGEST_FORMATS})")


def parse_seed(text: str) -> int:
    """Parse a seed given as decimal or ``0x`` hexadecimal text."""
    text = text.strip()
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if body.lower().startswith("0x"):
        value = int(body[2:], 16)
    else:
        value = int(body, 10)
    return -value if negative else value
