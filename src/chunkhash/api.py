"""Convenience API for chunkhash.

This module provides simple, high-level functions that fill any option left
unset from the configured settings (environment and ``~/.chunkhash``):

    >>> from chunkhash import hash_file_sync, smash_files_sync
    >>> digest = hash_file_sync("video.mp4")
    >>> combined = smash_files_sync(["part1.bin", "part2.bin"])

For full control (custom primitives, in-memory sources), use ``FileHasher``
directly.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from chunkhash.config.settings import get_settings
from chunkhash.hasher import FileHasher
from chunkhash.sources import BytesSource, SourceLike

# Marks an option the caller left unset, as opposed to an explicit None
UNSET: Any = object()


@dataclass
class _Resolved:
    chunk_size: int
    seed: int
    secret: bytes | None
    block_size: int


def _resolve(
    chunk_size: int | None,
    seed: int | None,
    secret: bytes | None,
) -> _Resolved:
    settings = get_settings()
    return _Resolved(
        chunk_size=settings.hashing.chunk_size if chunk_size is None else chunk_size,
        seed=settings.hashing.seed if seed is None else seed,
        secret=settings.hashing.load_secret() if secret is UNSET else secret,
        block_size=settings.io.block_size,
    )


# =============================================================================
# Single source
# =============================================================================


async def hash_file(
    source: SourceLike,
    chunk_size: int | None = None,
    seed: int | None = None,
    secret: bytes | None = UNSET,
) -> int:
    """Hash a file in chunks, streaming its content.

    Args:
        source: Path to the file (or any ``ByteSource``).
        chunk_size: Bytes per chunk (default from settings, 2500).
        seed: 64-bit seed (default from settings, 0).
        secret: Secret of at least 136 bytes (default from settings' secret file);
            pass None to hash without a secret even if one is configured.

    Returns:
        Unsigned 64-bit digest.

    Raises:
        SourceReadError: If the file can't be read.
        InvalidConfigurationError: If the options are invalid.

    Example:
        >>> import asyncio
        >>> digest = asyncio.run(hash_file("video.mp4"))
    """
    opts = _resolve(chunk_size, seed, secret)
    return await FileHasher.hash(
        source,
        chunk_size=opts.chunk_size,
        seed=opts.seed,
        secret=opts.secret,
        block_size=opts.block_size,
    )


def hash_file_sync(
    source: SourceLike,
    chunk_size: int | None = None,
    seed: int | None = None,
    secret: bytes | None = UNSET,
) -> int:
    """Hash a file in chunks after reading it fully into memory.

    Returns the same digest as ``hash_file``.
    """
    opts = _resolve(chunk_size, seed, secret)
    return FileHasher.hash_sync(
        source,
        chunk_size=opts.chunk_size,
        seed=opts.seed,
        secret=opts.secret,
    )


def hash_bytes(
    data: bytes,
    chunk_size: int | None = None,
    seed: int | None = None,
    secret: bytes | None = UNSET,
) -> int:
    """Hash an in-memory buffer exactly as a file with the same content."""
    return hash_file_sync(BytesSource(data), chunk_size=chunk_size, seed=seed, secret=secret)


# =============================================================================
# Multiple sources
# =============================================================================


async def smash_files(
    sources: Iterable[SourceLike],
    chunk_size: int | None = None,
    seed: int | None = None,
    secret: bytes | None = UNSET,
) -> int:
    """Hash files in their listed order into one combined digest (streamed).

    The files are chunked as one concatenated stream.

    Example:
        >>> import asyncio
        >>> digest = asyncio.run(smash_files(["a.bin", "b.bin"]))
    """
    opts = _resolve(chunk_size, seed, secret)
    return await FileHasher.smash(
        sources,
        chunk_size=opts.chunk_size,
        seed=opts.seed,
        secret=opts.secret,
        block_size=opts.block_size,
    )


def smash_files_sync(
    sources: Iterable[SourceLike],
    chunk_size: int | None = None,
    seed: int | None = None,
    secret: bytes | None = UNSET,
) -> int:
    """Hash files in their listed order into one combined digest (buffered)."""
    opts = _resolve(chunk_size, seed, secret)
    return FileHasher.smash_sync(
        sources,
        chunk_size=opts.chunk_size,
        seed=opts.seed,
        secret=opts.secret,
    )
