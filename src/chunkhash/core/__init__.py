"""Core chunking and hashing logic."""

from chunkhash.core.accumulator import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SEED,
    ChunkAccumulator,
    HashOptions,
)
from chunkhash.core.primitive import SECRET_SIZE_MIN, Hash64, xxh3_64

__all__ = [
    "ChunkAccumulator",
    "HashOptions",
    "Hash64",
    "xxh3_64",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_SEED",
    "SECRET_SIZE_MIN",
]
