"""Hash one or more files in chunks with XXH3.

Every entry point builds one ``ChunkAccumulator``, feeds it every byte of its
source(s) in order, and finalizes it once. Multi-file hashing ("smashing")
treats the files as one concatenated stream, so a chunk may straddle two
files.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chunkhash.core.accumulator import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SEED,
    ChunkAccumulator,
    HashOptions,
)
from chunkhash.core.primitive import Hash64, xxh3_64
from chunkhash.sources import DEFAULT_BLOCK_SIZE, SourceLike, as_source, check_block_size

logger = logging.getLogger(__name__)


class FileHasher:
    """Chunked XXH3 hashing of files and other byte sources.

    The streamed variants (``hash``, ``smash``) are coroutines that read
    block by block; the buffered variants (``hash_sync``, ``smash_sync``)
    read each source whole. Both produce identical digests.
    """

    def __init__(self, accumulator: ChunkAccumulator, block_size: int = DEFAULT_BLOCK_SIZE):
        self._accumulator = accumulator
        self._block_size = block_size

    @classmethod
    def _create(
        cls,
        chunk_size: int,
        seed: int,
        secret: bytes | None,
        hash_fn: Hash64,
        block_size: int,
    ) -> FileHasher:
        check_block_size(block_size)
        options = HashOptions(chunk_size=chunk_size, seed=seed, secret=secret)
        return cls(ChunkAccumulator(options, hash_fn=hash_fn), block_size=block_size)

    async def _feed_stream(self, source: SourceLike) -> None:
        src = as_source(source)
        logger.debug(f"Hashing {src.name} (streamed)")
        async for block in src.aiter_blocks(self._block_size):
            self._accumulator.feed(block)

    def _feed_whole(self, source: SourceLike) -> None:
        src = as_source(source)
        logger.debug(f"Hashing {src.name} (buffered)")
        self._accumulator.feed(src.read_all())

    @staticmethod
    async def hash(
        source: SourceLike,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        seed: int = DEFAULT_SEED,
        secret: bytes | None = None,
        hash_fn: Hash64 = xxh3_64,
        block_size: int = DEFAULT_BLOCK_SIZE,
    ) -> int:
        """Hash ``source`` in chunks, streaming its content.

        Args:
            source: Path, byte buffer, or ``ByteSource``.
            chunk_size: Number of bytes hashed with each chunk.
            seed: 64-bit seed for every chunk hash.
            secret: Optional secret of at least 136 bytes.
            hash_fn: Chunk hash primitive.
            block_size: Read size for each streamed block.

        Returns:
            Unsigned 64-bit digest.

        Raises:
            InvalidConfigurationError: If chunk_size or seed is invalid.
            InvalidSecretError: If the secret is too short.
            SourceReadError: If the source can't be read.
        """
        hasher = FileHasher._create(chunk_size, seed, secret, hash_fn, block_size)
        await hasher._feed_stream(source)
        return hasher._accumulator.finalize()

    @staticmethod
    def hash_sync(
        source: SourceLike,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        seed: int = DEFAULT_SEED,
        secret: bytes | None = None,
        hash_fn: Hash64 = xxh3_64,
    ) -> int:
        """Hash ``source`` in chunks, reading it fully into memory first.

        Takes the same options as ``hash`` and returns the same digest.
        """
        hasher = FileHasher._create(chunk_size, seed, secret, hash_fn, DEFAULT_BLOCK_SIZE)
        hasher._feed_whole(source)
        return hasher._accumulator.finalize()

    @staticmethod
    async def smash(
        sources: Iterable[SourceLike],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        seed: int = DEFAULT_SEED,
        secret: bytes | None = None,
        hash_fn: Hash64 = xxh3_64,
        block_size: int = DEFAULT_BLOCK_SIZE,
    ) -> int:
        """Hash ``sources`` in their listed order as one chunked stream.

        Leftover bytes of one source are completed by the next, so
        ``smash([s])`` equals ``hash(s)``.
        """
        hasher = FileHasher._create(chunk_size, seed, secret, hash_fn, block_size)
        for source in sources:
            await hasher._feed_stream(source)
        return hasher._accumulator.finalize()

    @staticmethod
    def smash_sync(
        sources: Iterable[SourceLike],
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        seed: int = DEFAULT_SEED,
        secret: bytes | None = None,
        hash_fn: Hash64 = xxh3_64,
    ) -> int:
        """Hash ``sources`` in their listed order, reading each fully."""
        hasher = FileHasher._create(chunk_size, seed, secret, hash_fn, DEFAULT_BLOCK_SIZE)
        for source in sources:
            hasher._feed_whole(source)
        return hasher._accumulator.finalize()
