"""Chunked streaming hash accumulator.

Bytes arrive through any number of ``feed`` calls. They are regrouped into
fixed-size chunks, each chunk is hashed on its own, and the chunk hashes are
XOR-folded into a single 64-bit digest. Delivery block boundaries never
affect the result; only the byte sequence and the options do.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chunkhash.core.primitive import Hash64, normalize_seed, validate_secret, xxh3_64
from chunkhash.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 2500
DEFAULT_SEED = 0


@dataclass(frozen=True)
class HashOptions:
    """Options fixed for the lifetime of one accumulator.

    Attributes:
        chunk_size: Number of bytes hashed per chunk.
        seed: 64-bit seed, stored as its unsigned value.
        secret: Optional secret of at least 136 bytes.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    seed: int = DEFAULT_SEED
    secret: bytes | None = None

    def __post_init__(self) -> None:
        chunk_size = self.chunk_size
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
            raise InvalidConfigurationError(
                "Chunk size must be an integer",
                details=f"got {type(chunk_size).__name__}",
            )
        if chunk_size <= 0:
            raise InvalidConfigurationError(
                "Chunk size must be positive",
                details=f"chunk_size={chunk_size}",
            )
        object.__setattr__(self, "seed", normalize_seed(self.seed))
        object.__setattr__(self, "secret", validate_secret(self.secret))


class ChunkAccumulator:
    """Folds chunk hashes of a byte stream into a 64-bit digest.

    One instance serves exactly one hashing operation: create it, ``feed``
    it any number of times, call ``finalize`` once, then discard it.
    """

    def __init__(self, options: HashOptions | None = None, hash_fn: Hash64 = xxh3_64):
        self.options = options or HashOptions()
        self._hash_fn = hash_fn
        self._chunk = bytearray()
        self._digest = 0
        self._chunks_hashed = 0
        self._bytes_fed = 0

    @property
    def digest(self) -> int:
        """Digest of the chunks hashed so far (excludes pending bytes)."""
        return self._digest

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet hashed."""
        return len(self._chunk)

    @property
    def chunks_hashed(self) -> int:
        return self._chunks_hashed

    @property
    def bytes_fed(self) -> int:
        return self._bytes_fed

    def _hash_chunk(self) -> None:
        """Hash the buffered chunk into the digest and clear the buffer."""
        opts = self.options
        self._digest ^= self._hash_fn(bytes(self._chunk), opts.seed, opts.secret)
        self._chunks_hashed += 1
        self._chunk.clear()

    def feed(self, data: bytes | bytearray | memoryview) -> None:
        """Append ``data``, hashing every chunk it completes.

        Bytes that don't complete a chunk stay buffered for the next call
        or for ``finalize``.
        """
        view = memoryview(data).cast("B")
        chunk_size = self.options.chunk_size
        consumed = 0
        total = len(view)
        while consumed < total:
            remainder = chunk_size - len(self._chunk)
            if total - consumed < remainder:
                self._chunk += view[consumed:]
                consumed = total
            else:
                self._chunk += view[consumed:consumed + remainder]
                consumed += remainder
                self._hash_chunk()
        self._bytes_fed += total

    def finalize(self) -> int:
        """Hash any short trailing chunk and return the digest."""
        if self._chunk:
            self._hash_chunk()
        logger.debug(
            "Finalized digest %016x over %d bytes in %d chunks",
            self._digest,
            self._bytes_fed,
            self._chunks_hashed,
        )
        return self._digest
