"""XXH3-64 hash primitive used for each chunk.

The `xxhash` binding exposes the seeded XXH3 entry point only. With a custom
secret, each chunk is hashed as a keyed message: a 16-byte key derived with
XXH3-128 from the secret and the seed is hashed ahead of the chunk bytes.
Secret digests therefore live apart from plain seeded digests, but they are
not those of native XXH3-with-secret. Callers with a binding that supports
native XXH3 secrets can pass their own ``Hash64`` to the hasher instead.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Protocol

import xxhash

from chunkhash.exceptions import InvalidConfigurationError, InvalidSecretError

MASK64 = (1 << 64) - 1

# Minimum secret size accepted by XXH3 (XXH3_SECRET_SIZE_MIN).
SECRET_SIZE_MIN = 136


class Hash64(Protocol):
    """Callable hashing one chunk to an unsigned 64-bit integer."""

    def __call__(self, data: bytes, seed: int, secret: bytes | None) -> int: ...


def normalize_seed(seed: int) -> int:
    """Map a signed or unsigned 64-bit seed onto ``[0, 2**64)``.

    Raises:
        InvalidConfigurationError: If seed is not an int in the 64-bit range.
    """
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise InvalidConfigurationError(
            "Seed must be an integer",
            details=f"got {type(seed).__name__}",
        )
    if not -(1 << 63) <= seed <= MASK64:
        raise InvalidConfigurationError(
            "Seed does not fit in 64 bits",
            details=f"seed={seed}",
        )
    return seed & MASK64


def validate_secret(secret: bytes | bytearray | memoryview | None) -> bytes | None:
    """Check a secret up front and return it as immutable bytes.

    Raises:
        InvalidSecretError: If the secret is not bytes-like or is too short.
    """
    if secret is None:
        return None
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise InvalidSecretError(
            "Secret must be a byte buffer",
            details=f"got {type(secret).__name__}",
        )
    secret = bytes(secret)
    if len(secret) < SECRET_SIZE_MIN:
        raise InvalidSecretError(
            f"Secret must be at least {SECRET_SIZE_MIN} bytes",
            details=f"got {len(secret)} bytes",
        )
    return secret


@lru_cache(maxsize=32)
def _keyed_prefix(secret: bytes, seed: int) -> xxhash.xxh3_64:
    """Seeded XXH3-64 state that has already absorbed the secret-derived key."""
    key = xxhash.xxh3_128_digest(secret + (seed & MASK64).to_bytes(8, "little"))
    return xxhash.xxh3_64(key, seed=seed)


def xxh3_64(data: bytes, seed: int = 0, secret: bytes | None = None) -> int:
    """Hash ``data`` with XXH3-64.

    Args:
        data: Chunk bytes.
        seed: Unsigned 64-bit seed.
        secret: Optional secret of at least ``SECRET_SIZE_MIN`` bytes.

    Returns:
        Unsigned 64-bit hash.
    """
    if secret is not None:
        if len(secret) < SECRET_SIZE_MIN:
            raise InvalidSecretError(
                f"Secret must be at least {SECRET_SIZE_MIN} bytes",
                details=f"got {len(secret)} bytes",
            )
        hasher = _keyed_prefix(bytes(secret), seed).copy()
        hasher.update(data)
        return hasher.intdigest()
    return xxhash.xxh3_64_intdigest(data, seed=seed)
