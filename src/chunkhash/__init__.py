"""chunkhash: Chunked XXH3 digests for files.

Files are split into fixed-size chunks, each chunk is hashed with XXH3-64,
and the chunk hashes are XOR-folded into one 64-bit digest. Several files
can be "smashed" into a single digest as if they were one stream.

Simple API (recommended for most users):
    >>> from chunkhash import hash_file_sync, smash_files_sync
    >>>
    >>> digest = hash_file_sync("video.mp4")
    >>> combined = smash_files_sync(["part1.bin", "part2.bin"])

Advanced usage (for more control):
    >>> import asyncio
    >>> from chunkhash import BytesSource, FileHasher
    >>>
    >>> digest = asyncio.run(FileHasher.hash("video.mp4", chunk_size=4096, seed=7))
    >>> FileHasher.hash_sync(BytesSource(b"payload"), chunk_size=4)
"""

__version__ = "1.0.0"

# Convenience API
from chunkhash.api import (
    hash_bytes,
    hash_file,
    hash_file_sync,
    smash_files,
    smash_files_sync,
)

# Configuration
from chunkhash.config.settings import Settings, get_settings

# Core
from chunkhash.core.accumulator import ChunkAccumulator, HashOptions
from chunkhash.core.primitive import SECRET_SIZE_MIN, Hash64, xxh3_64

# Exceptions
from chunkhash.exceptions import (
    ChunkHashError,
    InvalidConfigurationError,
    InvalidSecretError,
    SourceReadError,
)
from chunkhash.hasher import FileHasher

# Sources
from chunkhash.sources import ByteSource, BytesSource, FileSource, as_source

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ChunkHashError",
    "InvalidConfigurationError",
    "InvalidSecretError",
    "SourceReadError",
    # Core
    "ChunkAccumulator",
    "HashOptions",
    "Hash64",
    "xxh3_64",
    "SECRET_SIZE_MIN",
    "FileHasher",
    # Sources
    "ByteSource",
    "BytesSource",
    "FileSource",
    "as_source",
    # Configuration
    "Settings",
    "get_settings",
    # Convenience API
    "hash_file",
    "hash_file_sync",
    "hash_bytes",
    "smash_files",
    "smash_files_sync",
]
