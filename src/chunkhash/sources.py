"""Byte sources consumed by the file hasher.

A source delivers its content either as successive blocks (streamed) or as
one buffer (buffered). Concrete sources wrap a filesystem path or an
in-memory buffer.
"""

import asyncio
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import BinaryIO, Union

from chunkhash.exceptions import InvalidConfigurationError, SourceReadError

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 64 * 1024  # 64 KB

SourceLike = Union["ByteSource", str, os.PathLike, bytes, bytearray, memoryview]


def check_block_size(block_size: int) -> None:
    """Reject a read or delivery block size that is not positive.

    Raises:
        InvalidConfigurationError: If block_size is zero or negative.
    """
    if block_size <= 0:
        raise InvalidConfigurationError(
            "Block size must be positive",
            details=f"block_size={block_size}",
        )


class ByteSource(ABC):
    """Abstract base class for byte sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for messages and output."""
        pass

    @abstractmethod
    def iter_blocks(self, block_size: int = DEFAULT_BLOCK_SIZE) -> Iterator[bytes]:
        """Yield successive blocks until the source is exhausted."""
        pass

    @abstractmethod
    def read_all(self) -> bytes:
        """Return the complete content as one buffer."""
        pass

    async def aiter_blocks(self, block_size: int = DEFAULT_BLOCK_SIZE) -> AsyncIterator[bytes]:
        """Yield successive blocks, suspending between reads.

        The default implementation runs the blocking ``iter_blocks`` one
        step at a time in a worker thread. If the caller is cancelled while
        a read is in flight, that read is allowed to finish before the
        block iterator is closed, then the cancellation propagates.
        """
        blocks = self.iter_blocks(block_size)
        sentinel = object()
        try:
            while True:
                read = asyncio.ensure_future(asyncio.to_thread(next, blocks, sentinel))
                try:
                    block = await asyncio.shield(read)
                except asyncio.CancelledError:
                    # The worker thread still runs the iterator; close it only afterwards
                    await asyncio.wait([read])
                    if not read.cancelled():
                        read.exception()
                    raise
                if block is sentinel:
                    break
                yield block
        finally:
            close = getattr(blocks, "close", None)
            if close is not None:
                close()


class FileSource(ByteSource):
    """Reads bytes from a file on disk."""

    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"FileSource({str(self.path)!r})"

    def _open(self) -> BinaryIO:
        try:
            return open(self.path, "rb")
        except OSError as e:
            raise self._read_error(e) from e

    def _read_error(self, e: OSError) -> SourceReadError:
        if isinstance(e, FileNotFoundError):
            message = f"File not found: {self.path}"
        elif isinstance(e, IsADirectoryError):
            message = f"Expected file, got directory: {self.path}"
        elif isinstance(e, PermissionError):
            message = f"Permission denied: {self.path}"
        else:
            message = f"Failed to read {self.path}"
        return SourceReadError(message, path=self.path, details=str(e))

    def iter_blocks(self, block_size: int = DEFAULT_BLOCK_SIZE) -> Iterator[bytes]:
        check_block_size(block_size)
        with self._open() as f:
            logger.debug(f"Streaming {self.path} in {block_size}-byte blocks")
            while True:
                try:
                    block = f.read(block_size)
                except OSError as e:
                    raise self._read_error(e) from e
                if not block:
                    return
                yield block

    def read_all(self) -> bytes:
        with self._open() as f:
            try:
                return f.read()
            except OSError as e:
                raise self._read_error(e) from e


class BytesSource(ByteSource):
    """Serves bytes from memory.

    Args:
        data: Content of the source.
        delivery_size: If set, streamed reads deliver blocks of at most this
            many bytes regardless of the requested block size. Useful to
            simulate irregular network or pipe delivery.
        name: Display name.
    """

    def __init__(
        self,
        data: bytes | bytearray | memoryview,
        delivery_size: int | None = None,
        name: str = "<bytes>",
    ):
        if delivery_size is not None:
            check_block_size(delivery_size)
        self.data = bytes(data)
        self.delivery_size = delivery_size
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"BytesSource({len(self.data)} bytes)"

    def iter_blocks(self, block_size: int = DEFAULT_BLOCK_SIZE) -> Iterator[bytes]:
        check_block_size(block_size)
        step = self.delivery_size or block_size
        for start in range(0, len(self.data), step):
            yield self.data[start:start + step]

    def read_all(self) -> bytes:
        return self.data


def as_source(obj: SourceLike) -> ByteSource:
    """Coerce a path, byte buffer, or source into a ``ByteSource``.

    Raises:
        TypeError: If the object can't be used as a source.
    """
    if isinstance(obj, ByteSource):
        return obj
    if isinstance(obj, (str, os.PathLike)):
        return FileSource(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BytesSource(obj)
    raise TypeError(f"Cannot hash object of type {type(obj).__name__}")
