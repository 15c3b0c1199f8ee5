"""Custom exceptions for chunkhash."""

from pathlib import Path


class ChunkHashError(Exception):
    """Base exception for all chunkhash errors."""

    exit_code: int = 1
    default_hint: str | None = None

    def __init__(
        self,
        message: str,
        details: str | None = None,
        hint: str | None = None,
    ):
        self.message = message
        self.details = details
        self.hint = hint or self.default_hint
        super().__init__(message)


# Source errors (10-19)
class SourceReadError(ChunkHashError):
    """A byte source could not be opened or read."""

    exit_code = 10

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        details: str | None = None,
        hint: str | None = None,
    ):
        self.path = path
        super().__init__(message, details=details, hint=hint)


# Configuration errors (30-39)
class InvalidConfigurationError(ChunkHashError):
    """Hashing options are out of range."""

    exit_code = 30
    default_hint = "chunk_size must be a positive integer and seed must fit in 64 bits"


class InvalidSecretError(InvalidConfigurationError):
    """Secret is too short or not a byte buffer."""

    exit_code = 31
    default_hint = "Provide a secret of at least 136 bytes (--secret-file)"
