"""Hash and smash commands."""

import asyncio
from pathlib import Path
from typing import Any

import typer

from chunkhash.cli.utils import is_quiet
from chunkhash.config.settings import get_settings
from chunkhash.hasher import FileHasher
from chunkhash.output import get_formatter
from chunkhash.utils.formatting import DIGEST_FORMATS, format_digest, parse_seed


def _parse_seed_option(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return parse_seed(value)
    except ValueError:
        raise typer.BadParameter(f"Not an integer: {value}")


def _parse_format_option(value: str | None) -> str | None:
    if value is not None and value not in DIGEST_FORMATS:
        raise typer.BadParameter(f"Expected one of: {', '.join(DIGEST_FORMATS)}")
    return value


# Shared option declarations
ChunkSizeOption = typer.Option(None, "--chunk-size", "-c", help="Bytes per chunk [default: 2500]")
SeedOption = typer.Option(
    None,
    "--seed",
    "-s",
    help="64-bit seed, decimal or 0x-hex [default: 0]",
    callback=_parse_seed_option,
)
SecretFileOption = typer.Option(
    None,
    "--secret-file",
    help="File holding a secret of at least 136 bytes",
)
BufferedOption = typer.Option(
    False,
    "--buffered",
    "-b",
    help="Read each file fully into memory instead of streaming it",
)
FormatOption = typer.Option(
    None,
    "--format",
    "-f",
    help="Digest format: hex or int [default: hex]",
    callback=_parse_format_option,
)
JsonOption = typer.Option(False, "--json", help="Force JSON output")


def _options(
    chunk_size: int | None,
    seed: int | None,
    secret_file: Path | None,
    fmt: str | None,
) -> dict[str, Any]:
    """Merge command-line options over configured settings."""
    settings = get_settings()
    hashing = settings.hashing
    if secret_file is not None:
        hashing = hashing.model_copy(update={"secret_file": secret_file})
    return {
        "chunk_size": hashing.chunk_size if chunk_size is None else chunk_size,
        "seed": hashing.seed if seed is None else seed,
        "secret": hashing.load_secret(),
        "block_size": settings.io.block_size,
        "format": fmt or settings.output.format,
    }


def _report(opts: dict[str, Any], names: list[str], digests: list[int], json_output: bool) -> None:
    data = {
        "chunk_size": opts["chunk_size"],
        "seed": opts["seed"],
        "secret": opts["secret"] is not None,
        "digests": [
            {"name": name, "digest": format_digest(value, opts["format"])}
            for name, value in zip(names, digests)
        ],
    }
    get_formatter(json_flag=json_output, quiet=is_quiet()).output(data)


async def _hash_streamed(files: list[Path], opts: dict[str, Any]) -> list[int]:
    return await asyncio.gather(
        *(
            FileHasher.hash(
                path,
                chunk_size=opts["chunk_size"],
                seed=opts["seed"],
                secret=opts["secret"],
                block_size=opts["block_size"],
            )
            for path in files
        )
    )


def hash_files(
    files: list[Path] = typer.Argument(..., help="Files to hash"),
    chunk_size: int | None = ChunkSizeOption,
    seed: str | None = SeedOption,
    secret_file: Path | None = SecretFileOption,
    buffered: bool = BufferedOption,
    fmt: str | None = FormatOption,
    json_output: bool = JsonOption,
):
    """Hash each file separately in chunks with XXH3.

    Examples:

        chunkhash hash video.mp4

        chunkhash hash *.iso --chunk-size 65536 --seed 0x2a
    """
    opts = _options(chunk_size, seed, secret_file, fmt)

    if buffered:
        digests = [
            FileHasher.hash_sync(
                path,
                chunk_size=opts["chunk_size"],
                seed=opts["seed"],
                secret=opts["secret"],
            )
            for path in files
        ]
    else:
        digests = asyncio.run(_hash_streamed(files, opts))

    _report(opts, [str(path) for path in files], digests, json_output)


def smash_files(
    files: list[Path] = typer.Argument(..., help="Files to hash, in order"),
    chunk_size: int | None = ChunkSizeOption,
    seed: str | None = SeedOption,
    secret_file: Path | None = SecretFileOption,
    buffered: bool = BufferedOption,
    fmt: str | None = FormatOption,
    json_output: bool = JsonOption,
):
    """Hash files in their listed order into one combined digest.

    The files are chunked as one continuous stream, so the order matters
    wherever a chunk spans two files.

    Example:

        chunkhash smash part1.bin part2.bin part3.bin
    """
    opts = _options(chunk_size, seed, secret_file, fmt)

    if buffered:
        digest = FileHasher.smash_sync(
            files,
            chunk_size=opts["chunk_size"],
            seed=opts["seed"],
            secret=opts["secret"],
        )
    else:
        digest = asyncio.run(
            FileHasher.smash(
                files,
                chunk_size=opts["chunk_size"],
                seed=opts["seed"],
                secret=opts["secret"],
                block_size=opts["block_size"],
            )
        )

    _report(opts, [" + ".join(str(path) for path in files)], [digest], json_output)
