"""Tests for configuration loading and the convenience API."""

import asyncio

import pydantic
import pytest

from chunkhash.api import hash_bytes, hash_file, hash_file_sync, smash_files, smash_files_sync
from chunkhash.config.settings import Settings, get_config_path, get_settings
from chunkhash.exceptions import InvalidConfigurationError, InvalidSecretError, SourceReadError
from chunkhash.hasher import FileHasher


def _write_config(text: str) -> None:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.hashing.chunk_size == 2500
        assert settings.hashing.seed == 0
        assert settings.hashing.secret_file is None
        assert settings.io.block_size == 64 * 1024
        assert settings.output.format == "hex"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CHUNKHASH_HASHING__CHUNK_SIZE", "4096")
        monkeypatch.setenv("CHUNKHASH_HASHING__SEED", "7")
        settings = get_settings()
        assert settings.hashing.chunk_size == 4096
        assert settings.hashing.seed == 7

    def test_yaml_config(self):
        _write_config("hashing:\n  chunk_size: 1024\noutput:\n  format: int\n")
        settings = get_settings()
        assert settings.hashing.chunk_size == 1024
        assert settings.output.format == "int"

    def test_malformed_yaml_ignored(self):
        _write_config("hashing: [unclosed\n")
        assert get_settings().hashing.chunk_size == 2500

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(hashing={"chunk_size": 0})

    def test_rejects_unknown_format(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(output={"format": "base64"})

    @pytest.mark.parametrize(
        "name,value",
        [
            ("CHUNKHASH_HASHING__CHUNK_SIZE", "0"),
            ("CHUNKHASH_HASHING__SEED", str(1 << 64)),
            ("CHUNKHASH_IO__BLOCK_SIZE", "-1"),
        ],
    )
    def test_out_of_range_environment(self, monkeypatch, name, value):
        """Invalid configured values surface as InvalidConfigurationError."""
        monkeypatch.setenv(name, value)
        with pytest.raises(InvalidConfigurationError):
            get_settings()

    def test_out_of_range_yaml(self):
        _write_config("hashing:\n  chunk_size: -4\n")
        with pytest.raises(InvalidConfigurationError):
            get_settings()

    def test_load_secret(self, tmp_path, secret):
        secret_file = tmp_path / "secret.bin"
        secret_file.write_bytes(secret)
        settings = Settings(hashing={"secret_file": secret_file})
        assert settings.hashing.load_secret() == secret

    def test_load_secret_missing(self, tmp_path):
        settings = Settings(hashing={"secret_file": tmp_path / "nope.bin"})
        with pytest.raises(SourceReadError):
            settings.hashing.load_secret()

    def test_no_secret_file(self):
        assert Settings().hashing.load_secret() is None


class TestConvenienceAPI:
    """Tests for the module-level API."""

    def test_uses_configured_defaults(self, write_file, payload, monkeypatch):
        path = write_file("payload.bin", payload)
        monkeypatch.setenv("CHUNKHASH_HASHING__CHUNK_SIZE", "100")
        monkeypatch.setenv("CHUNKHASH_HASHING__SEED", "3")
        expected = FileHasher.hash_sync(path, chunk_size=100, seed=3)
        assert hash_file_sync(path) == expected
        assert asyncio.run(hash_file(path)) == expected

    def test_explicit_options_win(self, write_file, payload, monkeypatch):
        path = write_file("payload.bin", payload)
        monkeypatch.setenv("CHUNKHASH_HASHING__CHUNK_SIZE", "100")
        assert hash_file_sync(path, chunk_size=250) == FileHasher.hash_sync(path, chunk_size=250)

    def test_smash(self, write_file, payload):
        paths = [write_file("a.bin", payload[:777]), write_file("b.bin", payload[777:])]
        expected = FileHasher.smash_sync(paths)
        assert smash_files_sync(paths) == expected
        assert asyncio.run(smash_files(paths)) == expected

    def test_hash_bytes_matches_file(self, write_file, payload):
        path = write_file("payload.bin", payload)
        assert hash_bytes(payload) == hash_file_sync(path)

    def test_configured_secret_file(self, tmp_path, write_file, secret, monkeypatch):
        secret_file = tmp_path / "secret.bin"
        secret_file.write_bytes(secret)
        monkeypatch.setenv("CHUNKHASH_HASHING__SECRET_FILE", str(secret_file))
        path = write_file("a.bin", b"data")
        assert hash_file_sync(path) == FileHasher.hash_sync(path, secret=secret)

    def test_explicit_none_skips_configured_secret(self, tmp_path, write_file, secret, monkeypatch):
        """secret=None hashes without a secret even when a secret file is configured."""
        secret_file = tmp_path / "secret.bin"
        secret_file.write_bytes(secret)
        monkeypatch.setenv("CHUNKHASH_HASHING__SECRET_FILE", str(secret_file))
        path = write_file("a.bin", b"data")
        expected = FileHasher.hash_sync(path)
        assert hash_file_sync(path, secret=None) == expected
        assert hash_bytes(b"data", secret=None) == expected
        assert smash_files_sync([path], secret=None) == expected
        assert asyncio.run(hash_file(path, secret=None)) == expected
        assert hash_file_sync(path) != expected

    def test_configured_short_secret(self, tmp_path, write_file, monkeypatch):
        secret_file = tmp_path / "secret.bin"
        secret_file.write_bytes(b"too short")
        monkeypatch.setenv("CHUNKHASH_HASHING__SECRET_FILE", str(secret_file))
        with pytest.raises(InvalidSecretError):
            hash_file_sync(write_file("a.bin", b"data"))
