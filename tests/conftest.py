"""Pytest configuration and shared fixtures."""

import hashlib
from pathlib import Path
from typing import Callable

import pytest


def digest_of(data: bytes, algorithm: str = "sha256") -> str:
    """Hex digest of data with the named hashlib algorithm."""
    return hashlib.new(algorithm, data).hexdigest()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding a manifest and the files it lists."""
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_files(data_dir: Path) -> dict[str, bytes]:
    """Create a few files with known contents."""
    files = {
        "alpha.txt": b"alpha\n",
        "beta.bin": bytes(range(256)) * 64,
        "with space.txt": b"spaces in the name",
        "empty.txt": b"",
    }
    for name, content in files.items():
        (data_dir / name).write_bytes(content)
    return files


@pytest.fixture
def write_manifest(data_dir: Path) -> Callable[..., Path]:
    """Return a helper writing manifest lines into the data directory."""

    def _write(lines: list[str], name: str = "SHA256SUMS", newline: str = "\n") -> Path:
        path = data_dir / name
        path.write_bytes(("".join(line + newline for line in lines)).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def gnu_manifest(sample_files: dict[str, bytes], write_manifest) -> Path:
    """Well-formed GNU-style SHA256 manifest for every sample file."""
    lines = [f"{digest_of(content)}  {name}" for name, content in sample_files.items()]
    return write_manifest(lines)


# Markers for test categories
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "cli: marks tests that drive the command-line interface"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )
