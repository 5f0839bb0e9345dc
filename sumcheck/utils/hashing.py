"""Hashing utilities for file integrity verification."""

import hashlib
from pathlib import Path

from sumcheck.models.manifest import Algorithm

DEFAULT_CHUNK_SIZE = 65536


def new_hasher(algorithm: Algorithm | str) -> "hashlib._Hash":
    """Create a hashlib object for the given algorithm.

    Args:
        algorithm: Algorithm enum member or hashlib name.

    Returns:
        Fresh hash object.

    Raises:
        ValueError: If the algorithm is not supported.
    """
    name = algorithm.value if isinstance(algorithm, Algorithm) else str(algorithm).lower()
    if name not in {a.value for a in Algorithm}:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")
    return hashlib.new(name)


def compute_file_hash(
    path: Path,
    algorithm: Algorithm | str = Algorithm.SHA256,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Compute the hex digest of a file in chunks for memory efficiency.

    Args:
        path: Path to file.
        algorithm: Hash algorithm to use.
        chunk_size: Size of chunks to read.

    Returns:
        Lower-case hex digest.

    Raises:
        FileNotFoundError: If file doesn't exist.
        OSError: If file can't be read.
    """
    hash_obj = new_hasher(algorithm)

    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            hash_obj.update(chunk)

    return hash_obj.hexdigest()


def digests_match(computed: str, expected: str) -> bool:
    """Compare two hex digests, ignoring case.

    Args:
        computed: Digest computed from file contents.
        expected: Digest recorded in the manifest.

    Returns:
        True if the digests are equal.
    """
    return computed.lower() == expected.lower()
