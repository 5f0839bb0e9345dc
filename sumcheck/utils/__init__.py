"""Utility modules for logging and hashing."""

from sumcheck.utils.hashing import compute_file_hash, digests_match

__all__ = [
    "compute_file_hash",
    "digests_match",
]
