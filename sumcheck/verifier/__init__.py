"""Manifest parsing and verification."""

from sumcheck.verifier.errors import ManifestReadError
from sumcheck.verifier.parser import infer_algorithm, parse_line
from sumcheck.verifier.verifier import ManifestVerifier, verify_manifests

__all__ = [
    "ManifestReadError",
    "ManifestVerifier",
    "infer_algorithm",
    "parse_line",
    "verify_manifests",
]
