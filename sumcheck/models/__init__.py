"""Data models for manifest verification."""

from sumcheck.models.manifest import (
    Algorithm,
    EntryResult,
    EntryStatus,
    ManifestEntry,
    ManifestSummary,
    VerifyOptions,
)

__all__ = [
    "Algorithm",
    "EntryStatus",
    "ManifestEntry",
    "EntryResult",
    "ManifestSummary",
    "VerifyOptions",
]
