"""Data models for checksum manifest verification."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Algorithm(str, Enum):
    """Hash algorithms recognised by hex digest length."""

    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_length(self) -> int:
        """Length of the hex digest produced by this algorithm."""
        return _DIGEST_LENGTHS[self]

    @property
    def display_name(self) -> str:
        """Upper-case name as printed by the coreutils tools."""
        return self.value.upper()

    @classmethod
    def from_digest_length(cls, length: int) -> "Algorithm | None":
        """Look up the algorithm producing hex digests of the given length.

        Args:
            length: Number of hex characters in a digest.

        Returns:
            Matching Algorithm, or None for an unknown length.
        """
        for algorithm in cls:
            if algorithm.digest_length == length:
                return algorithm
        return None


_DIGEST_LENGTHS = {
    Algorithm.MD5: 32,
    Algorithm.SHA1: 40,
    Algorithm.SHA256: 64,
    Algorithm.SHA384: 96,
    Algorithm.SHA512: 128,
}


class EntryStatus(str, Enum):
    """Outcome of verifying a single manifest line."""

    VERIFIED = "verified"
    MISMATCH = "mismatch"
    UNREADABLE = "unreadable"
    INVALID_FORMAT = "invalid_format"
    SKIPPED = "skipped"  # missing file ignored via ignore_missing


@dataclass
class ManifestEntry:
    """One parsed manifest line."""

    line_number: int  # 1-based
    digest: str = ""
    path: str = ""  # as written, relative to the manifest directory

    @property
    def valid(self) -> bool:
        """Both digest and path were extracted by a known line format."""
        return bool(self.digest) and bool(self.path)


@dataclass
class EntryResult:
    """Verification outcome for one manifest entry."""

    entry: ManifestEntry
    status: EntryStatus
    algorithm: Algorithm | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if this result counts against the manifest."""
        return self.status in (
            EntryStatus.MISMATCH,
            EntryStatus.UNREADABLE,
            EntryStatus.INVALID_FORMAT,
        )


@dataclass
class VerifyOptions:
    """Output and strictness switches for a verification run."""

    ignore_missing: bool = False
    quiet: bool = False
    status: bool = False
    strict: bool = False
    warn: bool = False
    chunk_size: int = 65536


@dataclass
class ManifestSummary:
    """Aggregate counters for one manifest."""

    manifest_path: Path
    algorithm: Algorithm | None = None
    invalid_count: int = 0
    unreadable_count: int = 0
    mismatch_count: int = 0
    verified_count: int = 0
    skipped_count: int = 0
    strict_violation: bool = False
    read_error: str | None = None
    results: list[EntryResult] = field(default_factory=list)

    def record(self, result: EntryResult) -> None:
        """Count a result against the matching counter.

        Args:
            result: Entry result to record.
        """
        if result.status == EntryStatus.VERIFIED:
            self.verified_count += 1
        elif result.status == EntryStatus.MISMATCH:
            self.mismatch_count += 1
        elif result.status == EntryStatus.UNREADABLE:
            self.unreadable_count += 1
        elif result.status == EntryStatus.INVALID_FORMAT:
            self.invalid_count += 1
        else:
            self.skipped_count += 1
        self.results.append(result)

    @property
    def total_entries(self) -> int:
        """Number of lines processed."""
        return len(self.results)

    @property
    def is_clean(self) -> bool:
        """No invalid, unreadable or mismatched entries and no read error."""
        return (
            self.read_error is None
            and self.invalid_count == 0
            and self.unreadable_count == 0
            and self.mismatch_count == 0
        )
