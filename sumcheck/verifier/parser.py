"""Parsing of checksum manifest lines."""

import re
from dataclasses import dataclass

from sumcheck.models.manifest import Algorithm, ManifestEntry


@dataclass(frozen=True)
class LineFormat:
    """A recognised manifest line layout."""

    name: str
    pattern: re.Pattern[str]

    def match(self, line: str) -> tuple[str, str] | None:
        """Extract (digest, path) from a line in this format.

        Args:
            line: Manifest line without its line terminator.

        Returns:
            Digest and path, or None if the line doesn't match.
        """
        m = self.pattern.match(line)
        if m is None:
            return None
        return m.group("digest"), m.group("path")


# Tried in order, first match wins
LINE_FORMATS = (
    # md5sum/sha256sum: "<digest>  <path>" (text) or "<digest> *<path>" (binary)
    LineFormat("gnu", re.compile(r"^(?P<digest>\w+)(?:  | \*)(?P<path>.*)$")),
    # --tag / BSD: "SHA256 (<path>) = <digest>"
    LineFormat("bsd", re.compile(r"^\w+ \((?P<path>.*)\) = (?P<digest>\w+)$")),
)


def parse_line(line: str, line_number: int) -> ManifestEntry:
    """Parse one manifest line into an entry.

    Lines matching no known format produce an entry with an empty
    digest and path, which is therefore not valid.

    Args:
        line: Raw manifest line.
        line_number: 1-based position of the line in the manifest.

    Returns:
        Parsed ManifestEntry.
    """
    line = line.rstrip("\r\n")

    for line_format in LINE_FORMATS:
        parsed = line_format.match(line)
        if parsed is not None:
            digest, path = parsed
            return ManifestEntry(line_number=line_number, digest=digest, path=path)

    return ManifestEntry(line_number=line_number)


def infer_algorithm(digest: str) -> Algorithm | None:
    """Infer the hash algorithm from the length of a hex digest.

    Args:
        digest: Hex digest string.

    Returns:
        Algorithm, or None if no known algorithm has this digest length.
    """
    return Algorithm.from_digest_length(len(digest))
