"""Exceptions raised while verifying manifests."""

from pathlib import Path


class ManifestReadError(Exception):
    """Raised when a manifest file cannot be opened or read."""

    def __init__(self, manifest_path: Path, reason: str) -> None:
        self.manifest_path = manifest_path
        self.reason = reason
        super().__init__(f"{manifest_path}: {reason}")
