"""Verification of files against checksum manifests."""

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable

from sumcheck.models.manifest import (
    Algorithm,
    EntryResult,
    EntryStatus,
    ManifestEntry,
    ManifestSummary,
    VerifyOptions,
)
from sumcheck.utils.hashing import compute_file_hash, digests_match
from sumcheck.utils.logging import logger
from sumcheck.verifier.errors import ManifestReadError
from sumcheck.verifier.parser import infer_algorithm, parse_line

ResultCallback = Callable[[Path, EntryResult], None]
SummaryCallback = Callable[[ManifestSummary], None]


class ManifestVerifier:
    """Verifies the files listed in a checksum manifest.

    Entry paths are resolved against the manifest's own directory, which
    is passed explicitly through every lookup. The process working
    directory is never changed, so one verifier can serve several
    manifests on different threads.
    """

    def __init__(self, options: VerifyOptions | None = None) -> None:
        """Initialize verifier.

        Args:
            options: Verification switches. Defaults to VerifyOptions().
        """
        self.options = options or VerifyOptions()

    def verify(
        self,
        manifest_path: Path,
        on_result: Callable[[EntryResult], None] | None = None,
    ) -> ManifestSummary:
        """Verify every entry of one manifest.

        The algorithm is inferred once, from the first line carrying a
        digest, and used for all remaining lines. If it can't be inferred
        every entry is reported as improperly formatted.

        Args:
            manifest_path: Path to the manifest file.
            on_result: Optional callback invoked per entry, in line order.

        Returns:
            ManifestSummary with counters and per-entry results.

        Raises:
            ManifestReadError: If the manifest can't be opened or read.
        """
        manifest_path = Path(manifest_path)
        # Symlinked manifests resolve entries next to the link, not its target
        base_dir = manifest_path.absolute().parent
        lines = self._read_lines(manifest_path)

        summary = ManifestSummary(manifest_path=manifest_path)
        algorithm: Algorithm | None = None
        algorithm_inferred = False

        for line_number, line in enumerate(lines, start=1):
            entry = parse_line(line, line_number)

            if entry.digest and not algorithm_inferred:
                algorithm = infer_algorithm(entry.digest)
                algorithm_inferred = True
                summary.algorithm = algorithm
                if algorithm is None:
                    logger.debug(
                        f"{manifest_path}: no algorithm has {len(entry.digest)}-character "
                        f"digests (line {line_number})"
                    )
                else:
                    logger.debug(f"{manifest_path}: using {algorithm.display_name}")

            result = self.verify_entry(entry, algorithm, base_dir)
            summary.record(result)
            if on_result:
                on_result(result)

        summary.strict_violation = self.options.strict and summary.invalid_count > 0
        return summary

    def verify_entry(
        self,
        entry: ManifestEntry,
        algorithm: Algorithm | None,
        base_dir: Path,
    ) -> EntryResult:
        """Verify a single parsed entry.

        Args:
            entry: Parsed manifest line.
            algorithm: Algorithm in effect for the manifest, if any.
            base_dir: Directory entry paths are relative to.

        Returns:
            EntryResult for the entry.
        """
        if algorithm is None or not entry.valid:
            return EntryResult(entry, EntryStatus.INVALID_FORMAT, algorithm)

        file_path = base_dir / entry.path

        # os.path.isfile reports any stat error (ENAMETOOLONG, EACCES) as False
        if not os.path.isfile(file_path) or not os.access(file_path, os.R_OK):
            if self.options.ignore_missing:
                logger.debug(f"Skipping missing file: {file_path}")
                return EntryResult(entry, EntryStatus.SKIPPED, algorithm)
            return EntryResult(
                entry,
                EntryStatus.UNREADABLE,
                algorithm,
                error="No such file or not readable",
            )

        try:
            computed = compute_file_hash(file_path, algorithm, self.options.chunk_size)
        except OSError as e:
            return EntryResult(
                entry,
                EntryStatus.UNREADABLE,
                algorithm,
                error=e.strerror or str(e),
            )

        if digests_match(computed, entry.digest):
            return EntryResult(entry, EntryStatus.VERIFIED, algorithm)
        return EntryResult(entry, EntryStatus.MISMATCH, algorithm)

    def _read_lines(self, manifest_path: Path) -> list[str]:
        """Read manifest lines, dropping a leading byte order mark.

        Args:
            manifest_path: Path to the manifest file.

        Returns:
            Lines including their terminators.

        Raises:
            ManifestReadError: If the file can't be opened or read.
        """
        try:
            # Split on "\n" only; a trailing "\r" is stripped by parse_line.
            # Non-UTF-8 bytes survive as surrogates and map back to the
            # original file name bytes when the entry is opened.
            with open(
                manifest_path,
                "r",
                encoding="utf-8-sig",
                errors="surrogateescape",
                newline="\n",
            ) as f:
                return list(f)
        except OSError as e:
            raise ManifestReadError(manifest_path, e.strerror or str(e)) from e


def verify_manifests(
    manifest_paths: Iterable[Path],
    options: VerifyOptions | None = None,
    jobs: int = 1,
    on_result: ResultCallback | None = None,
    on_summary: SummaryCallback | None = None,
) -> list[ManifestSummary]:
    """Verify several manifests, optionally on a thread pool.

    Callbacks always fire in input order: for each manifest, on_result
    once per entry in line order, then on_summary. With jobs > 1 the
    results of a manifest are replayed once it completes.

    Args:
        manifest_paths: Manifests to verify.
        options: Verification switches.
        jobs: Number of manifests verified concurrently.
        on_result: Optional callback(manifest_path, result) per entry.
        on_summary: Optional callback(summary) per manifest.

    Returns:
        One ManifestSummary per manifest, in input order.
    """
    verifier = ManifestVerifier(options)
    paths = [Path(p) for p in manifest_paths]

    def run(path: Path, stream: bool) -> ManifestSummary:
        callback = None
        if stream and on_result:
            callback = lambda result: on_result(path, result)  # noqa: E731

        try:
            return verifier.verify(path, on_result=callback)
        except ManifestReadError as e:
            logger.debug(f"Failed to read manifest: {e}")
            return ManifestSummary(manifest_path=path, read_error=e.reason)

    summaries: list[ManifestSummary] = []

    if jobs <= 1 or len(paths) <= 1:
        for path in paths:
            summary = run(path, stream=True)
            summaries.append(summary)
            if on_summary:
                on_summary(summary)
        return summaries

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        for summary in executor.map(lambda p: run(p, stream=False), paths):
            if on_result:
                for result in summary.results:
                    on_result(summary.manifest_path, result)
            summaries.append(summary)
            if on_summary:
                on_summary(summary)

    return summaries
