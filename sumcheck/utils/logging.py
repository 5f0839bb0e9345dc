"""Logging configuration and utilities."""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from sumcheck.models.manifest import ManifestSummary

# Create module logger
logger = logging.getLogger("sumcheck")


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    verbose: bool = False,
) -> None:
    """Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to log file.
        verbose: If True, include debug information.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)
    if verbose:
        log_level = logging.DEBUG
    logger.setLevel(logging.DEBUG if log_file else log_level)

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    # Format - simpler for console
    if verbose:
        console_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        console_format = logging.Formatter("%(message)s")

    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8", errors="backslashreplace")
        file_handler.setLevel(logging.DEBUG)  # Always verbose in file

        file_format = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)


class ReportLogger:
    """Structured verification report with JSONL output."""

    def __init__(self, report_path: Path | None = None) -> None:
        """Initialize report logger.

        Args:
            report_path: Path to JSONL report file.
        """
        self.report_path = report_path
        if report_path:
            report_path.parent.mkdir(parents=True, exist_ok=True)

    def log_manifest(self, summary: ManifestSummary) -> None:
        """Log the outcome of one manifest.

        Args:
            summary: Completed manifest summary.
        """
        if summary.is_clean:
            logger.info(f"{summary.manifest_path}: {summary.verified_count} verified")
        else:
            logger.info(f"{summary.manifest_path}: verification failed")

        self._append({
            "timestamp": datetime.now().isoformat(),
            "event": "manifest",
            "manifest": str(summary.manifest_path),
            "algorithm": summary.algorithm.value if summary.algorithm else None,
            "entries": summary.total_entries,
            "verified": summary.verified_count,
            "mismatched": summary.mismatch_count,
            "unreadable": summary.unreadable_count,
            "invalid": summary.invalid_count,
            "skipped": summary.skipped_count,
            "strict_violation": summary.strict_violation,
            "read_error": summary.read_error,
            "failures": [
                {
                    "line": result.entry.line_number,
                    "path": result.entry.path,
                    "status": result.status.value,
                }
                for result in summary.results
                if result.failed
            ],
        })

    def log_run_complete(
        self,
        summaries: list[ManifestSummary],
        duration_seconds: float,
    ) -> None:
        """Log completion of a verification run.

        Args:
            summaries: Summaries of every manifest processed.
            duration_seconds: Total processing time.
        """
        failed = sum(1 for s in summaries if not s.is_clean)
        logger.info(
            f"Run complete: {len(summaries)} manifests, {failed} failed "
            f"in {duration_seconds:.1f}s"
        )

        self._append({
            "timestamp": datetime.now().isoformat(),
            "event": "run_complete",
            "manifests": len(summaries),
            "failed": failed,
            "duration_seconds": duration_seconds,
        })

    def _append(self, entry: dict[str, Any]) -> None:
        """Append one JSON line to the report file."""
        if not self.report_path:
            return
        with open(self.report_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")
