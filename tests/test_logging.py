"""Tests for logging utilities."""

import json
import logging
from pathlib import Path

from sumcheck.models.manifest import (
    Algorithm,
    EntryResult,
    EntryStatus,
    ManifestEntry,
    ManifestSummary,
)
from sumcheck.utils.logging import ReportLogger, logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_level(self):
        """Test the console handler follows the requested level."""
        setup_logging(level="INFO")

        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.INFO

    def test_verbose_enables_debug(self):
        """Test verbose mode logs debug messages."""
        setup_logging(level="WARNING", verbose=True)

        assert logger.handlers[0].level == logging.DEBUG

    def test_file_handler(self, tmp_path: Path):
        """Test the log file always receives debug messages."""
        log_file = tmp_path / "logs" / "sumcheck.log"
        setup_logging(level="ERROR", log_file=log_file)

        logger.debug("hashing something")
        for handler in logger.handlers:
            handler.flush()

        assert "hashing something" in log_file.read_text(encoding="utf-8")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()


class TestReportLogger:
    """Tests for ReportLogger."""

    def test_no_path_writes_nothing(self, tmp_path: Path):
        """Test a logger without a report path is a no-op."""
        report = ReportLogger()
        report.log_manifest(ManifestSummary(manifest_path=tmp_path / "SUMS"))

        assert list(tmp_path.iterdir()) == []

    def test_manifest_record(self, tmp_path: Path):
        """Test a manifest record lists failed entries only."""
        summary = ManifestSummary(manifest_path=Path("SUMS"), algorithm=Algorithm.MD5)
        summary.record(EntryResult(ManifestEntry(1, "a" * 32, "ok.txt"), EntryStatus.VERIFIED))
        summary.record(EntryResult(ManifestEntry(2, "b" * 32, "bad.txt"), EntryStatus.MISMATCH))
        summary.record(EntryResult(ManifestEntry(3), EntryStatus.INVALID_FORMAT))

        report_path = tmp_path / "report.jsonl"
        ReportLogger(report_path).log_manifest(summary)

        record = json.loads(report_path.read_text(encoding="utf-8"))
        assert record["event"] == "manifest"
        assert record["algorithm"] == "md5"
        assert record["entries"] == 3
        assert record["verified"] == 1
        assert record["invalid"] == 1
        assert [f["line"] for f in record["failures"]] == [2, 3]

    def test_run_complete(self, tmp_path: Path):
        """Test the run record counts failed manifests."""
        clean = ManifestSummary(manifest_path=Path("A"))
        broken = ManifestSummary(manifest_path=Path("B"), read_error="Permission denied")

        report_path = tmp_path / "report.jsonl"
        ReportLogger(report_path).log_run_complete([clean, broken], 0.5)

        record = json.loads(report_path.read_text(encoding="utf-8"))
        assert record["event"] == "run_complete"
        assert record["manifests"] == 2
        assert record["failed"] == 1
