"""Configuration loading and validation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATHS = ["sumcheck.yaml", "sumcheck.yml", ".sumcheck.yaml"]
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class VerifyConfig:
    """Default verification switches."""

    ignore_missing: bool = False
    quiet: bool = False
    status: bool = False
    strict: bool = False
    warn: bool = False


@dataclass
class ProcessingConfig:
    """Processing options."""

    jobs: int = 1
    chunk_size: int = 65536  # 64KB


@dataclass
class LoggingConfig:
    """Logging options."""

    level: str = "WARNING"
    file: Path | None = None
    report_file: Path | None = None  # JSONL verification report


@dataclass
class Config:
    """Complete application configuration."""

    verify: VerifyConfig = field(default_factory=VerifyConfig)
    processing: ProcessingConfig = field(default_factory=ProcessingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to YAML config file. Defaults to sumcheck.yaml.

    Returns:
        Loaded Config object.
    """
    config = Config()

    # Try default paths if not specified
    if config_path is None:
        for default_path in DEFAULT_CONFIG_PATHS:
            if Path(default_path).exists():
                config_path = Path(default_path)
                break

    if config_path and config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
            config = _parse_config(data)

    return config


def _parse_config(data: dict[str, Any]) -> Config:
    """Parse configuration dictionary into Config object.

    Args:
        data: Raw configuration dictionary.

    Returns:
        Config object.
    """
    config = Config()

    if "verify" in data:
        verify_data = data["verify"] or {}
        config.verify = VerifyConfig(
            ignore_missing=bool(verify_data.get("ignore_missing", False)),
            quiet=bool(verify_data.get("quiet", False)),
            status=bool(verify_data.get("status", False)),
            strict=bool(verify_data.get("strict", False)),
            warn=bool(verify_data.get("warn", False)),
        )

    if "processing" in data:
        proc_data = data["processing"] or {}
        config.processing = ProcessingConfig(
            jobs=proc_data.get("jobs", 1),
            chunk_size=proc_data.get("chunk_size", 65536),
        )

    if "logging" in data:
        log_data = data["logging"] or {}
        log_file = log_data.get("file")
        report_file = log_data.get("report_file")
        config.logging = LoggingConfig(
            level=str(log_data.get("level", "WARNING")),
            file=Path(log_file) if log_file else None,
            report_file=Path(report_file) if report_file else None,
        )

    return config


def validate_config(config: Config) -> list[str]:
    """Validate configuration, return list of issues.

    Args:
        config: Configuration to validate.

    Returns:
        List of validation issue messages.
    """
    issues = []

    if not isinstance(config.processing.jobs, int) or config.processing.jobs < 1:
        issues.append(f"Invalid jobs value: {config.processing.jobs}")

    if not isinstance(config.processing.chunk_size, int) or config.processing.chunk_size < 1:
        issues.append(f"Invalid chunk_size value: {config.processing.chunk_size}")

    if config.logging.level.upper() not in VALID_LOG_LEVELS:
        issues.append(f"Invalid log level: {config.logging.level}")

    return issues


def create_default_config(path: Path) -> None:
    """Create default configuration file.

    Args:
        path: Path to write config file.
    """
    default_config = """# sumcheck configuration
# Command-line flags switch options on; values here are the defaults.

verify:
  # Don't fail or report status for missing files
  ignore_missing: false
  # Don't print OK for each successfully verified file
  quiet: false
  # Don't output anything; the exit code shows success
  status: false
  # Exit non-zero for improperly formatted checksum lines
  strict: false
  # Warn about improperly formatted checksum lines
  warn: false

processing:
  # Number of manifests verified concurrently
  jobs: 1
  chunk_size: 65536

logging:
  level: "WARNING"
  file: null
  # JSONL report with one record per manifest
  report_file: null
"""
    with open(path, "w", encoding="utf-8") as f:
        f.write(default_config)
