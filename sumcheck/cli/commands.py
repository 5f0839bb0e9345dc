"""CLI commands using Typer."""

import sys
import time
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from sumcheck.cli.config import Config, create_default_config, load_config, validate_config
from sumcheck.cli.output import RichOutput

app = typer.Typer(
    name="sumcheck",
    help="Verify files against md5sum/sha*sum style checksum manifests.",
    add_completion=False,
)
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)
output = RichOutput(console, err_console)


def get_config(config_path: Optional[Path]) -> Config:
    """Load and validate configuration.

    Args:
        config_path: Optional path to config file.

    Returns:
        Validated Config object.

    Raises:
        typer.Exit: If configuration is invalid.
    """
    if config_path is not None and not config_path.is_file():
        output.print_error(f"Config file not found: {config_path}")
        raise typer.Exit(2)

    config = load_config(config_path)
    issues = validate_config(config)

    if issues:
        for issue in issues:
            output.print_error(issue)
        raise typer.Exit(2)

    return config


def _collect_manifests(manifests: Optional[List[Path]]) -> List[Path]:
    """Gather manifest paths from arguments or piped stdin.

    Paths that don't name a regular file are dropped.

    Args:
        manifests: Paths given on the command line.

    Returns:
        Existing manifest files, in the order given.

    Raises:
        typer.Exit: If no manifest was given at all.
    """
    from sumcheck.utils.logging import logger

    if not manifests:
        if sys.stdin is None or sys.stdin.isatty():
            output.print_error("No checksum manifest given", "Pass manifest paths or pipe them on stdin")
            raise typer.Exit(2)
        manifests = [Path(line.strip()) for line in sys.stdin if line.strip()]

    existing = []
    for path in manifests:
        if path.is_file():
            existing.append(path)
        else:
            logger.debug(f"Skipping {path}: not a file")
    return existing


@app.command()
def check(
    manifests: Optional[List[Path]] = typer.Argument(
        None,
        help="Checksum manifests to verify (read from stdin when omitted)",
        show_default=False,
    ),
    ignore_missing: bool = typer.Option(
        False,
        "--ignore-missing",
        help="Don't fail or report status for missing files",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Don't print OK for each successfully verified file",
    ),
    status: bool = typer.Option(
        False,
        "--status",
        help="Don't output anything, the exit code shows success",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit non-zero for improperly formatted checksum lines",
    ),
    warn: bool = typer.Option(
        False,
        "--warn",
        "-w",
        help="Warn about improperly formatted checksum lines",
    ),
    jobs: Optional[int] = typer.Option(
        None,
        "--jobs",
        "-j",
        min=1,
        help="Number of manifests verified concurrently",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to config file",
    ),
    report: Optional[Path] = typer.Option(
        None,
        "--report",
        help="Append a JSONL verification report to this file",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write a debug log to this file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Read checksums from manifests and verify the files they list.

    Each manifest may use the GNU ("<digest>  <file>") or BSD
    ("SHA256 (<file>) = <digest>") line format. File names are resolved
    relative to the directory holding the manifest.
    """
    from sumcheck.models.manifest import VerifyOptions
    from sumcheck.utils.logging import ReportLogger, setup_logging
    from sumcheck.verifier.verifier import verify_manifests

    config = get_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_file=log_file or config.logging.file,
        verbose=verbose,
    )

    manifest_paths = _collect_manifests(manifests)

    options = VerifyOptions(
        ignore_missing=ignore_missing or config.verify.ignore_missing,
        quiet=quiet or config.verify.quiet,
        status=status or config.verify.status,
        strict=strict or config.verify.strict,
        warn=warn or config.verify.warn,
        chunk_size=config.processing.chunk_size,
    )
    report_logger = ReportLogger(report or config.logging.report_file)

    def result_callback(manifest_path: Path, result) -> None:
        output.print_result(manifest_path, result, options)

    def summary_callback(summary) -> None:
        output.print_summary(summary, options)
        report_logger.log_manifest(summary)

    start_time = time.time()
    summaries = verify_manifests(
        manifest_paths,
        options,
        jobs=jobs or config.processing.jobs,
        on_result=result_callback,
        on_summary=summary_callback,
    )
    report_logger.log_run_complete(summaries, time.time() - start_time)

    if not all(summary.is_clean for summary in summaries):
        raise typer.Exit(1)


@app.command()
def init_config(
    path: Path = typer.Argument(
        Path("sumcheck.yaml"),
        help="Where to write the config file",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing file",
    ),
) -> None:
    """Write a default configuration file."""
    if path.exists() and not force:
        output.print_error(f"{path} already exists", "Use --force to overwrite it")
        raise typer.Exit(1)

    create_default_config(path)
    output.print_success(f"Configuration written to {path}")


if __name__ == "__main__":
    app()
