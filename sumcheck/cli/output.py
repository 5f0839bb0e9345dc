"""Rich console output formatting."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from sumcheck.models.manifest import EntryResult, EntryStatus, ManifestSummary, VerifyOptions


class RichOutput:
    """Rich console output formatting.

    Per-entry lines go to stdout, warnings and errors to stderr. Paths
    come from untrusted manifests, so they are always escaped before
    being mixed with markup.
    """

    def __init__(
        self,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        """Initialize with Rich consoles.

        Args:
            console: Console for per-entry results.
            err_console: Console for warnings and errors.
        """
        self.console = console or Console(emoji=False)
        self.err_console = err_console or Console(stderr=True, emoji=False)

    def print_result(
        self,
        manifest_path: Path,
        result: EntryResult,
        options: VerifyOptions,
    ) -> None:
        """Display the outcome of one manifest entry.

        Args:
            manifest_path: Manifest the entry came from.
            result: Entry result.
            options: Output switches.
        """
        if options.status:
            return

        name = result.entry.path

        if result.status == EntryStatus.VERIFIED:
            if not options.quiet:
                self._line(f"{name}: OK")
        elif result.status == EntryStatus.MISMATCH:
            self._line(f"{name}: FAILED")
        elif result.status == EntryStatus.UNREADABLE:
            self._line(f"{name}: FAILED open or read")
        elif result.status == EntryStatus.INVALID_FORMAT and options.warn:
            algorithm = result.algorithm.display_name if result.algorithm else ""
            message = " ".join(
                part for part in ("improperly formatted", algorithm, "checksum line") if part
            )
            self.err_console.print(
                f"{escape(str(manifest_path))}: {result.entry.line_number}: {message}",
                highlight=False,
                soft_wrap=True,
            )

    def print_summary(self, summary: ManifestSummary, options: VerifyOptions) -> None:
        """Display the warnings and errors closing one manifest.

        Args:
            summary: Manifest summary.
            options: Output switches.
        """
        if summary.read_error is not None:
            self.print_error(f"{summary.manifest_path}: {summary.read_error}")
            return

        if not options.status:
            if summary.invalid_count == 1:
                self.print_warning("1 line is improperly formatted")
            elif summary.invalid_count > 1:
                self.print_warning(f"{summary.invalid_count} lines are improperly formatted")

            if summary.unreadable_count == 1:
                self.print_warning("1 listed file could not be read")
            elif summary.unreadable_count > 1:
                self.print_warning(f"{summary.unreadable_count} listed files could not be read")

            if summary.mismatch_count == 1:
                self.print_warning("1 computed checksum did NOT match")
            elif summary.mismatch_count > 1:
                self.print_warning(f"{summary.mismatch_count} computed checksums did NOT match")

            if summary.verified_count == 0:
                self.print_warning(f"{summary.manifest_path}: no file was verified")

        if summary.strict_violation:
            self.print_error(f"{summary.manifest_path}: improperly formatted checksum file")

    def print_error(self, message: str, details: str | None = None) -> None:
        """Display error message.

        Args:
            message: Error message.
            details: Optional additional details.
        """
        self.err_console.print(
            f"[bold red]Error:[/bold red] {escape(message)}",
            highlight=False,
            soft_wrap=True,
        )
        if details:
            self.err_console.print(f"[dim]{escape(details)}[/dim]", highlight=False)

    def print_success(self, message: str) -> None:
        """Display success message.

        Args:
            message: Success message.
        """
        self.console.print(
            f"[bold green]Success:[/bold green] {escape(message)}",
            highlight=False,
            soft_wrap=True,
        )

    def print_warning(self, message: str) -> None:
        """Display warning message.

        Args:
            message: Warning message.
        """
        self.err_console.print(
            f"[bold yellow]WARNING:[/bold yellow] {escape(message)}",
            highlight=False,
            soft_wrap=True,
        )

    def _line(self, text: str) -> None:
        """Write a result line to stdout exactly as given.

        Bypasses Rich rendering, which expands tabs and drops control
        characters from file names.
        """
        stream = self.console.file
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(text + "\n")
            stream.flush()
            return

        # Surrogates from undecodable manifest bytes go back out as those bytes
        stream.flush()
        buffer.write((text + "\n").encode(stream.encoding or "utf-8", "surrogateescape"))
        buffer.flush()
