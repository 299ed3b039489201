"""
Console output for cnay - results on stdout, everything else on stderr
"""

import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn

from ..models import HostnameOutcome, OutcomeStatus


class ConsoleOutput:
    """
    Console output for resolution runs.

    Result lines go to stdout untouched so they can be piped. Progress,
    errors and log records go to stderr through rich.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self._progress: Optional[Progress] = None
        self._task_id = None
        self._counts = {status: 0 for status in OutcomeStatus}

    def setup_logging(self, debug: bool = False):
        """Route the cnay logger through rich on stderr"""
        logger = logging.getLogger('cnay')
        logger.handlers.clear()
        logger.addHandler(RichHandler(console=self.console, show_path=False))
        logger.setLevel(logging.DEBUG if debug else logging.WARNING)
        logger.propagate = False

    def start_progress(self, total: int):
        """Show a progress bar for total hostnames"""
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]Resolving..."),
            BarColumn(complete_style="cyan", finished_style="green"),
            TaskProgressColumn(),
            TextColumn("[dim]{task.fields[status]}"),
            console=self.console,
            transient=True
        )
        self._task_id = self._progress.add_task("resolve", total=total, status="")
        self._progress.start()

    def on_result(self, outcome: HostnameOutcome):
        """Progress callback, one call per finished hostname"""
        self._counts[outcome.status] += 1

        if self._progress is None:
            return

        accepted = self._counts[OutcomeStatus.ACCEPTED]
        skipped = self._counts[OutcomeStatus.ALIAS_ELSEWHERE]
        failed = self._counts[OutcomeStatus.LOOKUP_FAILED]
        self._progress.update(
            self._task_id,
            advance=1,
            status=f"{accepted} ok / {skipped} aliased / {failed} failed"
        )

    def stop_progress(self):
        if self._progress is not None:
            self._progress.stop()
            self._progress = None

    def print_results(self, lines: list[str]):
        """Print one result per line on stdout"""
        for line in lines:
            click.echo(line)

    def print_error(self, message: str):
        """Print error message"""
        self.console.print(f"[bold red]Error:[/] {escape(message)}", highlight=False)

    def print_warning(self, message: str):
        """Print warning message"""
        self.console.print(f"[yellow]Warning:[/] {escape(message)}", highlight=False)
