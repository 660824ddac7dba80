"""Interface for check and fix reporting."""

import json
from typing import Optional, Protocol

from rich.console import Console
from rich.table import Table

from literal_indent_linter.domain.constants import RULE_CODE, RULE_NAME
from literal_indent_linter.domain.entities import FileReport


class ViolationReporter(Protocol):
    """Protocol for reporting check and fix results."""

    def report_check(self, reports: list[FileReport]) -> None:
        """Report detection results to the user."""
        ...

    def report_fix(self, reports: list[FileReport]) -> None:
        """Report correction results to the user."""
        ...


class TerminalReporter:
    """Terminal reporter rendering rich tables."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def report_check(self, reports: list[FileReport]) -> None:
        """Print one row per violation."""
        rows = [(report, message) for report in reports for message in report.messages]
        if not rows:
            self.console.print("[green]No misaligned literal ends found.[/]")
            self._report_skipped(reports)
            return

        table = Table(title=f"[{RULE_CODE}] {RULE_NAME}")
        table.add_column("Location", style="cyan", no_wrap=True)
        table.add_column("Expected", justify="right")
        table.add_column("Got", justify="right")
        table.add_column("Message")
        for report, message in rows:
            table.add_row(
                f"{report.path}:{message.line}:{message.column}",
                str(message.expected),
                str(message.actual),
                message.message,
            )
        self.console.print(table)
        self._report_skipped(reports)

    def report_fix(self, reports: list[FileReport]) -> None:
        """Print one row per corrected file."""
        fixed = [report for report in reports if report.corrections]
        if not fixed:
            self.console.print("[green]Nothing to correct.[/]")
            self._report_skipped(reports)
            return

        table = Table(title=f"[{RULE_CODE}] Corrections")
        table.add_column("File", style="cyan")
        table.add_column("Corrections", justify="right")
        table.add_column("Lines")
        table.add_column("Converged")
        for report in fixed:
            table.add_row(
                report.path,
                str(len(report.corrections)),
                ", ".join(str(c.line) for c in report.corrections),
                "yes" if report.converged else "[yellow]no[/]",
            )
        self.console.print(table)
        self._report_skipped(reports)

    def _report_skipped(self, reports: list[FileReport]) -> None:
        for report in reports:
            if report.is_skipped():
                self.console.print(f"[yellow]Skipped[/] {report.path}: {report.skipped_reason}")


class JsonReporter:
    """Machine readable reporter: one JSON document on stdout."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def report_check(self, reports: list[FileReport]) -> None:
        payload = [
            {"path": report.path, **message.to_dict()}
            for report in reports
            for message in report.messages
        ]
        self.console.print_json(json.dumps(payload))

    def report_fix(self, reports: list[FileReport]) -> None:
        payload = [
            {
                "path": report.path,
                "converged": report.converged,
                "corrections": [c.to_dict() for c in report.corrections],
            }
            for report in reports
            if report.corrections
        ]
        self.console.print_json(json.dumps(payload))
