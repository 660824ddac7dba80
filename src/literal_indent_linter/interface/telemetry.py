"""Console telemetry: rich output mirrored to a stdlib logger."""

import logging

from rich.console import Console
from rich.markup import escape

from literal_indent_linter.domain.constants import BANNER
from literal_indent_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """TelemetryPort implementation printing through rich and logging every message."""

    def __init__(self, project_name: str, color: str, welcome: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.console = Console(stderr=True, highlight=False)
        self.logger = logging.getLogger("literal_indent")

    def handshake(self) -> None:
        self.console.print(f"[bold {self.color}]{self.project_name}[/] {BANNER}")
        self.console.print(f"[{self.color}]{self.welcome}[/]")
        self.logger.info("%s: %s", self.project_name, self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}")
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]![/] {escape(message)}")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]x[/] {escape(message)}")
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
