"""CLI entry points for literal-indent - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from literal_indent_linter.domain.config import ConfigurationLoader
from literal_indent_linter.domain.constants import RULE_DESCRIPTION
from literal_indent_linter.domain.protocols import (
    FileSystemProtocol,
    StructureProviderProtocol,
    SuppressionProtocol,
    TelemetryPort,
)
from literal_indent_linter.interface.reporters import ViolationReporter
from literal_indent_linter.use_cases.apply_fixes import ApplyFixesUseCase
from literal_indent_linter.use_cases.check_indentation import CheckIndentationUseCase


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    telemetry: TelemetryPort
    structure_gateway: StructureProviderProtocol
    filesystem: FileSystemProtocol
    suppression: SuppressionProtocol
    reporter: ViolationReporter
    json_reporter: ViolationReporter


def _resolve_target_path(path: Optional[Path]) -> str:
    """Resolve target path: explicit path, else src/ if exists, else '.'."""
    if path and str(path) != ".":
        return str(path)
    src_dir = Path.cwd() / "src"
    if src_dir.exists() and src_dir.is_dir():
        return "src"
    return "."


def _pick_reporter(deps: CLIDependencies, output_format: str) -> ViolationReporter:
    return deps.json_reporter if output_format == "json" else deps.reporter


def create_app(deps: CLIDependencies) -> typer.Typer:
    """Create the Typer app with explicitly injected dependencies."""
    app = typer.Typer(
        name="literal-indent",
        help=f"literal-indent: {RULE_DESCRIPTION}",
        add_completion=False,
    )

    @app.command()
    def check(
        path: Optional[Path] = typer.Argument(None, help="Path to check (default: src/ or .)"),  # noqa: B008
        output_format: str = typer.Option("table", "--format", help="Output format: table or json"),
    ) -> None:
        """Report closing brackets that do not line up with the line that opened the literal."""
        if output_format != "json":
            deps.telemetry.handshake()
        target_path = _resolve_target_path(path)
        use_case = CheckIndentationUseCase(
            structure_provider=deps.structure_gateway,
            filesystem=deps.filesystem,
            telemetry=deps.telemetry,
            config_loader=deps.config_loader,
            suppression=deps.suppression,
        )
        reports = use_case.execute(target_path)
        _pick_reporter(deps, output_format).report_check(reports)
        if any(report.has_violations() for report in reports):
            sys.exit(1)
        sys.exit(0)

    @app.command()
    def fix(
        path: Optional[Path] = typer.Argument(None, help="Path to fix (default: src/ or .)"),  # noqa: B008
        max_passes: Optional[int] = typer.Option(
            None, "--max-passes", min=1, help="Correction passes per file (default: from pyproject.toml)"
        ),
        dry_run: bool = typer.Option(False, "--dry-run", help="Compute corrections without writing files"),
        output_format: str = typer.Option("table", "--format", help="Output format: table or json"),
    ) -> None:
        """Realign misplaced closing brackets in place."""
        if output_format != "json":
            deps.telemetry.handshake()
        target_path = _resolve_target_path(path)
        use_case = ApplyFixesUseCase(
            structure_provider=deps.structure_gateway,
            filesystem=deps.filesystem,
            telemetry=deps.telemetry,
            config_loader=deps.config_loader,
            suppression=deps.suppression,
            max_passes=max_passes,
            dry_run=dry_run,
        )
        reports = use_case.execute(target_path)
        _pick_reporter(deps, output_format).report_fix(reports)
        if dry_run and any(report.corrections for report in reports):
            sys.exit(1)
        sys.exit(0)

    return app
