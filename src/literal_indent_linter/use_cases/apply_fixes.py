"""Use Case: Apply Fixes to Source Code."""

from typing import Optional

from literal_indent_linter.domain.applier import CorrectionApplier
from literal_indent_linter.domain.config import ConfigurationLoader
from literal_indent_linter.domain.entities import FileReport
from literal_indent_linter.domain.planner import CorrectionPlanner
from literal_indent_linter.domain.protocols import (
    FileSystemProtocol,
    StructureProviderProtocol,
    SuppressionProtocol,
    TelemetryPort,
)
from literal_indent_linter.domain.rules.literal_end_indentation import LiteralExpressionEndIndentationRule


class ApplyFixesUseCase:
    """Correct misaligned literal ends file by file, writing each file back whole."""

    def __init__(
        self,
        structure_provider: StructureProviderProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: ConfigurationLoader,
        suppression: Optional[SuppressionProtocol] = None,
        max_passes: Optional[int] = None,
        dry_run: bool = False,
    ) -> None:
        self.structure_provider = structure_provider
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.suppression = suppression
        self.dry_run = dry_run
        self.applier = CorrectionApplier(
            structure_provider,
            rule=LiteralExpressionEndIndentationRule(),
            planner=CorrectionPlanner(),
            suppression=suppression,
            max_passes=max_passes if max_passes is not None else config_loader.max_passes,
        )

    def execute(self, target_path: str) -> list[FileReport]:
        """Apply fixes to all files in target path."""
        self.telemetry.step(f"Starting Fix Logic on {target_path}")
        files = self.filesystem.glob_python_files(target_path, exclude=self.config_loader.exclude)
        reports = [self._execute_one_file(path) for path in files]

        modified_count = sum(1 for report in reports if report.corrections)
        correction_count = sum(len(report.corrections) for report in reports)
        status = "dry run complete" if self.dry_run else "complete"
        self.telemetry.step(
            f"Fix Suite {status}. Files repaired: {modified_count}, corrections: {correction_count}"
        )
        return reports

    def _execute_one_file(self, file_path: str) -> FileReport:
        """Process one file. Nothing is written unless every pass parsed cleanly."""
        rel = self.filesystem.relative_path(file_path)
        try:
            content = self.filesystem.read_text(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            self.telemetry.error(f"file={rel} status=skipped reason=unreadable ({exc})")
            return FileReport(path=rel, skipped_reason="unreadable")

        result = self.applier.correct(content)
        if result is None:
            self.telemetry.warning(f"file={rel} status=skipped reason=unparseable")
            return FileReport(path=rel, skipped_reason="unparseable")

        if not result.converged:
            self.telemetry.warning(
                f"file={rel} status=partial reason=max_passes_reached passes={result.passes}"
            )

        if not result.changed:
            self.telemetry.debug(f"file={rel} status=clean")
            return FileReport(path=rel, converged=result.converged)

        if not self.dry_run:
            self.filesystem.write_text(file_path, result.text)
        for correction in result.corrections:
            self.telemetry.step(f"Corrected: {rel}:{correction.line}:{correction.column}")
        self.telemetry.step(
            f"file={rel} status={'would_fix' if self.dry_run else 'fixed'} "
            f"corrections={len(result.corrections)} passes={result.passes}"
        )
        return FileReport(path=rel, corrections=result.corrections, converged=result.converged)
