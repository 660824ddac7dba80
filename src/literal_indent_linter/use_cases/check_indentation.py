"""Use Case: Report misaligned literal ends across a path."""

from typing import Optional

from literal_indent_linter.domain.config import ConfigurationLoader
from literal_indent_linter.domain.entities import FileReport, LintMessage
from literal_indent_linter.domain.protocols import (
    FileSystemProtocol,
    StructureProviderProtocol,
    SuppressionProtocol,
    TelemetryPort,
)
from literal_indent_linter.domain.rules.literal_end_indentation import LiteralExpressionEndIndentationRule
from literal_indent_linter.domain.text_index import SourceBuffer


class CheckIndentationUseCase:
    """Detection mode: scan every Python file and collect one message per violation."""

    def __init__(
        self,
        structure_provider: StructureProviderProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
        config_loader: ConfigurationLoader,
        suppression: Optional[SuppressionProtocol] = None,
        rule: Optional[LiteralExpressionEndIndentationRule] = None,
    ) -> None:
        self.structure_provider = structure_provider
        self.filesystem = filesystem
        self.telemetry = telemetry
        self.config_loader = config_loader
        self.suppression = suppression
        self.rule = rule or LiteralExpressionEndIndentationRule()

    def execute(self, target_path: str) -> list[FileReport]:
        """Check all files under target path."""
        self.telemetry.step(f"Checking literal end indentation in {target_path}")
        files = self.filesystem.glob_python_files(target_path, exclude=self.config_loader.exclude)
        reports = [self.check_file(path) for path in files]
        total = sum(len(report.messages) for report in reports)
        self.telemetry.step(f"Checked {len(files)} file(s); violations: {total}")
        return reports

    def check_file(self, path: str) -> FileReport:
        """Read and check a single file."""
        rel = self.filesystem.relative_path(path)
        try:
            text = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            self.telemetry.error(f"file={rel} status=skipped reason=unreadable ({exc})")
            return FileReport(path=rel, skipped_reason="unreadable")
        return self.check_text(text, rel)

    def check_text(self, text: str, path: str = "<string>") -> FileReport:
        """Check source text that is already in memory."""
        buffer = SourceBuffer(text)
        structure = self.structure_provider.parse(text)
        if structure is None:
            self.telemetry.warning(f"file={path} status=skipped reason=unparseable")
            return FileReport(path=path, skipped_reason="unparseable")

        messages: list[LintMessage] = []
        for violation in self.rule.check(buffer, structure):
            if self.suppression is not None and not self.suppression.is_enabled(violation, buffer):
                continue
            message = self.rule.to_lint_message(violation, buffer)
            if message is not None:
                messages.append(message)

        if messages:
            self.telemetry.debug(f"file={path} violations={len(messages)}")
        return FileReport(path=path, messages=messages)
