"""Unit tests for interface/reporters.py."""

import json
from io import StringIO

from rich.console import Console

from literal_indent_linter.domain.entities import Correction, FileReport, LintMessage
from literal_indent_linter.interface.reporters import JsonReporter, TerminalReporter


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def _message(line: int = 4, column: int = 4) -> LintMessage:
    return LintMessage(
        code="W9801",
        symbol="literal-expression-end-indentation",
        message="Array and dictionary literal end should have the same indentation. Expected 0, got 3.",
        line=line,
        column=column,
        expected=0,
        actual=3,
    )


class TestTerminalReporter:
    """Rich table rendering."""

    def test_report_check_lists_locations(self) -> None:
        console, out = _console()
        TerminalReporter(console).report_check([FileReport(path="pkg/mod.py", messages=[_message()])])
        text = out.getvalue()
        assert "pkg/mod.py:4:4" in text
        assert "W9801" in text

    def test_report_check_clean(self) -> None:
        console, out = _console()
        TerminalReporter(console).report_check([FileReport(path="pkg/mod.py")])
        assert "No misaligned literal ends found." in out.getvalue()

    def test_skipped_files_are_listed(self) -> None:
        console, out = _console()
        TerminalReporter(console).report_check([FileReport(path="broken.py", skipped_reason="unparseable")])
        assert "broken.py: unparseable" in out.getvalue()

    def test_report_fix_lists_corrected_files(self) -> None:
        console, out = _console()
        report = FileReport(
            path="pkg/mod.py",
            corrections=[Correction(offset=17, line=4, column=1), Correction(offset=40, line=9, column=1)],
            converged=False,
        )
        TerminalReporter(console).report_fix([report, FileReport(path="clean.py")])
        text = out.getvalue()
        assert "pkg/mod.py" in text
        assert "4, 9" in text
        assert "clean.py" not in text

    def test_report_fix_nothing_to_do(self) -> None:
        console, out = _console()
        TerminalReporter(console).report_fix([FileReport(path="clean.py")])
        assert "Nothing to correct." in out.getvalue()


class TestJsonReporter:
    """JSON output."""

    def test_report_check_payload(self) -> None:
        console, out = _console()
        JsonReporter(console).report_check([FileReport(path="mod.py", messages=[_message()])])
        payload = json.loads(out.getvalue())
        assert payload == [{"path": "mod.py", **_message().to_dict()}]

    def test_report_fix_payload_skips_clean_files(self) -> None:
        console, out = _console()
        JsonReporter(console).report_fix([
            FileReport(path="mod.py", corrections=[Correction(offset=17, line=4, column=1)]),
            FileReport(path="clean.py"),
        ])
        payload = json.loads(out.getvalue())
        assert payload == [
            {"path": "mod.py", "converged": True, "corrections": [{"offset": 17, "line": 4, "column": 1}]},
        ]
