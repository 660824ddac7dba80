"""Literal Expression End Indentation - closing brackets align with their opening line."""

from typing import Optional

from literal_indent_linter.domain.constants import (
    RULE_CODE,
    RULE_DESCRIPTION,
    RULE_MESSAGE_TEMPLATE,
    RULE_SYMBOL,
)
from literal_indent_linter.domain.entities import (
    ByteRange,
    LintMessage,
    StructureNode,
    Violation,
)
from literal_indent_linter.domain.text_index import SourceBuffer


class LiteralScanner:
    """
    Walk a structure tree and locate misaligned multi-line literals.

    Violations come out in post-order: a literal's nested literals are
    reported before the literal itself, and siblings follow document order.
    The resulting sequence is therefore sorted by closing bracket position.
    """

    def scan(self, buffer: SourceBuffer, root: StructureNode) -> list[Violation]:
        """Return the violations found below `root`."""
        violations: list[Violation] = []
        for child in root.substructure:
            violations.extend(self.scan(buffer, child))
            violation = self.evaluate(buffer, child)
            if violation is not None:
                violations.append(violation)
        return violations

    def evaluate(self, buffer: SourceBuffer, node: StructureNode) -> Optional[Violation]:
        """Return the violation for a single node, or None when it is aligned or not applicable."""
        if not node.is_literal or not node.elements:
            return None
        if node.offset is None or node.length is None or node.length < 1:
            return None

        start_line = self._line_of(buffer, node.offset)
        first_line = self._line_of(buffer, node.elements[0].offset)
        if start_line is None or first_line is None or start_line == first_line:
            return None

        last_line = self._line_of(buffer, node.elements[-1].offset)
        end_offset = node.offset + node.length - 1
        end_position = buffer.line_and_column(end_offset)
        if last_line is None or end_position is None:
            return None
        end_line, end_column = end_position
        if last_line == end_line:
            return None

        expected = buffer.indentation_width(start_line)
        actual = end_column - 1
        if expected is None or expected == actual:
            return None

        start_range = buffer.line_range(start_line)
        end_range = buffer.line_range(end_line)
        if start_range is None or end_range is None:
            return None

        return Violation(
            expected_range=ByteRange(start_range.offset, expected),
            actual_range=ByteRange(end_range.offset, end_offset - end_range.offset),
            expected=expected,
            actual=actual,
            end_offset=end_offset,
            literal_range=ByteRange(node.offset, node.length),
        )

    @staticmethod
    def _line_of(buffer: SourceBuffer, offset: Optional[int]) -> Optional[int]:
        if offset is None:
            return None
        position = buffer.line_and_column(offset)
        return position[0] if position else None


class LiteralExpressionEndIndentationRule:
    """
    Rule for W9801: the closing bracket of a multi-line list or dict literal
    must sit at the indentation of the line that opened the literal.

    The expected indentation is the column of the first non-whitespace
    character on the opening line, so `x = [` expects the bracket under `x`.
    """

    code: str = RULE_CODE
    symbol: str = RULE_SYMBOL
    description: str = RULE_DESCRIPTION

    def __init__(self, scanner: Optional[LiteralScanner] = None) -> None:
        self.scanner = scanner or LiteralScanner()

    def check(self, buffer: SourceBuffer, structure: StructureNode) -> list[Violation]:
        """Scan the structure for misaligned literal ends."""
        return self.scanner.scan(buffer, structure)

    def message(self, violation: Violation) -> str:
        return RULE_MESSAGE_TEMPLATE % (violation.expected, violation.actual)

    def to_lint_message(self, violation: Violation, buffer: SourceBuffer) -> Optional[LintMessage]:
        """Locate a violation at its closing bracket for reporting."""
        position = buffer.line_and_column(violation.end_offset)
        if position is None:
            return None
        line, column = position
        return LintMessage(
            code=self.code,
            symbol=self.symbol,
            message=self.message(violation),
            line=line,
            column=column,
            expected=violation.expected,
            actual=violation.actual,
        )
