"""Literal end indentation checks (W9801)."""

from typing import TYPE_CHECKING

import astroid  # type: ignore[import-untyped]
from pylint.checkers import BaseRawFileChecker

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from literal_indent_linter.domain.constants import (
    RULE_CODE,
    RULE_DESCRIPTION,
    RULE_MESSAGE_TEMPLATE,
    RULE_SYMBOL,
)
from literal_indent_linter.domain.protocols import ModuleStructureProtocol
from literal_indent_linter.domain.rules.literal_end_indentation import LiteralExpressionEndIndentationRule
from literal_indent_linter.domain.text_index import SourceBuffer


class LiteralIndentationChecker(BaseRawFileChecker):
    """W9801: closing bracket of a multi-line list/dict aligns with its opening line."""

    name: str = "literal-indent"
    msgs = {
        RULE_CODE: (
            RULE_MESSAGE_TEMPLATE,
            RULE_SYMBOL,
            RULE_DESCRIPTION + " Run 'literal-indent fix' to realign it automatically.",
        )
    }

    def __init__(self, linter: "PyLinter", structure_gateway: ModuleStructureProtocol) -> None:
        super().__init__(linter)
        self._structure_gateway = structure_gateway
        self._rule = LiteralExpressionEndIndentationRule()

    def process_module(self, node: astroid.nodes.Module) -> None:
        """Report every misaligned literal end in the module."""
        stream = node.stream()
        if stream is None:
            return
        with stream:
            data = stream.read()
        try:
            buffer = SourceBuffer.from_bytes(data)
        except UnicodeDecodeError:
            return

        structure = self._structure_gateway.from_module(node, buffer)
        for violation in self._rule.check(buffer, structure):
            position = buffer.line_and_column(violation.end_offset)
            if position is None:
                continue
            line, column = position
            self.add_message(
                RULE_SYMBOL,
                line=line,
                col_offset=column - 1,
                args=(violation.expected, violation.actual),
            )
