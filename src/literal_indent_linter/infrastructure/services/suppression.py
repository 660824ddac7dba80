"""Suppression directives: honour `# pylint: disable=...` comments in the fix pipeline."""

import io
import re
import tokenize
from typing import Optional

import astroid  # type: ignore[import-untyped]

from literal_indent_linter.domain.constants import DISABLE_DIRECTIVE_NAMES
from literal_indent_linter.domain.entities import Violation
from literal_indent_linter.domain.protocols import SuppressionProtocol
from literal_indent_linter.domain.text_index import SourceBuffer
from literal_indent_linter.infrastructure.gateways.astroid_gateway import AstroidStructureGateway

_DIRECTIVE = re.compile(r"pylint:\s*(disable-next|disable|enable)\s*=\s*([\w\-, ]+)")
_RULE_NAMES: frozenset[str] = frozenset(name.lower() for name in DISABLE_DIRECTIVE_NAMES)


class DirectiveSuppressionService(SuppressionProtocol):
    """
    Decide whether the rule is switched off at a violation.

    - A trailing `# pylint: disable=...` disables the rule for that line.
    - A standalone `# pylint: disable=...` disables it until a matching
      `# pylint: enable=...` or the end of the enclosing block (function,
      class, branch or module), the way pylint scopes block pragmas.
    - `# pylint: disable-next=...` disables the following line.

    A violation is suppressed when the literal's opening line or its closing
    bracket line is disabled.
    """

    def __init__(self, structure_gateway: Optional[AstroidStructureGateway] = None) -> None:
        self._structure_gateway = structure_gateway or AstroidStructureGateway()
        self._last: Optional[tuple[SourceBuffer, frozenset[int]]] = None

    def is_enabled(self, violation: Violation, buffer: SourceBuffer) -> bool:
        disabled = self.disabled_lines(buffer)
        if not disabled:
            return True
        for offset in (violation.literal_range.offset, violation.end_offset):
            position = buffer.line_and_column(offset)
            if position and position[0] in disabled:
                return False
        return True

    def disabled_lines(self, buffer: SourceBuffer) -> frozenset[int]:
        """Return the 1-indexed lines on which the rule is disabled."""
        if self._last is not None and self._last[0] is buffer:
            return self._last[1]
        lines = self._scan(buffer)
        self._last = (buffer, lines)
        return lines

    def _scan(self, buffer: SourceBuffer) -> frozenset[int]:
        try:
            tokens = list(tokenize.generate_tokens(io.StringIO(buffer.code_text).readline))
        except (tokenize.TokenError, SyntaxError):
            return frozenset()

        disabled: set[int] = set()
        block_starts: list[int] = []
        enables: list[int] = []
        for tok_type, tok_string, start, _, line_content in tokens:
            if tok_type != tokenize.COMMENT:
                continue
            match = _DIRECTIVE.search(tok_string)
            if match is None or not self._names_rule(match.group(2)):
                continue
            action = match.group(1)
            lineno = start[0]
            is_standalone = not line_content[:start[1]].strip()

            if action == "disable-next":
                disabled.add(lineno + 1)
            elif action == "disable" and is_standalone:
                block_starts.append(lineno)
            elif action == "disable":
                disabled.add(lineno)
            else:
                enables.append(lineno)

        if block_starts:
            module = self._structure_gateway.build_module(buffer)
            for lineno in block_starts:
                last = self._block_end(module, lineno) if module is not None else len(buffer.lines)
                for enable in enables:
                    if lineno < enable <= last:
                        last = enable - 1
                        break
                disabled.update(range(lineno, last + 1))
        return frozenset(disabled)

    def _block_end(self, module: astroid.nodes.Module, lineno: int) -> int:
        """Last line a block pragma on `lineno` covers."""
        node = self._innermost(module, lineno) or module
        return max(node.block_range(lineno)[1], lineno)

    def _innermost(self, node: astroid.nodes.NodeNG, lineno: int) -> Optional[astroid.nodes.NodeNG]:
        """Deepest node spanning `lineno`, children searched before their parent."""
        if node.lineno != node.end_lineno:
            for child in node.get_children():
                found = self._innermost(child, lineno)
                if found is not None:
                    return found
        if node.fromlineno <= lineno <= node.tolineno:
            return node
        return None

    @staticmethod
    def _names_rule(names: str) -> bool:
        return any(name.strip().lower() in _RULE_NAMES for name in names.split(","))
