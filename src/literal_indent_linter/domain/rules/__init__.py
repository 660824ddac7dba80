"""Domain models for rules."""

from typing import TYPE_CHECKING, List, Protocol

if TYPE_CHECKING:
    from literal_indent_linter.domain.entities import StructureNode, Violation
    from literal_indent_linter.domain.text_index import SourceBuffer


class BaseRule(Protocol):
    """A single formatting rule evaluated over a source buffer and its structure."""

    code: str
    symbol: str
    description: str

    def check(self, buffer: "SourceBuffer", structure: "StructureNode") -> List["Violation"]:
        """Return every violation of the rule, in reporting order."""
        ...

    def message(self, violation: "Violation") -> str:
        """Render the human readable reason for a violation."""
        ...
