from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    import astroid  # type: ignore[import-untyped]

    from literal_indent_linter.domain.entities import StructureNode, Violation
    from literal_indent_linter.domain.text_index import SourceBuffer


class StructureProviderProtocol(Protocol):
    """Protocol for the structural index producer (parses text into structure nodes)."""

    def parse(self, text: str) -> Optional["StructureNode"]:
        """Return the root structure node, or None when the text cannot be parsed."""
        ...


class ModuleStructureProtocol(StructureProviderProtocol, Protocol):
    """Structure producer that can also reuse a module the host linter already parsed."""

    def from_module(self, module: "astroid.nodes.Module", buffer: "SourceBuffer") -> "StructureNode":
        """Build the structure tree for an already parsed module."""
        ...


class SuppressionProtocol(Protocol):
    """Protocol for deciding whether the rule is enabled for a violation."""

    def is_enabled(self, violation: "Violation", buffer: "SourceBuffer") -> bool:
        """Return False when a directive disables the rule at the violation."""
        ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        ...

    def glob_python_files(self, path: str, exclude: Optional[list[str]] = None) -> list[str]:
        """Get all Python files in path (recursive if directory), minus excluded globs."""
        ...

    def relative_path(self, path: str) -> str:
        """Return path relative to the current directory when possible."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...
