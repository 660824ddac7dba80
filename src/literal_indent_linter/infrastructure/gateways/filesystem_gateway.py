"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from fnmatch import fnmatch
from pathlib import Path
from typing import List, Optional

from literal_indent_linter.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def glob_python_files(self, path: str, exclude: Optional[List[str]] = None) -> List[str]:
        """Get all Python files in path (recursive if directory), minus excluded globs."""
        path_obj = Path(path).resolve()
        if path_obj.is_dir():
            candidates = sorted(p for p in path_obj.glob("**/*.py") if p.is_file())
        else:
            candidates = [path_obj] if path_obj.suffix == ".py" else []
        patterns = exclude or []
        return [
            str(p) for p in candidates
            if not any(self._matches(p, pattern) for pattern in patterns)
        ]

    def relative_path(self, path: str) -> str:
        """Return path relative to the current directory when possible."""
        try:
            return str(Path(path).resolve().relative_to(Path.cwd()))
        except ValueError:
            return path

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file, keeping line endings untouched."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, keeping line endings untouched."""
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

    def _matches(self, path: Path, pattern: str) -> bool:
        relative = self.relative_path(str(path))
        return fnmatch(relative, pattern) or fnmatch(path.name, pattern)
