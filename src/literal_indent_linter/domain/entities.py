from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class StructureKind(str, Enum):
    """Kind tags carried by structure nodes."""
    MODULE = "module"
    ARRAY = "array"
    DICTIONARY = "dictionary"
    ELEMENT = "element"


LITERAL_KINDS: frozenset[str] = frozenset({StructureKind.ARRAY.value, StructureKind.DICTIONARY.value})


@dataclass(frozen=True)
class ByteRange:
    """A half-open byte range into an encoded source buffer."""
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class StructureNode:
    """
    Read-only view of one node of the structural index.

    Offsets and lengths are byte positions into the UTF-8 encoded source.
    Either may be None when the producer could not position the node; such
    nodes are treated as malformed and never report violations.
    """
    kind: str
    offset: Optional[int] = None
    length: Optional[int] = None
    elements: tuple["StructureNode", ...] = ()
    substructure: tuple["StructureNode", ...] = ()

    @property
    def is_literal(self) -> bool:
        return self.kind in LITERAL_KINDS


@dataclass(frozen=True)
class Violation:
    """A multi-line literal whose closing bracket is not aligned with its opening line."""
    expected_range: ByteRange
    actual_range: ByteRange
    expected: int
    actual: int
    end_offset: int
    literal_range: ByteRange


@dataclass(frozen=True)
class ReplacementStep:
    """Replace `actual_range` with the bytes currently under `expected_range`."""
    actual_range: ByteRange
    expected_range: ByteRange
    violation: Violation


@dataclass(frozen=True)
class Correction:
    """Location of one applied correction, relative to the buffer it was applied to."""
    offset: int
    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for reporter."""
        return {"offset": self.offset, "line": self.line, "column": self.column}


@dataclass(frozen=True)
class CorrectionResult:
    """Outcome of driving the scan, plan and apply cycle to a fixed point."""
    text: str
    corrections: list[Correction] = field(default_factory=list)
    passes: int = 0
    converged: bool = True

    @property
    def changed(self) -> bool:
        return bool(self.corrections)


@dataclass(frozen=True)
class LintMessage:
    """A reportable violation: location plus the human readable message."""
    code: str
    symbol: str
    message: str
    line: int
    column: int
    expected: int
    actual: int

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for reporter."""
        return {
            "code": self.code,
            "symbol": self.symbol,
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "expected": self.expected,
            "actual": self.actual,
        }


@dataclass(frozen=True)
class FileReport:
    """Detection or correction outcome for a single file."""
    path: str
    messages: list[LintMessage] = field(default_factory=list)
    corrections: list[Correction] = field(default_factory=list)
    skipped_reason: Optional[str] = None
    converged: bool = True

    def has_violations(self) -> bool:
        """Check if any violations were found."""
        return bool(self.messages)

    def is_skipped(self) -> bool:
        """Check if the file could not be analysed."""
        return self.skipped_reason is not None
