"""Byte offset to line/column index over an immutable source buffer."""

import codecs
import re
from bisect import bisect_right
from dataclasses import dataclass
from typing import Optional

from literal_indent_linter.domain.entities import ByteRange

# Same line terminators the Python tokenizer honours; str.splitlines() also
# splits on form feeds and unicode separators, which would desync line numbers.
_LINE_BREAK = re.compile(rb"\r\n|\r|\n")
_INDENT_CHARS: frozenset[str] = frozenset({" ", "\t"})


@dataclass(frozen=True)
class SourceLine:
    """One physical line: 1-indexed number, byte range without terminator, decoded text."""
    number: int
    byte_range: ByteRange
    text: str


class SourceBuffer:
    """
    Immutable text plus its UTF-8 encoding and derived line table.

    All ranges handed out by the buffer are byte ranges; columns are counted
    in characters so non-ASCII identifiers and comments do not skew them.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._data = text.encode("utf-8")
        self._lines = self._index_lines(self._data)
        self._starts = [line.byte_range.offset for line in self._lines]

    @classmethod
    def from_bytes(cls, data: bytes) -> "SourceBuffer":
        """Build a buffer from UTF-8 encoded content."""
        return cls(data.decode("utf-8"))

    @staticmethod
    def _index_lines(data: bytes) -> tuple[SourceLine, ...]:
        lines: list[SourceLine] = []
        start = 0
        for match in _LINE_BREAK.finditer(data):
            lines.append(SourceLine(
                number=len(lines) + 1,
                byte_range=ByteRange(start, match.start() - start),
                text=data[start:match.start()].decode("utf-8"),
            ))
            start = match.end()
        lines.append(SourceLine(
            number=len(lines) + 1,
            byte_range=ByteRange(start, len(data) - start),
            text=data[start:].decode("utf-8"),
        ))
        return tuple(lines)

    @property
    def text(self) -> str:
        return self._text

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def lines(self) -> tuple[SourceLine, ...]:
        return self._lines

    @property
    def bom_width(self) -> int:
        """Bytes taken by a leading UTF-8 byte order mark, 0 when there is none."""
        return len(codecs.BOM_UTF8) if self._data.startswith(codecs.BOM_UTF8) else 0

    @property
    def code_text(self) -> str:
        """The text without its byte order mark, as the parser and tokenizer expect it."""
        return self._text[1:] if self.bom_width else self._text

    def __len__(self) -> int:
        return len(self._data)

    def line(self, number: int) -> Optional[SourceLine]:
        """Return the 1-indexed line, or None when it does not exist."""
        if 1 <= number <= len(self._lines):
            return self._lines[number - 1]
        return None

    def line_range(self, number: int) -> Optional[ByteRange]:
        """Return the byte range of a line (terminator excluded)."""
        line = self.line(number)
        return line.byte_range if line else None

    def line_and_column(self, byte_offset: int) -> Optional[tuple[int, int]]:
        """
        Map a byte offset to (line, column), both 1-indexed.

        The column counts characters from the start of the line. Returns None
        for offsets outside the buffer, past the end of their line, or in the
        middle of a multi-byte sequence.
        """
        if byte_offset < 0 or byte_offset > len(self._data):
            return None
        index = bisect_right(self._starts, byte_offset) - 1
        line = self._lines[index]
        if byte_offset > line.byte_range.end:
            # Inside a line terminator.
            return None
        try:
            prefix = self._data[line.byte_range.offset:byte_offset].decode("utf-8")
        except UnicodeDecodeError:
            return None
        return (line.number, len(prefix) + 1)

    def byte_offset(self, line_number: int, byte_column: int) -> Optional[int]:
        """Map a 1-indexed line and 0-based byte column back to a byte offset."""
        line = self.line(line_number)
        if line is None or byte_column < 0 or byte_column > line.byte_range.length:
            return None
        return line.byte_range.offset + byte_column

    def indentation_width(self, line_number: int) -> Optional[int]:
        """Characters before the first non space/tab character of the line."""
        line = self.line(line_number)
        if line is None:
            return None
        for index, char in enumerate(line.text):
            if char not in _INDENT_CHARS:
                return index
        return len(line.text)

    def slice(self, byte_range: ByteRange) -> bytes:
        return self._data[byte_range.offset:byte_range.end]

    def is_blank(self, byte_range: ByteRange) -> bool:
        """True when the range holds only spaces and tabs."""
        return all(chr(byte) in _INDENT_CHARS for byte in self.slice(byte_range))
