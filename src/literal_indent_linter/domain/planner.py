"""Correction planning: turn a violation set into an ordered, non-conflicting replacement plan."""

from literal_indent_linter.domain.entities import ByteRange, ReplacementStep, Violation
from literal_indent_linter.domain.text_index import SourceBuffer


class CorrectionPlanner:
    """
    Resolve chained indentation ranges and order replacements back to front.

    When one literal closes on the line that opens another (`] + [`), the
    second literal's expected indentation is the very range the first
    literal's correction rewrites. Following the chain of actual ranges
    yields the indentation the line will have once every step is applied.
    """

    def plan(self, buffer: SourceBuffer, violations: list[Violation]) -> list[ReplacementStep]:
        """Return replacement steps sorted by descending actual range."""
        # A bracket sharing its line with other code (`)]`) is reported but
        # never rewritten: replacing its prefix would delete that code.
        correctable = [v for v in violations if buffer.is_blank(v.actual_range)]

        lookup: dict[ByteRange, Violation] = {}
        for violation in correctable:
            lookup[violation.actual_range] = violation

        steps: list[ReplacementStep] = []
        for violation in correctable:
            steps.append(ReplacementStep(
                actual_range=violation.actual_range,
                expected_range=self.resolve_expected(violation, lookup),
                violation=violation,
            ))

        steps.sort(key=lambda step: (step.actual_range.offset, step.actual_range.length), reverse=True)
        return steps

    @staticmethod
    def resolve_expected(violation: Violation, lookup: dict[ByteRange, Violation]) -> ByteRange:
        """Follow `expected -> actual` links until the chain ends or loops."""
        current = violation
        visited: set[ByteRange] = {current.actual_range}
        while True:
            nxt = lookup.get(current.expected_range)
            if nxt is None or nxt.actual_range in visited:
                return current.expected_range
            visited.add(nxt.actual_range)
            current = nxt
