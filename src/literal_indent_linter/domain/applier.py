"""Correction engine: apply replacement plans and re-scan until nothing is left to fix."""

from typing import Optional

from literal_indent_linter.domain.constants import DEFAULT_MAX_PASSES
from literal_indent_linter.domain.entities import Correction, CorrectionResult, ReplacementStep, Violation
from literal_indent_linter.domain.planner import CorrectionPlanner
from literal_indent_linter.domain.protocols import StructureProviderProtocol, SuppressionProtocol
from literal_indent_linter.domain.rules import BaseRule
from literal_indent_linter.domain.rules.literal_end_indentation import LiteralExpressionEndIndentationRule
from literal_indent_linter.domain.text_index import SourceBuffer


class CorrectionApplier:
    """
    Drive scan -> plan -> apply passes to a fixed point.

    Every pass works on a fresh buffer and a fresh structure parse, because
    the ranges of a violation go stale as soon as the text is rewritten and
    one correction can expose another (cascading indentation).
    """

    def __init__(
        self,
        structure_provider: StructureProviderProtocol,
        rule: Optional[BaseRule] = None,
        planner: Optional[CorrectionPlanner] = None,
        suppression: Optional[SuppressionProtocol] = None,
        max_passes: int = DEFAULT_MAX_PASSES,
    ) -> None:
        self.structure_provider = structure_provider
        self.rule: BaseRule = rule or LiteralExpressionEndIndentationRule()
        self.planner = planner or CorrectionPlanner()
        self.suppression = suppression
        self.max_passes = max(1, max_passes)

    def enabled_violations(self, buffer: SourceBuffer, violations: list[Violation]) -> list[Violation]:
        """Drop violations a suppression directive switches off."""
        if self.suppression is None:
            return list(violations)
        return [v for v in violations if self.suppression.is_enabled(v, buffer)]

    def apply(self, buffer: SourceBuffer, plan: list[ReplacementStep]) -> tuple[SourceBuffer, list[Correction]]:
        """
        Splice every step into the buffer, back to front.

        The expected bytes are read from the text as rewritten so far; steps
        are ordered so that no earlier step has touched them. Locations are
        reported against `buffer`, in application order.
        """
        data = bytearray(buffer.data)
        corrections: list[Correction] = []
        for step in plan:
            replacement = bytes(data[step.expected_range.offset:step.expected_range.end])
            data[step.actual_range.offset:step.actual_range.end] = replacement
            position = buffer.line_and_column(step.actual_range.offset)
            line, column = position if position else (0, 0)
            corrections.append(Correction(offset=step.actual_range.offset, line=line, column=column))
        return SourceBuffer.from_bytes(bytes(data)), corrections

    def correct(self, text: str) -> Optional[CorrectionResult]:
        """
        Correct `text` until a pass plans no replacement.

        Returns None when the structure provider cannot parse the text at any
        pass; callers keep the original text in that case. Reaching
        `max_passes` with work left returns the last pass with
        `converged=False`.
        """
        buffer = SourceBuffer(text)
        corrections: list[Correction] = []
        passes = 0
        while True:
            structure = self.structure_provider.parse(buffer.text)
            if structure is None:
                return None
            violations = self.enabled_violations(buffer, self.rule.check(buffer, structure))
            plan = self.planner.plan(buffer, violations)
            if not plan:
                return CorrectionResult(text=buffer.text, corrections=corrections, passes=passes, converged=True)
            if passes >= self.max_passes:
                return CorrectionResult(text=buffer.text, corrections=corrections, passes=passes, converged=False)
            buffer, applied = self.apply(buffer, plan)
            corrections.extend(applied)
            passes += 1
