"""
Pylint plugin entry point.

Enable with `pylint --load-plugins=literal_indent_linter.interface.checker`.
"""

from pylint.lint import PyLinter

from literal_indent_linter.infrastructure.di.container import LinterContainer
from literal_indent_linter.use_cases.checks.literal_indentation import LiteralIndentationChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = LinterContainer.get_instance()
    linter.register_checker(
        LiteralIndentationChecker(linter, structure_gateway=container.get_structure_gateway())
    )
