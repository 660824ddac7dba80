"""
Rule identity and defaults shared by the checker, the CLI and the fix pipeline.
"""

RULE_CODE: str = "W9801"
RULE_SYMBOL: str = "literal-expression-end-indentation"
RULE_NAME: str = "Literal Expression End Indentation"
RULE_DESCRIPTION: str = (
    "Array and dictionary literal end should have the same indentation as the line that started it."
)
RULE_MESSAGE_TEMPLATE: str = RULE_DESCRIPTION + " Expected %d, got %d."

CONFIG_SECTION: str = "literal-indent"
DEFAULT_MAX_PASSES: int = 10

# Directive values that switch the rule off in a pylint disable comment.
DISABLE_DIRECTIVE_NAMES: frozenset[str] = frozenset({RULE_CODE, RULE_SYMBOL, "all"})

BANNER: str = "literal-indent :: closing brackets line up with the line that opened them"
