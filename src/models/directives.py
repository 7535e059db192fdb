"""
Directive and conditional-frame models

Defines the directive keywords, the comment prefixes a directive may be
written behind, and the per-block record kept by the preprocessor while a
`#if` is open.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Tuple


class DirectiveKind(Enum):
    """
    Kinds of featuregate directives

    Values are the keywords as they appear after the `#` in source files.
    """
    IF = "if"
    ELSE = "else"
    ENDIF = "endif"


# Comment openers a directive may follow, e.g. "// #if FEATURE_A"
COMMENT_PREFIXES: Tuple[str, ...] = (
    "# ",     # python, shell, yaml
    "// ",    # js, ts, jsx
    "/* ",    # css
    "<!-- ",  # html
)


@dataclass
class ConditionalFrame:
    """
    Record of one open #if block

    One frame is pushed per #if and popped by the matching #endif. The
    preprocessor emits a line only while every frame on the stack has
    conditionMet set.

    Attributes:
        feature: Feature name from the opening #if
        conditionMet: True while the current branch of this block is emitted
                      (initially: feature is enabled; inverted once by #else)
        elseSeen: True once an #else has been processed for this block
        line_number: 1-based line of the opening #if

    Example:
        For "// #if FEATURE_A" at line 3 with FEATURE_A enabled:
        ConditionalFrame(feature="FEATURE_A", conditionMet=True,
                         elseSeen=False, line_number=3)
    """
    feature: str
    conditionMet: bool
    elseSeen: bool = False
    line_number: int = 0

    def branch_flip(self) -> None:
        """Switch to the #else branch of this block"""
        self.elseSeen = True
        self.conditionMet = not self.conditionMet
