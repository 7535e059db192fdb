"""
Conditional preprocessor for feature-gated source files

Filters a text line by line according to nested #if / #else / #endif
directives and a set of enabled feature names.

The preprocessor makes a single pass:
1. Classify each trimmed line as #if, #else, #endif or content
2. Maintain a stack of open ConditionalFrames
3. Emit a content line (untrimmed) only while every open frame is satisfied

Key features:
- Unbounded nesting; a line is visible iff all enclosing conditions hold
- Directive lines are always consumed, never emitted
- Structural validation with 1-based line numbers in every error
- Pure and reentrant: each call owns its frame stack and output buffer

Example:
    >>> source = "// #if FEATURE_A\\nA\\n// #else\\nB\\n// #endif"
    >>> process(source, ["FEATURE_A"])
    'A'
    >>> process(source, [])
    'B'
"""

from typing import FrozenSet, Iterable, List

from ..models.directives import DirectiveKind, ConditionalFrame
from ..models.errors import (
    MissingFeatureError,
    UnexpectedElseError,
    DuplicateElseError,
    UnexpectedEndifError,
    UnterminatedIfError,
)
from .directives import directive_classify


class Preprocessor:
    """
    Feature-flag preprocessor

    Handles:
    - #if FEATURE / #else / #endif in the supported comment styles
    - Nested blocks (AND of all enclosing conditions)
    - Error reporting with line numbers
    """

    def __init__(self, enabled_features: Iterable[str]) -> None:
        """
        Initialize preprocessor with the enabled feature set

        Args:
            enabled_features: Feature names whose #if branches are kept
        """
        self.enabled: FrozenSet[str] = frozenset(enabled_features)

    def process(self, content: str) -> str:
        """
        Filter content according to its directives

        Args:
            content: Full text of one source file

        Returns:
            Retained lines joined with newline

        Raises:
            MissingFeatureError: #if without a feature name
            UnexpectedElseError: #else with no open #if
            DuplicateElseError: second #else in the same block
            UnexpectedEndifError: #endif with no open #if
            UnterminatedIfError: #if blocks still open at end of input
        """
        lines = content.split("\n")
        result: List[str] = []
        stack: List[ConditionalFrame] = []
        skip = False

        for line_number, line in enumerate(lines, 1):
            trimmed = line.strip()
            kind = directive_classify(trimmed)

            if kind is DirectiveKind.IF:
                stack.append(self.frame_open(trimmed, line_number))
            elif kind is DirectiveKind.ELSE:
                if not stack:
                    raise UnexpectedElseError(line_number)
                top = stack[-1]
                if top.elseSeen:
                    raise DuplicateElseError(line_number, top.feature)
                top.branch_flip()
            elif kind is DirectiveKind.ENDIF:
                if not stack:
                    raise UnexpectedEndifError(line_number)
                stack.pop()
            else:
                if not skip:
                    result.append(line)
                continue

            skip = self.suppressed(stack)

        if stack:
            innermost = stack[-1]
            raise UnterminatedIfError(
                line_number=len(lines),
                count=len(stack),
                feature=innermost.feature,
                opened_at=innermost.line_number,
            )

        return "\n".join(result)

    def frame_open(self, trimmed: str, line_number: int) -> ConditionalFrame:
        """
        Build the frame for an #if line

        The feature name is the third whitespace-separated token
        ("//", "#if", "FEATURE"); trailing tokens such as "-->" are ignored.
        Tokens are split on any run of whitespace, so "// #if\\tFEATURE" and
        "// #if  FEATURE" both name FEATURE rather than splitting on single
        spaces and finding an empty third token.
        """
        parts = trimmed.split()
        if len(parts) < 3:
            raise MissingFeatureError(line_number)

        feature = parts[2]
        return ConditionalFrame(
            feature=feature,
            conditionMet=feature in self.enabled,
            line_number=line_number,
        )

    @staticmethod
    def suppressed(stack: List[ConditionalFrame]) -> bool:
        """True if any open frame is on an unsatisfied branch"""
        return any(not frame.conditionMet for frame in stack)


def process(content: str, enabled_features: Iterable[str]) -> str:
    """
    Filter content for the given enabled features

    Convenience wrapper around Preprocessor(enabled_features).process().
    """
    return Preprocessor(enabled_features).process(content)
