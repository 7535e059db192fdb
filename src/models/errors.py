"""
Preprocessor error types

Every structural problem in a directive sequence raises a subclass of
DirectiveError. Like the parser errors elsewhere in Python, they derive from
SyntaxError, and they carry the 1-based line number where the problem was
detected.

SourceDecodeError is raised when a file cannot be read as text at all.
"""

from pathlib import Path
from typing import Optional


class DirectiveError(SyntaxError):
    """
    Base class for malformed directive structure

    Attributes:
        line_number: 1-based line where the error was detected
        path: Source file being processed, attached by the tree walker
              (None when process() is called directly)
    """

    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.path: Optional[Path] = None


class MissingFeatureError(DirectiveError):
    """#if directive without a feature name"""

    def __init__(self, line_number: int) -> None:
        super().__init__(f"Line {line_number}: Missing feature in #if directive", line_number)


class UnexpectedElseError(DirectiveError):
    """#else with no open #if"""

    def __init__(self, line_number: int) -> None:
        super().__init__(
            f"Line {line_number}: Unexpected #else without matching #if", line_number
        )


class DuplicateElseError(DirectiveError):
    """Second #else inside the same #if block"""

    def __init__(self, line_number: int, feature: str) -> None:
        super().__init__(f"Line {line_number}: Duplicate #else in #if {feature}", line_number)
        self.feature = feature


class UnexpectedEndifError(DirectiveError):
    """#endif with no open #if"""

    def __init__(self, line_number: int) -> None:
        super().__init__(
            f"Line {line_number}: Unexpected #endif without matching #if", line_number
        )


class UnterminatedIfError(DirectiveError):
    """
    One or more #if blocks still open at end of input

    Attributes:
        count: Number of unmatched #if directives
        feature: Feature of the innermost open block
        opened_at: Line of the innermost open #if
    """

    def __init__(self, line_number: int, count: int, feature: str, opened_at: int) -> None:
        super().__init__(
            f"Missing #endif for {count} unmatched #if directive(s) "
            f"(innermost: #if {feature} at line {opened_at})",
            line_number,
        )
        self.count = count
        self.feature = feature
        self.opened_at = opened_at


class SourceDecodeError(ValueError):
    """
    Preprocessed file could not be decoded as text

    Attributes:
        path: File that failed to decode
        encoding: Encoding it was read with
    """

    def __init__(self, path: Path, encoding: str, reason: str) -> None:
        super().__init__(f"{path}: cannot decode as {encoding} ({reason})")
        self.path = path
        self.encoding = encoding
