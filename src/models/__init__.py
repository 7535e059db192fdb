"""
Models package for featuregate

Contains data structures and type definitions for the preprocessing pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveKind, ConditionalFrame, COMMENT_PREFIXES
from .walker import BuildResult
from .errors import (
    DirectiveError,
    MissingFeatureError,
    UnexpectedElseError,
    DuplicateElseError,
    UnexpectedEndifError,
    UnterminatedIfError,
    SourceDecodeError,
)

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveKind",
    "ConditionalFrame",
    "COMMENT_PREFIXES",
    "BuildResult",
    "DirectiveError",
    "MissingFeatureError",
    "UnexpectedElseError",
    "DuplicateElseError",
    "UnexpectedEndifError",
    "UnterminatedIfError",
    "SourceDecodeError",
]
