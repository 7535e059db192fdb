"""
featuregate - Feature-flag preprocessor for source trees

Produces feature-gated output trees from a single source tree by keeping or
stripping lines wrapped in #if / #else / #endif comment directives.
"""

__version__ = "1.0.0"

from .lib import Preprocessor, process, tree_copy, LOG, state_connectToLogger
from .models import (
    DirectiveError,
    MissingFeatureError,
    UnexpectedElseError,
    DuplicateElseError,
    UnexpectedEndifError,
    UnterminatedIfError,
)

__all__ = [
    "Preprocessor",
    "process",
    "tree_copy",
    "LOG",
    "state_connectToLogger",
    "DirectiveError",
    "MissingFeatureError",
    "UnexpectedElseError",
    "DuplicateElseError",
    "UnexpectedEndifError",
    "UnterminatedIfError",
    "__version__",
]
