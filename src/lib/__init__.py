"""
featuregate - Feature-flag preprocessor for source trees

Keeps or strips lines of source and markup files based on nested
#if / #else / #endif comment directives.
"""

__version__ = "1.0.0"

from .directives import directive_is, directive_classify
from .preprocessor import Preprocessor, process
from .walker import tree_copy, skipList_load
from .log import LOG, state_connectToLogger

__all__ = [
    "directive_is",
    "directive_classify",
    "Preprocessor",
    "process",
    "tree_copy",
    "skipList_load",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
