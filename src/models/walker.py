"""
Tree-walker data models

Type-safe structures returned by the tree walker.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class BuildResult:
    """
    Summary of one source-tree to output-tree copy

    Returned by tree_copy() once every entry under the source root has been
    visited.

    Attributes:
        processed: Files run through the preprocessor
        copied: Files copied byte-for-byte
        skipped: Entries left out because their name is on the skip list
        directories: Output directories created

    Example:
        A tree holding app.js, logo.png and node_modules/ with the default
        skip list:
        BuildResult(processed=[.../app.js], copied=[.../logo.png],
                    skipped=[.../node_modules], directories=[...])
    """
    processed: List[Path] = field(default_factory=list)
    copied: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    directories: List[Path] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.processed) + len(self.copied)
