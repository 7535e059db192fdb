"""
Source-tree walker

Copies a source tree to an output tree, running the preprocessor over
text files with a recognized suffix and copying everything else
byte-for-byte. Entries named on the skip list are left out at any depth.
"""

import shutil
from pathlib import Path
from typing import Iterable, List, Optional

from ..models.errors import DirectiveError, SourceDecodeError
from ..models.walker import BuildResult
from .log import LOG
from .preprocessor import Preprocessor


def skipList_load(
    sourcedir: Path, filename: str, defaults: Optional[Iterable[str]] = None
) -> List[str]:
    """
    Resolve the names to leave out of the output tree

    Starts from the configured defaults and appends the entries of the
    skip-list file at the source root, if there is one. The file holds one
    name per line; blank lines and lines starting with '#' are ignored.

    Args:
        sourcedir: Root of the source tree
        filename: Name of the skip-list file (e.g. ".featuregateignore")
        defaults: Names skipped even without a skip-list file

    Returns:
        Skip names in first-seen order, without duplicates

    Example:
        With ".featuregateignore" containing "build\\n# comment\\n\\nsecrets.txt":
        >>> skipList_load(Path("project"), ".featuregateignore", [".git"])
        ['.git', 'build', 'secrets.txt']
    """
    names: List[str] = list(defaults or [])

    ignore_file = sourcedir / filename
    if ignore_file.is_file():
        for raw in ignore_file.read_text(encoding="utf-8").splitlines():
            entry = raw.strip()
            if not entry or entry.startswith("#"):
                continue
            names.append(entry)
        LOG(f"Loaded skip list from {ignore_file}", level=2)

    return list(dict.fromkeys(names))


def file_preprocess(
    src: Path, dest: Path, preprocessor: Preprocessor, encoding: str = "utf-8"
) -> None:
    """
    Run one text file through the preprocessor

    Newlines are passed through untranslated so CRLF files keep their
    line endings. A DirectiveError gets the source path attached before
    it propagates; undecodable content raises SourceDecodeError.
    """
    try:
        with open(src, "r", encoding=encoding, newline="") as fh:
            content = fh.read()
    except UnicodeDecodeError as e:
        raise SourceDecodeError(src, encoding, e.reason) from e

    try:
        filtered = preprocessor.process(content)
    except DirectiveError as e:
        e.path = src
        raise

    with open(dest, "w", encoding=encoding, newline="") as fh:
        fh.write(filtered)


def tree_copy(
    src: Path,
    dest: Path,
    features: Iterable[str],
    skip_names: Iterable[str],
    extensions: Iterable[str],
    encoding: str = "utf-8",
) -> BuildResult:
    """
    Recursively copy src to dest, preprocessing matching files

    Args:
        src: Source file or directory
        dest: Destination path mirroring src
        features: Enabled feature names
        skip_names: Entry names left out of the copy (matched on base name)
        extensions: File suffixes run through the preprocessor
        encoding: Text encoding of preprocessed files

    Returns:
        BuildResult listing processed, copied and skipped paths

    Raises:
        DirectiveError: A preprocessed file has malformed directives; the
                        error's path attribute names the file
        SourceDecodeError: A preprocessed file is not valid text in encoding
    """
    result = BuildResult()
    preprocessor = Preprocessor(features)
    skip = frozenset(skip_names)
    suffixes = frozenset(extensions)
    dest_root = Path(dest).resolve()

    def entry_copy(source: Path, target: Path) -> None:
        if source.name in skip or source.resolve() == dest_root:
            LOG(f"Skipping {source}", level=2)
            result.skipped.append(source)
            return

        if source.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            result.directories.append(target)
            LOG(f"Entering {source}", level=3)
            for child in sorted(source.iterdir()):
                entry_copy(child, target / child.name)
            return

        target.parent.mkdir(parents=True, exist_ok=True)
        if source.suffix in suffixes:
            file_preprocess(source, target, preprocessor, encoding)
            result.processed.append(target)
            LOG(f"Processed {source}", level=3)
        else:
            shutil.copyfile(source, target)
            result.copied.append(target)
            LOG(f"Copied {source}", level=3)

    entry_copy(Path(src), Path(dest))
    return result
