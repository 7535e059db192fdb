"""
Directive recognition for featuregate

A directive is a comment line whose trimmed form starts with one of the
supported comment openers followed by `#<keyword>`:

    # #if FEATURE        (python, shell)
    // #if FEATURE       (js, ts, jsx)
    /* #if FEATURE */    (css)
    <!-- #if FEATURE --> (html)

Recognition is a strict, case-sensitive prefix test. Anything after the
prefix (feature name, closing comment token) is left to the caller.
"""

from typing import Optional, Union

from ..models.directives import DirectiveKind, COMMENT_PREFIXES


def directive_is(line: str, keyword: Union[str, DirectiveKind]) -> bool:
    """
    Check whether a trimmed line opens the given directive

    Args:
        line: Source line, already stripped of surrounding whitespace
        keyword: "if", "else", "endif" or the matching DirectiveKind

    Returns:
        True if the line starts with a supported comment opener followed
        by #keyword

    Example:
        >>> directive_is("// #if FEATURE_A", "if")
        True
        >>> directive_is("//#if FEATURE_A", "if")
        False
    """
    if isinstance(keyword, DirectiveKind):
        keyword = keyword.value
    return line.startswith(tuple(f"{prefix}#{keyword}" for prefix in COMMENT_PREFIXES))


def directive_classify(line: str) -> Optional[DirectiveKind]:
    """
    Classify a trimmed line as a directive

    Kinds are tried in the order if, else, endif; the first match wins.

    Returns:
        DirectiveKind of the line, or None for ordinary content
    """
    for kind in DirectiveKind:
        if directive_is(line, kind):
            return kind
    return None
