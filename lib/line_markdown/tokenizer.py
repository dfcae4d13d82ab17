"""
Grapheme tokenizer for the line Markdown converter.

Delimiter scanning works on user-perceived characters (extended grapheme
clusters), so a base letter with combining marks or a multi-codepoint emoji
is a single scan unit.
"""

from typing import List

import regex

GRAPHEME_PATTERN = regex.compile(r"\X")


def splitGraphemes(text: str) -> List[str]:
    """
    Split text into extended grapheme clusters.

    Args:
        text: Input text

    Returns:
        List of grapheme strings, empty for empty input
    """
    return GRAPHEME_PATTERN.findall(text)


def splitLines(text: str) -> List[str]:
    """
    Split a document into physical lines.

    Only `\\n` separates lines. An empty document is a single empty line and
    a trailing newline produces a trailing empty line.
    """
    return text.split("\n")
