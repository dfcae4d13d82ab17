"""
Line classifier for the line Markdown converter.

Looks at the leading characters of a line and decides whether it is a header,
a list item or a paragraph. The block marker is stripped, the remaining text
is kept raw for the inline rewriter.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from .ast_nodes import MDBlock, MDHeader, MDListItem, MDParagraph
from .tokenizer import splitGraphemes

logger = logging.getLogger(__name__)

HEADER_MARKER = "#"
LIST_MARKER = ("*", " ")
SEPARATOR = " "


def countHeaderLevel(graphemes: List[str]) -> Tuple[int, int]:
    """
    Count the leading `#` run of a header line.

    Every `#` may be followed by one space which is swallowed, so `# # Title`
    is a level 2 header. Counting stops at the first grapheme that is not `#`.

    Args:
        graphemes: Line split into graphemes

    Returns:
        Tuple of (level, index where the header content starts)
    """
    level = 0
    pos = 0
    total = len(graphemes)
    while pos < total and graphemes[pos] == HEADER_MARKER:
        level += 1
        pos += 1
        if pos < total and graphemes[pos] == SEPARATOR:
            pos += 1
    return level, pos


class LineClassifier:
    """
    Classifies single lines into blocks.

    Options:
        max_header_level: clamp header levels above this value, None keeps the
            raw `#` count (a line of ten `#` becomes a level 10 header)
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = options or {}
        self.maxHeaderLevel: Optional[int] = self.options.get("max_header_level", None)
        if self.maxHeaderLevel is not None and self.maxHeaderLevel < 1:
            raise ValueError(f"max_header_level must be positive, got {self.maxHeaderLevel}")

    def classify(self, line: str, lineNumber: int = 0) -> MDBlock:
        """
        Classify one line.

        Args:
            line: Raw line without the trailing newline
            lineNumber: 1-based line number, kept for diagnostics

        Returns:
            MDHeader, MDListItem or MDParagraph holding the raw inline content
        """
        graphemes = splitGraphemes(line)

        if graphemes and graphemes[0] == HEADER_MARKER:
            level, start = countHeaderLevel(graphemes)
            if self.maxHeaderLevel is not None and level > self.maxHeaderLevel:
                logger.debug(f"Line {lineNumber}: header level {level} clamped to {self.maxHeaderLevel}")
                level = self.maxHeaderLevel
            return MDHeader(level, "".join(graphemes[start:]), lineNumber)

        if tuple(graphemes[:2]) == LIST_MARKER:
            return MDListItem("".join(graphemes[2:]), lineNumber)

        return MDParagraph(line, lineNumber)
