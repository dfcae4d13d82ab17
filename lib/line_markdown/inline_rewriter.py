"""
Inline span rewriter for the line Markdown converter.

Turns `__bold__` and `_italic_` delimiters into `<strong>` and `<em>` tags
with a single greedy left-to-right pass. The scanner never searches ahead for
a matching closer before opening a tag, so unbalanced input still produces a
deterministic result instead of an error.
"""

import logging
from enum import Enum
from typing import List, NamedTuple

from .tokenizer import splitGraphemes

logger = logging.getLogger(__name__)

DELIMITER = "_"

ITALIC_OPEN = "<em>"
ITALIC_CLOSE = "</em>"
BOLD_OPEN = "<strong>"
BOLD_CLOSE = "</strong>"


class RewriteState(Enum):
    """Scanner states."""

    NORMAL = "normal"
    ITALIC_OPEN = "italic_open"


class InlineRewrite(NamedTuple):
    """Result of rewriting one piece of inline content."""

    html: str
    forcedCloses: int = 0


class InlineRewriter:
    """
    Finite-state scanner for emphasis delimiters.

    Rules, checked in this order at every position:

    NORMAL state:
        `_ _ X`  -> `<strong>` then X verbatim, skip all three
        `_ _`    -> `</strong>` when these are the last two graphemes
        `_ X`    -> `<em>` then X verbatim, switch to ITALIC_OPEN
        `_`      -> `</em>` when it is the last grapheme
    ITALIC_OPEN state:
        `c _`    -> c then `</em>`, back to NORMAL
        `_`      -> `</em>` when it is the last grapheme
    Anything else is copied as is. Spans still open at the end of the
    content are closed there.
    """

    def rewrite(self, content: str) -> InlineRewrite:
        """
        Rewrite emphasis delimiters in a single line of content.

        Args:
            content: Inline content with any block marker already stripped

        Returns:
            InlineRewrite with the resulting HTML and the number of tags that
            had to be closed at end of line
        """
        graphemes = splitGraphemes(content)
        total = len(graphemes)
        output: List[str] = []
        state = RewriteState.NORMAL
        openBold = 0
        forcedCloses = 0
        pos = 0

        while pos < total:
            char = graphemes[pos]
            hasNext = pos + 1 < total

            if state == RewriteState.ITALIC_OPEN:
                if hasNext and graphemes[pos + 1] == DELIMITER:
                    output.append(char)
                    output.append(ITALIC_CLOSE)
                    state = RewriteState.NORMAL
                    pos += 2
                elif char == DELIMITER and not hasNext:
                    output.append(ITALIC_CLOSE)
                    state = RewriteState.NORMAL
                    pos += 1
                else:
                    output.append(char)
                    pos += 1
                continue

            if char != DELIMITER:
                output.append(char)
                pos += 1
            elif hasNext and graphemes[pos + 1] == DELIMITER:
                if pos + 2 < total:
                    output.append(BOLD_OPEN)
                    output.append(graphemes[pos + 2])
                    openBold += 1
                    pos += 3
                else:
                    output.append(BOLD_CLOSE)
                    if openBold > 0:
                        openBold -= 1
                    pos += 2
            elif hasNext:
                output.append(ITALIC_OPEN)
                output.append(graphemes[pos + 1])
                state = RewriteState.ITALIC_OPEN
                pos += 2
            else:
                # Lone trailing delimiter
                output.append(ITALIC_CLOSE)
                pos += 1

        if state == RewriteState.ITALIC_OPEN:
            output.append(ITALIC_CLOSE)
            forcedCloses += 1
        if openBold:
            output.append(BOLD_CLOSE * openBold)
            forcedCloses += openBold

        if forcedCloses:
            logger.debug(f"Force-closed {forcedCloses} emphasis span(s) in {content!r}")

        return InlineRewrite("".join(output), forcedCloses)

    def rewriteToHtml(self, content: str) -> str:
        """Rewrite content and return only the HTML."""
        return self.rewrite(content).html
