"""
Main parser for the line Markdown converter.

This module provides the MarkdownParser class that orchestrates line
splitting, block classification, inline rewriting and rendering.
"""

import logging
from typing import Any, Dict, Optional

from .ast_nodes import BlockType, MDDocument
from .block_classifier import LineClassifier
from .renderer import HTMLRenderer
from .tokenizer import splitLines

logger = logging.getLogger(__name__)


class MarkdownParser:
    """
    Line-oriented Markdown parser.

    Processing model:
    1. Splitting: the input is split on newlines
    2. Classification: every line becomes a header, list item or paragraph
    3. Inline rewriting: emphasis delimiters become tags
    4. Rendering: fragments are joined in line order, optionally grouping
       list items into `<ul>`

    Lines never influence each other, so any string input has a defined
    output.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        """
        Initialize the parser.

        Args:
            options: Optional configuration, supported keys:
                group_lists: wrap consecutive list items in `<ul>` (default False)
                max_header_level: clamp header levels, None for no clamping
        """
        self.options = options or {}

        self.classifier = LineClassifier(self.options)
        self.htmlRenderer = HTMLRenderer(self.options)

        self.parseStats: Dict[str, Any] = {}
        self._resetStats()

    def parse(self, markdownText: str) -> MDDocument:
        """
        Parse text into a document of classified blocks.

        Args:
            markdownText: The Markdown text to parse

        Returns:
            MDDocument with one block per line

        Raises:
            ValueError: If input is not a string
        """
        if not isinstance(markdownText, str):
            raise ValueError("Input must be a string")

        self._resetStats()

        lines = splitLines(markdownText)
        document = MDDocument(tuple(lines))
        for lineNumber, line in enumerate(lines, start=1):
            block = self.classifier.classify(line, lineNumber)
            document.addBlock(block)
            self.parseStats[block.blockType.value] += 1

        self.parseStats["lines_processed"] = len(lines)
        return document

    def parseToHtml(self, markdownText: str) -> str:
        """
        Parse text and render it to HTML.

        Args:
            markdownText: The Markdown text to parse

        Returns:
            HTML string
        """
        document = self.parse(markdownText)
        fragments = self.htmlRenderer.renderFragments(document)
        self.parseStats["forced_closes"] = sum(fragment.forcedCloses for fragment in fragments)

        logger.debug(f"Rendered {len(fragments)} line(s), stats: {self.parseStats}")
        return self.htmlRenderer.joinFragments(fragments)

    def getAstJson(self, markdownText: str) -> Dict[str, Any]:
        """
        Parse text and return the block stream as a JSON-serializable dict.
        """
        return self.parse(markdownText).toDict()

    def getStats(self) -> Dict[str, Any]:
        """
        Get statistics of the last parse operation.

        Returns:
            Dictionary with line, block and forced-close counters
        """
        return self.parseStats.copy()

    def _resetStats(self) -> None:
        self.parseStats = {
            "lines_processed": 0,
            BlockType.HEADER.value: 0,
            BlockType.LIST_ITEM.value: 0,
            BlockType.PARAGRAPH.value: 0,
            "forced_closes": 0,
        }


# Convenience functions for quick conversion


def render(text: str, **options) -> str:
    """
    Convert text to HTML, one element per line.

    List items are left ungrouped unless `group_lists=True` is passed.
    """
    return MarkdownParser(options).parseToHtml(text)


def parseMarkdown(text: str, **options) -> MDDocument:
    """
    Parse text into a document of classified blocks.

    Args:
        text: Markdown text to parse
        **options: Parser options

    Returns:
        MDDocument representing the parsed text
    """
    return MarkdownParser(options).parse(text)


def markdownToHtml(text: str, **options) -> str:
    """
    Convert text to HTML with consecutive list items grouped into `<ul>`.

    Args:
        text: Markdown text to convert
        **options: Parser options, `group_lists` defaults to True here

    Returns:
        HTML string
    """
    options.setdefault("group_lists", True)
    return MarkdownParser(options).parseToHtml(text)
