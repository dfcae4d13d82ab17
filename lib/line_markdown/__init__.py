"""
Line Markdown converter

Converts a small, line-oriented Markdown subset to HTML. Every input line
becomes exactly one HTML element:

- `# Title` (any number of `#`) becomes `<hN>...</hN>`
- `* item` becomes `<li>...</li>`
- anything else becomes `<p>...</p>`

Inside every line `__bold__` becomes `<strong>` and `_italic_` becomes `<em>`.

Usage:
    from lib.line_markdown import MarkdownParser, render, markdownToHtml

    render("#Header!\\n* __Bold Item__")
    # '<h1>Header!</h1><li><strong>Bold Item</strong></li>'

    markdownToHtml("* one\\n* two")
    # '<ul><li>one</li><li>two</li></ul>'
"""

from .ast_nodes import BlockType, MDBlock, MDDocument, MDHeader, MDListItem, MDParagraph
from .block_classifier import LineClassifier, countHeaderLevel
from .inline_rewriter import InlineRewrite, InlineRewriter, RewriteState
from .parser import MarkdownParser, markdownToHtml, parseMarkdown, render
from .renderer import HTMLRenderer, RenderedFragment, groupListItems
from .tokenizer import splitGraphemes, splitLines

__version__ = "1.0.0"
__all__ = [
    "MarkdownParser",
    "render",
    "parseMarkdown",
    "markdownToHtml",
    "LineClassifier",
    "countHeaderLevel",
    "InlineRewriter",
    "InlineRewrite",
    "RewriteState",
    "HTMLRenderer",
    "RenderedFragment",
    "groupListItems",
    "splitGraphemes",
    "splitLines",
    # Block nodes
    "BlockType",
    "MDBlock",
    "MDDocument",
    "MDHeader",
    "MDListItem",
    "MDParagraph",
]
