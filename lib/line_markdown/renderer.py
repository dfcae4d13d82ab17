"""
HTML renderer for the line Markdown converter.

Renders each block to one HTML fragment and joins the fragments without any
separator. Optionally wraps runs of consecutive list items in `<ul>`.
"""

from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from .ast_nodes import BlockType, MDBlock, MDDocument, MDHeader, MDListItem, MDParagraph
from .inline_rewriter import InlineRewriter

LIST_OPEN = "<ul>"
LIST_CLOSE = "</ul>"


class RenderedFragment(NamedTuple):
    """HTML of one block tagged with the kind of block it came from."""

    blockType: BlockType
    html: str
    forcedCloses: int = 0


def groupListItems(fragments: Iterable[RenderedFragment]) -> List[str]:
    """
    Wrap every maximal run of list item fragments in `<ul>...</ul>`.

    Fragment content is never changed, only surrounded.

    Args:
        fragments: Rendered fragments in document order

    Returns:
        List of HTML strings, list runs merged into a single entry each
    """
    result: List[str] = []
    listRun: List[str] = []

    for fragment in fragments:
        if fragment.blockType == BlockType.LIST_ITEM:
            listRun.append(fragment.html)
            continue
        if listRun:
            result.append(LIST_OPEN + "".join(listRun) + LIST_CLOSE)
            listRun = []
        result.append(fragment.html)

    if listRun:
        result.append(LIST_OPEN + "".join(listRun) + LIST_CLOSE)

    return result


class HTMLRenderer:
    """
    Renderer that converts classified blocks to HTML.

    Options:
        group_lists: wrap consecutive list items in `<ul>` (default False)
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = options or {}
        self.groupLists = bool(self.options.get("group_lists", False))
        self.inlineRewriter = InlineRewriter()

    def render(self, document: MDDocument) -> str:
        """
        Render a parsed document to HTML.

        Args:
            document: Document produced by the parser

        Returns:
            HTML string, one element per source line
        """
        if not isinstance(document, MDDocument):
            raise ValueError("Expected MDDocument as root node")

        return self.joinFragments(self.renderFragments(document))

    def renderFragments(self, document: MDDocument) -> List[RenderedFragment]:
        """Render every block of the document, keeping document order."""
        return [self.renderBlock(block) for block in document.blocks]

    def joinFragments(self, fragments: List[RenderedFragment]) -> str:
        """Concatenate fragments, grouping list items if enabled."""
        if self.groupLists:
            return "".join(groupListItems(fragments))
        return "".join(fragment.html for fragment in fragments)

    def renderBlock(self, block: MDBlock) -> RenderedFragment:
        """Render a single block."""
        rewrite = self.inlineRewriter.rewrite(block.content)

        if isinstance(block, MDHeader):
            html = f"<h{block.level}>{rewrite.html}</h{block.level}>"
        elif isinstance(block, MDListItem):
            html = f"<li>{rewrite.html}</li>"
        elif isinstance(block, MDParagraph):
            html = f"<p>{rewrite.html}</p>"
        else:
            raise ValueError(f"Unknown block type: {type(block).__name__}")

        return RenderedFragment(block.blockType, html, rewrite.forcedCloses)
