"""
Block nodes for the line Markdown converter.

Every input line becomes exactly one block. Blocks are flat: there is no
nesting, inline emphasis is never materialized as separate nodes, it is
resolved during rendering by the inline rewriter.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Tuple


class BlockType(Enum):
    """Kinds of blocks a line can be classified as."""

    HEADER = "header"
    LIST_ITEM = "list_item"
    PARAGRAPH = "paragraph"


class MDBlock(ABC):
    """Base class for all line blocks."""

    def __init__(self, blockType: BlockType, content: str, lineNumber: int = 0):
        self.blockType = blockType
        # Raw inline content with the block marker already stripped
        self.content = content
        self.lineNumber = lineNumber

    @abstractmethod
    def toDict(self) -> Dict[str, Any]:
        """Convert block to dictionary representation."""
        pass

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MDBlock):
            return NotImplemented
        return self.toDict() == other.toDict()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(content={self.content!r})"


class MDHeader(MDBlock):
    """Header line, level is the number of leading `#` characters."""

    def __init__(self, level: int, content: str, lineNumber: int = 0):
        super().__init__(BlockType.HEADER, content, lineNumber)
        if level < 1:
            raise ValueError(f"Header level must be positive, got {level}")
        self.level = level

    def toDict(self) -> Dict[str, Any]:
        return {
            "type": self.blockType.value,
            "level": self.level,
            "content": self.content,
            "line": self.lineNumber,
        }

    def __repr__(self) -> str:
        return f"MDHeader(level={self.level}, content={self.content!r})"


class MDListItem(MDBlock):
    """Unordered list item (`* ` marker)."""

    def __init__(self, content: str, lineNumber: int = 0):
        super().__init__(BlockType.LIST_ITEM, content, lineNumber)

    def toDict(self) -> Dict[str, Any]:
        return {
            "type": self.blockType.value,
            "content": self.content,
            "line": self.lineNumber,
        }


class MDParagraph(MDBlock):
    """Anything that is neither a header nor a list item."""

    def __init__(self, content: str, lineNumber: int = 0):
        super().__init__(BlockType.PARAGRAPH, content, lineNumber)

    def toDict(self) -> Dict[str, Any]:
        return {
            "type": self.blockType.value,
            "content": self.content,
            "line": self.lineNumber,
        }


class MDDocument:
    """Parsed document: the source lines and one block per line."""

    def __init__(self, lines: Tuple[str, ...]):
        self.lines = lines
        self.blocks: List[MDBlock] = []

    def addBlock(self, block: MDBlock) -> None:
        """Append a classified block."""
        self.blocks.append(block)

    def toDict(self) -> Dict[str, Any]:
        return {
            "type": "document",
            "blocks": [block.toDict() for block in self.blocks],
        }

    def __len__(self) -> int:
        return len(self.blocks)

    def __repr__(self) -> str:
        return f"MDDocument(blocks={len(self.blocks)})"
