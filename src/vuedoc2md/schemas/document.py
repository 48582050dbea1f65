"""Markdown document tree models."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field, model_validator


class NodeType(str, Enum):
    """Closed set of node kinds produced by the Markdown parser."""

    DOCUMENT = "Document"
    HEADER = "Header"
    PARAGRAPH = "Paragraph"
    STR = "Str"
    CODE = "Code"
    CODE_BLOCK = "CodeBlock"
    LIST = "List"
    LIST_ITEM = "ListItem"
    EMPHASIS = "Emphasis"
    STRONG = "Strong"
    LINK = "Link"
    IMAGE = "Image"
    BLOCK_QUOTE = "BlockQuote"
    HORIZONTAL_RULE = "HorizontalRule"
    HTML = "Html"
    TABLE = "Table"
    TABLE_ROW = "TableRow"
    TABLE_CELL = "TableCell"
    SOFT_BREAK = "SoftBreak"
    HARD_BREAK = "HardBreak"
    DEFINITION = "Definition"


class Node(BaseModel):
    """One structural unit of a Markdown document.

    Attributes:
        type: Node kind.
        children: Ordered child nodes.
        raw: Source text of the node. Top-level blocks of a parsed document
            hold the exact source slice; ``None`` means the node is rendered
            from its fields when serialized.
        value: Decoded text of leaf nodes (``Str``, ``Code``, ``CodeBlock``...).
        level: Heading depth, only on ``Header`` nodes.
        url: Destination of ``Link`` and ``Image`` nodes.
        info: Fence info string of ``CodeBlock`` nodes.
        ordered: Whether a ``List`` is numbered.
        start: First number of an ordered ``List``.
    """

    type: NodeType
    children: list["Node"] = Field(default_factory=list)
    raw: str | None = None
    value: str | None = None
    level: int | None = Field(default=None, ge=1, le=6)
    url: str | None = None
    info: str | None = None
    ordered: bool = False
    start: int | None = None

    @model_validator(mode="after")
    def _check_level(self) -> "Node":
        if self.type is NodeType.HEADER and self.level is None:
            raise ValueError("Header nodes require a level")
        if self.type is not NodeType.HEADER and self.level is not None:
            raise ValueError(f"{self.type.value} nodes do not take a level")
        return self

    def walk(self) -> Iterator["Node"]:
        """Yield this node and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()
