"""Parse Markdown text into a document tree."""

from __future__ import annotations

import re

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from vuedoc2md.exceptions import MarkdownParseError
from vuedoc2md.schemas import Node, NodeType
from vuedoc2md.serializer import render_node

# Same line boundaries markdown-it uses for its line maps.
_LINE_RE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+$")

_CONTAINER_TYPES = {
    "paragraph": NodeType.PARAGRAPH,
    "blockquote": NodeType.BLOCK_QUOTE,
    "list_item": NodeType.LIST_ITEM,
    "em": NodeType.EMPHASIS,
    "strong": NodeType.STRONG,
    "table": NodeType.TABLE,
    "tr": NodeType.TABLE_ROW,
    "th": NodeType.TABLE_CELL,
    "td": NodeType.TABLE_CELL,
}
_LEAF_TYPES = {
    "text": NodeType.STR,
    "text_special": NodeType.STR,
    "code_inline": NodeType.CODE,
    "html_block": NodeType.HTML,
    "html_inline": NodeType.HTML,
}
# Wrappers whose children are lifted into the parent.
_TRANSPARENT_TYPES = {"inline", "thead", "tbody"}


def parse_markdown(text: str) -> Node:
    """Parse Markdown into a ``Document`` node.

    Top-level blocks keep the exact source slice they came from in ``raw``,
    including the blank lines that follow them, so the children's ``raw``
    concatenate back to ``text``. Nested nodes carry their canonical
    rendering.
    """
    if not text.strip():
        return Node(type=NodeType.DOCUMENT, raw=text)

    lines = _LINE_RE.findall(text)
    root = SyntaxTreeNode(_new_parser().parse(text))

    blocks: list[Node] = []
    leading = ""
    for block, start, end in _block_spans(root, len(lines)):
        if block is None:
            # Lines markdown-it consumed without a token: blank lines and
            # link reference definitions.
            content_start = next((i for i in range(start, end) if lines[i].strip()), end)
            blank = "".join(lines[start:content_start])
            if blocks:
                blocks[-1].raw = (blocks[-1].raw or "") + blank
            else:
                leading += blank
            if content_start == end:
                continue
            start = content_start
            node = Node(type=NodeType.DEFINITION, value="".join(lines[start:end]).strip())
        else:
            node = _convert_block(block)
        node.raw = leading + "".join(lines[start:end])
        leading = ""
        blocks.append(node)

    return Node(type=NodeType.DOCUMENT, children=blocks, raw=text)


def _new_parser() -> MarkdownIt:
    return MarkdownIt("commonmark").enable("table")


def _block_spans(
    root: SyntaxTreeNode, line_count: int
) -> list[tuple[SyntaxTreeNode | None, int, int]]:
    """Pair each top-level block with its line range, including unclaimed gaps."""
    spans: list[tuple[SyntaxTreeNode | None, int, int]] = []
    cursor = 0
    for block in root.children:
        if block.map is None:
            raise MarkdownParseError(f"Top-level {block.type} token has no line map")
        start, end = block.map
        start = max(start, cursor)
        if start > cursor:
            spans.append((None, cursor, start))
        spans.append((block, start, end))
        cursor = max(cursor, end)
    if cursor < line_count:
        spans.append((None, cursor, line_count))
    return spans


def _convert_block(block: SyntaxTreeNode) -> Node:
    nodes = _convert(block)
    if len(nodes) != 1:
        raise MarkdownParseError(f"Expected a single node for {block.type} block")
    return nodes[0]


def _convert(token: SyntaxTreeNode) -> list[Node]:
    kind = token.type

    if kind in _TRANSPARENT_TYPES:
        return _convert_children(token)

    if kind == "heading":
        node = Node(
            type=NodeType.HEADER,
            level=int(token.tag[1]),
            children=_convert_children(token),
        )
    elif kind in ("bullet_list", "ordered_list"):
        ordered = kind == "ordered_list"
        start = token.attrs.get("start", 1) if ordered else None
        node = Node(
            type=NodeType.LIST,
            ordered=ordered,
            start=int(start) if start is not None else None,
            children=_convert_children(token),
        )
    elif kind in ("fence", "code_block"):
        node = Node(
            type=NodeType.CODE_BLOCK,
            value=token.content,
            info=token.info.strip() or None,
        )
    elif kind == "link":
        node = Node(
            type=NodeType.LINK,
            url=str(token.attrs.get("href", "")),
            children=_convert_children(token),
        )
    elif kind == "image":
        node = Node(
            type=NodeType.IMAGE,
            url=str(token.attrs.get("src", "")),
            value=token.content,
        )
    elif kind == "hr":
        node = Node(type=NodeType.HORIZONTAL_RULE)
    elif kind == "softbreak":
        node = Node(type=NodeType.SOFT_BREAK)
    elif kind == "hardbreak":
        node = Node(type=NodeType.HARD_BREAK)
    elif kind in _CONTAINER_TYPES:
        node = Node(type=_CONTAINER_TYPES[kind], children=_convert_children(token))
    elif kind in _LEAF_TYPES:
        node = Node(type=_LEAF_TYPES[kind], value=token.content)
    else:
        raise MarkdownParseError(f"Unsupported Markdown token: {kind}")

    node.raw = render_node(node)
    return [node]


def _convert_children(token: SyntaxTreeNode) -> list[Node]:
    nodes: list[Node] = []
    for child in token.children:
        nodes.extend(_convert(child))
    return nodes
