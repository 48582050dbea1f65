"""Serialize Markdown document trees back to text."""

from __future__ import annotations

import re
from typing import Callable

from vuedoc2md.exceptions import SerializationError
from vuedoc2md.schemas import Node, NodeType

_ESCAPED_CHARS_RE = re.compile(r"([\\`*_\[\]<])")
_BACKTICK_RUN_RE = re.compile(r"`+")
_FENCE_RUN_RE = re.compile(r"^[ \t]*(`{3,})", re.MULTILINE)
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def serialize(node: Node) -> str:
    """Return the Markdown text of a node.

    Nodes that still carry their ``raw`` source are emitted verbatim, so an
    unmodified parse serializes byte-for-byte to its input. Nodes without
    ``raw`` are rendered from their fields.
    """
    if node.raw is not None:
        return node.raw
    return render_node(node)


def render_node(node: Node) -> str:
    """Render a node canonically, ignoring its own ``raw``."""
    renderer = _RENDERERS.get(node.type)
    if renderer is None:
        raise SerializationError(f"No renderer for node type {node.type.value}")
    return renderer(node)


def _render_document(node: Node) -> str:
    text = ""
    for child in node.children:
        block = serialize(child)
        if text and not text.endswith(("\n", "\r")) and not block.startswith(("\n", "\r")):
            text += _newline(text + block) * 2
        text += block
    return text


def _newline(text: str) -> str:
    match = _LINE_BREAK_RE.search(text)
    return match.group(0) if match else "\n"


def _render_inline(node: Node) -> str:
    return "".join(serialize(child) for child in node.children)


def _render_header(node: Node) -> str:
    level = min(node.level or 1, 6)
    title = _render_inline(node)
    return f"{'#' * level} {title}" if title else "#" * level


def _render_str(node: Node) -> str:
    return _ESCAPED_CHARS_RE.sub(r"\\\1", node.value or "")


def _render_code(node: Node) -> str:
    value = node.value or ""
    longest = max((len(run) for run in _BACKTICK_RUN_RE.findall(value)), default=0)
    fence = "`" * (longest + 1)
    if value.startswith("`") or value.endswith("`"):
        value = f" {value} "
    return f"{fence}{value}{fence}"


def _render_code_block(node: Node) -> str:
    value = node.value or ""
    longest = max((len(run) for run in _FENCE_RUN_RE.findall(value)), default=0)
    fence = "`" * max(3, longest + 1)
    if value and not value.endswith("\n"):
        value += "\n"
    return f"{fence}{node.info or ''}\n{value}{fence}"


def _render_list(node: Node) -> str:
    lines: list[str] = []
    number = node.start if node.start is not None else 1
    for item in node.children:
        marker = f"{number}." if node.ordered else "-"
        number += 1
        indent = " " * (len(marker) + 1)
        item_lines = _LINE_BREAK_RE.split(serialize(item))
        lines.append(f"{marker} {item_lines[0]}".rstrip())
        for line in item_lines[1:]:
            lines.append(indent + line if line.strip() else "")
    return "\n".join(lines)


def _render_list_item(node: Node) -> str:
    parts: list[str] = []
    previous: Node | None = None
    for child in node.children:
        if previous is not None:
            both_paragraphs = (
                previous.type is NodeType.PARAGRAPH and child.type is NodeType.PARAGRAPH
            )
            parts.append("\n\n" if both_paragraphs else "\n")
        parts.append(serialize(child).rstrip("\r\n"))
        previous = child
    return "".join(parts)


def _render_emphasis(node: Node) -> str:
    return f"*{_render_inline(node)}*"


def _render_strong(node: Node) -> str:
    return f"**{_render_inline(node)}**"


def _render_link(node: Node) -> str:
    return f"[{_render_inline(node)}]({node.url or ''})"


def _render_image(node: Node) -> str:
    return f"![{node.value or ''}]({node.url or ''})"


def _render_block_quote(node: Node) -> str:
    body = "\n\n".join(serialize(child).rstrip("\r\n") for child in node.children)
    return "\n".join(f"> {line}" if line else ">" for line in _LINE_BREAK_RE.split(body))


def _render_horizontal_rule(node: Node) -> str:
    return "---"


def _render_html(node: Node) -> str:
    return (node.value or "").rstrip("\r\n")


def _render_table(node: Node) -> str:
    rows = [serialize(row) for row in node.children]
    if not rows:
        return ""
    columns = len(node.children[0].children)
    separator = "| " + " | ".join("---" for _ in range(columns)) + " |"
    return "\n".join([rows[0], separator, *rows[1:]])


def _render_table_row(node: Node) -> str:
    return "| " + " | ".join(serialize(cell) for cell in node.children) + " |"


def _render_table_cell(node: Node) -> str:
    return _render_inline(node).replace("|", "\\|")


def _render_soft_break(node: Node) -> str:
    return "\n"


def _render_hard_break(node: Node) -> str:
    return "\\\n"


def _render_definition(node: Node) -> str:
    return node.value or ""


_RENDERERS: dict[NodeType, Callable[[Node], str]] = {
    NodeType.DOCUMENT: _render_document,
    NodeType.HEADER: _render_header,
    NodeType.PARAGRAPH: _render_inline,
    NodeType.STR: _render_str,
    NodeType.CODE: _render_code,
    NodeType.CODE_BLOCK: _render_code_block,
    NodeType.LIST: _render_list,
    NodeType.LIST_ITEM: _render_list_item,
    NodeType.EMPHASIS: _render_emphasis,
    NodeType.STRONG: _render_strong,
    NodeType.LINK: _render_link,
    NodeType.IMAGE: _render_image,
    NodeType.BLOCK_QUOTE: _render_block_quote,
    NodeType.HORIZONTAL_RULE: _render_horizontal_rule,
    NodeType.HTML: _render_html,
    NodeType.TABLE: _render_table,
    NodeType.TABLE_ROW: _render_table_row,
    NodeType.TABLE_CELL: _render_table_cell,
    NodeType.SOFT_BREAK: _render_soft_break,
    NodeType.HARD_BREAK: _render_hard_break,
    NodeType.DEFINITION: _render_definition,
}

_missing = set(NodeType) - set(_RENDERERS)
if _missing:  # pragma: no cover - guards the closed node set
    raise SerializationError(f"Missing renderers for: {sorted(t.value for t in _missing)}")
