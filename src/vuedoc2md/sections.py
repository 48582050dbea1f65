"""Locate and replace sections of a Markdown document tree."""

from __future__ import annotations

import re
from enum import Enum

from vuedoc2md.config import VUEDOC2MD_SECTION_SCOPE
from vuedoc2md.exceptions import MergeError, SectionNotFoundError
from vuedoc2md.schemas import Node, NodeType
from vuedoc2md.serializer import render_node, serialize

_LEADING_BLANK_LINES_RE = re.compile(r"\A(?:[ \t]*(?:\r\n|\r|\n))+")
_TRAILING_BREAKS_RE = re.compile(r"(?:[ \t]*(?:\r\n|\r|\n))+\Z")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class SectionScope(str, Enum):
    """Which blocks a matched section covers.

    NODE replaces the heading node alone, BODY replaces the blocks under the
    heading and keeps the heading, SECTION replaces both.
    """

    NODE = "node"
    BODY = "body"
    SECTION = "section"


def resolve_scope(value: SectionScope | str | None) -> SectionScope:
    """Return the scope named by ``value``, or the configured default for None.

    Raises:
        MergeError: If ``value`` names no scope.
    """
    if value is None:
        value = VUEDOC2MD_SECTION_SCOPE
    try:
        return SectionScope(value)
    except ValueError:
        raise MergeError(f"Invalid section scope: {value!r}") from None


def heading_title(node: Node) -> str | None:
    """Return the title text of a header node.

    The title is the value of the first ``Str`` descendant, depth-first. A
    header without any descendant has the empty title. Non-header nodes and
    headers whose text holds no ``Str`` (e.g. only inline code) have none.
    """
    if node.type is not NodeType.HEADER:
        return None
    if not node.children:
        return ""
    for descendant in node.walk():
        if descendant.type is NodeType.STR:
            return descendant.value or ""
    return None


def is_section_heading(node: Node, title: str) -> bool:
    """Check whether a node is the header of the section titled ``title``."""
    return heading_title(node) == title


def find_section_index(tree: Node, title: str) -> int | None:
    """Return the index of the first top-level header titled ``title``."""
    for index, child in enumerate(tree.children):
        if is_section_heading(child, title):
            return index
    return None


def find_section(tree: Node, title: str) -> Node | None:
    """Return the first top-level header whose title equals ``title``.

    Matching is exact (case-sensitive, untrimmed). When several headers share
    a title, only the first one is reachable.
    """
    index = find_section_index(tree, title)
    return tree.children[index] if index is not None else None


def section_bounds(tree: Node, index: int, scope: SectionScope) -> tuple[int, int]:
    """Compute the ``[start, end)`` child range a section covers.

    The body of a header runs until the next header of equal or shallower
    level, or the end of the document.
    """
    target = tree.children[index]
    if scope is SectionScope.NODE or target.type is not NodeType.HEADER:
        return index, index + 1

    end = index + 1
    while end < len(tree.children):
        sibling = tree.children[end]
        if sibling.type is NodeType.HEADER and (sibling.level or 1) <= (target.level or 1):
            break
        end += 1

    if scope is SectionScope.BODY:
        return index + 1, end
    return index, end


def replace_section(
    tree: Node,
    target: Node | None,
    replacement: Node,
    *,
    scope: SectionScope = SectionScope.NODE,
) -> Node:
    """Replace the section rooted at ``target`` with the blocks of ``replacement``.

    Args:
        tree: Parsed ``Document``.
        target: A direct child of ``tree``, usually from ``find_section``.
        replacement: Parsed fragment ``Document`` whose children are inserted.
        scope: Which blocks around ``target`` are replaced.

    Returns:
        A new ``Document``. Children outside the replaced range are the same
        objects as in ``tree``; ``tree`` itself is not modified.

    Raises:
        SectionNotFoundError: If ``target`` is None or not a child of ``tree``.
    """
    if target is None:
        raise SectionNotFoundError("Cannot replace a section that was not found")

    index = next((i for i, child in enumerate(tree.children) if child is target), None)
    if index is None:
        raise SectionNotFoundError("Target node is not a top-level block of the document")

    start, end = section_bounds(tree, index, scope)
    before = tree.children[:start]
    removed = tree.children[start:end]
    after = tree.children[end:]

    newline = _detect_newline(tree.children)
    inserted = _prepare_inserted(
        replacement.children,
        previous=before[-1] if before else None,
        removed=removed,
        has_following=bool(after),
        newline=newline,
    )

    return tree.model_copy(update={"children": [*before, *inserted, *after], "raw": None})


def _prepare_inserted(
    nodes: list[Node],
    *,
    previous: Node | None,
    removed: list[Node],
    has_following: bool,
    newline: str,
) -> list[Node]:
    """Copy fragment blocks and fit their spacing into the surrounding document."""
    if not nodes:
        return []

    inserted = [
        node if node.raw is not None else node.model_copy(update={"raw": render_node(node)})
        for node in nodes
    ]

    leading = ""
    if previous is not None:
        previous_text = serialize(previous)
        if not previous_text.endswith(("\n", "\r")):
            leading = newline * 2
        elif _count_breaks(_trailing_breaks(previous_text)) < 2:
            leading = newline

    first = inserted[0]
    inserted[0] = first.model_copy(
        update={"raw": leading + _LEADING_BLANK_LINES_RE.sub("", first.raw or "")}
    )

    trailing = _trailing_gap(removed, has_following=has_following, newline=newline)
    last = inserted[-1]
    inserted[-1] = last.model_copy(
        update={"raw": _TRAILING_BREAKS_RE.sub("", last.raw or "") + trailing}
    )
    return inserted


def _trailing_gap(removed: list[Node], *, has_following: bool, newline: str) -> str:
    """Line breaks to put after the inserted blocks."""
    if removed:
        gap = _trailing_breaks(serialize(removed[-1]))
        if not has_following or _count_breaks(gap) >= 2:
            return gap
    return newline * 2 if has_following else newline


def _trailing_breaks(text: str) -> str:
    match = _TRAILING_BREAKS_RE.search(text)
    return match.group(0) if match else ""


def _count_breaks(text: str) -> int:
    return len(_LINE_BREAK_RE.findall(text))


def _detect_newline(nodes: list[Node]) -> str:
    for node in nodes:
        match = _LINE_BREAK_RE.search(serialize(node))
        if match:
            return match.group(0)
    return "\n"
