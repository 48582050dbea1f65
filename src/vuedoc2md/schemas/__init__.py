"""Shared schemas for vuedoc2md."""

from vuedoc2md.schemas.component import ComponentDoc, EventDoc, MethodDoc, PropDoc, SlotDoc
from vuedoc2md.schemas.document import Node, NodeType

__all__ = [
    "ComponentDoc",
    "EventDoc",
    "MethodDoc",
    "Node",
    "NodeType",
    "PropDoc",
    "SlotDoc",
]
