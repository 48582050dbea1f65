"""Component metadata models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PropDoc(BaseModel):
    """A component prop."""

    name: str
    type: str | None = None
    description: str | None = None
    default: str | None = None
    required: bool = False


class EventDoc(BaseModel):
    """An event emitted with ``$emit``."""

    name: str
    description: str | None = None


class SlotDoc(BaseModel):
    """A ``<slot>`` declared in the template."""

    name: str = "default"
    description: str | None = None
    default_content: str | None = None


class MethodDoc(BaseModel):
    """A public component method."""

    name: str
    params: list[str] = Field(default_factory=list)
    description: str | None = None


class ComponentDoc(BaseModel):
    """Documentation extracted from a single file component."""

    name: str | None = None
    description: str | None = None
    props: list[PropDoc] = Field(default_factory=list)
    events: list[EventDoc] = Field(default_factory=list)
    slots: list[SlotDoc] = Field(default_factory=list)
    methods: list[MethodDoc] = Field(default_factory=list)
