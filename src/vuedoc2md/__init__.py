"""vuedoc2md: generate Markdown documentation for Vue components."""

from vuedoc2md.exceptions import (
    ComponentFileError,
    ComponentParseError,
    MarkdownParseError,
    MergeError,
    OptionsError,
    RenderError,
    SectionNotFoundError,
    SectionTargetMissingError,
    SerializationError,
    Vuedoc2mdError,
)
from vuedoc2md.generation import GenerationOptions, render_component, render_files
from vuedoc2md.markdown_parser import parse_markdown
from vuedoc2md.merge import merge_markdown
from vuedoc2md.schemas import ComponentDoc, Node, NodeType
from vuedoc2md.sections import SectionScope, find_section, replace_section
from vuedoc2md.serializer import serialize

__all__ = [
    "ComponentDoc",
    "ComponentFileError",
    "ComponentParseError",
    "GenerationOptions",
    "MarkdownParseError",
    "MergeError",
    "Node",
    "NodeType",
    "OptionsError",
    "RenderError",
    "SectionNotFoundError",
    "SectionScope",
    "SectionTargetMissingError",
    "SerializationError",
    "Vuedoc2mdError",
    "find_section",
    "merge_markdown",
    "parse_markdown",
    "render_component",
    "render_files",
    "replace_section",
    "serialize",
]
