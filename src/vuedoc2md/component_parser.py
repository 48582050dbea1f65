"""Extract documentation metadata from Vue single file components."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag, TemplateString

from vuedoc2md.exceptions import ComponentParseError
from vuedoc2md.schemas import ComponentDoc, EventDoc, MethodDoc, PropDoc, SlotDoc

_EXPORT_RE = re.compile(
    r"(?:export\s+default|module\.exports\s*=)\s*(?:[\w$.]+\s*\(\s*)?(?=\{)"
)
_DEFINE_PROPS_RE = re.compile(r"defineProps\s*(?:<[^>]*>)?\s*\(\s*(?=[\[{])")
_DEFINE_EMITS_RE = re.compile(r"defineEmits\s*(?:<[^>]*>)?\s*\(\s*(?=\[)")
_EMIT_RE = re.compile(r"""(?:\$emit|\bemit)\(\s*(['"`])(?P<name>[^'"`]+)\1""")
_KEY_RE = re.compile(
    r"""^(?:async\s+)?\*?\s*(?:(['"])(?P<quoted>[^'"]+)\1|(?P<ident>[\w$]+))\s*(?P<sep>[:(])"""
)
_ARROW_RE = re.compile(r"^(?:async\s*)?(?:\([^)]*\)|[\w$]+)\s*=>")
_SINGLE_PARAM_ARROW_RE = re.compile(r"^(?:async\s+)?([\w$]+)\s*=>")
_IDENT_RE = re.compile(r"[\w$]+")
_STRING_RE = re.compile(r"""^(['"`])(?P<value>.*)\1$""", re.DOTALL)
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_COMMENT_OPEN_RE = re.compile(r"^/\*+")
_COMMENT_CLOSE_RE = re.compile(r"\*+/$")
_COMMENT_PREFIX_RE = re.compile(r"^(?://+|\*+)")

_QUOTES = "'\"`"
_OPENERS = {"{": "}", "[": "]", "(": ")"}
_CLOSERS = set(_OPENERS.values())
# Text inside <template> is parsed as TemplateString by newer bs4 releases.
_SLOT_TEXT_TYPES = (NavigableString, TemplateString)


@dataclass
class _Entry:
    """A member of a JavaScript object literal."""

    key: str
    value: str
    comment: str | None
    private: bool
    is_method: bool


def parse_component(source: str, *, default_name: str | None = None) -> ComponentDoc:
    """Extract name, description, props, events, slots and methods from a ``.vue`` file.

    Args:
        source: Raw single file component source.
        default_name: Name to use when the component does not declare one,
            typically the file name without extension.

    Returns:
        The extracted component documentation.

    Raises:
        ComponentParseError: If the source has no ``<template>`` or
            ``<script>`` block, or the script has no readable component
            definition.
    """
    soup = BeautifulSoup(source, "html.parser")
    template = soup.find("template", recursive=False)
    script = soup.find("script", recursive=False)
    if template is None and script is None:
        raise ComponentParseError("No <template> or <script> block found in component source")

    name = default_name
    description: str | None = None
    props: list[PropDoc] = []
    methods: list[MethodDoc] = []
    events: list[EventDoc] = []
    slots: list[SlotDoc] = []

    if isinstance(script, Tag):
        code = script.string or ""
        if code.strip():
            if script.has_attr("setup"):
                props, events = _read_setup_script(code)
            else:
                definition = _read_options_script(code)
                name = definition.get("name") or name
                description = definition.get("description")
                props = definition.get("props", [])
                methods = definition.get("methods", [])
                events = definition.get("events", [])

    if isinstance(template, Tag):
        slots = _extract_slots(template)
        events = _merge_events(events, _extract_events(str(template)))

    return ComponentDoc(
        name=name,
        description=description,
        props=props,
        events=events,
        slots=slots,
        methods=methods,
    )


def _read_options_script(code: str) -> dict:
    match = _EXPORT_RE.search(code)
    if not match:
        raise ComponentParseError(
            "Unable to find the component definition (export default {...}) in <script>"
        )
    body = _object_body(code, match.end())
    entries = {entry.key: entry for entry in _parse_object(body)}

    definition: dict = {
        "description": _leading_comment(code, match.start()),
        "events": _extract_events(code),
    }
    if "name" in entries:
        definition["name"] = _string_value(entries["name"].value)
    if "props" in entries:
        definition["props"] = _parse_props(entries["props"].value)
    if "methods" in entries:
        definition["methods"] = _parse_methods(entries["methods"].value)
    return definition


def _read_setup_script(code: str) -> tuple[list[PropDoc], list[EventDoc]]:
    props: list[PropDoc] = []
    declared: list[EventDoc] = []

    match = _DEFINE_PROPS_RE.search(code)
    if match:
        close = _find_closing(code, match.end())
        if close is None:
            raise ComponentParseError("Unbalanced brackets in defineProps()")
        props = _parse_props(code[match.end() : close + 1])

    match = _DEFINE_EMITS_RE.search(code)
    if match:
        close = _find_closing(code, match.end())
        if close is None:
            raise ComponentParseError("Unbalanced brackets in defineEmits()")
        declared = [
            EventDoc(name=name, description=comment)
            for name, comment in _string_items(code[match.end() : close + 1])
        ]

    return props, _merge_events(declared, _extract_events(code))


def _parse_props(value: str) -> list[PropDoc]:
    value = value.strip()
    if value.startswith("["):
        return [
            PropDoc(name=name, description=comment) for name, comment in _string_items(value)
        ]
    if not value.startswith("{"):
        return []

    props: list[PropDoc] = []
    for entry in _parse_object(_object_body(value, 0)):
        prop_value = entry.value.strip()
        if prop_value.startswith("{"):
            options = {option.key: option for option in _parse_object(_object_body(prop_value, 0))}
            props.append(
                PropDoc(
                    name=entry.key,
                    type=_type_name(options["type"].value) if "type" in options else None,
                    description=entry.comment,
                    default=options["default"].value.strip() if "default" in options else None,
                    required="required" in options
                    and options["required"].value.strip() == "true",
                )
            )
        else:
            props.append(
                PropDoc(name=entry.key, type=_type_name(prop_value), description=entry.comment)
            )
    return props


def _parse_methods(value: str) -> list[MethodDoc]:
    value = value.strip()
    if not value.startswith("{"):
        return []

    methods: list[MethodDoc] = []
    for entry in _parse_object(_object_body(value, 0)):
        if not entry.is_method or entry.private or entry.key.startswith("_"):
            continue
        methods.append(
            MethodDoc(name=entry.key, params=_params(entry.value), description=entry.comment)
        )
    return methods


def _params(value: str) -> list[str]:
    value = value.strip()
    single = _SINGLE_PARAM_ARROW_RE.match(value)
    if single:
        return [single.group(1)]

    open_pos = value.find("(")
    if open_pos == -1:
        return []
    close = _find_closing(value, open_pos)
    if close is None:
        return []

    params: list[str] = []
    for item in _split_top_level(value[open_pos + 1 : close]):
        _, code, _ = _split_leading_comments(item)
        name = code.split("=", 1)[0].strip()
        if name:
            params.append(name)
    return params


def _type_name(value: str) -> str | None:
    value = value.strip()
    if value.startswith("["):
        names = [item.strip() for item in _split_top_level(_object_body(value, 0))]
        return " | ".join(name for name in names if name) or None
    return value or None


def _extract_events(code: str) -> list[EventDoc]:
    events: list[EventDoc] = []
    seen: set[str] = set()
    for match in _EMIT_RE.finditer(code):
        name = match.group("name")
        if name in seen:
            continue
        seen.add(name)
        events.append(EventDoc(name=name, description=_leading_comment(code, match.start())))
    return events


def _merge_events(first: list[EventDoc], second: list[EventDoc]) -> list[EventDoc]:
    merged = {event.name: event for event in first}
    for event in second:
        existing = merged.get(event.name)
        if existing is None:
            merged[event.name] = event
        elif existing.description is None and event.description:
            merged[event.name] = existing.model_copy(update={"description": event.description})
    return list(merged.values())


def _extract_slots(template: Tag) -> list[SlotDoc]:
    slots: list[SlotDoc] = []
    seen: set[str] = set()
    for slot in template.find_all("slot"):
        name = str(slot.get("name") or "default")
        if name in seen:
            continue
        seen.add(name)
        slots.append(
            SlotDoc(
                name=name,
                description=_slot_comment(slot),
                default_content=slot.get_text(" ", strip=True, types=_SLOT_TEXT_TYPES) or None,
            )
        )
    return slots


def _slot_comment(slot: Tag) -> str | None:
    for sibling in slot.previous_siblings:
        if isinstance(sibling, Comment):
            return _clean_comment(str(sibling))
        if isinstance(sibling, NavigableString) and not sibling.strip():
            continue
        break
    return None


# JavaScript scanning helpers


def _parse_object(body: str) -> list[_Entry]:
    """Split the inside of an object literal into its members."""
    entries: list[_Entry] = []
    for segment in _split_top_level(body):
        comment, code, raw_comment = _split_leading_comments(segment)
        code = code.strip()
        if not code or code.startswith("..."):
            continue

        match = _KEY_RE.match(code)
        if match:
            key = match.group("quoted") or match.group("ident")
            if match.group("sep") == ":":
                value = code[match.end() :].strip()
                is_method = value.startswith(("function", "async")) or bool(
                    _ARROW_RE.match(value)
                )
            else:
                value = code[match.end() - 1 :].strip()
                is_method = True
        elif _IDENT_RE.fullmatch(code):
            key, value, is_method = code, code, False
        else:
            continue

        entries.append(
            _Entry(
                key=key,
                value=value,
                comment=comment,
                private="@private" in (raw_comment or ""),
                is_method=is_method,
            )
        )
    return entries


def _object_body(code: str, open_pos: int) -> str:
    close = _find_closing(code, open_pos)
    if close is None:
        raise ComponentParseError("Unbalanced brackets in the component definition")
    return code[open_pos + 1 : close]


def _string_items(value: str) -> list[tuple[str, str | None]]:
    items: list[tuple[str, str | None]] = []
    for item in _split_top_level(_object_body(value.strip(), 0)):
        comment, code, _ = _split_leading_comments(item)
        text = _string_value(code)
        if text:
            items.append((text, comment))
    return items


def _string_value(code: str) -> str | None:
    match = _STRING_RE.match(code.strip())
    return match.group("value") if match else None


def _iter_code(text: str, start: int = 0) -> Iterator[tuple[int, str]]:
    """Yield ``(index, char)`` for characters outside strings and comments."""
    i = start
    length = len(text)
    while i < length:
        char = text[i]
        if char in _QUOTES:
            i = _skip_string(text, i)
            continue
        if text.startswith("//", i):
            end = text.find("\n", i)
            i = length if end == -1 else end
            continue
        if text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = length if end == -1 else end + 2
            continue
        yield i, char
        i += 1


def _skip_string(text: str, start: int) -> int:
    """Return the index just past the string literal opening at ``start``."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == quote:
            return i + 1
        if char == "\n" and quote != "`":
            return i
        i += 1
    return len(text)


def _find_closing(text: str, open_pos: int) -> int | None:
    """Find the bracket matching the one at ``open_pos``."""
    if open_pos >= len(text) or text[open_pos] not in _OPENERS:
        return None

    stack: list[str] = []
    for index, char in _iter_code(text, open_pos):
        if char in _OPENERS:
            stack.append(_OPENERS[char])
        elif char in _CLOSERS:
            if not stack or stack.pop() != char:
                return None
            if not stack:
                return index
    return None


def _split_top_level(body: str) -> list[str]:
    """Split on commas that are not nested in brackets, strings or comments."""
    parts: list[str] = []
    depth = 0
    start = 0
    for index, char in _iter_code(body):
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
        elif char == "," and depth == 0:
            parts.append(body[start:index])
            start = index + 1
    parts.append(body[start:])
    return parts


def _split_leading_comments(segment: str) -> tuple[str | None, str, str | None]:
    """Separate the comments in front of a code segment.

    Returns:
        Tuple of (cleaned comment, remaining code, raw comment).
    """
    raw_comment: str | None = None
    line_comments: list[str] = []
    rest = segment
    while True:
        stripped = rest.lstrip()
        if stripped.startswith("/*"):
            end = stripped.find("*/")
            if end == -1:
                return None, "", None
            raw_comment = stripped[: end + 2]
            line_comments = []
            rest = stripped[end + 2 :]
        elif stripped.startswith("//"):
            end = stripped.find("\n")
            line_comments.append(stripped if end == -1 else stripped[:end])
            raw_comment = "\n".join(line_comments)
            rest = "" if end == -1 else stripped[end + 1 :]
        else:
            comment = _clean_comment(raw_comment) if raw_comment else None
            return comment, stripped, raw_comment


def _leading_comment(text: str, pos: int) -> str | None:
    """Return the comment directly above the line containing ``pos``."""
    line_start = text.rfind("\n", 0, pos) + 1
    before = text[:line_start].rstrip()
    if before.endswith("*/"):
        start = before.rfind("/*")
        return _clean_comment(before[start:]) if start != -1 else None

    lines: list[str] = []
    for line in reversed(before.splitlines()):
        stripped = line.strip()
        if not stripped.startswith("//"):
            break
        lines.append(stripped)
    if lines:
        return _clean_comment("\n".join(reversed(lines)))
    return None


def _clean_comment(comment: str) -> str | None:
    """Strip comment markers and ``@tag`` lines, joining the text into one line."""
    words: list[str] = []
    for line in _LINE_BREAK_RE.split(comment):
        line = _COMMENT_CLOSE_RE.sub("", _COMMENT_OPEN_RE.sub("", line.strip())).strip()
        line = _COMMENT_PREFIX_RE.sub("", line).strip()
        if not line or line.startswith("@"):
            continue
        words.append(line)
    text = " ".join(words)
    return text or None
