"""Render component documentation as Markdown."""

from __future__ import annotations

from vuedoc2md.schemas import ComponentDoc


def render_component_markdown(
    component: ComponentDoc,
    *,
    level: int = 1,
    ignore_name: bool = False,
    ignore_description: bool = False,
) -> str:
    """Render a component as a Markdown fragment.

    Parameters
    ----------
    component : ComponentDoc
        The extracted component documentation.
    level : int
        Heading depth of the component name. Group headings (Slots, Props,
        Events, Methods) sit one level deeper, or at ``level`` when the name
        is not rendered.
    ignore_name : bool
        If True, omit the component name heading.
    ignore_description : bool
        If True, omit the component description.
    """
    blocks: list[str] = []
    group_level = level
    if component.name and not ignore_name:
        blocks.append(_heading(level, component.name))
        group_level = level + 1

    if component.description and not ignore_description:
        blocks.append(component.description.strip())

    if component.slots:
        blocks.append(_heading(group_level, "Slots"))
        blocks.append(
            _table(
                ["Name", "Description", "Default Slot Content"],
                [
                    [_code(slot.name), slot.description, slot.default_content]
                    for slot in component.slots
                ],
            )
        )

    if component.props:
        blocks.append(_heading(group_level, "Props"))
        blocks.append(
            _table(
                ["Name", "Type", "Description", "Default"],
                [
                    [
                        _code(prop.name) + (" *required*" if prop.required else ""),
                        _code(prop.type) if prop.type else None,
                        prop.description,
                        _code(prop.default) if prop.default else None,
                    ]
                    for prop in component.props
                ],
            )
        )

    if component.events:
        blocks.append(_heading(group_level, "Events"))
        blocks.append(
            _table(
                ["Name", "Description"],
                [[_code(event.name), event.description] for event in component.events],
            )
        )

    if component.methods:
        blocks.append(_heading(group_level, "Methods"))
        blocks.append(
            _table(
                ["Name", "Parameters", "Description"],
                [
                    [
                        _code(f"{method.name}()"),
                        ", ".join(_code(param) for param in method.params) or None,
                        method.description,
                    ]
                    for method in component.methods
                ],
            )
        )

    return "\n\n".join(block for block in blocks if block) + "\n"


def _heading(level: int, text: str) -> str:
    return f"{'#' * min(max(level, 1), 6)} {text}"


def _code(text: str) -> str:
    fence = "``" if "`" in text else "`"
    padding = " " if "`" in text else ""
    return f"{fence}{padding}{text}{padding}{fence}"


def _table(header: list[str], rows: list[list[str | None]]) -> str:
    lines = [
        "| " + " | ".join(header) + " |",
        "| " + " | ".join("---" for _ in header) + " |",
    ]
    for row in rows:
        lines.append("| " + " | ".join(_cell(value) for value in row) + " |")
    return "\n".join(lines)


def _cell(value: str | None) -> str:
    if not value:
        return ""
    return value.strip().replace("|", "\\|").replace("\n", "<br>")
