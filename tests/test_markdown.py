"""Tests for component Markdown rendering."""

from __future__ import annotations

from vuedoc2md.component_parser import parse_component
from vuedoc2md.markdown import render_component_markdown
from vuedoc2md.markdown_parser import parse_markdown
from vuedoc2md.schemas import ComponentDoc, EventDoc, MethodDoc, NodeType, PropDoc, SlotDoc

CHECKBOX_MARKDOWN = """# checkbox

A simple checkbox component

## Slots

| Name | Description | Default Slot Content |
| --- | --- | --- |
| `label` | Use this slot to set the checkbox label | Label |
| `default` |  |  |

## Props

| Name | Type | Description | Default |
| --- | --- | --- | --- |
| `checked` | `Boolean` | The checkbox model | `false` |
| `value` | `String \\| Number` | Initial checkbox value |  |
| `disabled` *required* | `Boolean` | Whether the checkbox is disabled |  |

## Events

| Name | Description |
| --- | --- |
| `change` | Emitted when the checkbox state changes |
| `input` |  |

## Methods

| Name | Parameters | Description |
| --- | --- | --- |
| `check()` |  | Check the checkbox |
| `uncheck()` | `silent`, `reason` |  |
"""


class TestRenderComponentMarkdown:
    """Tests for render_component_markdown."""

    def test_full_component(self, checkbox_source: str) -> None:
        """A documented component renders every group in order."""
        component = parse_component(checkbox_source)

        assert render_component_markdown(component) == CHECKBOX_MARKDOWN

    def test_name_only(self) -> None:
        """A bare component renders its name heading."""
        assert render_component_markdown(ComponentDoc(name="x")) == "# x\n"

    def test_level(self) -> None:
        """Group headings sit one level below the component name."""
        component = ComponentDoc(name="x", events=[EventDoc(name="close")])

        result = render_component_markdown(component, level=3)

        assert result.startswith("### x\n\n#### Events\n")

    def test_ignore_name(self) -> None:
        """Without the name, groups use the requested level."""
        component = ComponentDoc(name="x", description="About x", slots=[SlotDoc()])

        result = render_component_markdown(component, level=2, ignore_name=True)

        assert result.startswith("About x\n\n## Slots\n")
        assert "# x" not in result

    def test_ignore_description(self) -> None:
        """The description can be left out."""
        component = ComponentDoc(name="x", description="About x")

        assert render_component_markdown(component, ignore_description=True) == "# x\n"

    def test_level_is_clamped(self) -> None:
        """Group headings never go deeper than level six."""
        component = ComponentDoc(name="x", props=[PropDoc(name="p")])

        result = render_component_markdown(component, level=6)

        assert "###### x\n\n###### Props\n" in result

    def test_cells_are_escaped(self) -> None:
        """Pipes and line breaks inside cells keep the table intact."""
        component = ComponentDoc(
            methods=[MethodDoc(name="run", description="first | second\nthird")]
        )

        result = render_component_markdown(component)

        assert "| `run()` |  | first \\| second<br>third |" in result

    def test_output_parses_as_tables(self, checkbox_source: str) -> None:
        """Rendered fragments are valid Markdown with one table per group."""
        tree = parse_markdown(render_component_markdown(parse_component(checkbox_source)))

        tables = [node for node in tree.children if node.type is NodeType.TABLE]
        assert len(tables) == 4
        assert len(tables[1].children) == 4
