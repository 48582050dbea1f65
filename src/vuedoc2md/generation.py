"""Generation pipeline for component source -> Markdown."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from vuedoc2md.component_parser import parse_component
from vuedoc2md.config import VUEDOC2MD_ENCODING, VUEDOC2MD_HEADING_LEVEL
from vuedoc2md.exceptions import ComponentFileError
from vuedoc2md.file_utils import read_text_async
from vuedoc2md.markdown import render_component_markdown
from vuedoc2md.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class GenerationOptions:
    """Options for component documentation rendering.

    Attributes:
        level: Heading depth of the component name.
        ignore_name: If True, omit the component name heading.
        ignore_description: If True, omit the component description.
    """

    level: int = VUEDOC2MD_HEADING_LEVEL
    ignore_name: bool = False
    ignore_description: bool = False


def render_component(
    source: str,
    *,
    filename: str | None = None,
    options: GenerationOptions | None = None,
) -> str:
    """Parse a single file component and render its documentation.

    Args:
        source: Raw ``.vue`` source.
        filename: Optional file name; its stem names components that do not
            declare a ``name``.
        options: Rendering options. Uses defaults if None.

    Returns:
        The Markdown fragment.

    Raises:
        RenderError: If the component source cannot be parsed.
    """
    opts = options or GenerationOptions()
    default_name = Path(filename).stem if filename else None
    component = parse_component(source, default_name=default_name)
    return render_component_markdown(
        component,
        level=opts.level,
        ignore_name=opts.ignore_name,
        ignore_description=opts.ignore_description,
    )


async def render_files(
    filenames: Iterable[str],
    options: GenerationOptions | None = None,
    *,
    encoding: str = VUEDOC2MD_ENCODING,
) -> str:
    """Read and render several component files into one fragment.

    Fragments are joined in the given order, separated by a blank line.

    Raises:
        ComponentFileError: If a file does not exist.
        RenderError: If a component cannot be parsed.
    """
    opts = options or GenerationOptions()
    fragments: list[str] = []
    for filename in filenames:
        path = Path(filename)
        if not path.is_file():
            raise ComponentFileError(f"Component file not found: {filename}")
        source = await read_text_async(path, encoding)
        logger.debug("Rendering component %s", path)
        fragments.append(render_component(source, filename=filename, options=opts))
    return "\n".join(fragments)
