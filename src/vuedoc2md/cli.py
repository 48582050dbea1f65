"""Command line interface for vuedoc2md."""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence, TextIO

from vuedoc2md.config import VUEDOC2MD_LOG_LEVEL
from vuedoc2md.exceptions import MergeError, OptionsError, Vuedoc2mdError
from vuedoc2md.file_utils import read_optional_text_async, write_text_async
from vuedoc2md.generation import GenerationOptions, render_component, render_files
from vuedoc2md.merge import merge_markdown
from vuedoc2md.sections import SectionScope, resolve_scope
from vuedoc2md.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_PROG = "vuedoc2md"
_MISSING_VALUE_RE = re.compile(r"argument --(?P<option>[\w-]+): expected one argument")


@dataclass
class CliOptions:
    """Parsed command line options.

    Attributes:
        filenames: Component files to document. Empty means read stdin.
        level: Heading depth of component names, None for the configured default.
        output: Markdown file to write instead of stdout.
        section: Title of the section of ``output`` to replace.
        scope: Which part of the matched section is replaced, None for the
            configured default.
        ignore_name: If True, omit component name headings.
        ignore_description: If True, omit component descriptions.
    """

    filenames: list[str] = field(default_factory=list)
    level: int | None = None
    output: str | None = None
    section: str | None = None
    scope: SectionScope | None = None
    ignore_name: bool = False
    ignore_description: bool = False

    def generation_options(self) -> GenerationOptions:
        options = GenerationOptions(
            ignore_name=self.ignore_name,
            ignore_description=self.ignore_description,
        )
        if self.level is not None:
            options.level = self.level
        return options


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        missing = _MISSING_VALUE_RE.match(message)
        if missing:
            raise OptionsError(f"Missing {missing.group('option')} value")
        raise OptionsError(message)


def _level(value: str) -> int:
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid level value: {value}") from None
    if not 1 <= level <= 6:
        raise argparse.ArgumentTypeError(f"Invalid level value: {value}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=_PROG,
        description="Generate Markdown documentation for Vue components.",
    )
    parser.add_argument("filenames", nargs="*", help="Component files (.vue). Reads stdin when omitted.")
    parser.add_argument("--level", type=_level, help="Heading level of component names (1-6)")
    parser.add_argument("--output", help="Markdown file to write instead of stdout")
    parser.add_argument("--section", help="Replace only this section of the --output file")
    parser.add_argument(
        "--scope",
        type=SectionScope,
        choices=list(SectionScope),
        metavar="{node,body,section}",
        help="Part of the section replaced by --section: node, body or section",
    )
    parser.add_argument("--ignore-name", action="store_true", help="Omit component names")
    parser.add_argument("--ignore-description", action="store_true", help="Omit component descriptions")
    return parser


def parse_args(argv: Sequence[str], require_files: bool = False) -> CliOptions:
    """Parse command line arguments.

    Raises:
        OptionsError: If an option is missing its value, has an invalid
            value, or no file is given while ``require_files`` is set.
    """
    namespace = build_parser().parse_args(list(argv))
    if require_files and not namespace.filenames:
        raise OptionsError("Missing filename")
    return CliOptions(
        filenames=list(namespace.filenames),
        level=namespace.level,
        output=namespace.output,
        section=namespace.section,
        scope=namespace.scope,
        ignore_name=namespace.ignore_name,
        ignore_description=namespace.ignore_description,
    )


def validate_options(options: CliOptions) -> None:
    """Check option combinations that argparse cannot express.

    Raises:
        OptionsError: If ``--section`` is used without ``--output``, the
            section title is empty, ``--output`` is a directory, or the
            configured section scope is invalid.
    """
    try:
        resolve_scope(options.scope)
    except MergeError as exc:
        raise OptionsError(str(exc)) from None
    if options.section is not None:
        if not options.output:
            raise OptionsError("--output is required when using --section")
        if not options.section:
            raise OptionsError("--section value must not be empty")
    if options.output and Path(options.output).is_dir():
        raise OptionsError("--output value must be a file")


async def process_raw_content(source: str, options: CliOptions, *, sink: TextIO) -> None:
    """Render one component source and write the fragment to ``sink``."""
    sink.write(render_component(source, options=options.generation_options()))


async def process_without_output_option(
    options: CliOptions,
    *,
    sink: TextIO,
    stdin: TextIO | None = None,
) -> None:
    """Render the components and write the fragment to ``sink``."""
    if not options.filenames:
        await process_raw_content(_read_stdin(stdin), options, sink=sink)
        return
    sink.write(await render_files(options.filenames, options.generation_options()))


async def process_with_output_option(options: CliOptions, *, stdin: TextIO | None = None) -> None:
    """Render the components and write or merge them into ``options.output``.

    The output file is only written once rendering and merging succeeded.
    """
    if not options.output:
        raise OptionsError("--output is required")

    if options.filenames:
        fragment = await render_files(options.filenames, options.generation_options())
    else:
        fragment = render_component(_read_stdin(stdin), options=options.generation_options())

    output = Path(options.output)
    existing = await read_optional_text_async(output) if options.section is not None else None
    content = merge_markdown(existing, fragment, options.section, scope=options.scope)
    await write_text_async(output, content)
    logger.info(
        "Wrote documentation",
        extra={"output": str(output), "section": options.section, "files": len(options.filenames)},
    )


async def run(options: CliOptions, *, stdin: TextIO, sink: TextIO) -> None:
    """Dispatch to file output or sink output."""
    if options.output:
        await process_with_output_option(options, stdin=stdin)
    else:
        await process_without_output_option(options, sink=sink, stdin=stdin)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the CLI and return the process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        options = parse_args(sys.argv[1:] if argv is None else argv)
        validate_options(options)
    except OptionsError as exc:
        stderr.write(f"{_PROG}: {exc}\n")
        return 2

    configure_logging(VUEDOC2MD_LOG_LEVEL, stream=stderr)
    try:
        asyncio.run(run(options, stdin=stdin, sink=stdout))
    except (Vuedoc2mdError, OSError, UnicodeError) as exc:
        logger.debug("Generation failed", exc_info=True)
        stderr.write(f"{_PROG}: {exc}\n")
        return 1
    return 0


def _read_stdin(stdin: TextIO | None) -> str:
    return (stdin or sys.stdin).read()
