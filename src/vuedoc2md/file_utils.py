"""File utilities for reading and writing documents off the event loop."""

from __future__ import annotations

import asyncio
from pathlib import Path

from vuedoc2md.config import VUEDOC2MD_ENCODING


async def read_text_async(path: Path, encoding: str = VUEDOC2MD_ENCODING) -> str:
    """Read text from a file asynchronously using a thread pool.

    Newlines are returned untranslated so documents keep their line endings.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents as a string.
    """
    return await asyncio.to_thread(_read_text, path, encoding)


async def write_text_async(path: Path, content: str, encoding: str = VUEDOC2MD_ENCODING) -> None:
    """Write text to a file asynchronously using a thread pool.

    Args:
        path: Path to the file to write.
        content: Text content to write, line endings untouched.
        encoding: Text encoding to use.
    """
    await asyncio.to_thread(_write_text, path, content, encoding)


async def read_optional_text_async(path: Path, encoding: str = VUEDOC2MD_ENCODING) -> str | None:
    """Read a file if it exists.

    Returns:
        The file contents, or None when ``path`` is not an existing file.
    """
    if not await asyncio.to_thread(path.is_file):
        return None
    return await read_text_async(path, encoding)


def _read_text(path: Path, encoding: str) -> str:
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def _write_text(path: Path, content: str, encoding: str) -> None:
    with path.open("w", encoding=encoding, newline="") as handle:
        handle.write(content)
