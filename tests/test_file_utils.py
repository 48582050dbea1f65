"""Tests for file utilities module."""

from __future__ import annotations

from pathlib import Path

import pytest

from vuedoc2md.file_utils import read_optional_text_async, read_text_async, write_text_async


class TestReadTextAsync:
    """Tests for read_text_async function."""

    @pytest.mark.asyncio
    async def test_reads_text_content(self, tmp_path: Path) -> None:
        """Reads text content from file."""
        path = tmp_path / "README.md"
        path.write_text("# Title\n", encoding="utf-8")

        result = await read_text_async(path)

        assert result == "# Title\n"

    @pytest.mark.asyncio
    async def test_keeps_line_endings(self, tmp_path: Path) -> None:
        """CRLF line endings are returned untranslated."""
        path = tmp_path / "README.md"
        path.write_bytes(b"# Title\r\n\r\nBody\r\n")

        result = await read_text_async(path)

        assert result == "# Title\r\n\r\nBody\r\n"

    @pytest.mark.asyncio
    async def test_respects_encoding(self, tmp_path: Path) -> None:
        """Respects specified encoding."""
        path = tmp_path / "README.md"
        path.write_text("Café", encoding="latin-1")

        result = await read_text_async(path, encoding="latin-1")

        assert result == "Café"


class TestWriteTextAsync:
    """Tests for write_text_async function."""

    @pytest.mark.asyncio
    async def test_writes_text_content(self, tmp_path: Path) -> None:
        """Writes text content to file."""
        path = tmp_path / "README.md"

        await write_text_async(path, "# Title\n")

        assert path.read_text(encoding="utf-8") == "# Title\n"

    @pytest.mark.asyncio
    async def test_writes_line_endings_verbatim(self, tmp_path: Path) -> None:
        """Line endings are written exactly as given."""
        path = tmp_path / "README.md"

        await write_text_async(path, "a\r\nb\n")

        assert path.read_bytes() == b"a\r\nb\n"


class TestReadOptionalTextAsync:
    """Tests for read_optional_text_async function."""

    @pytest.mark.asyncio
    async def test_returns_none_when_missing(self, tmp_path: Path) -> None:
        """Returns None when the file does not exist."""
        assert await read_optional_text_async(tmp_path / "missing.md") is None

    @pytest.mark.asyncio
    async def test_returns_none_for_directory(self, tmp_path: Path) -> None:
        """Directories are treated as missing."""
        assert await read_optional_text_async(tmp_path) is None

    @pytest.mark.asyncio
    async def test_reads_existing_file(self, readme_file: Path, readme_text: str) -> None:
        """Reads the file when it exists."""
        assert await read_optional_text_async(readme_file) == readme_text
