"""Tests for the command line interface."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from vuedoc2md.cli import (
    CliOptions,
    main,
    parse_args,
    process_raw_content,
    process_with_output_option,
    process_without_output_option,
    validate_options,
)
from vuedoc2md.exceptions import ComponentParseError, OptionsError, SectionNotFoundError
from vuedoc2md.generation import GenerationOptions, render_component
from vuedoc2md.sections import SectionScope


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self) -> None:
        """No arguments means stdin input and stdout output."""
        options = parse_args([])

        assert options.filenames == []
        assert options.level is None
        assert options.output is None
        assert options.section is None
        assert options.scope is None
        assert not options.ignore_name
        assert not options.ignore_description

    def test_all_options(self) -> None:
        """Every option is mapped onto CliOptions."""
        options = parse_args(
            [
                "--level",
                "2",
                "--output",
                "README.md",
                "--section",
                "API",
                "--scope",
                "section",
                "--ignore-name",
                "--ignore-description",
                "a.vue",
                "b.vue",
            ]
        )

        assert options.filenames == ["a.vue", "b.vue"]
        assert options.level == 2
        assert options.output == "README.md"
        assert options.section == "API"
        assert options.scope is SectionScope.SECTION
        assert options.ignore_name
        assert options.ignore_description

    @pytest.mark.parametrize("option", ["level", "output", "section", "scope"])
    def test_missing_option_value(self, option: str) -> None:
        """An option without its value names the missing value."""
        with pytest.raises(OptionsError, match=f"^Missing {option} value$"):
            parse_args([f"--{option}"])

    def test_missing_value_before_next_option(self) -> None:
        """A following option does not count as a value."""
        with pytest.raises(OptionsError, match="Missing output value"):
            parse_args(["--output", "--level", "2"])

    @pytest.mark.parametrize("value", ["hello.vue", "0", "7", "1.5"])
    def test_invalid_level(self, value: str) -> None:
        """Levels must be integers between 1 and 6."""
        with pytest.raises(OptionsError, match="Invalid level value"):
            parse_args(["--level", value])

    def test_invalid_scope(self) -> None:
        """Unknown scopes are rejected."""
        with pytest.raises(OptionsError):
            parse_args(["--scope", "all"])

    def test_missing_filename(self) -> None:
        """Files can be made mandatory."""
        with pytest.raises(OptionsError, match="Missing filename"):
            parse_args([], require_files=True)

    def test_generation_options(self) -> None:
        """CLI flags translate into generation options."""
        options = parse_args(["--level", "3", "--ignore-name"]).generation_options()

        assert options == GenerationOptions(level=3, ignore_name=True)


class TestValidateOptions:
    """Tests for validate_options function."""

    def test_section_requires_output(self) -> None:
        """--section cannot be used without --output."""
        with pytest.raises(OptionsError, match="--output is required when using --section"):
            validate_options(CliOptions(section="API"))

    def test_section_must_not_be_empty(self, tmp_path: Path) -> None:
        """An empty section title is rejected."""
        options = CliOptions(output=str(tmp_path / "README.md"), section="")

        with pytest.raises(OptionsError, match="must not be empty"):
            validate_options(options)

    def test_output_must_be_a_file(self, tmp_path: Path) -> None:
        """A directory is not a valid output."""
        with pytest.raises(OptionsError, match="must be a file"):
            validate_options(CliOptions(output=str(tmp_path)))

    def test_invalid_configured_scope(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A bad VUEDOC2MD_SECTION_SCOPE value is an options error."""
        monkeypatch.setattr("vuedoc2md.sections.VUEDOC2MD_SECTION_SCOPE", "everything")

        with pytest.raises(OptionsError, match="Invalid section scope"):
            validate_options(CliOptions())

    def test_explicit_scope_ignores_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A --scope value does not depend on the environment."""
        monkeypatch.setattr("vuedoc2md.sections.VUEDOC2MD_SECTION_SCOPE", "everything")

        validate_options(CliOptions(scope=SectionScope.BODY))

    def test_valid_combination(self, readme_file: Path) -> None:
        """A section with an output file passes."""
        validate_options(CliOptions(output=str(readme_file), section="API"))


class TestProcessWithoutOutput:
    """Tests for writing fragments to a sink."""

    @pytest.mark.asyncio
    async def test_raw_content(self, checkbox_source: str) -> None:
        """Raw component source is rendered to the sink."""
        sink = io.StringIO()

        await process_raw_content(checkbox_source, CliOptions(), sink=sink)

        assert sink.getvalue() == render_component(checkbox_source)

    @pytest.mark.asyncio
    async def test_reads_stdin_without_files(self, checkbox_source: str) -> None:
        """Standard input is used when no file is given."""
        sink = io.StringIO()

        await process_without_output_option(
            CliOptions(level=2), sink=sink, stdin=io.StringIO(checkbox_source)
        )

        assert sink.getvalue().startswith("## checkbox\n")

    @pytest.mark.asyncio
    async def test_renders_files(self, checkbox_file: Path, checkbox_source: str) -> None:
        """Component files are rendered to the sink."""
        sink = io.StringIO()

        await process_without_output_option(CliOptions(filenames=[str(checkbox_file)]), sink=sink)

        assert sink.getvalue() == render_component(checkbox_source)

    @pytest.mark.asyncio
    async def test_parse_error_propagates(self, broken_source: str) -> None:
        """Invalid components raise and write nothing."""
        sink = io.StringIO()

        with pytest.raises(ComponentParseError):
            await process_raw_content(broken_source, CliOptions(), sink=sink)

        assert sink.getvalue() == ""


class TestProcessWithOutput:
    """Tests for writing and merging into an output file."""

    @pytest.mark.asyncio
    async def test_overwrites_output(self, tmp_path: Path, checkbox_file: Path) -> None:
        """Without a section the output file is replaced."""
        output = tmp_path / "out.md"
        output.write_text("stale\n", encoding="utf-8")

        await process_with_output_option(
            CliOptions(filenames=[str(checkbox_file)], output=str(output))
        )

        assert output.read_text(encoding="utf-8").startswith("# checkbox\n")

    @pytest.mark.asyncio
    async def test_merges_section(
        self, readme_file: Path, checkbox_file: Path, readme_text: str
    ) -> None:
        """With a section only that part of the output changes."""
        options = CliOptions(
            filenames=[str(checkbox_file)],
            output=str(readme_file),
            section="API",
            scope=SectionScope.BODY,
            level=3,
        )

        await process_with_output_option(options)

        result = readme_file.read_text(encoding="utf-8")
        assert result.startswith(readme_text.split("Old API")[0])
        assert "## API\n\n### checkbox\n" in result
        assert "Old API documentation." not in result
        assert result.endswith("## License\n\nMIT\n")

    @pytest.mark.asyncio
    async def test_missing_section_leaves_file_untouched(
        self, readme_file: Path, checkbox_file: Path, readme_text: str
    ) -> None:
        """The output is not written when the section is missing."""
        options = CliOptions(
            filenames=[str(checkbox_file)], output=str(readme_file), section="Usage"
        )

        with pytest.raises(SectionNotFoundError):
            await process_with_output_option(options)

        assert readme_file.read_text(encoding="utf-8") == readme_text

    @pytest.mark.asyncio
    async def test_requires_output(self) -> None:
        """The output option is mandatory here."""
        with pytest.raises(OptionsError):
            await process_with_output_option(CliOptions())


class TestMain:
    """Tests for the main entry point."""

    def test_stdin_to_stdout(self, checkbox_source: str) -> None:
        """Reads a component from stdin and prints its documentation."""
        stdout = io.StringIO()

        code = main(
            [], stdin=io.StringIO(checkbox_source), stdout=stdout, stderr=io.StringIO()
        )

        assert code == 0
        assert stdout.getvalue() == render_component(checkbox_source)

    def test_option_error_exit_code(self) -> None:
        """Invalid options exit with status 2."""
        stderr = io.StringIO()

        code = main(["--section", "API"], stdout=io.StringIO(), stderr=stderr)

        assert code == 2
        assert stderr.getvalue() == "vuedoc2md: --output is required when using --section\n"

    def test_missing_file_exit_code(self, tmp_path: Path) -> None:
        """Generation failures exit with status 1."""
        stderr = io.StringIO()
        stdout = io.StringIO()

        code = main([str(tmp_path / "nope.vue")], stdout=stdout, stderr=stderr)

        assert code == 1
        assert "Component file not found" in stderr.getvalue()
        assert stdout.getvalue() == ""

    def test_section_merge(
        self, readme_file: Path, checkbox_file: Path, readme_text: str
    ) -> None:
        """The README section is updated in place."""
        code = main(
            [
                str(checkbox_file),
                "--output",
                str(readme_file),
                "--section",
                "License",
                "--scope",
                "section",
            ],
            stdout=io.StringIO(),
            stderr=io.StringIO(),
        )

        result = readme_file.read_text(encoding="utf-8")
        assert code == 0
        assert "## License" not in result
        assert result.startswith(readme_text.split("## License")[0] + "# checkbox\n")

    def test_section_not_found(self, readme_file: Path, checkbox_file: Path) -> None:
        """Unknown sections are reported."""
        stderr = io.StringIO()

        code = main(
            [str(checkbox_file), "--output", str(readme_file), "--section", "Usage"],
            stdout=io.StringIO(),
            stderr=stderr,
        )

        assert code == 1
        assert "Section 'Usage' not found" in stderr.getvalue()

    def test_section_without_existing_output(self, tmp_path: Path, checkbox_file: Path) -> None:
        """Updating a section of a missing file fails."""
        output = tmp_path / "README.md"

        code = main(
            [str(checkbox_file), "--output", str(output), "--section", "API"],
            stdout=io.StringIO(),
            stderr=io.StringIO(),
        )

        assert code == 1
        assert not output.exists()

    def test_invalid_configured_scope_exit_code(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A bad configured scope exits with status 2."""
        monkeypatch.setattr("vuedoc2md.sections.VUEDOC2MD_SECTION_SCOPE", "everything")
        stderr = io.StringIO()

        code = main([], stdin=io.StringIO(""), stdout=io.StringIO(), stderr=stderr)

        assert code == 2
        assert "Invalid section scope: 'everything'" in stderr.getvalue()

    def test_unwritable_output_exit_code(self, tmp_path: Path, checkbox_file: Path) -> None:
        """Write failures are reported without a traceback."""
        output = tmp_path / "missing" / "README.md"
        stderr = io.StringIO()

        code = main(
            [str(checkbox_file), "--output", str(output)], stdout=io.StringIO(), stderr=stderr
        )

        assert code == 1
        assert stderr.getvalue().startswith("vuedoc2md: ")
        assert "Traceback" not in stderr.getvalue()
        assert not output.exists()

    def test_undecodable_component_exit_code(self, tmp_path: Path) -> None:
        """Components that are not valid text are reported."""
        component = tmp_path / "binary.vue"
        component.write_bytes(b"<template>\xff\xfe</template>")
        stderr = io.StringIO()

        code = main([str(component)], stdout=io.StringIO(), stderr=stderr)

        assert code == 1
        assert "utf-8" in stderr.getvalue()
