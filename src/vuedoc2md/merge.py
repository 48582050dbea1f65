"""Merge a generated Markdown fragment into an existing document."""

from __future__ import annotations

from vuedoc2md.exceptions import SectionNotFoundError, SectionTargetMissingError
from vuedoc2md.markdown_parser import parse_markdown
from vuedoc2md.sections import SectionScope, find_section, replace_section, resolve_scope
from vuedoc2md.serializer import serialize


def merge_markdown(
    existing_text: str | None,
    fragment_text: str,
    section_title: str | None = None,
    *,
    scope: SectionScope | str | None = None,
) -> str:
    """Merge ``fragment_text`` into the section ``section_title`` of a document.

    Args:
        existing_text: Current document text, or None when there is none.
        fragment_text: Freshly rendered Markdown.
        section_title: Title of the section to replace. When None the
            fragment is the whole output.
        scope: Which blocks of the matched section are replaced. None uses
            the configured default, the heading node alone unless
            ``VUEDOC2MD_SECTION_SCOPE`` says otherwise.

    Returns:
        The merged document text.

    Raises:
        SectionTargetMissingError: If a section is requested without an
            existing document.
        SectionNotFoundError: If no header matches ``section_title``.
        MergeError: If ``scope`` names no section scope.
    """
    if section_title is None:
        return fragment_text

    if not existing_text:
        raise SectionTargetMissingError(
            f"Cannot update section {section_title!r}: there is no existing document"
        )

    section_scope = resolve_scope(scope)
    tree = parse_markdown(existing_text)
    target = find_section(tree, section_title)
    if target is None:
        raise SectionNotFoundError(f"Section {section_title!r} not found in the document")

    fragment = parse_markdown(fragment_text)
    merged = replace_section(tree, target, fragment, scope=section_scope)
    return serialize(merged)
