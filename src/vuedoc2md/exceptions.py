"""Custom exceptions for vuedoc2md."""


class Vuedoc2mdError(Exception):
    """Base exception for vuedoc2md operations."""


class OptionsError(Vuedoc2mdError):
    """Invalid command line options."""


class MergeError(Vuedoc2mdError):
    """Error while merging a fragment into an existing document."""


class SectionTargetMissingError(MergeError):
    """A section was requested but there is no document to merge into."""


class SectionNotFoundError(MergeError):
    """No heading in the existing document matches the requested section."""


class RenderError(Vuedoc2mdError):
    """Component metadata could not be turned into a Markdown fragment."""


class ComponentParseError(RenderError):
    """Malformed component source."""


class ComponentFileError(Vuedoc2mdError):
    """Component file is missing or unreadable."""


class MarkdownParseError(Vuedoc2mdError):
    """Markdown tokens outside the supported node kinds."""


class SerializationError(Vuedoc2mdError):
    """Error while turning a document tree back into text."""
