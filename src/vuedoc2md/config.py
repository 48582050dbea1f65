"""Local configuration for vuedoc2md."""

from __future__ import annotations

import os


DEFAULT_HEADING_LEVEL = 1
DEFAULT_SECTION_SCOPE = "node"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"

# Heading depth of the component name in generated fragments.
VUEDOC2MD_HEADING_LEVEL = int(os.getenv("VUEDOC2MD_HEADING_LEVEL", str(DEFAULT_HEADING_LEVEL)))
# Which part of a matched section --section replaces: node, body or section.
VUEDOC2MD_SECTION_SCOPE = os.getenv("VUEDOC2MD_SECTION_SCOPE", DEFAULT_SECTION_SCOPE)
VUEDOC2MD_ENCODING = os.getenv("VUEDOC2MD_ENCODING", DEFAULT_ENCODING)
VUEDOC2MD_LOG_LEVEL = os.getenv("VUEDOC2MD_LOG_LEVEL", DEFAULT_LOG_LEVEL)
