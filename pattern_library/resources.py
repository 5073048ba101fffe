"""
Pattern Resources

Exposes every pattern as an MCP resource addressed by
pattern:///<category>/<name>.
"""

import re
from urllib.parse import quote, unquote

from mcp import types

from pattern_library.catalog import InvalidPatternKeyError, PatternCatalog

URI_SCHEME = "pattern"
MARKDOWN_MIME_TYPE = "text/markdown"

_URI_RE = re.compile(r"^pattern:///([^/]+)/([^/]+)$")


def pattern_uri(category: str, name: str) -> str:
    """Build a pattern URI; category and name are percent-encoded."""
    return f"{URI_SCHEME}:///{quote(category, safe='')}/{quote(name, safe='')}"


def parse_pattern_uri(uri: str) -> tuple[str, str]:
    """Split a pattern URI into (category, name)."""
    match = _URI_RE.match(uri)
    if not match:
        raise InvalidPatternKeyError(f"Invalid pattern URI: {uri}")
    return unquote(match.group(1)), unquote(match.group(2))


def list_pattern_resources(catalog: PatternCatalog) -> list[types.Resource]:
    """One resource per catalog entry, titled by the pattern's heading."""
    return [
        types.Resource(
            uri=pattern_uri(entry.category, entry.name),
            name=entry.title,
            description=entry.description,
            mimeType=MARKDOWN_MIME_TYPE,
        )
        for entry in catalog.list_all()
    ]


def read_pattern_resource(catalog: PatternCatalog, uri: str) -> str:
    """Raw markdown of the pattern the URI points at."""
    category, name = parse_pattern_uri(uri)
    return catalog.get(category, name).content
