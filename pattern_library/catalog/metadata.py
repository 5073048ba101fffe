"""
Pattern Metadata

Best-effort title/description extraction from a pattern's markdown text.
"""

import re

TITLE_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
DESCRIPTION_RE = re.compile(r"^>\s+(.+)$", re.MULTILINE)


def extract_metadata(text: str, fallback_title: str) -> tuple[str, str]:
    """
    Extract (title, description) from markdown text.
    
    Args:
        text: Full markdown content
        fallback_title: Title to use when no level-1 heading is found
    
    Returns:
        title: first "# Heading" line, else fallback_title
        description: first "> quote" line, else ""
    """
    title_match = TITLE_RE.search(text)
    description_match = DESCRIPTION_RE.search(text)
    
    title = title_match.group(1) if title_match else fallback_title
    description = description_match.group(1) if description_match else ""
    return title, description
