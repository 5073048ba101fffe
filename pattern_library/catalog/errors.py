"""
Catalog Errors

NotFound, scan failure and malformed input conditions raised by the catalog.
Adapters translate these into protocol errors (MCP tool errors, HTTP status codes).
"""


class PatternLibraryError(Exception):
    """Base class for catalog errors."""


class PatternNotFoundError(PatternLibraryError):
    """No markdown file exists for a (category, name) key."""
    
    def __init__(self, category: str, name: str):
        self.category = category
        self.name = name
        super().__init__(f"Pattern not found: {category}/{name}")


class CategoryNotFoundError(PatternLibraryError):
    """No category directory exists with the given name."""
    
    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Category not found: {category}")


class CatalogScanError(PatternLibraryError):
    """A directory or file could not be read while indexing."""


class InvalidPatternKeyError(PatternLibraryError):
    """A category or name is empty or would escape the patterns directory."""
