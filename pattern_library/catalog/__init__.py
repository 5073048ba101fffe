"""Pattern catalog: indexing, metadata extraction and queries."""

from .errors import (
    PatternLibraryError,
    PatternNotFoundError,
    CategoryNotFoundError,
    CatalogScanError,
    InvalidPatternKeyError,
)
from .indexer import CatalogIndexer, PatternEntry
from .metadata import extract_metadata
from .query import PatternCatalog, PatternDocument, search, by_category

__all__ = [
    "PatternLibraryError",
    "PatternNotFoundError",
    "CategoryNotFoundError",
    "CatalogScanError",
    "InvalidPatternKeyError",
    "CatalogIndexer",
    "PatternEntry",
    "extract_metadata",
    "PatternCatalog",
    "PatternDocument",
    "search",
    "by_category",
]
