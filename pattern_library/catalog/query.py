"""
Query Layer

Keyword and category filters over the catalog, plus key lookup of a single
pattern's raw markdown.
"""

from dataclasses import asdict, dataclass
from typing import Optional

from pattern_library.catalog.errors import (
    CatalogScanError,
    InvalidPatternKeyError,
    PatternNotFoundError,
)
from pattern_library.catalog.indexer import MARKDOWN_EXTENSION, CatalogIndexer, PatternEntry
from pattern_library.config import Config
from pattern_library.utils.logger import Logger


@dataclass(frozen=True)
class PatternDocument:
    """Raw content of one pattern file."""
    category: str
    name: str
    content: str
    
    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def search(entries: list[PatternEntry], query: str) -> list[PatternEntry]:
    """Case-insensitive substring match on title, description or category.
    
    An empty query matches everything. Order is preserved.
    """
    needle = query.lower()
    return [
        entry for entry in entries
        if needle in entry.title.lower()
        or needle in entry.description.lower()
        or needle in entry.category.lower()
    ]


def by_category(entries: list[PatternEntry], category: str) -> list[PatternEntry]:
    """Exact, case-sensitive category match."""
    return [entry for entry in entries if entry.category == category]


def validate_key(value: str, field: str) -> None:
    """Reject keys that are empty or that are not a single path segment."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidPatternKeyError(f"{field} must be a non-empty string")
    if value in (".", "..") or any(sep in value for sep in ("/", "\\", "\x00")):
        raise InvalidPatternKeyError(f"Invalid {field}: {value!r}")


class PatternCatalog:
    """
    Read-only view of the patterns directory shared by both adapters.
    
    Holds no state beyond its configuration: every call rescans or rereads
    the filesystem.
    """
    
    def __init__(self, config: Config, logger: Optional[Logger] = None):
        self.config = config
        self.root = config.patterns_dir
        self.logger = logger or Logger("pattern-library.catalog", level=config.log_level)
        self.indexer = CatalogIndexer(self.root, self.logger, strict=config.strict_scan)
    
    def list_all(self) -> list[PatternEntry]:
        return self.indexer.scan()
    
    def search(self, query: str) -> list[PatternEntry]:
        return search(self.list_all(), query)
    
    def by_category(self, category: str) -> list[PatternEntry]:
        return by_category(self.list_all(), category)
    
    def categories(self) -> list[str]:
        return self.indexer.categories()
    
    def list_names(self, category: str) -> list[str]:
        """Pattern names (no metadata) in one category."""
        validate_key(category, "category")
        return self.indexer.list_category_names(category)
    
    def get(self, category: str, name: str) -> PatternDocument:
        """
        Read <root>/<category>/<name>.md.
        
        Raises:
            InvalidPatternKeyError: category or name is not a plain path segment
            PatternNotFoundError: no such file
            CatalogScanError: the file exists but could not be read
        """
        validate_key(category, "category")
        validate_key(name, "name")
        
        path = self.root / category / f"{name}{MARKDOWN_EXTENSION}"
        try:
            content = path.read_bytes().decode("utf-8")
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as e:
            raise PatternNotFoundError(category, name) from e
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogScanError(f"Cannot read pattern {category}/{name}: {e}") from e
        
        return PatternDocument(category=category, name=name, content=content)
    
    def pattern_url(self, category: str, name: str) -> str:
        """Link to the pattern file in the published repository."""
        return (
            f"{self.config.repository_url}/blob/{self.config.repository_branch}"
            f"/patterns/{category}/{name}{MARKDOWN_EXTENSION}"
        )
