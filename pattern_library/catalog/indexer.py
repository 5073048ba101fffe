"""
Catalog Indexer

Builds the pattern catalog from disk. Layout:

    <root>/
        <category>/
            <name>.md

Every call rescans the filesystem; nothing is cached between requests.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from pattern_library.catalog.errors import CatalogScanError, CategoryNotFoundError
from pattern_library.catalog.metadata import extract_metadata
from pattern_library.utils.logger import Logger

MARKDOWN_EXTENSION = ".md"


@dataclass(frozen=True)
class PatternEntry:
    """Metadata for one pattern file."""
    category: str
    name: str
    title: str
    description: str
    
    def to_dict(self) -> dict[str, str]:
        return asdict(self)


def is_pattern_file(path: Path) -> bool:
    return path.name.endswith(MARKDOWN_EXTENSION) and path.is_file()


def pattern_name(path: Path) -> str:
    """File name without the markdown extension."""
    return path.name[: -len(MARKDOWN_EXTENSION)]


class CatalogIndexer:
    """
    Scans a patterns root directory into PatternEntry records.
    
    Entries come back in filesystem enumeration order. A file that cannot be
    read is skipped with a warning, unless strict is set, in which case the
    whole scan fails.
    """
    
    def __init__(self, root: Path, logger: Optional[Logger] = None, strict: bool = False):
        self.root = Path(root)
        self.logger = logger or Logger("pattern-library.catalog")
        self.strict = strict
    
    def scan(self) -> list[PatternEntry]:
        """Read every category directory and return one entry per markdown file."""
        entries = []
        for category_path in self._list_dir(self.root):
            if not category_path.is_dir():
                continue
            for file_path in self._list_dir(category_path):
                if not is_pattern_file(file_path):
                    continue
                entry = self._read_entry(category_path.name, file_path)
                if entry is not None:
                    entries.append(entry)
        
        self.logger.debug(f"Indexed {len(entries)} patterns from {self.root}")
        return entries
    
    def categories(self) -> list[str]:
        """Names of the category directories under the root."""
        return [p.name for p in self._list_dir(self.root) if p.is_dir()]
    
    def list_category_names(self, category: str) -> list[str]:
        """Pattern names in one category, without reading file contents."""
        category_path = self.root / category
        if not category_path.is_dir():
            raise CategoryNotFoundError(category)
        return [pattern_name(p) for p in self._list_dir(category_path) if is_pattern_file(p)]
    
    def _list_dir(self, path: Path) -> list[Path]:
        try:
            return list(path.iterdir())
        except OSError as e:
            raise CatalogScanError(f"Cannot read directory {path}: {e}") from e
    
    def _read_entry(self, category: str, file_path: Path) -> Optional[PatternEntry]:
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            if self.strict:
                raise CatalogScanError(f"Cannot read pattern file {file_path}: {e}") from e
            self.logger.warning(f"Skipping unreadable pattern file {file_path}: {e}")
            return None
        
        title, description = extract_metadata(content, fallback_title=file_path.name)
        return PatternEntry(
            category=category,
            name=pattern_name(file_path),
            title=title,
            description=description,
        )
