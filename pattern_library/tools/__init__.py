"""
Tools Module

The MCP tools exposed by the pattern library:
- search_patterns: Keyword search over the catalog
- get_pattern_code: Full markdown of one pattern
- list_patterns_by_category: Pattern names in one category
"""

from .base import BaseTool
from .registry import ToolRegistry

from .search import SearchPatternsTool
from .get import GetPatternCodeTool
from .category import ListPatternsByCategoryTool

__all__ = [
    "BaseTool",
    "ToolRegistry",
    "SearchPatternsTool",
    "GetPatternCodeTool",
    "ListPatternsByCategoryTool",
]
