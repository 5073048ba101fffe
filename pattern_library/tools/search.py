"""
Search Patterns Tool

Keyword search over pattern titles, descriptions and categories.
"""

from typing import Any

from pattern_library.catalog import PatternCatalog, PatternLibraryError
from pattern_library.mcp_types import ToolContext, ToolHandlerResult, ToolInput
from pattern_library.tools.base import BaseTool
from pattern_library.utils import Logger


class SearchPatternsTool(BaseTool):
    """Search for patterns by keyword, technology, or problem domain."""
    
    def __init__(self, logger: Logger, catalog: PatternCatalog):
        super().__init__(logger, catalog)
    
    @property
    def name(self) -> str:
        return "search_patterns"
    
    @property
    def description(self) -> str:
        return "Search for patterns by keyword, technology, or problem domain"
    
    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": 'Search query (e.g., "authentication", "Azure", "deployment")'
                }
            },
            "required": ["query"]
        }
    
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Return matching entries as a JSON array."""
        query = input.get("query")
        try:
            matches = self.catalog.search(query)
        except PatternLibraryError as e:
            return self.handleCatalogError(e)
        
        self.logger.debug(f"search_patterns({query!r}) matched {len(matches)} patterns")
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult([m.to_dict() for m in matches])
        )
