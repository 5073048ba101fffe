"""
List Patterns By Category Tool

Lists pattern names in one category.
"""

from typing import Any

from pattern_library.catalog import PatternCatalog, PatternLibraryError
from pattern_library.mcp_types import ToolContext, ToolHandlerResult, ToolInput
from pattern_library.tools.base import BaseTool
from pattern_library.utils import Logger


class ListPatternsByCategoryTool(BaseTool):
    """List all patterns in a specific category (names only)."""
    
    def __init__(self, logger: Logger, catalog: PatternCatalog):
        super().__init__(logger, catalog)
    
    @property
    def name(self) -> str:
        return "list_patterns_by_category"
    
    @property
    def description(self) -> str:
        return "List all patterns in a specific category"
    
    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Category to list (e.g., auth, styling, routing, deployment, api, debugging)"
                }
            },
            "required": ["category"]
        }
    
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        category = input.get("category")
        try:
            names = self.catalog.list_names(category)
        except PatternLibraryError as e:
            return self.handleCatalogError(e)
        
        lines = "\n".join(f"- {name}" for name in names)
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(f"Patterns in {category}:\n{lines}")
        )
