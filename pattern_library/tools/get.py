"""
Get Pattern Code Tool

Returns the full markdown of one pattern.
"""

from typing import Any

from pattern_library.catalog import PatternCatalog, PatternLibraryError
from pattern_library.mcp_types import ToolContext, ToolHandlerResult, ToolInput
from pattern_library.tools.base import BaseTool
from pattern_library.utils import Logger


class GetPatternCodeTool(BaseTool):
    """Get the complete code for a specific pattern."""
    
    def __init__(self, logger: Logger, catalog: PatternCatalog):
        super().__init__(logger, catalog)
    
    @property
    def name(self) -> str:
        return "get_pattern_code"
    
    @property
    def description(self) -> str:
        return "Get the complete code for a specific pattern"
    
    @property
    def inputSchema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": "Pattern category (e.g., auth, styling, routing, deployment, api, debugging)"
                },
                "name": {
                    "type": "string",
                    "description": "Pattern name (e.g., azure-ad-msal, carbon-dark-theme)"
                }
            },
            "required": ["category", "name"]
        }
    
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        category = input.get("category")
        name = input.get("name")
        try:
            document = self.catalog.get(category, name)
        except PatternLibraryError as e:
            return self.handleCatalogError(e)
        
        return ToolHandlerResult(
            success=True,
            result=self.createSuccessResult(document.content)
        )
