"""
Base Tool Classes
Abstract base classes for tool implementations.
"""

import json
from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from jsonschema import Draft7Validator

from pattern_library.catalog import (
    CatalogScanError,
    CategoryNotFoundError,
    InvalidPatternKeyError,
    PatternCatalog,
    PatternLibraryError,
    PatternNotFoundError,
)
from pattern_library.mcp_types import (
    MCPErrorCode,
    TextContent,
    ToolContext,
    ToolError,
    ToolHandlerResult,
    ToolInput,
    ToolResult,
    ToolValidationError,
    ToolValidationResult,
)


class BaseTool(ABC):
    """Abstract base class for all tool implementations."""
    
    def __init__(self, logger, catalog: PatternCatalog):
        self.logger = logger
        self.catalog = catalog
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name."""
        pass
    
    @property
    @abstractmethod
    def description(self) -> str:
        """Tool description."""
        pass
    
    @property
    @abstractmethod
    def inputSchema(self) -> Dict[str, Any]:
        """Tool input schema (JSON Schema)."""
        pass
    
    @abstractmethod
    async def execute(self, input: ToolInput, context: ToolContext) -> ToolHandlerResult:
        """Execute the tool with input and context."""
        pass
    
    def validateInput(self, input: Dict[str, Any]) -> ToolValidationResult:
        """Validate tool input against inputSchema."""
        validator = Draft7Validator(self.inputSchema)
        errors = [
            ToolValidationError(
                field=".".join(str(p) for p in e.path) or "input",
                message=e.message,
                code=e.validator.upper(),
            )
            for e in sorted(validator.iter_errors(dict(input)), key=lambda e: list(e.path))
        ]
        return ToolValidationResult(valid=not errors, errors=errors)
    
    def createSuccessResult(self, data: Any) -> ToolResult:
        """Create a successful tool result, JSON-encoding non-string data."""
        if isinstance(data, str):
            text = data
        else:
            text = json.dumps(data, indent=2, default=str, ensure_ascii=False)
        
        return ToolResult(
            content=[TextContent(type="text", text=text)],
            isError=False
        )
    
    def createErrorResult(self, error: ToolError) -> ToolResult:
        """Create an error tool result - follows MCP specification."""
        return ToolResult(
            content=[TextContent(type="text", text=error.message)],
            isError=True
        )
    
    def failure(self, code: MCPErrorCode, message: str, details: Optional[str] = None) -> ToolHandlerResult:
        """Build a failed handler result carrying both the error and its MCP rendering."""
        error = ToolError(code=code, message=message, details=details)
        return ToolHandlerResult(
            success=False,
            error=error,
            result=self.createErrorResult(error)
        )
    
    def invalidInput(self, validation: ToolValidationResult) -> ToolHandlerResult:
        message = "; ".join(e.message for e in validation.errors)
        return self.failure(MCPErrorCode.INVALID_INPUT, f"Invalid input: {message}")
    
    def handleCatalogError(self, error: PatternLibraryError) -> ToolHandlerResult:
        """Map catalog errors onto MCP error codes."""
        if isinstance(error, (PatternNotFoundError, CategoryNotFoundError)):
            return self.failure(
                MCPErrorCode.RESOURCE_NOT_FOUND,
                f"{error}\n\nAvailable categories: {self.availableCategories()}"
            )
        if isinstance(error, InvalidPatternKeyError):
            return self.failure(MCPErrorCode.INVALID_INPUT, str(error))
        
        self.logger.error(f"Tool execution error: {error}")
        return self.failure(MCPErrorCode.INTERNAL_ERROR, str(error))
    
    def availableCategories(self) -> str:
        try:
            categories = self.catalog.categories()
        except CatalogScanError:
            return "(unavailable)"
        return ", ".join(categories) if categories else "(none)"
    
    def logExecution(self, context: ToolContext, success: bool):
        """Log tool execution."""
        self.logger.debug(f"Tool executed: {self.name}", extra={
            'tool': self.name,
            'success': success,
            'requestId': context.requestId
        })
