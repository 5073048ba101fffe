"""
MCP Types Module
Types and dataclasses for the MCP server implementation.
"""

from .tools import (
    # Enums
    MCPErrorCode,
    
    # Core types
    TextContent,
    ToolInput,
    ToolContext,
    ToolResult,
    ToolError,
    ToolHandlerResult,
    
    # Validation
    ToolValidationError,
    ToolValidationResult,
    
    # Execution
    ToolExecution,
    ToolExecutionResult,
    
    # Type aliases
    ToolHandler,
)

__all__ = [
    # Enums
    "MCPErrorCode",
    
    # Core types
    "TextContent",
    "ToolInput",
    "ToolContext",
    "ToolResult",
    "ToolError",
    "ToolHandlerResult",
    
    # Validation
    "ToolValidationError",
    "ToolValidationResult",
    
    # Execution
    "ToolExecution",
    "ToolExecutionResult",
    
    # Type aliases
    "ToolHandler",
]
