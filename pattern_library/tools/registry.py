"""
Tool Registry
Manages tool registration, discovery, and execution.
"""

from datetime import datetime, timezone
from itertools import count
from typing import Dict, Any, List, Optional

from mcp.types import Tool as MCPTool

from pattern_library.mcp_types import (
    MCPErrorCode,
    ToolContext,
    ToolError,
    ToolExecution,
    ToolExecutionResult,
    ToolHandler,
)
from pattern_library.tools.base import BaseTool


class ToolRegistry:
    """Tool Registry Implementation."""
    
    def __init__(self, logger):
        self.logger = logger
        self.tools: Dict[str, BaseTool] = {}
        self.handlers: Dict[str, ToolHandler] = {}
        self._executionIds = count(1)
    
    def register(self, tool: BaseTool) -> None:
        """Register a tool and its execute() handler."""
        if tool.name in self.tools:
            raise ValueError(f"Tool {tool.name} is already registered")
        
        self.tools[tool.name] = tool
        self.handlers[tool.name] = tool.execute
        self.logger.info(f"Tool registered: {tool.name}")
    
    def get(self, toolName: str) -> Optional[BaseTool]:
        """Get a tool by name."""
        return self.tools.get(toolName)
    
    def listTools(self) -> List[BaseTool]:
        """List all registered tools."""
        return list(self.tools.values())
    
    def hasTool(self, toolName: str) -> bool:
        """Check if a tool is registered."""
        return toolName in self.tools
    
    async def execute(self, toolName: str, input: Dict[str, Any], context: ToolContext) -> ToolExecutionResult:
        """Validate input, then run the tool's handler."""
        tool = self.get(toolName)
        if not tool:
            raise ValueError(f"Tool {toolName} not found")
        
        execution = ToolExecution(
            id=f"exec_{next(self._executionIds)}",
            toolName=toolName,
            input=input,
            context=context,
            startTime=datetime.now(timezone.utc).isoformat(),
            status='running'
        )
        
        try:
            validation = tool.validateInput(input)
            if not validation.valid:
                result = tool.invalidInput(validation)
            else:
                result = await self.handlers[toolName](input, context)
            
            execution.status = 'completed' if result.success else 'failed'
            execution.result = result.result
            execution.error = result.error
            self._finish(execution)
            tool.logExecution(context, result.success)
            
            return ToolExecutionResult(
                execution=execution,
                success=result.success,
                result=result.result,
                error=result.error
            )
        
        except Exception as error:
            self.logger.error(f"Tool {toolName} raised: {error}")
            execution.status = 'failed'
            execution.error = ToolError(
                code=MCPErrorCode.TOOL_EXECUTION_ERROR,
                message=str(error)
            )
            self._finish(execution)
            
            return ToolExecutionResult(
                execution=execution,
                success=False,
                error=execution.error
            )
    
    def getToolSchemas(self) -> List[MCPTool]:
        """Get tool schemas for MCP protocol - returns proper MCP Tool objects."""
        return [
            MCPTool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.inputSchema
            )
            for tool in self.listTools()
        ]
    
    def _finish(self, execution: ToolExecution) -> None:
        execution.endTime = datetime.now(timezone.utc).isoformat()
        execution.duration = int((datetime.fromisoformat(execution.endTime) -
                                  datetime.fromisoformat(execution.startTime)).total_seconds() * 1000)
        self.logger.debug(f"{execution.id} {execution.toolName} {execution.status} in {execution.duration}ms")
