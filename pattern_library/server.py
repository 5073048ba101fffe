#!/usr/bin/env python3
"""
Pattern Library MCP Server

Serves proven, working code patterns from successful projects over stdio.
Patterns are listed/read as resources and searched through tools.
"""

import asyncio
from typing import Optional

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

from pattern_library import __version__, __package_name__
from pattern_library.catalog import PatternCatalog, PatternLibraryError
from pattern_library.config import Config
from pattern_library.mcp_types import ToolContext
from pattern_library.resources import (
    MARKDOWN_MIME_TYPE,
    list_pattern_resources,
    read_pattern_resource,
)
from pattern_library.tools import (
    GetPatternCodeTool,
    ListPatternsByCategoryTool,
    SearchPatternsTool,
    ToolRegistry,
)
from pattern_library.utils import Logger


class PatternLibraryMCPServer:
    """MCP server exposing the pattern catalog."""
    
    def __init__(self, config: Config, logger: Optional[Logger] = None):
        self.config = config
        self.logger = logger or Logger(name=__package_name__, level=config.log_level)
        self.catalog = PatternCatalog(config, self.logger)
        
        self.server = Server(__package_name__)
        self.tool_registry = ToolRegistry(self.logger)
        self._register_tools()
        self._setup_handlers()
    
    def _register_tools(self):
        for tool in (
            SearchPatternsTool(self.logger, self.catalog),
            GetPatternCodeTool(self.logger, self.catalog),
            ListPatternsByCategoryTool(self.logger, self.catalog),
        ):
            self.tool_registry.register(tool)
        
        self.logger.info(f"Registered {len(self.tool_registry.listTools())} tools")
    
    def _setup_handlers(self):
        """Set up MCP protocol request handlers using decorators."""
        
        @self.server.list_resources()
        async def handle_list_resources() -> list[types.Resource]:
            return await self.list_resources()
        
        @self.server.read_resource()
        async def handle_read_resource(uri) -> list[ReadResourceContents]:
            text = await self.read_resource(str(uri))
            return [ReadResourceContents(content=text, mime_type=MARKDOWN_MIME_TYPE)]
        
        @self.server.list_tools()
        async def handle_list_tools() -> list[types.Tool]:
            return self.tool_registry.getToolSchemas()
        
        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            return await self.call_tool(name, arguments)
    
    async def list_resources(self) -> list[types.Resource]:
        """listAll: every pattern as a resource."""
        try:
            resources = list_pattern_resources(self.catalog)
        except PatternLibraryError as e:
            self.logger.error(f"Error listing patterns: {e}")
            raise
        self.logger.debug(f"Listing {len(resources)} pattern resources")
        return resources
    
    async def read_resource(self, uri: str) -> str:
        """readOne: raw markdown for pattern:///<category>/<name>."""
        try:
            return read_pattern_resource(self.catalog, uri)
        except PatternLibraryError as e:
            self.logger.warning(f"Failed to read {uri}: {e}")
            raise
    
    async def call_tool(self, name: str, arguments: Optional[dict]) -> list[types.TextContent]:
        """Execute a tool - MCP tools/call handler.
        
        Failures raise, which the MCP server reports as an isError tool result.
        """
        if not self.tool_registry.hasTool(name):
            self.logger.error(f"Unknown tool: {name}")
            raise ValueError(f"Unknown tool: {name}")
        
        loop = asyncio.get_running_loop()
        context = ToolContext(
            userId="system",
            requestId=f"req_{loop.time()}",
            timestamp=loop.time(),
            toolName=name
        )
        
        result = await self.tool_registry.execute(name, arguments or {}, context)
        if result.success and result.result:
            return [
                types.TextContent(type="text", text=item.text)
                for item in result.result.content
            ]
        
        error_msg = result.error.message if result.error else "Unknown error"
        self.logger.warning(f"Tool {name} failed: {error_msg}")
        raise RuntimeError(error_msg)
    
    async def start(self):
        """Start the MCP server on stdio."""
        self.logger.info(f"Serving patterns from {self.config.patterns_dir}")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=__package_name__,
                    server_version=__version__,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    ),
                ),
            )


async def run_stdio(config: Config):
    """Run in stdio mode (for editor / agent connection)."""
    server = PatternLibraryMCPServer(config)
    await server.start()
