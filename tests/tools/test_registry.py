"""Tests for ToolRegistry."""

import pytest
from unittest.mock import AsyncMock

from pattern_library.mcp_types import MCPErrorCode
from pattern_library.tools import (
    GetPatternCodeTool,
    ListPatternsByCategoryTool,
    SearchPatternsTool,
    ToolRegistry,
)


@pytest.fixture
def registry(logger, catalog):
    registry = ToolRegistry(logger)
    registry.register(SearchPatternsTool(logger, catalog))
    registry.register(GetPatternCodeTool(logger, catalog))
    registry.register(ListPatternsByCategoryTool(logger, catalog))
    return registry


class TestToolRegistry:
    """Test ToolRegistry."""
    
    def test_register_and_list(self, registry):
        assert [t.name for t in registry.listTools()] == [
            "search_patterns",
            "get_pattern_code",
            "list_patterns_by_category",
        ]
        assert registry.hasTool("get_pattern_code")
        assert not registry.hasTool("delete_pattern")
    
    def test_duplicate_registration(self, registry, logger, catalog):
        with pytest.raises(ValueError):
            registry.register(SearchPatternsTool(logger, catalog))
    
    def test_tool_schemas(self, registry):
        schemas = {s.name: s for s in registry.getToolSchemas()}
        
        assert schemas["get_pattern_code"].inputSchema["required"] == ["category", "name"]
        assert schemas["list_patterns_by_category"].inputSchema["required"] == ["category"]
    
    @pytest.mark.asyncio
    async def test_execute_success(self, registry, mock_context):
        result = await registry.execute("search_patterns", {"query": "router"}, mock_context)
        
        assert result.success
        assert result.execution.status == "completed"
        assert result.execution.duration is not None
    
    @pytest.mark.asyncio
    async def test_missing_required_field_rejected_before_handler(self, registry, mock_context):
        handler = AsyncMock()
        registry.handlers["get_pattern_code"] = handler
        
        result = await registry.execute("get_pattern_code", {"category": "auth"}, mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.INVALID_INPUT
        assert "required" in result.error.message
        handler.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_wrong_type_rejected(self, registry, mock_context):
        result = await registry.execute("search_patterns", {"query": 42}, mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.INVALID_INPUT
    
    @pytest.mark.asyncio
    async def test_handler_exception_becomes_failure(self, registry, mock_context):
        registry.handlers["search_patterns"] = AsyncMock(side_effect=RuntimeError("boom"))
        
        result = await registry.execute("search_patterns", {"query": "x"}, mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.TOOL_EXECUTION_ERROR
        assert result.execution.status == "failed"
    
    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry, mock_context):
        with pytest.raises(ValueError):
            await registry.execute("nope", {}, mock_context)
