"""Tests for ListPatternsByCategoryTool."""

import pytest

from pattern_library.mcp_types import MCPErrorCode, ToolInput
from pattern_library.tools.category import ListPatternsByCategoryTool


@pytest.mark.asyncio
class TestListPatternsByCategoryTool:
    """Test ListPatternsByCategoryTool."""
    
    async def test_lists_names_only(self, logger, catalog, mock_context):
        tool = ListPatternsByCategoryTool(logger, catalog)
        
        result = await tool.execute(ToolInput(category="routing"), mock_context)
        
        assert result.success
        assert result.result.content[0].text == "Patterns in routing:\n- react-router-navigation"
    
    async def test_multiple_names(self, logger, catalog, mock_context, make_pattern):
        make_pattern("auth", "backend-proxy", "# Proxy\n")
        tool = ListPatternsByCategoryTool(logger, catalog)
        
        result = await tool.execute(ToolInput(category="auth"), mock_context)
        
        lines = result.result.content[0].text.splitlines()
        assert lines[0] == "Patterns in auth:"
        assert sorted(lines[1:]) == ["- azure-ad-msal", "- backend-proxy"]
    
    async def test_unknown_category(self, logger, catalog, mock_context):
        tool = ListPatternsByCategoryTool(logger, catalog)
        
        result = await tool.execute(ToolInput(category="deployment"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.RESOURCE_NOT_FOUND
        assert result.result.content[0].text.startswith("Category not found: deployment")
