"""Tests for SearchPatternsTool."""

import json

import pytest
from unittest.mock import Mock

from pattern_library.catalog import CatalogScanError
from pattern_library.mcp_types import MCPErrorCode, ToolInput
from pattern_library.tools.search import SearchPatternsTool


@pytest.mark.asyncio
class TestSearchPatternsTool:
    """Test SearchPatternsTool."""
    
    async def test_returns_matches_as_json(self, logger, catalog, mock_context):
        tool = SearchPatternsTool(logger, catalog)
        
        result = await tool.execute(ToolInput(query="router"), mock_context)
        
        assert result.success
        matches = json.loads(result.result.content[0].text)
        assert matches == [{
            "category": "routing",
            "name": "react-router-navigation",
            "title": "React Router Navigation Pattern",
            "description": "Nested routes with a shared layout and protected pages.",
        }]
    
    async def test_case_insensitive(self, logger, catalog, mock_context):
        tool = SearchPatternsTool(logger, catalog)
        
        upper = await tool.execute(ToolInput(query="AZURE"), mock_context)
        lower = await tool.execute(ToolInput(query="azure"), mock_context)
        
        assert upper.result.content[0].text == lower.result.content[0].text
        assert len(json.loads(lower.result.content[0].text)) == 1
    
    async def test_empty_query_lists_everything(self, logger, catalog, mock_context):
        tool = SearchPatternsTool(logger, catalog)
        
        result = await tool.execute(ToolInput(query=""), mock_context)
        
        assert result.success
        assert len(json.loads(result.result.content[0].text)) == 2
    
    async def test_no_matches(self, logger, catalog, mock_context):
        tool = SearchPatternsTool(logger, catalog)
        
        result = await tool.execute(ToolInput(query="kubernetes"), mock_context)
        
        assert result.success
        assert json.loads(result.result.content[0].text) == []
    
    async def test_scan_failure_is_internal_error(self, logger, mock_context):
        mock_catalog = Mock()
        mock_catalog.search.side_effect = CatalogScanError("Cannot read directory /nope")
        tool = SearchPatternsTool(logger, mock_catalog)
        
        result = await tool.execute(ToolInput(query="x"), mock_context)
        
        assert not result.success
        assert result.error.code == MCPErrorCode.INTERNAL_ERROR
        assert result.result.isError
        logger.error.assert_called_once()


class TestSearchPatternsSchema:
    """Test SearchPatternsTool input validation."""
    
    def test_schema_requires_query(self, logger, catalog):
        tool = SearchPatternsTool(logger, catalog)
        
        assert tool.inputSchema["required"] == ["query"]
        assert not tool.validateInput({}).valid
        assert tool.validateInput({"query": ""}).valid
