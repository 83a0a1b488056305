"""
Lightweight MCP tool surface over an assembled Hedera tool set.

This keeps a name -> tool mapping built once per client/configuration pair.
It is stateless beyond that; the caller must handle authentication to the HTTP
server hosting this adapter.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from hedera_agent_kit.api import HederaAgentKitAPI
from hedera_agent_kit.config import Configuration
from hedera_agent_kit.errors import ToolNotFoundError
from hedera_agent_kit.tool_discovery import ToolDiscovery
from hedera_agent_kit.tools import Tool, ToolResult, to_jsonable

logger = logging.getLogger(__name__)


def tool_input_schema(tool: Tool) -> Dict[str, Any]:
    schema = tool.parameters.model_json_schema()
    schema.pop("title", None)
    return schema


class HederaMCPToolkit:
    """Expose the discovered tools with MCP ``tools/list`` and ``tools/call`` semantics."""

    def __init__(self, client: Any, configuration: Optional[Configuration] = None) -> None:
        self.configuration = configuration or Configuration()
        discovery = ToolDiscovery.create_from_configuration(self.configuration)
        tools = discovery.get_all_tools(self.configuration.context, self.configuration)
        self.api = HederaAgentKitAPI(client, self.configuration.context, tools)

    def list_tools(self) -> List[Dict[str, Any]]:
        """Return MCP tool descriptors."""
        return [
            {
                "name": tool.method,
                "title": tool.name,
                "description": tool.description,
                "inputSchema": tool_input_schema(tool),
            }
            for tool in self.api.tools
        ]

    def has_tool(self, name: str) -> bool:
        try:
            self.api.get_tool(name)
        except ToolNotFoundError:
            return False
        return True

    async def call_tool(self, name: str, params: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Dispatch to a tool by method name.

        Unknown tools come back as an error string like any other tool failure.
        """
        try:
            result = await self.api.run(name, params or {})
        except ToolNotFoundError as exc:
            logger.warning("Unknown tool requested: %s", name)
            return exc.message
        return to_jsonable(result)
