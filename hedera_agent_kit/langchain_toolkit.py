"""LangChain adapter: one ``StructuredTool`` per discovered Hedera tool."""

from __future__ import annotations

import json
from typing import Any, List, Optional

from langchain_core.tools import StructuredTool

from hedera_agent_kit.api import HederaAgentKitAPI
from hedera_agent_kit.config import Configuration
from hedera_agent_kit.tool_discovery import ToolDiscovery
from hedera_agent_kit.tools import Tool, to_jsonable


def _render(result: Any) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(to_jsonable(result))


def create_langchain_tool(api: HederaAgentKitAPI, tool: Tool) -> StructuredTool:
    async def _run(**kwargs: Any) -> str:
        return _render(await api.run(tool.method, kwargs))

    return StructuredTool.from_function(
        func=None,
        coroutine=_run,
        name=tool.method,
        description=tool.description,
        args_schema=tool.parameters,
    )


class HederaLangchainToolkit:
    def __init__(self, client: Any, configuration: Optional[Configuration] = None) -> None:
        self.configuration = configuration or Configuration()
        discovery = ToolDiscovery.create_from_configuration(self.configuration)
        tools = discovery.get_all_tools(self.configuration.context, self.configuration)
        self.api = HederaAgentKitAPI(client, self.configuration.context, tools)
        self._tools = [create_langchain_tool(self.api, tool) for tool in tools]

    def get_tools(self) -> List[StructuredTool]:
        return list(self._tools)
