"""Run tools by method name against one ledger client and context."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from hedera_agent_kit.config import Context
from hedera_agent_kit.errors import ToolNotFoundError
from hedera_agent_kit.tools import Tool, ToolResult

logger = logging.getLogger(__name__)


class HederaAgentKitAPI:
    def __init__(self, client: Any, context: Optional[Context] = None, tools: Optional[Iterable[Tool]] = None) -> None:
        self.client = client
        self.context = context or Context()
        self._tools: Dict[str, Tool] = {tool.method: tool for tool in tools or []}

    @property
    def tools(self) -> List[Tool]:
        return list(self._tools.values())

    def get_tool(self, method: str) -> Tool:
        tool = self._tools.get(method)
        if tool is None:
            raise ToolNotFoundError(method)
        return tool

    async def run(self, method: str, arg: Any = None) -> ToolResult:
        """
        Execute ``method`` with ``arg`` as raw parameters.

        Raises:
            ToolNotFoundError: if no tool with that method is registered.
        """
        tool = self.get_tool(method)
        logger.debug("Running tool %s", method)
        return await tool.execute(self.client, self.context, arg)
