"""Plugin contract and the name-keyed plugin registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from hedera_agent_kit.config import Context
from hedera_agent_kit.tools.base import Tool

logger = logging.getLogger(__name__)

ToolFactory = Callable[[Context], List[Tool]]


@dataclass(frozen=True, slots=True)
class Plugin:
    """A named bundle of tool factories."""

    name: str
    tools: ToolFactory
    version: Optional[str] = None
    description: Optional[str] = None


class PluginRegistry:
    """
    Holds plugins by name.

    Registering a name twice replaces the earlier plugin and logs a warning.
    """

    def __init__(self) -> None:
        self._plugins: Dict[str, Plugin] = {}

    def register(self, plugin: Plugin) -> None:
        if plugin.name in self._plugins:
            logger.warning("Plugin %r is already registered; overwriting", plugin.name)
        self._plugins[plugin.name] = plugin

    def get_plugins(self) -> List[Plugin]:
        return list(self._plugins.values())

    def get_tools(self, context: Context) -> List[Tool]:
        """Collect every plugin's tools, skipping plugins whose factory raises."""
        tools: List[Tool] = []
        for plugin in self._plugins.values():
            try:
                tools.extend(plugin.tools(context))
            except Exception:
                logger.exception("Error loading tools from plugin %r", plugin.name)
        return tools

    def clear(self) -> None:
        self._plugins.clear()

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins
