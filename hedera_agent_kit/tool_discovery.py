"""Assemble the active tool set from the core plugins and any extra plugins."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Set

from hedera_agent_kit.config import Configuration, Context
from hedera_agent_kit.plugins import Plugin, PluginRegistry, core_tools
from hedera_agent_kit.tools import Tool

logger = logging.getLogger(__name__)


class ToolDiscovery:
    """
    Merge core tools with plugin tools.

    Core tools always win a method-name collision; the plugin tool is dropped
    with a warning. Between two plugins the first tool seen is kept.
    """

    def __init__(self, plugins: Optional[Iterable[Plugin]] = None) -> None:
        self.plugin_registry = PluginRegistry()
        for plugin in plugins or []:
            self.plugin_registry.register(plugin)

    def get_all_tools(self, context: Context, configuration: Optional[Configuration] = None) -> List[Tool]:
        tools = core_tools(context)
        seen: Set[str] = {tool.method for tool in tools}
        core_methods = set(seen)

        for tool in self.plugin_registry.get_tools(context):
            if tool.method in core_methods:
                logger.warning("Plugin tool %r conflicts with core tool; using core tool", tool.method)
                continue
            if tool.method in seen:
                logger.warning("Duplicate plugin tool %r ignored", tool.method)
                continue
            seen.add(tool.method)
            tools.append(tool)

        allowed = configuration.tools if configuration is not None else None
        if allowed:
            allowed_set = set(allowed)
            return [tool for tool in tools if tool.method in allowed_set]
        return tools

    @classmethod
    def create_from_configuration(cls, configuration: Configuration) -> "ToolDiscovery":
        return cls(configuration.plugins)
