"""
Hedera agent kit.

Exposes Hedera account, token, consensus and mirror node query operations as
LLM-friendly tools, with adapters for LangChain and an MCP JSON-RPC server,
plus fluent builders for direct use. See DESIGN.md for details.
"""

from hedera_agent_kit.config import AgentMode, Configuration, Context, KitConfig
from hedera_agent_kit.plugins import Plugin, PluginRegistry
from hedera_agent_kit.tool_discovery import ToolDiscovery
from hedera_agent_kit.tools import Tool

__all__ = [
    "AgentMode",
    "Configuration",
    "Context",
    "KitConfig",
    "Plugin",
    "PluginRegistry",
    "Tool",
    "ToolDiscovery",
]
