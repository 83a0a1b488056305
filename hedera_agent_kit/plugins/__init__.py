"""Plugins group tool factories; the core plugins ship with the kit."""

from .base import Plugin, PluginRegistry, ToolFactory
from .core import (
    CORE_PLUGINS,
    core_account_plugin,
    core_consensus_plugin,
    core_hts_plugin,
    core_queries_plugin,
    core_scs_plugin,
    core_tools,
)

__all__ = [
    "Plugin",
    "PluginRegistry",
    "ToolFactory",
    "CORE_PLUGINS",
    "core_account_plugin",
    "core_consensus_plugin",
    "core_hts_plugin",
    "core_queries_plugin",
    "core_scs_plugin",
    "core_tools",
]
