import logging

import pytest

from conftest import FakeClient
from hedera_agent_kit.api import HederaAgentKitAPI
from hedera_agent_kit.config import Configuration, Context
from hedera_agent_kit.errors import ToolNotFoundError
from hedera_agent_kit.plugins import CORE_PLUGINS, Plugin, PluginRegistry, core_tools
from hedera_agent_kit.schemas.consensus import CreateTopicParameters
from hedera_agent_kit.tool_discovery import ToolDiscovery
from hedera_agent_kit.tools import Tool


async def _echo(client, context, raw_params):
    return {"echo": raw_params}


def make_tool(method, name=None):
    return Tool(
        method=method,
        name=name or method,
        description=f"{method} tool",
        parameters=CreateTopicParameters,
        execute=_echo,
    )


def make_plugin(name, *tools):
    return Plugin(name=name, tools=lambda context: list(tools))


def test_core_tool_methods():
    methods = [tool.method for tool in core_tools(Context())]
    assert len(methods) == len(set(methods))
    assert set(methods) == {
        "transfer_hbar",
        "sign_schedule_transaction_tool",
        "create_fungible_token_tool",
        "mint_fungible_token_tool",
        "airdrop_fungible_token_tool",
        "create_non_fungible_token_tool",
        "mint_non_fungible_token_tool",
        "create_topic_tool",
        "submit_topic_message_tool",
        "get_hbar_balance_query",
        "get_account_query_tool",
        "get_account_token_balances_query_tool",
        "get_topic_messages_query_tool",
        "get_token_info_query_tool",
        "transfer_token",
        "associate_token_tool",
        "dissociate_token_tool",
        "delete_topic_tool",
        "execute_contract_tool",
        "get_contract_info_query_tool",
    }
    assert all(plugin.version for plugin in CORE_PLUGINS)


def test_registry_last_write_wins_with_warning(caplog):
    registry = PluginRegistry()
    first = make_plugin("extras", make_tool("one"))
    second = make_plugin("extras", make_tool("two"))
    registry.register(first)
    with caplog.at_level(logging.WARNING):
        registry.register(second)
    assert len(registry) == 1
    assert "extras" in registry
    assert registry.get_plugins() == [second]
    assert "already registered" in caplog.text

    registry.clear()
    assert len(registry) == 0


def test_registry_skips_broken_plugin(caplog):
    def broken(context):
        raise RuntimeError("factory failed")

    registry = PluginRegistry()
    registry.register(Plugin(name="broken", tools=broken))
    registry.register(make_plugin("ok", make_tool("ok_tool")))
    with caplog.at_level(logging.ERROR):
        tools = registry.get_tools(Context())
    assert [tool.method for tool in tools] == ["ok_tool"]
    assert "broken" in caplog.text


def test_core_tool_wins_collision(caplog):
    shadow = make_tool("transfer_hbar", name="Shadow Transfer")
    discovery = ToolDiscovery([make_plugin("shadow", shadow)])
    with caplog.at_level(logging.WARNING):
        tools = discovery.get_all_tools(Context())
    transfer = [tool for tool in tools if tool.method == "transfer_hbar"]
    assert len(transfer) == 1
    assert transfer[0].name == "Transfer HBAR"
    assert "conflicts with core tool" in caplog.text


def test_first_plugin_wins_between_plugins(caplog):
    discovery = ToolDiscovery(
        [
            make_plugin("a", make_tool("custom_tool", name="from a")),
            make_plugin("b", make_tool("custom_tool", name="from b")),
        ]
    )
    with caplog.at_level(logging.WARNING):
        tools = discovery.get_all_tools(Context())
    custom = [tool for tool in tools if tool.method == "custom_tool"]
    assert [tool.name for tool in custom] == ["from a"]
    assert "Duplicate plugin tool" in caplog.text


def test_allow_list_filters_after_merge():
    configuration = Configuration(
        tools=["custom_tool", "transfer_hbar"],
        plugins=[make_plugin("a", make_tool("custom_tool"), make_tool("other_tool"))],
    )
    discovery = ToolDiscovery.create_from_configuration(configuration)
    methods = [tool.method for tool in discovery.get_all_tools(Context(), configuration)]
    assert methods == ["transfer_hbar", "custom_tool"]


def test_single_entry_allow_list():
    configuration = Configuration(tools=["get_hbar_balance_query"])
    tools = ToolDiscovery().get_all_tools(Context(), configuration)
    assert [tool.method for tool in tools] == ["get_hbar_balance_query"]


@pytest.mark.parametrize("allowed", [None, []])
def test_empty_allow_list_means_everything(allowed):
    tools = ToolDiscovery().get_all_tools(Context(), Configuration(tools=allowed))
    assert len(tools) == len(core_tools(Context()))


@pytest.mark.asyncio
async def test_api_runs_tools_by_method():
    context = Context(account_id="0.0.100")
    api = HederaAgentKitAPI(FakeClient(), context, [make_tool("echo")])
    assert await api.run("echo", {"a": 1}) == {"echo": {"a": 1}}
    assert [tool.method for tool in api.tools] == ["echo"]
    with pytest.raises(ToolNotFoundError) as exc:
        await api.run("missing")
    assert exc.value.message == "Unknown tool: missing"
