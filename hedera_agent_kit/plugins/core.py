"""Built-in plugins covering the account, token, consensus, contract and query services."""

from __future__ import annotations

from typing import List

from hedera_agent_kit.config import Context
from hedera_agent_kit.plugins.base import Plugin
from hedera_agent_kit.tools import (
    Tool,
    airdrop_fungible_token_tool,
    associate_token_tool,
    create_fungible_token_tool,
    create_non_fungible_token_tool,
    create_topic_tool,
    delete_topic_tool,
    dissociate_token_tool,
    execute_contract_tool,
    get_account_query_tool,
    get_account_token_balances_tool,
    get_contract_info_tool,
    get_hbar_balance_tool,
    get_token_info_tool,
    get_topic_messages_tool,
    mint_fungible_token_tool,
    mint_non_fungible_token_tool,
    sign_schedule_transaction_tool,
    submit_topic_message_tool,
    transfer_hbar_tool,
    transfer_token_tool,
)

CORE_PLUGIN_VERSION = "1.0.0"

core_account_plugin = Plugin(
    name="core-account-plugin",
    version=CORE_PLUGIN_VERSION,
    description="HBAR transfers and scheduled transaction signing",
    tools=lambda context: [
        transfer_hbar_tool(context),
        sign_schedule_transaction_tool(context),
    ],
)

core_hts_plugin = Plugin(
    name="core-hts-plugin",
    version=CORE_PLUGIN_VERSION,
    description="Token creation, minting, transfers, airdrops and associations",
    tools=lambda context: [
        create_fungible_token_tool(context),
        mint_fungible_token_tool(context),
        airdrop_fungible_token_tool(context),
        transfer_token_tool(context),
        create_non_fungible_token_tool(context),
        mint_non_fungible_token_tool(context),
        associate_token_tool(context),
        dissociate_token_tool(context),
    ],
)

core_consensus_plugin = Plugin(
    name="core-consensus-plugin",
    version=CORE_PLUGIN_VERSION,
    description="Topic creation, deletion and message submission",
    tools=lambda context: [
        create_topic_tool(context),
        submit_topic_message_tool(context),
        delete_topic_tool(context),
    ],
)

core_scs_plugin = Plugin(
    name="core-scs-plugin",
    version=CORE_PLUGIN_VERSION,
    description="Smart contract calls and contract lookups",
    tools=lambda context: [
        execute_contract_tool(context),
        get_contract_info_tool(context),
    ],
)

core_queries_plugin = Plugin(
    name="core-queries-plugin",
    version=CORE_PLUGIN_VERSION,
    description="Mirror node queries for balances, accounts, topics and tokens",
    tools=lambda context: [
        get_hbar_balance_tool(context),
        get_account_query_tool(context),
        get_account_token_balances_tool(context),
        get_topic_messages_tool(context),
        get_token_info_tool(context),
    ],
)

CORE_PLUGINS = (
    core_account_plugin,
    core_hts_plugin,
    core_consensus_plugin,
    core_scs_plugin,
    core_queries_plugin,
)


def core_tools(context: Context) -> List[Tool]:
    tools: List[Tool] = []
    for plugin in CORE_PLUGINS:
        tools.extend(plugin.tools(context))
    return tools
