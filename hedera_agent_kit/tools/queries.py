"""Read-only query tools backed by the mirror node."""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import asdict
from typing import Any, Dict, List

from hedera_agent_kit import normaliser
from hedera_agent_kit.config import MAX_TOPIC_MESSAGES, Context
from hedera_agent_kit.mirror_api import TopicMessage, get_mirrornode_service
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.queries import (
    AccountBalanceQueryParameters,
    AccountQueryParameters,
    AccountTokenBalancesQueryParameters,
    TokenInfoQueryParameters,
    TopicMessagesQueryParameters,
)
from hedera_agent_kit.tools.base import Tool, ToolResult, tool_boundary
from hedera_agent_kit.utils.decimals import tinybars_to_hbar
from hedera_agent_kit.utils.prompt_generator import (
    get_account_parameter_description,
    get_context_snippet,
    get_parameter_usage_instructions,
)

logger = logging.getLogger(__name__)

GET_HBAR_BALANCE_QUERY_TOOL = "get_hbar_balance_query"
GET_ACCOUNT_QUERY_TOOL = "get_account_query_tool"
GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL = "get_account_token_balances_query_tool"
GET_TOPIC_MESSAGES_QUERY_TOOL = "get_topic_messages_query_tool"
GET_TOKEN_INFO_QUERY_TOOL = "get_token_info_query_tool"


def get_hbar_balance_prompt(context: Context) -> str:
    account_desc = get_account_parameter_description("account_id", context)
    return f"""
{get_context_snippet(context)}

This tool will return the HBAR balance for a given Hedera account.

Parameters:
- {account_desc}
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to get HBAR balance")
async def get_hbar_balance(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(AccountBalanceQueryParameters, raw_params)
    normalised = normaliser.normalise_hbar_balance_params(params, context, client)
    mirror = get_mirrornode_service(context, client)
    tinybars = await mirror.get_account_hbar_balance(normalised.account_id)
    return {
        "account_id": normalised.account_id,
        "hbar_balance": format(tinybars_to_hbar(tinybars).normalize(), "f"),
    }


def get_hbar_balance_tool(context: Context) -> Tool:
    return Tool(
        method=GET_HBAR_BALANCE_QUERY_TOOL,
        name="Get HBAR Balance",
        description=get_hbar_balance_prompt(context),
        parameters=AccountBalanceQueryParameters,
        execute=get_hbar_balance,
    )


def get_account_query_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will return the account information for a given Hedera account.

Parameters:
- account_id (str, required): The account ID to query
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to get account query")
async def get_account_query(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(AccountQueryParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    account = await mirror.get_account(params.account_id)
    return {"account_id": params.account_id, "account": asdict(account)}


def get_account_query_tool(context: Context) -> Tool:
    return Tool(
        method=GET_ACCOUNT_QUERY_TOOL,
        name="Get Account Query",
        description=get_account_query_prompt(context),
        parameters=AccountQueryParameters,
        execute=get_account_query,
    )


def get_account_token_balances_prompt(context: Context) -> str:
    account_desc = get_account_parameter_description("account_id", context)
    return f"""
{get_context_snippet(context)}

This tool will return the token balances for a given Hedera account.

Parameters:
- {account_desc}
- token_id (str, optional): The token ID to query for. If not provided, all token balances will be returned
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to get account token balances")
async def get_account_token_balances(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(AccountTokenBalancesQueryParameters, raw_params)
    normalised = normaliser.normalise_account_token_balances_params(params, context, client)
    mirror = get_mirrornode_service(context, client)
    data = await mirror.get_account_token_balances(normalised.account_id, normalised.token_id)
    tokens = data.get("tokens") if isinstance(data.get("tokens"), list) else []
    return {"account_id": normalised.account_id, "token_balances": tokens}


def get_account_token_balances_tool(context: Context) -> Tool:
    return Tool(
        method=GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
        name="Get Account Token Balances",
        description=get_account_token_balances_prompt(context),
        parameters=AccountTokenBalancesQueryParameters,
        execute=get_account_token_balances,
    )


def get_topic_messages_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will return the messages for a given Hedera topic, newest first.

Parameters:
- topic_id (str, required): The topic ID to query
- start_time (datetime, optional): ISO 8601 datetime. If set, the messages will be returned after this datetime
- end_time (datetime, optional): ISO 8601 datetime. If set, the messages will be returned before this datetime
- limit (int, optional): The maximum number of messages to return (at most {MAX_TOPIC_MESSAGES})
{get_parameter_usage_instructions()}
"""


def _decode_message(message: TopicMessage) -> Dict[str, Any]:
    entry = asdict(message)
    try:
        entry["message"] = base64.b64decode(message.message, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        logger.debug("Topic message %s is not base64 text", message.sequence_number)
    return entry


@tool_boundary("Failed to get topic messages")
async def get_topic_messages(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(TopicMessagesQueryParameters, raw_params)
    query = normaliser.normalise_topic_messages_query_params(params, context)
    mirror = get_mirrornode_service(context, client)
    response = await mirror.get_topic_messages(query)
    messages: List[Dict[str, Any]] = [_decode_message(message) for message in response.messages]
    return {"topic_id": response.topic_id, "messages": messages}


def get_topic_messages_tool(context: Context) -> Tool:
    return Tool(
        method=GET_TOPIC_MESSAGES_QUERY_TOOL,
        name="Get Topic Messages",
        description=get_topic_messages_prompt(context),
        parameters=TopicMessagesQueryParameters,
        execute=get_topic_messages,
    )


def get_token_info_prompt(context: Context) -> str:
    return f"""
This tool will return the details of a given Hedera token: name, symbol, decimals, supply and type.

Parameters:
- token_id (str, required): The token ID to query
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to get token info")
async def get_token_info(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(TokenInfoQueryParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    details = await mirror.get_token_details(params.token_id)
    return {
        "token_id": details.token_id,
        "name": details.name,
        "symbol": details.symbol,
        "decimals": details.decimals,
        "type": details.type,
        "max_supply": details.max_supply,
        "total_supply": details.total_supply,
        "treasury_account_id": details.treasury_account_id,
    }


def get_token_info_tool(context: Context) -> Tool:
    return Tool(
        method=GET_TOKEN_INFO_QUERY_TOOL,
        name="Get Token Info",
        description=get_token_info_prompt(context),
        parameters=TokenInfoQueryParameters,
        execute=get_token_info,
    )
