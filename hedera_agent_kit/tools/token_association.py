"""Token association tools: an account must be associated before it can hold a token."""

from __future__ import annotations

from typing import Any

from hedera_agent_kit import builder, normaliser
from hedera_agent_kit.config import MAX_TOKEN_ASSOCIATIONS, Context
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.token import AssociateTokenParameters, DissociateTokenParameters
from hedera_agent_kit.strategies import handle_transaction
from hedera_agent_kit.tools.base import Tool, ToolResult, tool_boundary
from hedera_agent_kit.utils.prompt_generator import (
    get_account_parameter_description,
    get_context_snippet,
    get_parameter_usage_instructions,
)

ASSOCIATE_TOKEN_TOOL = "associate_token_tool"
DISSOCIATE_TOKEN_TOOL = "dissociate_token_tool"


def associate_token_prompt(context: Context) -> str:
    account_desc = get_account_parameter_description("account_id", context)
    return f"""
{get_context_snippet(context)}

This tool will associate one or more tokens with an account so it can receive them.

Parameters:
- token_ids (array of str, required): Up to {MAX_TOKEN_ASSOCIATIONS} token IDs to associate
- {account_desc}
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to associate token")
async def associate_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(AssociateTokenParameters, raw_params)
    normalised = normaliser.normalise_token_association_params(params, context, client)
    tx = builder.associate_token(normalised)
    return await handle_transaction(tx, client, context)


def associate_token_tool(context: Context) -> Tool:
    return Tool(
        method=ASSOCIATE_TOKEN_TOOL,
        name="Associate Token",
        description=associate_token_prompt(context),
        parameters=AssociateTokenParameters,
        execute=associate_token,
    )


def dissociate_token_prompt(context: Context) -> str:
    account_desc = get_account_parameter_description("account_id", context)
    return f"""
{get_context_snippet(context)}

This tool will dissociate one or more tokens from an account. The account must hold a zero balance of each token.

Parameters:
- token_ids (array of str, required): Up to {MAX_TOKEN_ASSOCIATIONS} token IDs to dissociate
- {account_desc}
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to dissociate token")
async def dissociate_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(DissociateTokenParameters, raw_params)
    normalised = normaliser.normalise_token_association_params(params, context, client)
    tx = builder.dissociate_token(normalised)
    return await handle_transaction(tx, client, context)


def dissociate_token_tool(context: Context) -> Tool:
    return Tool(
        method=DISSOCIATE_TOKEN_TOOL,
        name="Dissociate Token",
        description=dissociate_token_prompt(context),
        parameters=DissociateTokenParameters,
        execute=dissociate_token,
    )
