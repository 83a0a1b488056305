"""Fungible token tools: create, mint, airdrop and transfer."""

from __future__ import annotations

from typing import Any

from hedera_agent_kit import builder, normaliser
from hedera_agent_kit.config import DEFAULT_FUNGIBLE_MAX_SUPPLY, Context
from hedera_agent_kit.mirror_api import get_mirrornode_service
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.token import (
    AirdropFungibleTokenParameters,
    CreateFungibleTokenParameters,
    MintFungibleTokenParameters,
    TransferTokenParameters,
)
from hedera_agent_kit.strategies import handle_transaction
from hedera_agent_kit.tools.base import Tool, ToolResult, tool_boundary
from hedera_agent_kit.utils.prompt_generator import (
    get_account_parameter_description,
    get_context_snippet,
    get_parameter_usage_instructions,
    get_scheduling_parameter_description,
)

CREATE_FUNGIBLE_TOKEN_TOOL = "create_fungible_token_tool"
MINT_FUNGIBLE_TOKEN_TOOL = "mint_fungible_token_tool"
AIRDROP_FUNGIBLE_TOKEN_TOOL = "airdrop_fungible_token_tool"
TRANSFER_TOKEN_TOOL = "transfer_token"


def create_fungible_token_prompt(context: Context) -> str:
    treasury_desc = get_account_parameter_description("treasury_account_id", context)
    return f"""
{get_context_snippet(context)}

This tool creates a fungible token on Hedera.

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- initial_supply (number, optional): The initial supply of the token, defaults to 0
- supply_type (str, optional): The supply type of the token. Can be "finite" or "infinite". Defaults to "finite"
- max_supply (number, optional): The maximum supply of the token. Only applicable if supply_type is "finite". Defaults to {DEFAULT_FUNGIBLE_MAX_SUPPLY:,} if not specified
- decimals (int, optional): The number of decimals the token supports. Defaults to 0
- {treasury_desc}
- is_supply_key (boolean, optional): If the user wants to set a supply key, set to true, otherwise false
- token_memo (str, optional): Memo stored on the token
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to create fungible token")
async def create_fungible_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(CreateFungibleTokenParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    normalised = await normaliser.normalise_create_fungible_token_params(
        params, context, client, mirror
    )
    tx = builder.create_fungible_token(normalised)
    return await handle_transaction(tx, client, context)


def create_fungible_token_tool(context: Context) -> Tool:
    return Tool(
        method=CREATE_FUNGIBLE_TOKEN_TOOL,
        name="Create Fungible Token",
        description=create_fungible_token_prompt(context),
        parameters=CreateFungibleTokenParameters,
        execute=create_fungible_token,
    )


def mint_fungible_token_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will mint a given amount (supply) of an existing fungible token on Hedera.

Parameters:
- token_id (str, required): The id of the token
- amount (number, required): The amount of tokens to mint, in display units
{get_parameter_usage_instructions()}

Example: "Mint 1 of 0.0.6458037" means minting the amount of 1 of the token with id 0.0.6458037.
"""


@tool_boundary("Failed to mint fungible token")
async def mint_fungible_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(MintFungibleTokenParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    normalised = await normaliser.normalise_mint_fungible_token_params(
        params, context, client, mirror
    )
    tx = builder.mint_fungible_token(normalised)
    return await handle_transaction(tx, client, context)


def mint_fungible_token_tool(context: Context) -> Tool:
    return Tool(
        method=MINT_FUNGIBLE_TOKEN_TOOL,
        name="Mint Fungible Token",
        description=mint_fungible_token_prompt(context),
        parameters=MintFungibleTokenParameters,
        execute=mint_fungible_token,
    )


def airdrop_fungible_token_prompt(context: Context) -> str:
    source_desc = get_account_parameter_description("source_account_id", context)
    return f"""
{get_context_snippet(context)}

This tool will airdrop a fungible token on Hedera.

Parameters:
- token_id (str, required): The id of the token
- {source_desc}
- recipients (array, required): A list of recipient objects, each containing:
  - account_id (str): The recipient's account ID (e.g. "0.0.1234")
  - amount (number): The amount of tokens to send to that recipient, in display units
- transaction_memo (str, optional): Memo to include with the transaction
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to airdrop fungible token")
async def airdrop_fungible_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(AirdropFungibleTokenParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    normalised = await normaliser.normalise_airdrop_fungible_token_params(
        params, context, client, mirror
    )
    tx = builder.airdrop_fungible_token(normalised)
    return await handle_transaction(tx, client, context)


def airdrop_fungible_token_tool(context: Context) -> Tool:
    return Tool(
        method=AIRDROP_FUNGIBLE_TOKEN_TOOL,
        name="Airdrop Fungible Token",
        description=airdrop_fungible_token_prompt(context),
        parameters=AirdropFungibleTokenParameters,
        execute=airdrop_fungible_token,
    )


def transfer_token_prompt(context: Context) -> str:
    source_desc = get_account_parameter_description("source_account_id", context)
    return f"""
{get_context_snippet(context)}

This tool will transfer a fungible token from one account to another.

Parameters:
- token_id (str, required): The id of the token to transfer
- amount (number, required): The amount of tokens to transfer, in display units
- receiver_account_id (str, required): The account to transfer the token to
- {source_desc}
- transaction_memo (str, optional): Memo to include with the transaction
{get_scheduling_parameter_description(context)}
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to transfer token")
async def transfer_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(TransferTokenParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    normalised = await normaliser.normalise_transfer_token_params(params, context, client, mirror)
    scheduling = await normaliser.normalise_scheduling_params(
        params.scheduling_params, context, client, mirror
    )
    tx = builder.transfer_token(normalised)
    return await handle_transaction(tx, client, context, scheduling)


def transfer_token_tool(context: Context) -> Tool:
    return Tool(
        method=TRANSFER_TOKEN_TOOL,
        name="Transfer Token",
        description=transfer_token_prompt(context),
        parameters=TransferTokenParameters,
        execute=transfer_token,
    )
