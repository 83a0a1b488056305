"""Non-fungible token tools."""

from __future__ import annotations

from typing import Any

from hedera_agent_kit import builder, normaliser
from hedera_agent_kit.config import DEFAULT_NFT_MAX_SUPPLY, MAX_NFT_URIS, Context
from hedera_agent_kit.mirror_api import get_mirrornode_service
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.token import (
    CreateNonFungibleTokenParameters,
    MintNonFungibleTokenParameters,
)
from hedera_agent_kit.strategies import handle_transaction
from hedera_agent_kit.tools.base import Tool, ToolResult, tool_boundary
from hedera_agent_kit.utils.prompt_generator import (
    get_account_parameter_description,
    get_context_snippet,
    get_parameter_usage_instructions,
)

CREATE_NON_FUNGIBLE_TOKEN_TOOL = "create_non_fungible_token_tool"
MINT_NON_FUNGIBLE_TOKEN_TOOL = "mint_non_fungible_token_tool"


def create_non_fungible_token_prompt(context: Context) -> str:
    treasury_desc = get_account_parameter_description("treasury_account_id", context)
    return f"""
{get_context_snippet(context)}

This tool creates a non-fungible token (NFT) class on Hedera.

Parameters:
- token_name (str, required): The name of the token
- token_symbol (str, required): The symbol of the token
- max_supply (int, optional): The maximum supply of the token. Defaults to {DEFAULT_NFT_MAX_SUPPLY}
- {treasury_desc}
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to create non-fungible token")
async def create_non_fungible_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(CreateNonFungibleTokenParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    normalised = await normaliser.normalise_create_non_fungible_token_params(
        params, context, client, mirror
    )
    tx = builder.create_non_fungible_token(normalised)
    return await handle_transaction(tx, client, context)


def create_non_fungible_token_tool(context: Context) -> Tool:
    return Tool(
        method=CREATE_NON_FUNGIBLE_TOKEN_TOOL,
        name="Create Non-Fungible Token",
        description=create_non_fungible_token_prompt(context),
        parameters=CreateNonFungibleTokenParameters,
        execute=create_non_fungible_token,
    )


def mint_non_fungible_token_prompt(context: Context) -> str:
    return f"""
This tool will mint NFTs with their unique metadata for the class of NFTs defined by the token_id on Hedera.

Parameters:
- token_id (str, required): The id of the token
- uris (array, required): An array of at most {MAX_NFT_URIS} strings (URIs) hosting the NFT metadata
{get_parameter_usage_instructions()}

Example: "Mint 0.0.6465503 with metadata: ipfs://bafyreiao6ajgsfji6qsgbqwdtjdu5gmul7tv2v3pd6kjgcw5o65b2ogst4/metadata.json" means minting an NFT with the given metadata URI for the class of NFTs defined by the token with id 0.0.6465503.
"""


@tool_boundary("Failed to mint non-fungible token")
async def mint_non_fungible_token(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(MintNonFungibleTokenParameters, raw_params)
    normalised = normaliser.normalise_mint_non_fungible_token_params(params, context)
    tx = builder.mint_non_fungible_token(normalised)
    return await handle_transaction(tx, client, context)


def mint_non_fungible_token_tool(context: Context) -> Tool:
    return Tool(
        method=MINT_NON_FUNGIBLE_TOKEN_TOOL,
        name="Mint Non-Fungible Token",
        description=mint_non_fungible_token_prompt(context),
        parameters=MintNonFungibleTokenParameters,
        execute=mint_non_fungible_token,
    )
