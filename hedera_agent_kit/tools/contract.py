"""Smart contract service tools."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from hedera_agent_kit import builder, normaliser
from hedera_agent_kit.config import DEFAULT_CONTRACT_GAS, Context
from hedera_agent_kit.mirror_api import get_mirrornode_service
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.contract import ContractInfoQueryParameters, ExecuteContractParameters
from hedera_agent_kit.strategies import handle_transaction
from hedera_agent_kit.tools.base import Tool, ToolResult, tool_boundary
from hedera_agent_kit.utils.prompt_generator import (
    get_context_snippet,
    get_parameter_usage_instructions,
)

EXECUTE_CONTRACT_TOOL = "execute_contract_tool"
GET_CONTRACT_INFO_QUERY_TOOL = "get_contract_info_query_tool"


def execute_contract_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will call a state-changing function on a deployed smart contract.

Parameters:
- contract_id (str, required): The ID of the contract (e.g. "0.0.5005")
- function_name (str, required): The name of the function to call
- function_parameters (array, optional): Ordered arguments, each an object with:
  - type (str): One of address, bool, string, bytes32, int32, int64, int256, uint8, uint32, uint64, uint256
  - value: The argument value. address and bytes32 values are hex strings
- gas (int, optional): Gas limit for the call, defaults to {DEFAULT_CONTRACT_GAS:,}
- payable_amount (number, optional): HBAR to send with a payable function
- transaction_memo (str, optional): Memo to include with the transaction
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to execute contract")
async def execute_contract(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(ExecuteContractParameters, raw_params)
    normalised = normaliser.normalise_execute_contract_params(params, context)
    tx = builder.execute_contract(normalised)
    return await handle_transaction(tx, client, context)


def execute_contract_tool(context: Context) -> Tool:
    return Tool(
        method=EXECUTE_CONTRACT_TOOL,
        name="Execute Contract",
        description=execute_contract_prompt(context),
        parameters=ExecuteContractParameters,
        execute=execute_contract,
    )


def get_contract_info_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will return mirror node details for a deployed smart contract.

Parameters:
- contract_id (str, required): The contract ID to query
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to get contract info")
async def get_contract_info(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(ContractInfoQueryParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    details = await mirror.get_contract_info(params.contract_id)
    return {"contract_id": params.contract_id, "contract": asdict(details)}


def get_contract_info_tool(context: Context) -> Tool:
    return Tool(
        method=GET_CONTRACT_INFO_QUERY_TOOL,
        name="Get Contract Info",
        description=get_contract_info_prompt(context),
        parameters=ContractInfoQueryParameters,
        execute=get_contract_info,
    )
