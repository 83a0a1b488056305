"""Account service tools."""

from __future__ import annotations

from typing import Any

from hedera_agent_kit import builder, normaliser
from hedera_agent_kit.config import Context
from hedera_agent_kit.mirror_api import get_mirrornode_service
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.account import (
    SignScheduleTransactionParameters,
    TransferHbarParameters,
)
from hedera_agent_kit.strategies import handle_transaction
from hedera_agent_kit.tools.base import Tool, ToolResult, tool_boundary
from hedera_agent_kit.utils.prompt_generator import (
    get_account_parameter_description,
    get_context_snippet,
    get_parameter_usage_instructions,
    get_scheduling_parameter_description,
)

TRANSFER_HBAR_TOOL = "transfer_hbar"
SIGN_SCHEDULE_TRANSACTION_TOOL = "sign_schedule_transaction_tool"


def transfer_hbar_prompt(context: Context) -> str:
    source_desc = get_account_parameter_description("source_account_id", context)
    return f"""
{get_context_snippet(context)}

This tool will transfer HBAR to one or more accounts.

Parameters:
- transfers (array, required): List of objects, each with:
  - account_id (str): Recipient account ID (e.g. "0.0.1234")
  - amount (number): Amount of HBAR to send to that recipient
- {source_desc}
- transaction_memo (str, optional): Memo to include with the transaction
{get_scheduling_parameter_description(context)}
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to transfer HBAR")
async def transfer_hbar(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(TransferHbarParameters, raw_params)
    normalised = normaliser.normalise_transfer_hbar(params, context, client)
    scheduling = await normaliser.normalise_scheduling_params(
        params.scheduling_params, context, client, get_mirrornode_service(context, client)
    )
    tx = builder.transfer_hbar(normalised)
    return await handle_transaction(tx, client, context, scheduling)


def transfer_hbar_tool(context: Context) -> Tool:
    return Tool(
        method=TRANSFER_HBAR_TOOL,
        name="Transfer HBAR",
        description=transfer_hbar_prompt(context),
        parameters=TransferHbarParameters,
        execute=transfer_hbar,
    )


def sign_schedule_transaction_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will add a signature to an existing scheduled transaction.
In return-bytes mode the signing transaction is returned for the user to sign.

Parameters:
- schedule_id (str, required): The ID of the scheduled transaction (e.g. "0.0.5678")
- transaction_memo (str, optional): Memo to include with the transaction
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to sign scheduled transaction")
async def sign_schedule_transaction(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(SignScheduleTransactionParameters, raw_params)
    normalised = normaliser.normalise_sign_schedule_params(params, context)
    tx = builder.sign_schedule_transaction(normalised)
    return await handle_transaction(tx, client, context)


def sign_schedule_transaction_tool(context: Context) -> Tool:
    return Tool(
        method=SIGN_SCHEDULE_TRANSACTION_TOOL,
        name="Sign Scheduled Transaction",
        description=sign_schedule_transaction_prompt(context),
        parameters=SignScheduleTransactionParameters,
        execute=sign_schedule_transaction,
    )
