"""Reusable fragments for tool descriptions shown to the LLM."""

from __future__ import annotations

from hedera_agent_kit.config import AgentMode, Context
from hedera_agent_kit.utils.account_resolver import get_default_account_description

PARAMETER_USAGE_INSTRUCTIONS = """
Important:
- Only include optional parameters if explicitly provided by the user
- Do not generate placeholder values for optional fields
- Leave optional parameters undefined if not specified by the user"""


def get_context_snippet(context: Context) -> str:
    lines = ["Context:"]

    if context.mode == AgentMode.RETURN_BYTES:
        lines.append("- Mode: Return Bytes (preparing transactions for user signing)")
        if context.account_id:
            lines.append(f"- User Account: {context.account_id} (default for transaction parameters)")
            lines.append(f"- When no account is specified, {context.account_id} will be used")
        else:
            lines.append("- User Account: Not specified")
            lines.append("- When no account is specified, the operator account will be used")
    else:
        lines.append("- Mode: Autonomous (agent executes transactions directly)")
        if context.account_id:
            lines.append(f"- User Account: {context.account_id}")
        lines.append("- When no account is specified, the operator account will be used")

    return "\n".join(lines)


def get_account_parameter_description(param_name: str, context: Context, *, required: bool = False) -> str:
    if required:
        return f"{param_name} (str, required): The Hedera account ID"
    default_desc = get_default_account_description(context)
    return (
        f"{param_name} (str, optional): The Hedera account ID. "
        f"If not provided, defaults to the {default_desc}"
    )


def get_parameter_usage_instructions() -> str:
    return PARAMETER_USAGE_INSTRUCTIONS


def get_scheduling_parameter_description(context: Context) -> str:
    payer = context.account_id or "the operator account"
    return f"""- scheduling_params (object, optional): Create a scheduled transaction instead of executing immediately:
  - is_scheduled (boolean): Set to true only if the user asks to schedule the transaction
  - schedule_memo (str, optional): Memo stored on the schedule
  - payer_account_id (str, optional): Account paying for the scheduled transaction, defaults to {payer}
  - is_admin_key (boolean, optional): Whether the default account's key may delete the schedule
  - wait_for_expiry (boolean, optional): Execute only at expiration even if all signatures are collected earlier"""
