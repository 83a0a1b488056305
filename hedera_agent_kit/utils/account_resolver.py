"""Default-account selection for tools whose account parameters are optional."""

from __future__ import annotations

from typing import Any, Optional

from hedera_agent_kit.config import AgentMode, Context
from hedera_agent_kit.errors import AccountResolutionError


def operator_account_id(client: Any) -> Optional[str]:
    account_id = getattr(client, "operator_account_id", None)
    if account_id is None:
        return None
    text = str(account_id)
    return text or None


def operator_public_key(client: Any) -> Any:
    """Public key of the client's operator, or None when no operator is set."""
    private_key = getattr(client, "operator_private_key", None)
    if private_key is None:
        return None
    return private_key.public_key()


def get_default_account(context: Context, client: Any) -> str:
    """
    Return the account that acts when the caller names none.

    In RETURN_BYTES mode the connected end-user (``context.account_id``) is the
    actor awaiting signature; otherwise the client operator is.
    """
    if context.mode == AgentMode.RETURN_BYTES and context.account_id:
        return context.account_id

    operator = operator_account_id(client)
    if not operator:
        raise AccountResolutionError(
            "No account available: neither context.account_id nor operator account"
        )
    return operator


def resolve_account(explicit: Optional[str], context: Context, client: Any) -> str:
    if explicit:
        return explicit
    return get_default_account(context, client)


def get_default_account_description(context: Context) -> str:
    """Describe the default account for tool prompts."""
    if context.mode == AgentMode.RETURN_BYTES and context.account_id:
        return f"user account ({context.account_id})"
    return "operator account"
