"""LLM-facing tool implementations."""

from .base import Tool, ToolResult, to_jsonable, tool_boundary
from .account import (
    SIGN_SCHEDULE_TRANSACTION_TOOL,
    TRANSFER_HBAR_TOOL,
    sign_schedule_transaction_tool,
    transfer_hbar_tool,
)
from .fungible_token import (
    AIRDROP_FUNGIBLE_TOKEN_TOOL,
    CREATE_FUNGIBLE_TOKEN_TOOL,
    MINT_FUNGIBLE_TOKEN_TOOL,
    TRANSFER_TOKEN_TOOL,
    airdrop_fungible_token_tool,
    create_fungible_token_tool,
    mint_fungible_token_tool,
    transfer_token_tool,
)
from .non_fungible_token import (
    CREATE_NON_FUNGIBLE_TOKEN_TOOL,
    MINT_NON_FUNGIBLE_TOKEN_TOOL,
    create_non_fungible_token_tool,
    mint_non_fungible_token_tool,
)
from .token_association import (
    ASSOCIATE_TOKEN_TOOL,
    DISSOCIATE_TOKEN_TOOL,
    associate_token_tool,
    dissociate_token_tool,
)
from .consensus import (
    CREATE_TOPIC_TOOL,
    DELETE_TOPIC_TOOL,
    SUBMIT_TOPIC_MESSAGE_TOOL,
    create_topic_tool,
    delete_topic_tool,
    submit_topic_message_tool,
)
from .contract import (
    EXECUTE_CONTRACT_TOOL,
    GET_CONTRACT_INFO_QUERY_TOOL,
    execute_contract_tool,
    get_contract_info_tool,
)
from .queries import (
    GET_ACCOUNT_QUERY_TOOL,
    GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL,
    GET_HBAR_BALANCE_QUERY_TOOL,
    GET_TOKEN_INFO_QUERY_TOOL,
    GET_TOPIC_MESSAGES_QUERY_TOOL,
    get_account_query_tool,
    get_account_token_balances_tool,
    get_hbar_balance_tool,
    get_token_info_tool,
    get_topic_messages_tool,
)

__all__ = [
    "Tool",
    "ToolResult",
    "to_jsonable",
    "tool_boundary",
    "TRANSFER_HBAR_TOOL",
    "SIGN_SCHEDULE_TRANSACTION_TOOL",
    "CREATE_FUNGIBLE_TOKEN_TOOL",
    "MINT_FUNGIBLE_TOKEN_TOOL",
    "AIRDROP_FUNGIBLE_TOKEN_TOOL",
    "TRANSFER_TOKEN_TOOL",
    "CREATE_NON_FUNGIBLE_TOKEN_TOOL",
    "MINT_NON_FUNGIBLE_TOKEN_TOOL",
    "ASSOCIATE_TOKEN_TOOL",
    "DISSOCIATE_TOKEN_TOOL",
    "CREATE_TOPIC_TOOL",
    "SUBMIT_TOPIC_MESSAGE_TOOL",
    "DELETE_TOPIC_TOOL",
    "EXECUTE_CONTRACT_TOOL",
    "GET_CONTRACT_INFO_QUERY_TOOL",
    "GET_HBAR_BALANCE_QUERY_TOOL",
    "GET_ACCOUNT_QUERY_TOOL",
    "GET_ACCOUNT_TOKEN_BALANCES_QUERY_TOOL",
    "GET_TOPIC_MESSAGES_QUERY_TOOL",
    "GET_TOKEN_INFO_QUERY_TOOL",
    "transfer_hbar_tool",
    "sign_schedule_transaction_tool",
    "create_fungible_token_tool",
    "mint_fungible_token_tool",
    "airdrop_fungible_token_tool",
    "transfer_token_tool",
    "create_non_fungible_token_tool",
    "mint_non_fungible_token_tool",
    "associate_token_tool",
    "dissociate_token_tool",
    "create_topic_tool",
    "submit_topic_message_tool",
    "delete_topic_tool",
    "execute_contract_tool",
    "get_contract_info_tool",
    "get_hbar_balance_tool",
    "get_account_query_tool",
    "get_account_token_balances_tool",
    "get_topic_messages_tool",
    "get_token_info_tool",
]
