"""HTTP client wrappers for the Hedera mirror node API."""

from .client import (
    HederaMirrornodeService,
    MirrorNodeError,
    MirrorNodeNotFoundError,
    MirrorNodeUnreachableError,
    default_client,
    get_mirrornode_service,
)
from .types import (
    AccountResponse,
    ContractDetails,
    TokenDetails,
    TopicMessage,
    TopicMessagesQuery,
    TopicMessagesResponse,
)

__all__ = [
    "HederaMirrornodeService",
    "MirrorNodeError",
    "MirrorNodeNotFoundError",
    "MirrorNodeUnreachableError",
    "default_client",
    "get_mirrornode_service",
    "AccountResponse",
    "ContractDetails",
    "TokenDetails",
    "TopicMessage",
    "TopicMessagesQuery",
    "TopicMessagesResponse",
]
