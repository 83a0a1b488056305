"""Response shapes returned by the mirror node service."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(slots=True)
class AccountResponse:
    account_id: str
    account_public_key: Optional[str]
    key_type: Optional[str]
    balance: int


@dataclass(slots=True)
class TopicMessage:
    topic_id: str
    message: str
    consensus_timestamp: str
    sequence_number: Optional[int] = None
    payer_account_id: Optional[str] = None


@dataclass(slots=True)
class TopicMessagesQuery:
    topic_id: str
    lower_timestamp: Optional[str] = None
    upper_timestamp: Optional[str] = None
    limit: int = 100


@dataclass(slots=True)
class TopicMessagesResponse:
    topic_id: str
    messages: List[TopicMessage] = field(default_factory=list)


@dataclass(slots=True)
class TokenDetails:
    token_id: str
    decimals: int
    name: Optional[str]
    symbol: Optional[str]
    max_supply: Optional[str]
    type: Optional[str]
    total_supply: Optional[str] = None
    treasury_account_id: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass(slots=True)
class ContractDetails:
    contract_id: str
    evm_address: Optional[str]
    memo: Optional[str]
    admin_key: Optional[str]
    auto_renew_account_id: Optional[str]
    created_timestamp: Optional[str]
    expiration_timestamp: Optional[str]
    file_id: Optional[str]
    deleted: bool = False
