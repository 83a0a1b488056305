"""Read-only query parameters served by the mirror node."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import Field

from hedera_agent_kit.config import MAX_TOPIC_MESSAGES
from hedera_agent_kit.schemas import ToolParameters
from hedera_agent_kit.validators import EntityId


class AccountQueryParameters(ToolParameters):
    account_id: EntityId = Field(description="The account ID to query.")


class AccountBalanceQueryParameters(ToolParameters):
    account_id: Optional[EntityId] = Field(default=None, description="The account ID to query.")


class AccountTokenBalancesQueryParameters(ToolParameters):
    account_id: Optional[EntityId] = Field(default=None, description="The account ID to query.")
    token_id: Optional[EntityId] = Field(
        default=None,
        description="The token ID to query. If not provided, all token balances are returned.",
    )


class TopicMessagesQueryParameters(ToolParameters):
    topic_id: EntityId = Field(description="The topic ID to query.")
    start_time: Optional[datetime] = Field(
        default=None,
        description="ISO 8601 datetime. If set, only messages after this time are returned.",
    )
    end_time: Optional[datetime] = Field(
        default=None,
        description="ISO 8601 datetime. If set, only messages before this time are returned.",
    )
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_TOPIC_MESSAGES,
        description="The maximum number of messages to return.",
    )


class TokenInfoQueryParameters(ToolParameters):
    token_id: EntityId = Field(description="The token ID to query.")


@dataclass(frozen=True, slots=True)
class AccountQueryNormalised:
    account_id: str


@dataclass(frozen=True, slots=True)
class AccountTokenBalancesQueryNormalised:
    account_id: str
    token_id: Optional[str] = None
