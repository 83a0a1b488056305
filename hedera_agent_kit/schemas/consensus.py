"""Consensus service parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import Field

from hedera_agent_kit.schemas import ToolParameters
from hedera_agent_kit.validators import EntityId


class CreateTopicParameters(ToolParameters):
    is_submit_key: Optional[bool] = Field(
        default=None, description="Whether to set a submit key for the topic."
    )
    topic_memo: Optional[str] = Field(default=None, description="Memo for the topic.")


class SubmitTopicMessageParameters(ToolParameters):
    topic_id: EntityId = Field(description="The ID of the topic to submit the message to.")
    message: str = Field(min_length=1, description="The message to submit to the topic.")


@dataclass(frozen=True, slots=True)
class CreateTopicNormalised:
    topic_memo: Optional[str] = None
    submit_key: Any = None  # hiero PublicKey


@dataclass(frozen=True, slots=True)
class SubmitTopicMessageNormalised:
    topic_id: str
    message: str


class DeleteTopicParameters(ToolParameters):
    topic_id: EntityId = Field(description="The ID of the topic to delete.")


@dataclass(frozen=True, slots=True)
class DeleteTopicNormalised:
    topic_id: str
