"""Consensus service (topic) tools."""

from __future__ import annotations

from typing import Any

from hedera_agent_kit import builder, normaliser
from hedera_agent_kit.config import Context
from hedera_agent_kit.mirror_api import get_mirrornode_service
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.consensus import (
    CreateTopicParameters,
    DeleteTopicParameters,
    SubmitTopicMessageParameters,
)
from hedera_agent_kit.strategies import handle_transaction
from hedera_agent_kit.tools.base import Tool, ToolResult, tool_boundary
from hedera_agent_kit.utils.prompt_generator import (
    get_context_snippet,
    get_parameter_usage_instructions,
)

CREATE_TOPIC_TOOL = "create_topic_tool"
SUBMIT_TOPIC_MESSAGE_TOOL = "submit_topic_message_tool"
DELETE_TOPIC_TOOL = "delete_topic_tool"


def create_topic_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will create a new topic on the Hedera network.

Parameters:
- topic_memo (str, optional): A memo for the topic
- is_submit_key (boolean, optional): Whether to set a submit key for the topic. Set to true if the user wants to restrict who can submit messages
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to create topic")
async def create_topic(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(CreateTopicParameters, raw_params)
    mirror = get_mirrornode_service(context, client)
    normalised = await normaliser.normalise_create_topic_params(params, context, client, mirror)
    tx = builder.create_topic(normalised)
    return await handle_transaction(tx, client, context)


def create_topic_tool(context: Context) -> Tool:
    return Tool(
        method=CREATE_TOPIC_TOOL,
        name="Create Topic",
        description=create_topic_prompt(context),
        parameters=CreateTopicParameters,
        execute=create_topic,
    )


def submit_topic_message_prompt(context: Context) -> str:
    return f"""
This tool will submit a message to a topic on the Hedera network.

Parameters:
- topic_id (str, required): The ID of the topic to submit the message to
- message (str, required): The message to submit to the topic
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to submit message to topic")
async def submit_topic_message(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(SubmitTopicMessageParameters, raw_params)
    normalised = normaliser.normalise_submit_topic_message_params(params, context)
    tx = builder.submit_topic_message(normalised)
    return await handle_transaction(tx, client, context)


def submit_topic_message_tool(context: Context) -> Tool:
    return Tool(
        method=SUBMIT_TOPIC_MESSAGE_TOOL,
        name="Submit Topic Message",
        description=submit_topic_message_prompt(context),
        parameters=SubmitTopicMessageParameters,
        execute=submit_topic_message,
    )


def delete_topic_prompt(context: Context) -> str:
    return f"""
{get_context_snippet(context)}

This tool will delete a topic. Only topics created with an admin key can be deleted.

Parameters:
- topic_id (str, required): The ID of the topic to delete
{get_parameter_usage_instructions()}
"""


@tool_boundary("Failed to delete topic")
async def delete_topic(client: Any, context: Context, raw_params: Any) -> ToolResult:
    params = parse_params(DeleteTopicParameters, raw_params)
    normalised = normaliser.normalise_delete_topic_params(params, context)
    tx = builder.delete_topic(normalised)
    return await handle_transaction(tx, client, context)


def delete_topic_tool(context: Context) -> Tool:
    return Tool(
        method=DELETE_TOPIC_TOOL,
        name="Delete Topic",
        description=delete_topic_prompt(context),
        parameters=DeleteTopicParameters,
        execute=delete_topic,
    )
