"""Uniform tool shape shared by every plugin and host adapter."""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Awaitable, Callable, Dict, Type, Union

from pydantic import BaseModel

from hedera_agent_kit.errors import HederaAgentKitError
from hedera_agent_kit.mirror_api import MirrorNodeError

logger = logging.getLogger(__name__)

ToolResult = Union[Dict[str, Any], str]
ToolExecute = Callable[[Any, Any, Any], Awaitable[ToolResult]]


@dataclass(frozen=True, slots=True)
class Tool:
    method: str
    name: str
    description: str
    parameters: Type[BaseModel]
    execute: ToolExecute


def tool_boundary(failure_message: str) -> Callable[[ToolExecute], ToolExecute]:
    """
    Wrap a tool coroutine so failures come back as message strings.

    Kit and mirror node errors are expected outcomes and only logged at info
    level; anything else is logged with its traceback.
    """

    def decorator(func: ToolExecute) -> ToolExecute:
        @functools.wraps(func)
        async def wrapper(client: Any, context: Any, raw_params: Any) -> ToolResult:
            try:
                return await func(client, context, raw_params)
            except (HederaAgentKitError, MirrorNodeError) as exc:
                logger.info("%s: %s", failure_message, exc)
                return str(exc) or failure_message
            except Exception as exc:
                logger.exception("Unexpected error in %s", func.__name__)
                return str(exc) or failure_message

        return wrapper

    return decorator


def to_jsonable(value: Any) -> Any:
    """Render tool results for JSON transports (bytes become hex)."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value
