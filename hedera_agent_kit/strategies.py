"""
What happens to a transaction once it has been built.

AUTONOMOUS: the client operator signs and submits, and the receipt is reported.
RETURN_BYTES: the transaction is frozen for the context account and returned
as bytes so the end user can sign it elsewhere.

Either mode can schedule instead: the built transaction is wrapped in a
schedule create transaction, which then goes through the mode as usual.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from hiero_sdk_python import AccountId, ResponseCode, TransactionId

from hedera_agent_kit import builder
from hedera_agent_kit.config import AgentMode, Context
from hedera_agent_kit.errors import AccountResolutionError, TransactionFailedError
from hedera_agent_kit.schemas.account import ScheduleCreateNormalised

logger = logging.getLogger(__name__)

_RECEIPT_ID_FIELDS = ("account_id", "token_id", "topic_id", "schedule_id")


def _status_name(status: Any) -> str:
    name = getattr(status, "name", None)
    if isinstance(name, str):
        return name
    try:
        return ResponseCode(status).name
    except ValueError:
        return str(status)


class TxModeStrategy:
    async def handle(self, tx: Any, client: Any, context: Context) -> Dict[str, Any]:
        raise NotImplementedError


class ExecuteStrategy(TxModeStrategy):
    """Sign with the operator, submit, and wait for the receipt."""

    async def handle(self, tx: Any, client: Any, context: Context) -> Dict[str, Any]:
        # hiero's execute() blocks until the receipt arrives.
        receipt = await asyncio.to_thread(tx.execute, client)
        status = _status_name(receipt.status)
        transaction_id = getattr(receipt, "transaction_id", None) or getattr(tx, "transaction_id", None)
        if status != "SUCCESS":
            logger.warning("Transaction %s failed with status %s", transaction_id, status)
            raise TransactionFailedError(f"Transaction failed with status {status}", status=status)

        result: Dict[str, Any] = {"status": status, "transaction_id": str(transaction_id)}
        for field_name in _RECEIPT_ID_FIELDS:
            value = getattr(receipt, field_name, None)
            if value is not None:
                result[field_name] = str(value)
        serials = getattr(receipt, "serial_numbers", None)
        if serials:
            result["serial_numbers"] = [int(serial) for serial in serials]
        return result


class ReturnBytesStrategy(TxModeStrategy):
    """Freeze for the context account and hand back the unsigned bytes."""

    async def handle(self, tx: Any, client: Any, context: Context) -> Dict[str, Any]:
        if not context.account_id:
            raise AccountResolutionError("Context account_id is required for returnBytes mode")
        transaction_id = TransactionId.generate(AccountId.from_string(context.account_id))
        tx.set_transaction_id(transaction_id)
        tx.freeze_with(client)
        return {"bytes": tx.to_bytes(), "transaction_id": str(transaction_id)}


def get_strategy_from_context(context: Context) -> TxModeStrategy:
    if context.mode == AgentMode.RETURN_BYTES:
        return ReturnBytesStrategy()
    return ExecuteStrategy()


async def handle_transaction(
    tx: Any,
    client: Any,
    context: Context,
    scheduling: Optional[ScheduleCreateNormalised] = None,
) -> Dict[str, Any]:
    if scheduling is not None:
        logger.debug("Scheduling %s instead of submitting it directly", type(tx).__name__)
        tx = builder.schedule_transaction(tx, scheduling)
    strategy = get_strategy_from_context(context)
    return await strategy.handle(tx, client, context)
