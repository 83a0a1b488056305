"""Account service parameters: HBAR transfers and scheduled transactions."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from hedera_agent_kit.schemas import ToolParameters
from hedera_agent_kit.validators import EntityId


class SchedulingParameters(BaseModel):
    """Optional wrapper turning a transaction into a scheduled one."""

    model_config = ConfigDict(extra="forbid")

    is_scheduled: bool = Field(
        default=False,
        description="If true, the transaction is created as a schedule instead of executing immediately.",
    )
    schedule_memo: Optional[str] = Field(default=None, description="Memo stored on the schedule.")
    payer_account_id: Optional[EntityId] = Field(
        default=None,
        description="Account that pays for the scheduled transaction once it executes.",
    )
    is_admin_key: Optional[bool] = Field(
        default=None,
        description="If true, the default account's key can delete the schedule.",
    )
    wait_for_expiry: Optional[bool] = Field(
        default=None,
        description="If true, execute only at expiration even when all signatures arrive earlier.",
    )


class TransferEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    account_id: EntityId = Field(description='Recipient account ID (e.g. "0.0.1234").')
    amount: Decimal = Field(description="Amount of HBAR to transfer.")


class TransferHbarParameters(ToolParameters):
    transfers: List[TransferEntry] = Field(
        min_length=1, description="Array of HBAR transfers, one per recipient."
    )
    source_account_id: Optional[EntityId] = Field(default=None, description="Sender account ID.")
    transaction_memo: Optional[str] = Field(
        default=None, description="Memo to include with the transaction."
    )
    scheduling_params: Optional[SchedulingParameters] = Field(
        default=None, description="Set to schedule the transfer instead of executing it."
    )


class SignScheduleTransactionParameters(ToolParameters):
    schedule_id: EntityId = Field(description="The ID of the scheduled transaction to sign.")
    transaction_memo: Optional[str] = Field(
        default=None, description="Memo to include with the signing transaction."
    )


@dataclass(frozen=True, slots=True)
class HbarTransfer:
    account_id: str
    amount: int  # signed tinybars


@dataclass(frozen=True, slots=True)
class TransferHbarNormalised:
    hbar_transfers: Tuple[HbarTransfer, ...]
    transaction_memo: Optional[str] = None


@dataclass(frozen=True, slots=True)
class SignScheduleTransactionNormalised:
    schedule_id: str
    transaction_memo: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ScheduleCreateNormalised:
    payer_account_id: Optional[str] = None
    admin_key: Any = None  # hiero PublicKey
    schedule_memo: Optional[str] = None
    wait_for_expiry: bool = False
