"""Smart contract service parameters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from hedera_agent_kit.config import DEFAULT_CONTRACT_GAS, MAX_CONTRACT_GAS
from hedera_agent_kit.schemas import ToolParameters
from hedera_agent_kit.validators import EntityId

ContractArgumentType = Literal[
    "address",
    "bool",
    "string",
    "bytes32",
    "int32",
    "int64",
    "int256",
    "uint8",
    "uint32",
    "uint64",
    "uint256",
]


class ContractFunctionArgument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: ContractArgumentType = Field(description="Solidity type of the argument.")
    value: Union[bool, int, str] = Field(
        description="Argument value. Addresses and bytes32 values are hex strings."
    )


class ExecuteContractParameters(ToolParameters):
    contract_id: EntityId = Field(description="The ID of the contract to call.")
    function_name: str = Field(min_length=1, description="The contract function to call.")
    function_parameters: Optional[List[ContractFunctionArgument]] = Field(
        default=None, description="Ordered function arguments, each with type and value."
    )
    gas: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_CONTRACT_GAS,
        description=f"Gas limit for the call. Defaults to {DEFAULT_CONTRACT_GAS}.",
    )
    payable_amount: Optional[Decimal] = Field(
        default=None, gt=0, description="HBAR to send with a payable function call."
    )
    transaction_memo: Optional[str] = Field(
        default=None, description="Memo to include with the transaction."
    )


class ContractInfoQueryParameters(ToolParameters):
    contract_id: EntityId = Field(description="The contract ID to query.")


@dataclass(frozen=True, slots=True)
class ContractArgument:
    type: str
    value: Any  # int, bool, str, or raw bytes for address and bytes32


@dataclass(frozen=True, slots=True)
class ExecuteContractNormalised:
    contract_id: str
    function_name: str
    function_parameters: Tuple[ContractArgument, ...]
    gas: int
    payable_amount: Optional[int] = None  # tinybars
    transaction_memo: Optional[str] = None
