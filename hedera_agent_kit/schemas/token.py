"""Token service parameters for fungible and non-fungible tokens."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated, Any, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from hedera_agent_kit.config import (
    MAX_NFT_URI_LENGTH,
    MAX_NFT_URIS,
    MAX_TOKEN_ASSOCIATIONS,
    MAX_TOKEN_DECIMALS,
)
from hedera_agent_kit.schemas import ToolParameters
from hedera_agent_kit.schemas.account import SchedulingParameters
from hedera_agent_kit.validators import EntityId


class CreateFungibleTokenParameters(ToolParameters):
    token_name: str = Field(min_length=1, description="The name of the token.")
    token_symbol: str = Field(min_length=1, description="The symbol of the token.")
    initial_supply: Optional[Decimal] = Field(
        default=None, ge=0, description="The initial supply of the token, in display units."
    )
    supply_type: Optional[Literal["finite", "infinite"]] = Field(
        default=None, description="Supply type of the token."
    )
    max_supply: Optional[Decimal] = Field(
        default=None, gt=0, description="The maximum supply of the token, in display units."
    )
    decimals: Optional[int] = Field(
        default=None, ge=0, le=MAX_TOKEN_DECIMALS, description="The number of decimals."
    )
    treasury_account_id: Optional[EntityId] = Field(
        default=None, description="The treasury account of the token."
    )
    is_supply_key: Optional[bool] = Field(
        default=None, description="Determines if the token supply key should be set."
    )
    token_memo: Optional[str] = Field(default=None, description="Memo stored on the token.")


class CreateNonFungibleTokenParameters(ToolParameters):
    token_name: str = Field(min_length=1, description="The name of the token.")
    token_symbol: str = Field(min_length=1, description="The symbol of the token.")
    max_supply: Optional[int] = Field(
        default=None, gt=0, description="The maximum number of NFTs that can be minted."
    )
    treasury_account_id: Optional[EntityId] = Field(
        default=None, description="The treasury account of the token."
    )


class MintFungibleTokenParameters(ToolParameters):
    token_id: EntityId = Field(description="The id of the token.")
    amount: Decimal = Field(description="The amount of tokens to mint, in display units.")


class MintNonFungibleTokenParameters(ToolParameters):
    token_id: EntityId = Field(description="The id of the NFT class.")
    uris: List[Annotated[str, Field(max_length=MAX_NFT_URI_LENGTH)]] = Field(
        min_length=1,
        max_length=MAX_NFT_URIS,
        description="An array of URIs hosting NFT metadata.",
    )


class AirdropRecipient(BaseModel):
    model_config = ConfigDict(extra="forbid")

    account_id: EntityId = Field(description='Recipient account ID (e.g. "0.0.1234").')
    amount: Decimal = Field(description="Amount of tokens to send, in display units.")


class AirdropFungibleTokenParameters(ToolParameters):
    token_id: EntityId = Field(description="The id of the token.")
    source_account_id: Optional[EntityId] = Field(
        default=None, description="The account to airdrop the token from."
    )
    recipients: List[AirdropRecipient] = Field(
        min_length=1, description="Array of recipient objects, each with account_id and amount."
    )
    transaction_memo: Optional[str] = Field(
        default=None, description="Memo to include with the transaction."
    )


class TransferTokenParameters(ToolParameters):
    token_id: EntityId = Field(description="The id of the token to transfer.")
    amount: Decimal = Field(description="The amount of tokens to transfer, in display units.")
    receiver_account_id: EntityId = Field(description="The account to transfer the token to.")
    source_account_id: Optional[EntityId] = Field(
        default=None, description="The account to transfer the token from."
    )
    transaction_memo: Optional[str] = Field(
        default=None, description="Memo to include with the transaction."
    )
    scheduling_params: Optional[SchedulingParameters] = Field(
        default=None, description="Set to schedule the transfer instead of executing it."
    )


class AssociateTokenParameters(ToolParameters):
    token_ids: List[EntityId] = Field(
        min_length=1,
        max_length=MAX_TOKEN_ASSOCIATIONS,
        description="The ids of the tokens to associate with the account.",
    )
    account_id: Optional[EntityId] = Field(
        default=None, description="The account to associate the tokens with."
    )


class DissociateTokenParameters(ToolParameters):
    token_ids: List[EntityId] = Field(
        min_length=1,
        max_length=MAX_TOKEN_ASSOCIATIONS,
        description="The ids of the tokens to dissociate from the account.",
    )
    account_id: Optional[EntityId] = Field(
        default=None, description="The account to dissociate the tokens from."
    )


@dataclass(frozen=True, slots=True)
class CreateFungibleTokenNormalised:
    token_name: str
    token_symbol: str
    decimals: int
    initial_supply: int
    supply_type: Any  # hiero SupplyType
    treasury_account_id: str
    max_supply: Optional[int] = None
    supply_key: Any = None  # hiero PublicKey
    token_memo: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CreateNonFungibleTokenNormalised:
    token_name: str
    token_symbol: str
    max_supply: int
    treasury_account_id: str
    supply_key: Any
    supply_type: Any
    token_type: Any


@dataclass(frozen=True, slots=True)
class MintFungibleTokenNormalised:
    token_id: str
    amount: int


@dataclass(frozen=True, slots=True)
class MintNonFungibleTokenNormalised:
    token_id: str
    metadata: Tuple[bytes, ...]


@dataclass(frozen=True, slots=True)
class TokenTransfer:
    token_id: str
    account_id: str
    amount: int  # signed base units


@dataclass(frozen=True, slots=True)
class AirdropFungibleTokenNormalised:
    token_transfers: Tuple[TokenTransfer, ...]
    transaction_memo: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TransferTokenNormalised:
    token_transfers: Tuple[TokenTransfer, ...]
    transaction_memo: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TokenAssociationNormalised:
    account_id: str
    token_ids: Tuple[str, ...]
