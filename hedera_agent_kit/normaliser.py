"""
Business rules that turn validated tool input into ledger-ready parameters.

Every function here takes a raw parameter model (already validated), the call
``Context`` and the ledger client, and returns a new frozen normalised record.
The only I/O is through the injected mirror node service. Failures raise
``HederaAgentKitError`` subclasses (or mirror errors) for the tool boundary to
report.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Iterable, List, Optional, Tuple, Union

from hiero_sdk_python import PublicKey
from hiero_sdk_python.tokens.supply_type import SupplyType
from hiero_sdk_python.tokens.token_type import TokenType

from hedera_agent_kit.config import (
    DEFAULT_CONTRACT_GAS,
    DEFAULT_FUNGIBLE_MAX_SUPPLY,
    DEFAULT_NFT_MAX_SUPPLY,
    DEFAULT_TOPIC_MESSAGES,
    MAX_TOPIC_MESSAGES,
    Context,
)
from hedera_agent_kit.errors import KeyResolutionError, ParameterValidationError
from hedera_agent_kit.mirror_api import TopicMessagesQuery
from hedera_agent_kit.schemas.account import (
    HbarTransfer,
    ScheduleCreateNormalised,
    SchedulingParameters,
    SignScheduleTransactionNormalised,
    SignScheduleTransactionParameters,
    TransferHbarNormalised,
    TransferHbarParameters,
)
from hedera_agent_kit.schemas.consensus import (
    CreateTopicNormalised,
    CreateTopicParameters,
    DeleteTopicNormalised,
    DeleteTopicParameters,
    SubmitTopicMessageNormalised,
    SubmitTopicMessageParameters,
)
from hedera_agent_kit.schemas.contract import (
    ContractArgument,
    ContractFunctionArgument,
    ExecuteContractNormalised,
    ExecuteContractParameters,
)
from hedera_agent_kit.schemas.queries import (
    AccountBalanceQueryParameters,
    AccountQueryNormalised,
    AccountTokenBalancesQueryNormalised,
    AccountTokenBalancesQueryParameters,
    TopicMessagesQueryParameters,
)
from hedera_agent_kit.schemas.token import (
    AirdropFungibleTokenNormalised,
    AirdropFungibleTokenParameters,
    AssociateTokenParameters,
    CreateFungibleTokenNormalised,
    CreateFungibleTokenParameters,
    CreateNonFungibleTokenNormalised,
    CreateNonFungibleTokenParameters,
    DissociateTokenParameters,
    MintFungibleTokenNormalised,
    MintFungibleTokenParameters,
    MintNonFungibleTokenNormalised,
    MintNonFungibleTokenParameters,
    TokenAssociationNormalised,
    TokenTransfer,
    TransferTokenNormalised,
    TransferTokenParameters,
)
from hedera_agent_kit.utils.account_resolver import (
    get_default_account,
    operator_public_key,
    resolve_account,
)
from hedera_agent_kit.utils.decimals import hbar_to_tinybars, to_base_unit
from hedera_agent_kit.validators import clamp_limit

logger = logging.getLogger(__name__)


def _format_amount(amount: Decimal) -> str:
    # Decimal("1E+1") -> "10", Decimal("0.10") -> "0.10"
    return format(amount, "f")


def parse_public_key(value: str, key_type: Optional[str] = None) -> Any:
    """Parse a hex public key, using the mirror node's ``_type`` label when known."""
    if key_type == "ED25519":
        return PublicKey.from_string_ed25519(value)
    if key_type == "ECDSA_SECP256K1":
        return PublicKey.from_string_ecdsa(value)
    return PublicKey.from_string(value)


async def resolve_public_key(account_id: str, context: Context, client: Any, mirror: Any) -> Any:
    """
    Find the public key that controls ``account_id``.

    Order: the context's key when the account is the context account, then the
    key reported by the mirror node, then the client operator's key.

    Raises:
        KeyResolutionError: if no key could be determined.
        MirrorNodeError: if the mirror lookup fails.
    """
    if context.account_public_key and account_id == context.account_id:
        return parse_public_key(context.account_public_key)

    account = await mirror.get_account(account_id)
    if account.account_public_key:
        return parse_public_key(account.account_public_key, account.key_type)

    fallback = operator_public_key(client)
    if fallback is None:
        raise KeyResolutionError(f"Could not determine public key for account {account_id}")
    logger.debug("Mirror node returned no key for %s, using operator key", account_id)
    return fallback


async def normalise_create_fungible_token_params(
    params: CreateFungibleTokenParameters, context: Context, client: Any, mirror: Any
) -> CreateFungibleTokenNormalised:
    treasury_account_id = resolve_account(params.treasury_account_id, context, client)

    finite = (params.supply_type or "finite") == "finite"
    decimals = params.decimals if params.decimals is not None else 0
    initial_supply = to_base_unit(params.initial_supply or 0, decimals)

    max_supply: Optional[int] = None
    if finite:
        raw_max = params.max_supply if params.max_supply is not None else DEFAULT_FUNGIBLE_MAX_SUPPLY
        max_supply = to_base_unit(raw_max, decimals)
        if initial_supply > max_supply:
            raise ParameterValidationError(
                f"Initial supply ({initial_supply}) exceeds max supply ({max_supply})"
            )

    supply_key = None
    if params.is_supply_key:
        supply_key = await resolve_public_key(
            get_default_account(context, client), context, client, mirror
        )

    return CreateFungibleTokenNormalised(
        token_name=params.token_name,
        token_symbol=params.token_symbol,
        decimals=decimals,
        initial_supply=initial_supply,
        supply_type=SupplyType.FINITE if finite else SupplyType.INFINITE,
        treasury_account_id=treasury_account_id,
        max_supply=max_supply,
        supply_key=supply_key,
        token_memo=params.token_memo,
    )


async def normalise_create_non_fungible_token_params(
    params: CreateNonFungibleTokenParameters, context: Context, client: Any, mirror: Any
) -> CreateNonFungibleTokenNormalised:
    treasury_account_id = resolve_account(params.treasury_account_id, context, client)
    # Supply key is mandatory for NFT classes.
    supply_key = await resolve_public_key(
        get_default_account(context, client), context, client, mirror
    )
    return CreateNonFungibleTokenNormalised(
        token_name=params.token_name,
        token_symbol=params.token_symbol,
        max_supply=params.max_supply or DEFAULT_NFT_MAX_SUPPLY,
        treasury_account_id=treasury_account_id,
        supply_key=supply_key,
        supply_type=SupplyType.FINITE,
        token_type=TokenType.NON_FUNGIBLE_UNIQUE,
    )


def normalise_transfer_hbar(
    params: TransferHbarParameters, context: Context, client: Any
) -> TransferHbarNormalised:
    """
    Convert HBAR amounts to tinybars and append the debit for the source.

    The resulting list always sums to zero and holds exactly one entry for the
    source account.
    """
    source_account_id = resolve_account(params.source_account_id, context, client)

    transfers: List[HbarTransfer] = []
    total = 0
    for entry in params.transfers:
        tinybars = hbar_to_tinybars(entry.amount)
        if tinybars <= 0:
            raise ParameterValidationError(f"Invalid transfer amount: {_format_amount(entry.amount)}")
        _reject_self_transfer(entry.account_id, source_account_id)
        total += tinybars
        transfers.append(HbarTransfer(account_id=entry.account_id, amount=tinybars))

    transfers.append(HbarTransfer(account_id=source_account_id, amount=-total))
    return TransferHbarNormalised(
        hbar_transfers=tuple(transfers), transaction_memo=params.transaction_memo
    )


async def normalise_airdrop_fungible_token_params(
    params: AirdropFungibleTokenParameters, context: Context, client: Any, mirror: Any
) -> AirdropFungibleTokenNormalised:
    source_account_id = resolve_account(params.source_account_id, context, client)
    details = await mirror.get_token_details(params.token_id)
    transfers = _token_transfers(
        params.token_id,
        source_account_id,
        ((recipient.account_id, recipient.amount) for recipient in params.recipients),
        details.decimals,
        label="recipient",
    )
    return AirdropFungibleTokenNormalised(
        token_transfers=transfers, transaction_memo=params.transaction_memo
    )


async def normalise_transfer_token_params(
    params: TransferTokenParameters, context: Context, client: Any, mirror: Any
) -> TransferTokenNormalised:
    source_account_id = resolve_account(params.source_account_id, context, client)
    details = await mirror.get_token_details(params.token_id)
    transfers = _token_transfers(
        params.token_id,
        source_account_id,
        [(params.receiver_account_id, params.amount)],
        details.decimals,
        label="transfer",
    )
    return TransferTokenNormalised(token_transfers=transfers, transaction_memo=params.transaction_memo)


def _reject_self_transfer(account_id: str, source_account_id: str) -> None:
    if account_id == source_account_id:
        raise ParameterValidationError(
            f"Cannot transfer from account {source_account_id} to itself"
        )


def _token_transfers(
    token_id: str,
    source_account_id: str,
    entries: Iterable[Tuple[str, Decimal]],
    decimals: int,
    *,
    label: str,
) -> Tuple[TokenTransfer, ...]:
    """Credit each entry in base units and debit their total from the source."""
    transfers: List[TokenTransfer] = []
    total = 0
    for account_id, display_amount in entries:
        amount = to_base_unit(display_amount, decimals)
        if amount <= 0:
            raise ParameterValidationError(
                f"Invalid {label} amount: {_format_amount(display_amount)}"
            )
        _reject_self_transfer(account_id, source_account_id)
        total += amount
        transfers.append(TokenTransfer(token_id=token_id, account_id=account_id, amount=amount))

    transfers.append(TokenTransfer(token_id=token_id, account_id=source_account_id, amount=-total))
    return tuple(transfers)


def normalise_token_association_params(
    params: Union[AssociateTokenParameters, DissociateTokenParameters], context: Context, client: Any
) -> TokenAssociationNormalised:
    # Repeated ids are dropped, first occurrence order kept.
    return TokenAssociationNormalised(
        account_id=resolve_account(params.account_id, context, client),
        token_ids=tuple(dict.fromkeys(params.token_ids)),
    )


async def normalise_mint_fungible_token_params(
    params: MintFungibleTokenParameters, context: Context, client: Any, mirror: Any
) -> MintFungibleTokenNormalised:
    details = await mirror.get_token_details(params.token_id)
    amount = to_base_unit(params.amount, details.decimals)
    if amount <= 0:
        raise ParameterValidationError(f"Invalid mint amount: {_format_amount(params.amount)}")
    return MintFungibleTokenNormalised(token_id=params.token_id, amount=amount)


def normalise_mint_non_fungible_token_params(
    params: MintNonFungibleTokenParameters, context: Context
) -> MintNonFungibleTokenNormalised:
    return MintNonFungibleTokenNormalised(
        token_id=params.token_id,
        metadata=tuple(uri.encode("utf-8") for uri in params.uris),
    )


async def normalise_create_topic_params(
    params: CreateTopicParameters, context: Context, client: Any, mirror: Any
) -> CreateTopicNormalised:
    submit_key = None
    if params.is_submit_key:
        submit_key = await resolve_public_key(
            get_default_account(context, client), context, client, mirror
        )
    return CreateTopicNormalised(topic_memo=params.topic_memo, submit_key=submit_key)


def normalise_submit_topic_message_params(
    params: SubmitTopicMessageParameters, context: Context
) -> SubmitTopicMessageNormalised:
    return SubmitTopicMessageNormalised(topic_id=params.topic_id, message=params.message)


def normalise_delete_topic_params(
    params: DeleteTopicParameters, context: Context
) -> DeleteTopicNormalised:
    return DeleteTopicNormalised(topic_id=params.topic_id)


def normalise_sign_schedule_params(
    params: SignScheduleTransactionParameters, context: Context
) -> SignScheduleTransactionNormalised:
    return SignScheduleTransactionNormalised(
        schedule_id=params.schedule_id, transaction_memo=params.transaction_memo
    )


async def normalise_scheduling_params(
    params: Optional[SchedulingParameters], context: Context, client: Any, mirror: Any
) -> Optional[ScheduleCreateNormalised]:
    """
    Resolve the schedule wrapper for a transaction, or None to run it directly.

    The payer of the inner transaction defaults to the context account.
    ``is_admin_key`` attaches the default account's public key as the
    schedule admin key.
    """
    if params is None or not params.is_scheduled:
        return None
    admin_key = None
    if params.is_admin_key:
        admin_key = await resolve_public_key(
            get_default_account(context, client), context, client, mirror
        )
    return ScheduleCreateNormalised(
        payer_account_id=params.payer_account_id or context.account_id,
        admin_key=admin_key,
        schedule_memo=params.schedule_memo,
        wait_for_expiry=bool(params.wait_for_expiry),
    )


def _int_bits(type_name: str) -> int:
    return int(type_name.removeprefix("u").removeprefix("int"))


def _contract_argument(argument: ContractFunctionArgument) -> ContractArgument:
    type_name, value = argument.type, argument.value
    if type_name == "bool":
        if not isinstance(value, bool):
            raise ParameterValidationError(f"Invalid bool argument: {value!r}")
        return ContractArgument(type=type_name, value=value)

    if type_name in ("string", "address", "bytes32"):
        if not isinstance(value, str):
            raise ParameterValidationError(f"Invalid {type_name} argument: {value!r}")
        if type_name == "string":
            return ContractArgument(type=type_name, value=value)
        hex_value = value.removeprefix("0x")
        size = 20 if type_name == "address" else 32
        try:
            raw = bytes.fromhex(hex_value)
        except ValueError:
            raw = b""
        if len(raw) != size:
            raise ParameterValidationError(f"Invalid {type_name} argument: {value!r}")
        return ContractArgument(type=type_name, value=raw)

    # Remaining types are (u)intN.
    if isinstance(value, bool):
        raise ParameterValidationError(f"Invalid {type_name} argument: {value!r}")
    try:
        number = int(value)
    except ValueError:
        raise ParameterValidationError(f"Invalid {type_name} argument: {value!r}") from None
    bits = _int_bits(type_name)
    if type_name.startswith("u"):
        low, high = 0, 2**bits - 1
    else:
        low, high = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    if not low <= number <= high:
        raise ParameterValidationError(f"{type_name} argument out of range: {number}")
    return ContractArgument(type=type_name, value=number)


def normalise_execute_contract_params(
    params: ExecuteContractParameters, context: Context
) -> ExecuteContractNormalised:
    payable_amount = None
    if params.payable_amount is not None:
        payable_amount = hbar_to_tinybars(params.payable_amount)
        if payable_amount <= 0:
            raise ParameterValidationError(
                f"Invalid payable amount: {_format_amount(params.payable_amount)}"
            )
    return ExecuteContractNormalised(
        contract_id=params.contract_id,
        function_name=params.function_name,
        function_parameters=tuple(
            _contract_argument(argument) for argument in params.function_parameters or ()
        ),
        gas=params.gas or DEFAULT_CONTRACT_GAS,
        payable_amount=payable_amount,
        transaction_memo=params.transaction_memo,
    )


def normalise_hbar_balance_params(
    params: AccountBalanceQueryParameters, context: Context, client: Any
) -> AccountQueryNormalised:
    return AccountQueryNormalised(account_id=resolve_account(params.account_id, context, client))


def normalise_account_token_balances_params(
    params: AccountTokenBalancesQueryParameters, context: Context, client: Any
) -> AccountTokenBalancesQueryNormalised:
    return AccountTokenBalancesQueryNormalised(
        account_id=resolve_account(params.account_id, context, client),
        token_id=params.token_id,
    )


def _mirror_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return f"{int(value.timestamp())}.000000000"


def normalise_topic_messages_query_params(
    params: TopicMessagesQueryParameters, context: Context
) -> TopicMessagesQuery:
    """Translate ISO datetimes into mirror node ``seconds.nanos`` bounds."""
    return TopicMessagesQuery(
        topic_id=params.topic_id,
        lower_timestamp=_mirror_timestamp(params.start_time),
        upper_timestamp=_mirror_timestamp(params.end_time),
        limit=clamp_limit(params.limit, default=DEFAULT_TOPIC_MESSAGES, max_value=MAX_TOPIC_MESSAGES),
    )
