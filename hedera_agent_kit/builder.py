"""
Transaction constructors.

Each function maps an already normalised parameter record onto an unsubmitted
``hiero_sdk_python`` transaction. Nothing here validates or applies defaults.
"""

from __future__ import annotations

from typing import Any

from hiero_sdk_python import (
    AccountId,
    ContractExecuteTransaction,
    ContractFunctionParameters,
    ContractId,
    ScheduleCreateTransaction,
    ScheduleId,
    ScheduleSignTransaction,
    TokenAirdropTransaction,
    TokenAssociateTransaction,
    TokenCreateTransaction,
    TokenDissociateTransaction,
    TokenId,
    TokenMintTransaction,
    TopicCreateTransaction,
    TopicDeleteTransaction,
    TopicId,
    TopicMessageSubmitTransaction,
    TransferTransaction,
)
from hiero_sdk_python.tokens.token_type import TokenType

from hedera_agent_kit.schemas.account import (
    ScheduleCreateNormalised,
    SignScheduleTransactionNormalised,
    TransferHbarNormalised,
)
from hedera_agent_kit.schemas.consensus import (
    CreateTopicNormalised,
    DeleteTopicNormalised,
    SubmitTopicMessageNormalised,
)
from hedera_agent_kit.schemas.contract import ExecuteContractNormalised
from hedera_agent_kit.schemas.token import (
    AirdropFungibleTokenNormalised,
    CreateFungibleTokenNormalised,
    CreateNonFungibleTokenNormalised,
    MintFungibleTokenNormalised,
    MintNonFungibleTokenNormalised,
    TokenAssociationNormalised,
    TransferTokenNormalised,
)


def transfer_hbar(params: TransferHbarNormalised) -> TransferTransaction:
    tx = TransferTransaction()
    for entry in params.hbar_transfers:
        tx.add_hbar_transfer(AccountId.from_string(entry.account_id), entry.amount)
    if params.transaction_memo:
        tx.set_transaction_memo(params.transaction_memo)
    return tx


def airdrop_fungible_token(params: AirdropFungibleTokenNormalised) -> TokenAirdropTransaction:
    tx = TokenAirdropTransaction()
    for entry in params.token_transfers:
        tx.add_token_transfer(
            TokenId.from_string(entry.token_id), AccountId.from_string(entry.account_id), entry.amount
        )
    if params.transaction_memo:
        tx.set_transaction_memo(params.transaction_memo)
    return tx


def create_fungible_token(params: CreateFungibleTokenNormalised) -> TokenCreateTransaction:
    tx = (
        TokenCreateTransaction()
        .set_token_name(params.token_name)
        .set_token_symbol(params.token_symbol)
        .set_decimals(params.decimals)
        .set_initial_supply(params.initial_supply)
        .set_treasury_account_id(AccountId.from_string(params.treasury_account_id))
        .set_token_type(TokenType.FUNGIBLE_COMMON)
        .set_supply_type(params.supply_type)
    )
    if params.max_supply is not None:
        tx.set_max_supply(params.max_supply)
    if params.supply_key is not None:
        tx.set_supply_key(params.supply_key)
    if params.token_memo:
        tx.set_memo(params.token_memo)
    return tx


def create_non_fungible_token(params: CreateNonFungibleTokenNormalised) -> TokenCreateTransaction:
    return (
        TokenCreateTransaction()
        .set_token_name(params.token_name)
        .set_token_symbol(params.token_symbol)
        .set_decimals(0)
        .set_initial_supply(0)
        .set_treasury_account_id(AccountId.from_string(params.treasury_account_id))
        .set_token_type(params.token_type)
        .set_supply_type(params.supply_type)
        .set_max_supply(params.max_supply)
        .set_supply_key(params.supply_key)
    )


def mint_fungible_token(params: MintFungibleTokenNormalised) -> TokenMintTransaction:
    return (
        TokenMintTransaction()
        .set_token_id(TokenId.from_string(params.token_id))
        .set_amount(params.amount)
    )


def mint_non_fungible_token(params: MintNonFungibleTokenNormalised) -> TokenMintTransaction:
    return (
        TokenMintTransaction()
        .set_token_id(TokenId.from_string(params.token_id))
        .set_metadata(list(params.metadata))
    )


def create_topic(params: CreateTopicNormalised) -> TopicCreateTransaction:
    tx = TopicCreateTransaction()
    if params.topic_memo:
        tx.set_memo(params.topic_memo)
    if params.submit_key is not None:
        tx.set_submit_key(params.submit_key)
    return tx


def submit_topic_message(params: SubmitTopicMessageNormalised) -> TopicMessageSubmitTransaction:
    return (
        TopicMessageSubmitTransaction()
        .set_topic_id(TopicId.from_string(params.topic_id))
        .set_message(params.message)
    )


def sign_schedule_transaction(params: SignScheduleTransactionNormalised) -> ScheduleSignTransaction:
    tx = ScheduleSignTransaction().set_schedule_id(ScheduleId.from_string(params.schedule_id))
    if params.transaction_memo:
        tx.set_transaction_memo(params.transaction_memo)
    return tx


def transfer_token(params: TransferTokenNormalised) -> TransferTransaction:
    tx = TransferTransaction()
    for entry in params.token_transfers:
        tx.add_token_transfer(
            TokenId.from_string(entry.token_id), AccountId.from_string(entry.account_id), entry.amount
        )
    if params.transaction_memo:
        tx.set_transaction_memo(params.transaction_memo)
    return tx


def associate_token(params: TokenAssociationNormalised) -> TokenAssociateTransaction:
    return (
        TokenAssociateTransaction()
        .set_account_id(AccountId.from_string(params.account_id))
        .set_token_ids([TokenId.from_string(token_id) for token_id in params.token_ids])
    )


def dissociate_token(params: TokenAssociationNormalised) -> TokenDissociateTransaction:
    return (
        TokenDissociateTransaction()
        .set_account_id(AccountId.from_string(params.account_id))
        .set_token_ids([TokenId.from_string(token_id) for token_id in params.token_ids])
    )


def delete_topic(params: DeleteTopicNormalised) -> TopicDeleteTransaction:
    return TopicDeleteTransaction().set_topic_id(TopicId.from_string(params.topic_id))


def execute_contract(params: ExecuteContractNormalised) -> ContractExecuteTransaction:
    function_parameters = ContractFunctionParameters()
    for argument in params.function_parameters:
        getattr(function_parameters, f"add_{argument.type}")(argument.value)
    tx = (
        ContractExecuteTransaction()
        .set_contract_id(ContractId.from_string(params.contract_id))
        .set_gas(params.gas)
        .set_function(params.function_name, function_parameters)
    )
    if params.payable_amount is not None:
        tx.set_payable_amount(params.payable_amount)
    if params.transaction_memo:
        tx.set_transaction_memo(params.transaction_memo)
    return tx


def schedule_transaction(tx: Any, params: ScheduleCreateNormalised) -> ScheduleCreateTransaction:
    """Wrap an unfrozen transaction in a schedule create transaction."""
    schedule = ScheduleCreateTransaction().set_scheduled_transaction(tx)
    if params.schedule_memo:
        schedule.set_schedule_memo(params.schedule_memo)
    if params.payer_account_id:
        schedule.set_payer_account_id(AccountId.from_string(params.payer_account_id))
    if params.admin_key is not None:
        schedule.set_admin_key(params.admin_key)
    if params.wait_for_expiry:
        schedule.set_wait_for_expiry(True)
    return schedule
