"""
Fluent builders for using the kit directly from Python code.

Each preparation method runs the same validation and normalisation as the
matching tool, keeps the built transaction, and returns the builder so the
call can be chained into ``execute()``::

    kit = HederaAgentKit(client)
    result = await (await kit.hts().create_fungible_token({...})).execute()

Unlike tools, builders raise on failure.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from hedera_agent_kit import builder, normaliser
from hedera_agent_kit.config import Context
from hedera_agent_kit.errors import HederaAgentKitError, NotSupportedError
from hedera_agent_kit.mirror_api import get_mirrornode_service
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.account import (
    ScheduleCreateNormalised,
    SignScheduleTransactionParameters,
    TransferHbarParameters,
)
from hedera_agent_kit.schemas.consensus import (
    CreateTopicParameters,
    DeleteTopicParameters,
    SubmitTopicMessageParameters,
)
from hedera_agent_kit.schemas.contract import ExecuteContractParameters
from hedera_agent_kit.schemas.token import (
    AirdropFungibleTokenParameters,
    AssociateTokenParameters,
    CreateFungibleTokenParameters,
    CreateNonFungibleTokenParameters,
    DissociateTokenParameters,
    MintFungibleTokenParameters,
    MintNonFungibleTokenParameters,
    TransferTokenParameters,
)
from hedera_agent_kit.strategies import handle_transaction


class HederaAgentKit:
    """Entry point bundling a ledger client with its call context."""

    def __init__(self, client: Any, context: Optional[Context] = None) -> None:
        self.client = client
        self.context = context or Context()

    @property
    def mirrornode(self):
        return get_mirrornode_service(self.context, self.client)

    def accounts(self) -> "AccountBuilder":
        return AccountBuilder(self)

    def hts(self) -> "HtsBuilder":
        return HtsBuilder(self)

    def hcs(self) -> "HcsBuilder":
        return HcsBuilder(self)

    def scs(self) -> "ScsBuilder":
        return ScsBuilder(self)


class BaseServiceBuilder:
    def __init__(self, kit: HederaAgentKit) -> None:
        self.kit = kit
        self._transaction: Any = None

    @property
    def transaction(self) -> Any:
        return self._transaction

    def _set_transaction(self, tx: Any) -> "BaseServiceBuilder":
        self._transaction = tx
        return self

    async def execute(
        self,
        *,
        schedule: bool = False,
        schedule_memo: Optional[str] = None,
        schedule_payer_account_id: Optional[str] = None,
        schedule_admin_key: Any = None,
    ) -> Dict[str, Any]:
        """
        Run the prepared transaction through the context's execution mode.

        With ``schedule=True`` a schedule create transaction wrapping the
        prepared one is submitted (or returned as bytes) instead. The schedule
        payer defaults to the context account.

        Raises:
            HederaAgentKitError: if nothing has been prepared, or the ledger
                rejected the transaction.
        """
        if self._transaction is None:
            raise HederaAgentKitError("No transaction has been prepared", code="NO_TRANSACTION")
        tx, self._transaction = self._transaction, None
        scheduling = None
        if schedule:
            scheduling = ScheduleCreateNormalised(
                payer_account_id=schedule_payer_account_id or self.kit.context.account_id,
                admin_key=schedule_admin_key,
                schedule_memo=schedule_memo,
            )
        return await handle_transaction(tx, self.kit.client, self.kit.context, scheduling)


class AccountBuilder(BaseServiceBuilder):
    def transfer_hbar(self, params: Any) -> "AccountBuilder":
        parsed = parse_params(TransferHbarParameters, params)
        normalised = normaliser.normalise_transfer_hbar(parsed, self.kit.context, self.kit.client)
        return self._set_transaction(builder.transfer_hbar(normalised))

    def prepare_sign_scheduled_transaction(self, params: Any) -> "AccountBuilder":
        parsed = parse_params(SignScheduleTransactionParameters, params)
        normalised = normaliser.normalise_sign_schedule_params(parsed, self.kit.context)
        return self._set_transaction(builder.sign_schedule_transaction(normalised))

    def delete_nft_spender_allowance(self, params: Any = None) -> "AccountBuilder":
        raise NotSupportedError(
            "Deleting an NFT spender allowance is not supported by the ledger SDK yet"
        )


class HtsBuilder(BaseServiceBuilder):
    async def create_fungible_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(CreateFungibleTokenParameters, params)
        normalised = await normaliser.normalise_create_fungible_token_params(
            parsed, self.kit.context, self.kit.client, self.kit.mirrornode
        )
        return self._set_transaction(builder.create_fungible_token(normalised))

    async def create_non_fungible_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(CreateNonFungibleTokenParameters, params)
        normalised = await normaliser.normalise_create_non_fungible_token_params(
            parsed, self.kit.context, self.kit.client, self.kit.mirrornode
        )
        return self._set_transaction(builder.create_non_fungible_token(normalised))

    async def mint_fungible_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(MintFungibleTokenParameters, params)
        normalised = await normaliser.normalise_mint_fungible_token_params(
            parsed, self.kit.context, self.kit.client, self.kit.mirrornode
        )
        return self._set_transaction(builder.mint_fungible_token(normalised))

    def mint_non_fungible_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(MintNonFungibleTokenParameters, params)
        normalised = normaliser.normalise_mint_non_fungible_token_params(parsed, self.kit.context)
        return self._set_transaction(builder.mint_non_fungible_token(normalised))

    async def airdrop_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(AirdropFungibleTokenParameters, params)
        normalised = await normaliser.normalise_airdrop_fungible_token_params(
            parsed, self.kit.context, self.kit.client, self.kit.mirrornode
        )
        return self._set_transaction(builder.airdrop_fungible_token(normalised))

    async def transfer_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(TransferTokenParameters, params)
        normalised = await normaliser.normalise_transfer_token_params(
            parsed, self.kit.context, self.kit.client, self.kit.mirrornode
        )
        return self._set_transaction(builder.transfer_token(normalised))

    def associate_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(AssociateTokenParameters, params)
        normalised = normaliser.normalise_token_association_params(
            parsed, self.kit.context, self.kit.client
        )
        return self._set_transaction(builder.associate_token(normalised))

    def dissociate_token(self, params: Any) -> "HtsBuilder":
        parsed = parse_params(DissociateTokenParameters, params)
        normalised = normaliser.normalise_token_association_params(
            parsed, self.kit.context, self.kit.client
        )
        return self._set_transaction(builder.dissociate_token(normalised))


class HcsBuilder(BaseServiceBuilder):
    async def create_topic(self, params: Any = None) -> "HcsBuilder":
        parsed = parse_params(CreateTopicParameters, params)
        normalised = await normaliser.normalise_create_topic_params(
            parsed, self.kit.context, self.kit.client, self.kit.mirrornode
        )
        return self._set_transaction(builder.create_topic(normalised))

    def submit_message_to_topic(self, params: Any) -> "HcsBuilder":
        parsed = parse_params(SubmitTopicMessageParameters, params)
        normalised = normaliser.normalise_submit_topic_message_params(parsed, self.kit.context)
        return self._set_transaction(builder.submit_topic_message(normalised))

    def delete_topic(self, params: Any) -> "HcsBuilder":
        parsed = parse_params(DeleteTopicParameters, params)
        normalised = normaliser.normalise_delete_topic_params(parsed, self.kit.context)
        return self._set_transaction(builder.delete_topic(normalised))


class ScsBuilder(BaseServiceBuilder):
    def execute_contract(self, params: Any) -> "ScsBuilder":
        parsed = parse_params(ExecuteContractParameters, params)
        normalised = normaliser.normalise_execute_contract_params(parsed, self.kit.context)
        return self._set_transaction(builder.execute_contract(normalised))
