from decimal import Decimal

import pytest

from hedera_agent_kit.errors import ParameterValidationError
from hedera_agent_kit.schemas import parse_params
from hedera_agent_kit.schemas.account import TransferHbarParameters
from hedera_agent_kit.schemas.consensus import CreateTopicParameters
from hedera_agent_kit.schemas.queries import TopicMessagesQueryParameters
from hedera_agent_kit.schemas.token import (
    AirdropFungibleTokenParameters,
    CreateFungibleTokenParameters,
    MintNonFungibleTokenParameters,
)


def test_optional_fields_stay_absent():
    params = parse_params(CreateFungibleTokenParameters, {"token_name": "Gold", "token_symbol": "GLD"})
    assert params.initial_supply is None
    assert params.max_supply is None
    assert params.decimals is None
    assert params.supply_type is None
    assert params.is_supply_key is None


def test_unknown_fields_rejected():
    with pytest.raises(ParameterValidationError) as exc:
        parse_params(CreateTopicParameters, {"topic_memo": "hi", "admin_key": "x"})
    assert "admin_key" in exc.value.message
    assert exc.value.code == "INVALID_PARAMETERS"


def test_every_offending_field_is_listed():
    with pytest.raises(ParameterValidationError) as exc:
        parse_params(
            TransferHbarParameters,
            {"transfers": [{"account_id": "not-an-id", "amount": "abc"}]},
        )
    assert len(exc.value.errors) == 2
    assert any(line.startswith("transfers.0.account_id") for line in exc.value.errors)
    assert any(line.startswith("transfers.0.amount") for line in exc.value.errors)


def test_transfers_require_at_least_one_entry():
    with pytest.raises(ParameterValidationError):
        parse_params(TransferHbarParameters, {"transfers": []})


def test_amounts_parse_to_decimal():
    params = parse_params(
        AirdropFungibleTokenParameters,
        {"token_id": "0.0.5005", "recipients": [{"account_id": "0.0.7", "amount": 1.25}]},
    )
    assert params.recipients[0].amount == Decimal("1.25")


def test_non_object_params_rejected():
    with pytest.raises(ParameterValidationError):
        parse_params(CreateTopicParameters, ["not", "an", "object"])


def test_none_params_treated_as_empty_object():
    params = parse_params(CreateTopicParameters, None)
    assert params.is_submit_key is None


def test_nft_uri_bounds():
    with pytest.raises(ParameterValidationError):
        parse_params(MintNonFungibleTokenParameters, {"token_id": "0.0.9", "uris": ["u"] * 11})
    with pytest.raises(ParameterValidationError):
        parse_params(MintNonFungibleTokenParameters, {"token_id": "0.0.9", "uris": ["x" * 101]})
    params = parse_params(MintNonFungibleTokenParameters, {"token_id": "0.0.9", "uris": ["ipfs://a"]})
    assert params.uris == ["ipfs://a"]


def test_decimals_bounded():
    with pytest.raises(ParameterValidationError):
        parse_params(
            CreateFungibleTokenParameters,
            {"token_name": "Gold", "token_symbol": "GLD", "decimals": 19},
        )


def test_topic_messages_limit_bounds_and_datetimes():
    params = parse_params(
        TopicMessagesQueryParameters,
        {"topic_id": "0.0.42", "start_time": "2024-01-01T00:00:00Z", "limit": 5},
    )
    assert params.start_time.year == 2024
    with pytest.raises(ParameterValidationError):
        parse_params(TopicMessagesQueryParameters, {"topic_id": "0.0.42", "limit": 101})


def test_json_schema_carries_descriptions():
    schema = TransferHbarParameters.model_json_schema()
    assert schema["properties"]["transaction_memo"]["description"]
    assert "transfers" in schema["required"]
    assert schema["additionalProperties"] is False
