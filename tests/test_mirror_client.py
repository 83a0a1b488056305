import httpx
import pytest

from hedera_agent_kit.config import KitConfig
from hedera_agent_kit.mirror_api import (
    HederaMirrornodeService,
    MirrorNodeError,
    MirrorNodeNotFoundError,
    MirrorNodeUnreachableError,
    TopicMessagesQuery,
    default_client,
    get_mirrornode_service,
)


class MockResponse:
    def __init__(self, status_code: int, json_body):
        self.status_code = status_code
        self._json = json_body

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


class MockAsyncClient:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    async def get(self, path, params=None):
        self.calls.append({"path": path, "params": params})
        if not self.responses:
            raise RuntimeError("No mock responses")
        return self.responses.pop(0)

    async def aclose(self):
        return None


class FailingAsyncClient:
    async def get(self, *_args, **_kwargs):
        raise httpx.ConnectError("boom")

    async def aclose(self):
        return None


def _service(responses, **config):
    mock = MockAsyncClient(responses)
    service = HederaMirrornodeService(
        KitConfig(network="testnet", **config), base_url="https://mirror.test", async_client=mock
    )
    return service, mock


def _message(seq):
    return {
        "topic_id": "0.0.42",
        "message": "aGVsbG8=",
        "consensus_timestamp": f"1700000000.{seq:09d}",
        "sequence_number": seq,
        "payer_account_id": "0.0.2",
    }


@pytest.mark.asyncio
async def test_get_account_parses_key_and_balance():
    service, mock = _service(
        [
            MockResponse(
                200,
                {
                    "account": "0.0.100",
                    "key": {"_type": "ED25519", "key": "abcd"},
                    "balance": {"balance": 250000000, "tokens": []},
                },
            )
        ]
    )
    account = await service.get_account("0.0.100")
    assert account.account_id == "0.0.100"
    assert account.account_public_key == "abcd"
    assert account.key_type == "ED25519"
    assert account.balance == 250000000
    assert mock.calls[0]["path"] == "/api/v1/accounts/0.0.100"

    service, _ = _service([MockResponse(200, {"account": "0.0.100", "balance": {"balance": 7}})])
    assert await service.get_account_hbar_balance("0.0.100") == 7


@pytest.mark.asyncio
async def test_account_without_key():
    service, _ = _service([MockResponse(200, {"account": "0.0.5", "key": None, "balance": {}})])
    account = await service.get_account("0.0.5")
    assert account.account_public_key is None
    assert account.balance == 0


@pytest.mark.asyncio
async def test_not_found_mapping_keeps_status_message():
    service, _ = _service(
        [MockResponse(404, {"_status": {"messages": [{"message": "Not found"}]}})]
    )
    with pytest.raises(MirrorNodeNotFoundError) as exc:
        await service.get_account("0.0.404")
    assert str(exc.value) == "HTTP error! status: 404. Message: Not found"
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_server_error_maps_to_generic():
    service, _ = _service([MockResponse(500, ValueError("not json"))])
    with pytest.raises(MirrorNodeError) as exc:
        await service.get_token_details("0.0.1")
    assert not isinstance(exc.value, MirrorNodeNotFoundError)
    assert str(exc.value) == "HTTP error! status: 500."


@pytest.mark.asyncio
async def test_unexpected_response_shape():
    service, _ = _service([MockResponse(200, ["unexpected"])])
    with pytest.raises(MirrorNodeError):
        await service.get_account("0.0.1")


@pytest.mark.asyncio
async def test_unreachable_maps_error():
    service = HederaMirrornodeService(base_url="https://mirror.test", async_client=FailingAsyncClient())
    with pytest.raises(MirrorNodeUnreachableError):
        await service.get_account("0.0.1")


@pytest.mark.asyncio
async def test_token_balances_filter_param():
    body = {"tokens": [{"token_id": "0.0.5005", "balance": 10}], "links": {"next": None}}
    service, mock = _service([MockResponse(200, body), MockResponse(200, body)])
    assert await service.get_account_token_balances("0.0.100", "0.0.5005") == body
    assert mock.calls[0]["path"] == "/api/v1/accounts/0.0.100/tokens"
    assert mock.calls[0]["params"] == {"token.id": "0.0.5005"}

    await service.get_account_token_balances("0.0.100")
    assert mock.calls[1]["params"] is None


@pytest.mark.asyncio
async def test_token_details_decimals_are_ints():
    service, _ = _service(
        [
            MockResponse(
                200,
                {
                    "token_id": "0.0.5005",
                    "decimals": "2",
                    "name": "Gold",
                    "symbol": "GLD",
                    "type": "FUNGIBLE_COMMON",
                    "max_supply": "0",
                },
            )
        ]
    )
    details = await service.get_token_details("0.0.5005")
    assert details.decimals == 2
    assert details.symbol == "GLD"


@pytest.mark.asyncio
async def test_topic_messages_follow_next_links():
    next_link = "/api/v1/topics/0.0.42/messages?order=desc&limit=2&timestamp=lt:1700000000.000000002"
    service, mock = _service(
        [
            MockResponse(200, {"messages": [_message(4), _message(3)], "links": {"next": next_link}}),
            MockResponse(200, {"messages": [_message(2)], "links": {"next": None}}),
        ]
    )
    query = TopicMessagesQuery(
        topic_id="0.0.42",
        lower_timestamp="1700000000.000000000",
        upper_timestamp="1800000000.000000000",
        limit=10,
    )
    response = await service.get_topic_messages(query)

    assert [m.sequence_number for m in response.messages] == [4, 3, 2]
    first_params = mock.calls[0]["params"]
    assert ("timestamp", "gte:1700000000.000000000") in first_params
    assert ("timestamp", "lte:1800000000.000000000") in first_params
    assert ("order", "desc") in first_params
    assert mock.calls[1] == {"path": next_link, "params": None}


@pytest.mark.asyncio
async def test_topic_messages_stop_at_limit():
    service, mock = _service(
        [
            MockResponse(
                200,
                {"messages": [_message(3), _message(2), _message(1)], "links": {"next": "/api/v1/more"}},
            )
        ]
    )
    response = await service.get_topic_messages(TopicMessagesQuery(topic_id="0.0.42", limit=2))
    assert [m.sequence_number for m in response.messages] == [3, 2]
    assert len(mock.calls) == 1


@pytest.mark.asyncio
async def test_topic_messages_page_cap(caplog):
    pages = [
        MockResponse(200, {"messages": [_message(i)], "links": {"next": "/api/v1/more"}})
        for i in range(5)
    ]
    service, mock = _service(pages, max_topic_message_pages=3)
    with caplog.at_level("WARNING"):
        response = await service.get_topic_messages(TopicMessagesQuery(topic_id="0.0.42", limit=100))
    assert len(mock.calls) == 3
    assert len(response.messages) == 3
    assert any("pagination stopped" in record.message for record in caplog.records)


@pytest.mark.asyncio
async def test_contract_info_reads_admin_key_and_auto_renew():
    service, mock = _service(
        [
            MockResponse(
                200,
                {
                    "contract_id": "0.0.6006",
                    "evm_address": "0x0000000000000000000000000000000000001776",
                    "memo": "counter",
                    "admin_key": {"_type": "ED25519", "key": "abcd"},
                    "auto_renew_account": "0.0.2",
                    "created_timestamp": "1700000000.000000001",
                    "expiration_timestamp": None,
                    "file_id": "0.0.6005",
                    "deleted": False,
                },
            ),
            MockResponse(200, {"contract_id": "0.0.7007", "admin_key": None, "deleted": True}),
        ]
    )
    details = await service.get_contract_info("0.0.6006")
    assert mock.calls[0]["path"] == "/api/v1/contracts/0.0.6006"
    assert details.admin_key == "abcd"
    assert details.auto_renew_account_id == "0.0.2"
    assert details.file_id == "0.0.6005"
    assert details.deleted is False

    bare = await service.get_contract_info("0.0.7007")
    assert bare.admin_key is None
    assert bare.memo is None
    assert bare.deleted is True


def test_get_mirrornode_service_prefers_context():
    injected = object()
    context = type("Ctx", (), {"mirrornode_service": injected})()
    assert get_mirrornode_service(context) is injected


def test_get_mirrornode_service_defaults_to_shared_client():
    context = type("Ctx", (), {"mirrornode_service": None})()
    assert get_mirrornode_service(context) is default_client
