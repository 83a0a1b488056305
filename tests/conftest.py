import os
import sys
from types import SimpleNamespace

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from hedera_agent_kit.metrics import default_metrics  # noqa: E402
from hiero_sdk_python import Client, Network  # noqa: E402
from hedera_agent_kit.mirror_api import (  # noqa: E402
    AccountResponse,
    MirrorNodeNotFoundError,
    TokenDetails,
    TopicMessagesResponse,
)

OPERATOR_ID = "0.0.2"


class FakeOperatorKey:
    def __init__(self, public_key):
        self._public_key = public_key

    def public_key(self):
        return self._public_key


class FakeClient:
    """Duck-typed stand-in for a hiero Client."""

    def __init__(self, operator_account_id=OPERATOR_ID, operator_public_key="operator-public-key"):
        self.operator_account_id = operator_account_id
        self.operator_private_key = (
            FakeOperatorKey(operator_public_key) if operator_public_key is not None else None
        )
        self.network = SimpleNamespace(network="testnet")


class StubMirror:
    """In-memory mirror node service recording every call."""

    def __init__(
        self, *, accounts=None, tokens=None, token_balances=None, topic_messages=None, contracts=None
    ):
        self.accounts = accounts or {}
        self.tokens = tokens or {}
        self.token_balances = token_balances or {}
        self.topic_messages = topic_messages or []
        self.contracts = contracts or {}
        self.calls = []

    async def get_account(self, account_id):
        self.calls.append(("get_account", account_id))
        if account_id not in self.accounts:
            raise MirrorNodeNotFoundError("HTTP error! status: 404. Message: Not found", status_code=404)
        return self.accounts[account_id]

    async def get_account_hbar_balance(self, account_id):
        account = await self.get_account(account_id)
        return account.balance

    async def get_account_token_balances(self, account_id, token_id=None):
        self.calls.append(("get_account_token_balances", account_id, token_id))
        return {"tokens": self.token_balances.get(account_id, []), "links": {"next": None}}

    async def get_topic_messages(self, query):
        self.calls.append(("get_topic_messages", query))
        return TopicMessagesResponse(topic_id=query.topic_id, messages=list(self.topic_messages))

    async def get_token_details(self, token_id):
        self.calls.append(("get_token_details", token_id))
        if token_id not in self.tokens:
            raise MirrorNodeNotFoundError("HTTP error! status: 404. Message: Not found", status_code=404)
        return self.tokens[token_id]

    async def get_contract_info(self, contract_id):
        self.calls.append(("get_contract_info", contract_id))
        if contract_id not in self.contracts:
            raise MirrorNodeNotFoundError("HTTP error! status: 404. Message: Not found", status_code=404)
        return self.contracts[contract_id]


def make_account(account_id, *, public_key=None, balance=0):
    return AccountResponse(
        account_id=account_id,
        account_public_key=public_key,
        key_type="ED25519" if public_key else None,
        balance=balance,
    )


def make_token(token_id, *, decimals=2, name="Gold", symbol="GLD"):
    return TokenDetails(
        token_id=token_id,
        decimals=decimals,
        name=name,
        symbol=symbol,
        max_supply="0",
        type="FUNGIBLE_COMMON",
        total_supply="1000",
        treasury_account_id=OPERATOR_ID,
    )


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def stub_mirror():
    return StubMirror(
        accounts={
            OPERATOR_ID: make_account(OPERATOR_ID, public_key=None, balance=150_000_000),
            "0.0.100": make_account("0.0.100", public_key="user-public-key", balance=1),
        },
        tokens={"0.0.5005": make_token("0.0.5005", decimals=2)},
    )


@pytest.fixture
def ledger_client(monkeypatch):
    """A real testnet client built from the SDK's bundled node list."""
    monkeypatch.setattr(Network, "_fetch_nodes_from_mirror_node", lambda self: [])
    client = Client(Network("testnet"))
    yield client
    client.close()
