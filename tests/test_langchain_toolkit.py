import json

import pytest

from conftest import FakeClient, StubMirror, make_account
from hedera_agent_kit.config import Configuration, Context
from hedera_agent_kit.langchain_toolkit import HederaLangchainToolkit


def _toolkit(**config):
    mirror = StubMirror(accounts={"0.0.2": make_account("0.0.2", balance=100_000_000)})
    configuration = Configuration(context=Context(mirrornode_service=mirror), **config)
    return HederaLangchainToolkit(FakeClient(), configuration)


def test_one_structured_tool_per_discovered_tool():
    tools = _toolkit().get_tools()
    names = [tool.name for tool in tools]
    assert "transfer_hbar" in names
    assert len(names) == len(set(names))
    transfer = next(tool for tool in tools if tool.name == "transfer_hbar")
    assert "transfer HBAR" in transfer.description
    assert transfer.args_schema.__name__ == "TransferHbarParameters"


def test_allow_list_applies():
    tools = _toolkit(tools=["get_hbar_balance_query"]).get_tools()
    assert [tool.name for tool in tools] == ["get_hbar_balance_query"]


@pytest.mark.asyncio
async def test_tool_result_is_json_text():
    tool = _toolkit(tools=["get_hbar_balance_query"]).get_tools()[0]
    output = await tool.ainvoke({"account_id": "0.0.2"})
    assert json.loads(output) == {"account_id": "0.0.2", "hbar_balance": "1"}


@pytest.mark.asyncio
async def test_tool_failure_is_plain_text():
    tool = _toolkit(tools=["get_hbar_balance_query"]).get_tools()[0]
    output = await tool.ainvoke({"account_id": "0.0.404"})
    assert output == "HTTP error! status: 404. Message: Not found"
