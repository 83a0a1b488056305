import pytest
from fastapi.testclient import TestClient

from conftest import FakeClient, StubMirror, make_account
from hedera_agent_kit.config import Configuration, Context
from hedera_agent_kit.mcp import HederaMCPToolkit
from hedera_agent_kit.server import MCP_SERVER_NAME, MCP_SERVER_VERSION, create_app


@pytest.fixture
def toolkit():
    mirror = StubMirror(accounts={"0.0.2": make_account("0.0.2", balance=250_000_000)})
    configuration = Configuration(context=Context(mirrornode_service=mirror))
    return HederaMCPToolkit(FakeClient(), configuration)


@pytest.fixture
def client(toolkit):
    return TestClient(create_app(toolkit=toolkit))


def test_mcp_initialize(client):
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 10,
            "method": "initialize",
            "params": {
                "protocolVersion": "2025-03-26",
                "capabilities": {},
                "clientInfo": {"name": "test-client", "version": "0.0.0"},
            },
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == 10
    result = data["result"]
    assert result["protocolVersion"] == "2025-03-26"
    assert result["serverInfo"]["name"] == MCP_SERVER_NAME
    assert result["serverInfo"]["version"] == MCP_SERVER_VERSION
    assert result["capabilities"]["tools"]["listChanged"] is False


def test_mcp_initialize_requires_protocol_version(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 11, "method": "initialize", "params": {}})
    assert resp.json()["error"]["code"] == -32602


def test_mcp_tools_list(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 3, "method": "tools/list"})
    assert resp.status_code == 200
    tools = resp.json()["result"]["tools"]
    transfer = next(t for t in tools if t["name"] == "transfer_hbar")
    assert transfer["title"] == "Transfer HBAR"
    assert transfer["inputSchema"]["type"] == "object"
    assert "transfers" in transfer["inputSchema"]["properties"]
    assert "title" not in transfer["inputSchema"]
    assert "scheduling_params" in transfer["inputSchema"]["properties"]
    names = {t["name"] for t in tools}
    assert {"transfer_token", "associate_token_tool", "execute_contract_tool"} <= names


def test_mcp_tools_call_success(client):
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 4,
            "method": "tools/call",
            "params": {"name": "get_hbar_balance_query", "arguments": {}},
        },
    )
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert "isError" not in result
    assert result["structuredContent"] == {"account_id": "0.0.2", "hbar_balance": "2.5"}
    assert result["content"][0]["type"] == "text"

    metrics = client.get("/metrics").json()
    assert metrics["tool_success"]["get_hbar_balance_query"] == 1


def test_mcp_tools_call_tool_failure_is_error_content(client):
    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 5,
            "method": "tools/call",
            "params": {"name": "get_account_query_tool", "arguments": {"account_id": "bad"}},
        },
    )
    result = resp.json()["result"]
    assert result["isError"] is True
    assert result["content"][0]["text"].startswith("Invalid parameters")
    assert client.get("/metrics").json()["tool_error"]["get_account_query_tool"] == 1


def test_mcp_unknown_tool(client):
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 6, "method": "tools/call", "params": {"name": "nope"}},
    )
    result = resp.json()["result"]
    assert result["isError"] is True
    assert result["content"][0]["text"] == "Unknown tool: nope"
    assert client.get("/metrics").json()["unknown_tool"] == 1


def test_mcp_tools_call_invalid_params(client):
    resp = client.post(
        "/mcp",
        json={"jsonrpc": "2.0", "id": 7, "method": "tools/call", "params": {"name": "transfer_hbar", "arguments": "x"}},
    )
    assert resp.json()["error"]["code"] == -32602

    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 8, "method": "tools/call", "params": {}})
    assert resp.json()["error"]["code"] == -32602


def test_mcp_initialized_notification(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "method": "notifications/initialized"})
    assert resp.status_code == 204


def test_mcp_legacy_aliases(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 12, "method": "list_tools"})
    assert any(tool["name"] == "transfer_hbar" for tool in resp.json()["result"]["tools"])

    resp = client.post(
        "/mcp",
        json={
            "jsonrpc": "2.0",
            "id": 13,
            "method": "call_tool",
            "params": {"tool": "get_hbar_balance_query", "params": {"account_id": "0.0.2"}},
        },
    )
    assert resp.json()["result"]["structuredContent"]["hbar_balance"] == "2.5"


def test_mcp_method_not_found(client):
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 9, "method": "tools/delete"})
    assert resp.json()["error"]["code"] == -32601


def test_mcp_parse_and_shape_errors(client):
    resp = client.post("/mcp", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32700

    resp = client.post("/mcp", json=[1, 2])
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == -32600


def test_allow_list_limits_listed_tools():
    configuration = Configuration(tools=["get_hbar_balance_query"])
    app = create_app(toolkit=HederaMCPToolkit(FakeClient(), configuration))
    resp = TestClient(app).post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
    assert [tool["name"] for tool in resp.json()["result"]["tools"]] == ["get_hbar_balance_query"]
