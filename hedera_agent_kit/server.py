"""FastAPI application exposing the Hedera tools over an MCP JSON-RPC gateway."""

from __future__ import annotations

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from hedera_agent_kit.config import KitConfig, build_client, default_config
from hedera_agent_kit.mcp import HederaMCPToolkit
from hedera_agent_kit.metrics import default_metrics
from hedera_agent_kit.mirror_api import default_client

logger = logging.getLogger(__name__)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = "0.1.0"
MCP_SERVER_NAME = "hedera-agent-kit"
MCP_SERVER_VERSION = APP_VERSION


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload)


def configure_logging(config: KitConfig = default_config) -> None:
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    if config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler])
    else:
        logging.basicConfig(level=level)


def _toolkit_from_env() -> HederaMCPToolkit:
    client = build_client(default_config.network)
    return HederaMCPToolkit(client, default_config.build_configuration())


def _jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def _jsonrpc_error_payload(rpc_id: Any, code: int, message: str) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "error": {"code": code, "message": message}}


def _wrap_tool_result(result: Any) -> Dict[str, Any]:
    """
    Shape tool outputs into MCP-friendly content array.
    """
    # Tools report every failure as a plain string.
    if isinstance(result, str):
        return {"content": [{"type": "text", "text": result}], "isError": True}

    try:
        text_repr = json.dumps(result, ensure_ascii=True)
    except (TypeError, ValueError):
        text_repr = str(result)
    return {
        "content": [{"type": "text", "text": text_repr}],
        "structuredContent": result,
    }


def _log_tool_result(tool_name: str, result: Any, request_id: Optional[str] = None) -> None:
    if isinstance(result, str):
        logger.warning(
            "tool=%s outcome=error error=%s request_id=%s",
            tool_name,
            result,
            request_id,
            extra={"tool": tool_name, "request_id": request_id, "error": result},
        )
        default_metrics.record_tool(tool_name, success=False)
    else:
        logger.info(
            "tool=%s outcome=success request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
        default_metrics.record_tool(tool_name, success=True)


def create_app(toolkit: Optional[HederaMCPToolkit] = None) -> FastAPI:
    """
    Build the HTTP app.

    Without an explicit toolkit one is built from the operator environment on
    the first MCP request.
    """
    state: Dict[str, Optional[HederaMCPToolkit]] = {"toolkit": toolkit}

    def get_toolkit() -> HederaMCPToolkit:
        if state["toolkit"] is None:
            state["toolkit"] = _toolkit_from_env()
        return state["toolkit"]

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        await default_client.aclose()

    app = FastAPI(
        title="Hedera Agent Kit",
        description="Hedera account, token, consensus and query tools for LLM agents.",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def add_request_context(request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start = time.time()
        default_metrics.incr_request()
        response = await call_next(request)
        duration_ms = (time.time() - start) * 1000
        default_metrics.record_duration(request_id, duration_ms)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health")
    async def health() -> JSONResponse:
        """Lightweight health endpoint for monitoring."""
        return JSONResponse(content=HEALTH_STATUS)

    @app.get("/metrics")
    async def metrics() -> JSONResponse:
        """Return in-process metrics snapshot."""
        return JSONResponse(content=default_metrics.snapshot())

    @app.post("/mcp")
    async def mcp_gateway(request: Request) -> Response:
        """
        Minimal JSON-RPC gateway for MCP integrations.

        Supported methods:
          - initialize
          - list_tools / tools/list
          - call_tool / tools/call
          - notifications/initialized
        """
        request_id = getattr(request.state, "request_id", None)
        start_time = time.time()

        def _respond(
            payload: Dict[str, Any],
            status_code: int = 200,
            *,
            outcome: str,
            method_label: Optional[str] = None,
            tool_label: Optional[str] = None,
            error_code: Optional[int] = None,
        ) -> JSONResponse:
            duration_ms = (time.time() - start_time) * 1000
            logger.debug(
                "mcp outcome=%s method=%s tool=%s id=%s status=%s duration_ms=%.2f error_code=%s",
                outcome,
                method_label,
                tool_label,
                payload.get("id"),
                status_code,
                duration_ms,
                error_code,
                extra={"request_id": request_id, "tool": tool_label, "error": error_code},
            )
            return JSONResponse(status_code=status_code, content=payload)

        try:
            body = await request.json()
        except ValueError:
            payload = _jsonrpc_error_payload(None, -32700, "Parse error")
            return _respond(payload, status_code=400, outcome="error", error_code=-32700)

        if not isinstance(body, dict):
            payload = _jsonrpc_error_payload(None, -32600, "Invalid request")
            return _respond(payload, status_code=400, outcome="error", error_code=-32600)

        method = body.get("method")
        rpc_id = body.get("id")
        raw_params = body.get("params")
        if raw_params is None:
            params: Dict[str, Any] = {}
        elif isinstance(raw_params, dict):
            params = raw_params
        else:
            payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
            return _respond(payload, outcome="error", method_label=method, error_code=-32602)

        if not method:
            payload = _jsonrpc_error_payload(rpc_id, -32600, "Invalid request")
            return _respond(payload, outcome="error", error_code=-32600)

        if method == "initialize":
            protocol_version = params.get("protocolVersion")
            if not isinstance(protocol_version, str) or not protocol_version:
                payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
                return _respond(payload, outcome="error", method_label=method, error_code=-32602)
            result = {
                "protocolVersion": protocol_version,
                "serverInfo": {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION},
                "capabilities": {"tools": {"listChanged": False}},
            }
            return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

        if method in ("list_tools", "tools/list"):
            result = {"tools": get_toolkit().list_tools()}
            return _respond(_jsonrpc_success_payload(rpc_id, result), outcome="success", method_label=method)

        if method in ("call_tool", "tools/call"):
            tool_name = params.get("tool") or params.get("name")
            arguments = params.get("params")
            if arguments is None:
                arguments = params.get("arguments") or {}
            if not isinstance(tool_name, str) or not tool_name.strip():
                payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
                return _respond(payload, outcome="error", method_label=method, error_code=-32602)
            if not isinstance(arguments, dict):
                payload = _jsonrpc_error_payload(rpc_id, -32602, "Invalid params")
                return _respond(
                    payload, outcome="error", method_label=method, tool_label=tool_name, error_code=-32602
                )

            toolkit = get_toolkit()
            if not toolkit.has_tool(tool_name):
                default_metrics.incr_unknown_tool()
            result = await toolkit.call_tool(tool_name, arguments)
            _log_tool_result(tool_name, result, request_id)
            return _respond(
                _jsonrpc_success_payload(rpc_id, _wrap_tool_result(result)),
                outcome="success",
                method_label=method,
                tool_label=tool_name,
            )

        if method in ("notifications/initialized", "initialized"):
            # Notifications get no JSON-RPC response body.
            logger.debug("mcp initialized notification received request_id=%s", request_id)
            return Response(status_code=204)

        payload = _jsonrpc_error_payload(rpc_id, -32601, "Method not found")
        return _respond(payload, outcome="error", method_label=method, error_code=-32601)

    return app


configure_logging()
app = create_app()

# Run with: uvicorn hedera_agent_kit.server:app
