"""
Thin HTTP client for the Hedera mirror node REST API.

All methods are read-only and map mirror node failures to internal exceptions
that the tool layer turns into user-facing messages.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from urllib.parse import quote

import httpx

from hedera_agent_kit.config import (
    MIRROR_NODE_API_PREFIX,
    KitConfig,
    default_config,
    resolve_mirror_base_url,
)
from hedera_agent_kit.mirror_api.types import (
    AccountResponse,
    ContractDetails,
    TokenDetails,
    TopicMessage,
    TopicMessagesQuery,
    TopicMessagesResponse,
)

logger = logging.getLogger(__name__)

QueryParams = Union[Dict[str, Any], Sequence[Tuple[str, Any]]]


class MirrorNodeError(Exception):
    """Base exception for mirror node errors."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MirrorNodeNotFoundError(MirrorNodeError):
    """Raised when the requested entity does not exist."""


class MirrorNodeUnreachableError(MirrorNodeError):
    """Raised when the mirror node cannot be reached."""


def _safe_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class HederaMirrornodeService:
    """Async client for the subset of the mirror node API the tools need."""

    def __init__(
        self,
        config: KitConfig | None = None,
        *,
        base_url: Optional[str] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self.base_url = (base_url or resolve_mirror_base_url(self.config.network)).rstrip("/")
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _map_error(self, status_code: int, message: Optional[str]) -> MirrorNodeError:
        detail = f"HTTP error! status: {status_code}."
        if message:
            detail = f"{detail} Message: {message}"
        if status_code == 404:
            return MirrorNodeNotFoundError(detail, status_code=status_code)
        return MirrorNodeError(detail, status_code=status_code)

    @staticmethod
    def _error_message(data: Any) -> Optional[str]:
        # {"_status": {"messages": [{"message": "Not found"}]}}
        if not isinstance(data, dict):
            return None
        status = data.get("_status")
        if isinstance(status, dict):
            messages = status.get("messages")
            if isinstance(messages, list) and messages:
                first = messages[0]
                if isinstance(first, dict) and isinstance(first.get("message"), str):
                    return first["message"]
        return None

    async def _request(self, path: str, *, params: Optional[QueryParams] = None) -> Dict[str, Any]:
        client = await self._get_client()
        try:
            response = await client.get(path, params=params)
        except httpx.RequestError as exc:
            logger.warning("Mirror node unreachable for path %s", path)
            raise MirrorNodeUnreachableError("Mirror node unreachable") from exc

        data: Any = None
        try:
            data = response.json()
        except ValueError:
            data = None

        if response.status_code >= 400:
            raise self._map_error(response.status_code, self._error_message(data))

        if not isinstance(data, dict):
            raise MirrorNodeError("Unexpected response from mirror node.", status_code=response.status_code)
        return data

    async def get_account(self, account_id: str) -> AccountResponse:
        """Retrieve account id, public key and tinybar balance."""
        encoded = quote(account_id, safe="")
        data = await self._request(f"{MIRROR_NODE_API_PREFIX}/accounts/{encoded}")
        key = data.get("key") if isinstance(data.get("key"), dict) else {}
        balance = data.get("balance") if isinstance(data.get("balance"), dict) else {}
        return AccountResponse(
            account_id=data.get("account") or account_id,
            account_public_key=key.get("key"),
            key_type=key.get("_type"),
            balance=_safe_int(balance.get("balance")),
        )

    async def get_account_hbar_balance(self, account_id: str) -> int:
        """Return the account balance in tinybars."""
        account = await self.get_account(account_id)
        return account.balance

    async def get_account_token_balances(
        self, account_id: str, token_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """Return the raw token relationship listing for an account."""
        encoded = quote(account_id, safe="")
        params: Dict[str, Any] = {}
        if token_id:
            params["token.id"] = token_id
        return await self._request(
            f"{MIRROR_NODE_API_PREFIX}/accounts/{encoded}/tokens", params=params or None
        )

    async def get_topic_messages(self, query: TopicMessagesQuery) -> TopicMessagesResponse:
        """
        Collect topic messages newest-first, following pagination links.

        At most ``config.max_topic_message_pages`` pages are fetched per call
        regardless of what the mirror node advertises.
        """
        encoded = quote(query.topic_id, safe="")
        params: List[Tuple[str, Any]] = []
        if query.lower_timestamp:
            params.append(("timestamp", f"gte:{query.lower_timestamp}"))
        if query.upper_timestamp:
            params.append(("timestamp", f"lte:{query.upper_timestamp}"))
        params.append(("order", "desc"))
        params.append(("limit", min(self.config.mirror_page_size, max(query.limit, 1))))

        next_path: Optional[str] = f"{MIRROR_NODE_API_PREFIX}/topics/{encoded}/messages"
        next_params: Optional[QueryParams] = params
        messages: List[TopicMessage] = []
        pages = 0
        while next_path:
            pages += 1
            data = await self._request(next_path, params=next_params)
            for raw in data.get("messages") or []:
                if not isinstance(raw, dict):
                    continue
                messages.append(
                    TopicMessage(
                        topic_id=raw.get("topic_id") or query.topic_id,
                        message=raw.get("message") or "",
                        consensus_timestamp=raw.get("consensus_timestamp") or "",
                        sequence_number=raw.get("sequence_number"),
                        payer_account_id=raw.get("payer_account_id"),
                    )
                )
            if len(messages) >= query.limit:
                break
            if pages >= self.config.max_topic_message_pages:
                logger.warning(
                    "Topic %s pagination stopped after %d pages", query.topic_id, pages
                )
                break
            links = data.get("links") if isinstance(data.get("links"), dict) else {}
            # "next" is a host-relative path that already carries the query string.
            next_path = links.get("next") or None
            next_params = None

        return TopicMessagesResponse(topic_id=query.topic_id, messages=messages[: query.limit])

    async def get_token_details(self, token_id: str) -> TokenDetails:
        encoded = quote(token_id, safe="")
        data = await self._request(f"{MIRROR_NODE_API_PREFIX}/tokens/{encoded}")
        return TokenDetails(
            token_id=data.get("token_id") or token_id,
            decimals=_safe_int(data.get("decimals")),
            name=data.get("name"),
            symbol=data.get("symbol"),
            max_supply=data.get("max_supply"),
            type=data.get("type"),
            total_supply=data.get("total_supply"),
            treasury_account_id=data.get("treasury_account_id"),
            raw=data,
        )

    async def get_contract_info(self, contract_id: str) -> ContractDetails:
        encoded = quote(contract_id, safe="")
        data = await self._request(f"{MIRROR_NODE_API_PREFIX}/contracts/{encoded}")
        admin_key = data.get("admin_key") if isinstance(data.get("admin_key"), dict) else {}
        return ContractDetails(
            contract_id=data.get("contract_id") or contract_id,
            evm_address=data.get("evm_address"),
            memo=data.get("memo"),
            admin_key=admin_key.get("key"),
            auto_renew_account_id=data.get("auto_renew_account"),
            created_timestamp=data.get("created_timestamp"),
            expiration_timestamp=data.get("expiration_timestamp"),
            file_id=data.get("file_id"),
            deleted=bool(data.get("deleted")),
        )


def get_mirrornode_service(context, client=None) -> HederaMirrornodeService:
    """
    Pick the mirror service for a call: the one injected through the context,
    otherwise a shared default for the client's network.
    """
    service = getattr(context, "mirrornode_service", None)
    if service is not None:
        return service
    network = getattr(getattr(client, "network", None), "network", None)
    if isinstance(network, str) and network and network != default_client.config.network:
        cached = _network_clients.get(network)
        if cached is None:
            cached = HederaMirrornodeService(KitConfig(network=network))
            _network_clients[network] = cached
        return cached
    return default_client


_network_clients: Dict[str, HederaMirrornodeService] = {}
default_client = HederaMirrornodeService()
