"""
Configuration helpers for the Hedera agent kit.

This module centralizes network and mirror node selection, default timeouts,
safety limits, and the per-call ``Context`` / ``Configuration`` shapes that the
host adapters thread through every tool invocation. Operator credentials are
read from the environment only when a ledger client is built; they are never
stored in the repository or logged.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from hedera_agent_kit.plugins import Plugin

# Default connection settings
DEFAULT_NETWORK = os.getenv("HEDERA_NETWORK", "testnet")
MIRROR_NODE_URL_ENV_VAR = "HEDERA_MIRROR_NODE_URL"

MIRROR_NODE_BASE_URLS = {
    "mainnet": "https://mainnet-public.mirrornode.hedera.com",
    "testnet": "https://testnet.mirrornode.hedera.com",
    "previewnet": "https://previewnet.mirrornode.hedera.com",
}
MIRROR_NODE_API_PREFIX = "/api/v1"


def _load_timeout() -> float:
    raw_timeout = os.getenv("HEDERA_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 10.0
    return 10.0


DEFAULT_TIMEOUT = _load_timeout()

# Operator credentials
OPERATOR_ID_ENV_VAR = "HEDERA_OPERATOR_ID"
OPERATOR_KEY_ENV_VAR = "HEDERA_OPERATOR_KEY"

# Safety limits
MAX_TOPIC_MESSAGE_PAGES = 100
MIRROR_PAGE_SIZE = 100
DEFAULT_TOPIC_MESSAGES = 100
MAX_TOPIC_MESSAGES = 100
MAX_NFT_URIS = 10
MAX_NFT_URI_LENGTH = 100
MAX_TOKEN_DECIMALS = 18
DEFAULT_FUNGIBLE_MAX_SUPPLY = 1_000_000
DEFAULT_NFT_MAX_SUPPLY = 100
HBAR_DECIMALS = 8  # 1 HBAR = 10^8 tinybars
DEFAULT_CONTRACT_GAS = 100_000
MAX_CONTRACT_GAS = 15_000_000
MAX_TOKEN_ASSOCIATIONS = 10

LOG_LEVEL = os.getenv("HEDERA_KIT_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("HEDERA_KIT_LOG_FORMAT", "json")  # json or plain


class AgentMode(str, Enum):
    """What happens to a transaction once it has been built."""

    AUTONOMOUS = "autonomous"
    RETURN_BYTES = "returnBytes"


def _parse_mode(raw: Optional[str]) -> AgentMode:
    if not raw:
        return AgentMode.AUTONOMOUS
    for mode in AgentMode:
        if raw.strip().lower() in (mode.value.lower(), mode.name.lower()):
            return mode
    return AgentMode.AUTONOMOUS


def _parse_tool_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def resolve_mirror_base_url(network: Optional[str] = None) -> str:
    """
    Return the mirror node host for a network.

    ``HEDERA_MIRROR_NODE_URL`` wins over the built-in table so private or
    local mirror nodes can be targeted.
    """
    override = os.getenv(MIRROR_NODE_URL_ENV_VAR)
    if override:
        return override.rstrip("/")
    name = (network or DEFAULT_NETWORK).lower()
    if name not in MIRROR_NODE_BASE_URLS:
        raise ValueError(f"Network type {name} not supported")
    return MIRROR_NODE_BASE_URLS[name]


@dataclass(frozen=True, slots=True)
class Context:
    """Per-invocation settings shared by every tool in an assembled tool set."""

    account_id: Optional[str] = None
    account_public_key: Optional[str] = None
    mode: AgentMode = AgentMode.AUTONOMOUS
    mirrornode_service: Optional[Any] = None


@dataclass(slots=True)
class Configuration:
    """Toolkit construction options consumed by the host adapters."""

    tools: Optional[List[str]] = None
    plugins: List["Plugin"] = field(default_factory=list)
    context: Context = field(default_factory=Context)


@dataclass(slots=True)
class KitConfig:
    """Runtime configuration for ledger and mirror node access."""

    network: str = DEFAULT_NETWORK
    timeout: float = DEFAULT_TIMEOUT
    mode: AgentMode = _parse_mode(os.getenv("HEDERA_AGENT_MODE"))
    account_id: Optional[str] = os.getenv("HEDERA_ACCOUNT_ID") or None
    tools: List[str] = field(default_factory=lambda: _parse_tool_list(os.getenv("HEDERA_KIT_TOOLS")))
    max_topic_message_pages: int = MAX_TOPIC_MESSAGE_PAGES
    mirror_page_size: int = MIRROR_PAGE_SIZE
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT

    def build_context(self, mirrornode_service: Optional[Any] = None) -> Context:
        return Context(
            account_id=self.account_id,
            mode=self.mode,
            mirrornode_service=mirrornode_service,
        )

    def build_configuration(self, plugins: Optional[List["Plugin"]] = None) -> Configuration:
        return Configuration(
            tools=list(self.tools) or None,
            plugins=list(plugins or []),
            context=self.build_context(),
        )


def build_client(network: Optional[str] = None):
    """
    Build a ledger client for ``network`` using the operator env vars.

    Raises:
        ValueError: if the operator id or key is missing.
    """
    from hiero_sdk_python import AccountId, Client, Network, PrivateKey

    operator_id = os.getenv(OPERATOR_ID_ENV_VAR)
    operator_key = os.getenv(OPERATOR_KEY_ENV_VAR)
    if not operator_id or not operator_key:
        raise ValueError(
            f"{OPERATOR_ID_ENV_VAR} and {OPERATOR_KEY_ENV_VAR} must be set to build a client"
        )
    client = Client(Network(network=network or DEFAULT_NETWORK))
    client.set_operator(AccountId.from_string(operator_id.strip()), PrivateKey.from_string(operator_key.strip()))
    return client


default_config = KitConfig()
