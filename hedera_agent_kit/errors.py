"""Exception hierarchy for the Hedera agent kit.

Everything below the tool boundary raises one of these; the boundary turns
them into plain message strings for the host framework.
"""

from __future__ import annotations

from typing import List, Optional


class HederaAgentKitError(Exception):
    """Base exception for all kit errors."""

    def __init__(self, message: str, *, code: str = "KIT_ERROR") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ParameterValidationError(HederaAgentKitError):
    """Raw tool parameters failed schema validation."""

    def __init__(self, message: str, *, errors: Optional[List[str]] = None) -> None:
        super().__init__(message, code="INVALID_PARAMETERS")
        self.errors = list(errors or [])


class AccountResolutionError(HederaAgentKitError):
    """No account id could be derived from params, context or client."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="ACCOUNT_UNRESOLVED")


class KeyResolutionError(HederaAgentKitError):
    """No public key could be derived for an account."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="KEY_UNRESOLVED")


class TransactionFailedError(HederaAgentKitError):
    """The ledger returned a non-success receipt."""

    def __init__(self, message: str, *, status: Optional[str] = None) -> None:
        super().__init__(message, code="TRANSACTION_FAILED")
        self.status = status


class ToolNotFoundError(HederaAgentKitError):
    def __init__(self, method: str) -> None:
        super().__init__(f"Unknown tool: {method}", code="TOOL_NOT_FOUND")
        self.method = method


class NotSupportedError(HederaAgentKitError):
    """Operation is known but deliberately unavailable."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="NOT_SUPPORTED")
