"""
Parameter schemas for every tool.

Each operation has a raw pydantic model describing what a user or LLM may send
(unknown fields are rejected, optional fields stay ``None``) and a frozen
dataclass describing the normalised, ledger-ready form produced by
``hedera_agent_kit.normaliser``.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from hedera_agent_kit.errors import ParameterValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ToolParameters(BaseModel):
    """Base for raw tool input: fail closed on anything unexpected."""

    model_config = ConfigDict(extra="forbid")


def _error_lines(exc: ValidationError) -> List[str]:
    lines: List[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "params"
        lines.append(f"{location}: {error.get('msg', 'invalid value')}")
    return lines


def format_validation_error(exc: ValidationError) -> str:
    return "Invalid parameters: " + "; ".join(_error_lines(exc))


def parse_params(model: Type[ModelT], raw: Optional[Any]) -> ModelT:
    """
    Validate ``raw`` against ``model``.

    Accepts an instance of the model, a mapping, or None (treated as ``{}``).

    Raises:
        ParameterValidationError: listing every offending field.
    """
    if isinstance(raw, model):
        return raw
    if raw is None:
        raw = {}
    if isinstance(raw, BaseModel):
        raw = raw.model_dump(exclude_unset=True)
    if not isinstance(raw, Mapping):
        raise ParameterValidationError("Invalid parameters: expected an object")
    try:
        return model.model_validate(dict(raw))
    except ValidationError as exc:
        raise ParameterValidationError(format_validation_error(exc), errors=_error_lines(exc)) from exc


__all__ = ["ToolParameters", "format_validation_error", "parse_params"]
