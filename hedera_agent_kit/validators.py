"""Shared validation helpers for Hedera tool parameters."""

from __future__ import annotations

import re
from typing import Annotated, Optional

from pydantic import Field

# Entity ids are "shard.realm.num", e.g. 0.0.1234.
ENTITY_ID_REGEX = re.compile(r"^\d+\.\d+\.\d+$")


def clamp_limit(value: Optional[int], *, default: int, max_value: int) -> int:
    """Clamp limit-style integers to configured bounds."""
    if value is None:
        return default
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    if parsed <= 0:
        return default
    return min(parsed, max_value)


EntityId = Annotated[str, Field(pattern=ENTITY_ID_REGEX.pattern)]
