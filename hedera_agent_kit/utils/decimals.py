"""Conversions between human-readable amounts and integer base units."""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal
from typing import Union

from hedera_agent_kit.config import HBAR_DECIMALS

Amount = Union[Decimal, int, float, str]


def _as_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    # str() first so floats keep their shortest repr (0.1 -> "0.1").
    return Decimal(str(amount))


def to_base_unit(amount: Amount, decimals: int) -> int:
    """
    Convert ``amount`` to base units, truncating any fraction finer than
    ``decimals`` places.
    """
    scaled = _as_decimal(amount).scaleb(decimals)
    return int(scaled.to_integral_value(rounding=ROUND_DOWN))


def to_display_unit(base_amount: Union[int, str], decimals: int) -> Decimal:
    return Decimal(int(base_amount)).scaleb(-decimals)


def hbar_to_tinybars(amount: Amount) -> int:
    return to_base_unit(amount, HBAR_DECIMALS)


def tinybars_to_hbar(tinybars: Union[int, str]) -> Decimal:
    return to_display_unit(tinybars, HBAR_DECIMALS)
