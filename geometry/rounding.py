# geometry/rounding.py
"""
Component rounding with an explicit midpoint policy.

Values are rounded on their exact binary value, so ``2.675`` (stored as
``2.67499999...``) rounds to ``2.67`` like the built-in ``round``.
"""

from __future__ import annotations

import decimal
import enum
import logging
import math
from typing import Optional

import config
from geometry.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

# wide enough for every finite double plus MAX_ROUND_DIGITS decimals
_CONTEXT = decimal.Context(prec=400)


class MidpointRounding(enum.Enum):
    """How a value exactly halfway between two candidates is rounded."""

    TO_EVEN = decimal.ROUND_HALF_EVEN          # banker's rounding
    AWAY_FROM_ZERO = decimal.ROUND_HALF_UP


def check_digits(digits: Optional[int]) -> int:
    if digits is None:
        return 0
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidArgumentError(f"{config.ROUND_DIGITS}, got {digits!r}")
    if not 0 <= digits <= config.MAX_ROUND_DIGITS:
        logger.debug("rejected rounding digits %d", digits)
        raise InvalidArgumentError(f"{config.ROUND_DIGITS}, got {digits}")
    return digits


def round_value(value: float, digits: Optional[int] = None,
                mode: MidpointRounding = MidpointRounding.TO_EVEN) -> float:
    """Round ``value`` to ``digits`` decimals (0 when omitted)."""
    digits = check_digits(digits)
    mode = MidpointRounding(mode)
    if not math.isfinite(value):
        return value
    quantum = decimal.Decimal(1).scaleb(-digits)
    rounded = decimal.Decimal(float(value)).quantize(quantum, rounding=mode.value, context=_CONTEXT)
    return float(rounded)
