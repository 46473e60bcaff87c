from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from enum import Enum

from .errors import (
    InvalidExpiry, InvalidKind, InvalidRate, InvalidSpot, InvalidStrike,
    InvalidVolatility,
)


class OptionKind(str, Enum):
    """Vanilla option type."""
    CALL = "call"
    PUT = "put"


CALL = OptionKind.CALL
PUT  = OptionKind.PUT

_LOG_MAX = math.log(sys.float_info.max)


@dataclass(frozen=True)
class OptionContract:
    """European vanilla option plus the market inputs needed to price it.

    Parameters
    ----------
    spot : float
        Current underlying price, ``S > 0``.
    strike : float
        Strike price, ``K > 0``.
    volatility : float
        Annualised volatility, ``sigma >= 0``.
    risk_free_rate : float
        Continuously-compounded annual rate; any finite value.
    time_to_expiry : float
        Years remaining, ``T >= 0``.
    kind : OptionKind or str
        ``"call"`` or ``"put"``; strings are coerced to :class:`OptionKind`.

    Validation happens here, once.  Pricing functions downstream assume a
    valid contract.  ``volatility == 0`` and ``time_to_expiry == 0`` are
    valid and handled by the limiting-value rules of the pricer.
    """
    spot: float
    strike: float
    volatility: float
    risk_free_rate: float
    time_to_expiry: float     # years
    kind: OptionKind = CALL

    def __post_init__(self):
        if not (math.isfinite(self.spot) and self.spot > 0):
            raise InvalidSpot(f"spot must be positive and finite, got {self.spot}")
        if not (math.isfinite(self.strike) and self.strike > 0):
            raise InvalidStrike(f"strike must be positive and finite, got {self.strike}")
        if not (math.isfinite(self.volatility) and self.volatility >= 0):
            raise InvalidVolatility(
                f"volatility must be non-negative and finite, got {self.volatility}"
            )
        if not math.isfinite(self.risk_free_rate):
            raise InvalidRate(f"risk_free_rate must be finite, got {self.risk_free_rate}")
        if not (math.isfinite(self.time_to_expiry) and self.time_to_expiry >= 0):
            raise InvalidExpiry(
                f"time_to_expiry must be non-negative and finite, got {self.time_to_expiry}"
            )
        if math.log(self.strike) - self.risk_free_rate * self.time_to_expiry > _LOG_MAX:
            raise InvalidRate(
                f"discounted strike overflows for risk_free_rate={self.risk_free_rate}, "
                f"time_to_expiry={self.time_to_expiry}"
            )
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "kind", as_kind(self.kind))

    @property
    def is_degenerate(self) -> bool:
        """True when d1/d2 are undefined (zero volatility or at expiry)."""
        return self.volatility == 0 or self.time_to_expiry == 0


def as_kind(kind) -> OptionKind:
    """Normalise ``"call"``/``"put"`` (any case) or an :class:`OptionKind`."""
    if isinstance(kind, OptionKind):
        return kind
    try:
        return OptionKind(str(kind).lower())
    except ValueError:
        raise InvalidKind(f"kind must be 'call' or 'put', got {kind!r}") from None
