"""Closed-form Black-Scholes price and greeks for European vanilla options.

Every function takes a validated :class:`~bsgreeks.core.OptionContract`
and returns a float.  Contracts with ``volatility == 0`` or
``time_to_expiry == 0`` are valid but have no d1/d2; they are priced by
their limiting values:

* the price is the intrinsic value against the discounted strike
  ``K * exp(-r T)`` (which is just ``K`` at expiry);
* delta is the moneyness step against that same strike (0.5 exactly on
  the boundary);
* gamma and vega are ``0.0``;
* theta is ``0.0`` at expiry; with zero volatility it keeps only its
  carry term;
* rho uses the step in place of ``N(d2)`` (and is ``0.0`` at expiry).

Theta is the calendar-time derivative per year (negative for a long
vanilla without carry), vega is per unit of volatility and rho per unit
of rate.  :meth:`Greeks.per_market_units` converts to trading-desk units.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from math import exp, log, sqrt
from typing import Dict, Optional, Tuple

from .core import CALL, OptionContract, OptionKind, as_kind
from .errors import UndefinedKernel, UndefinedLambda
from .normal import cdf, pdf

__all__ = [
    "Greeks",
    "d1", "d2", "d1_d2",
    "price",
    "delta", "gamma", "vega", "theta", "rho", "lambda_", "elasticity",
    "greeks",
    "value_at_expiry",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Kernel
# ---------------------------------------------------------------------------
def d1_d2(c: OptionContract) -> Tuple[float, float]:
    """Return ``(d1, d2)``.  Raises :class:`UndefinedKernel` if sigma or T is 0."""
    if c.is_degenerate:
        raise UndefinedKernel(
            f"d1/d2 undefined for volatility={c.volatility}, "
            f"time_to_expiry={c.time_to_expiry}"
        )
    # sigma is never squared, so a large finite sigma keeps d1, d2 finite
    sqrt_t = sqrt(c.time_to_expiry)
    rt = c.volatility * sqrt_t
    base = log(c.spot / c.strike) / rt + c.risk_free_rate / c.volatility * sqrt_t
    return base + 0.5 * rt, base - 0.5 * rt


def d1(c: OptionContract) -> float:
    return d1_d2(c)[0]


def d2(c: OptionContract) -> float:
    return d1_d2(c)[1]


# ---------------------------------------------------------------------------
# Degenerate-contract helpers
# ---------------------------------------------------------------------------
def _discounted_strike(c: OptionContract) -> float:
    return exp(log(c.strike) - c.risk_free_rate * c.time_to_expiry)


def _moneyness_step(c: OptionContract) -> float:
    """Limit of N(d1) and N(d2) as sigma*sqrt(T) -> 0."""
    k = _discounted_strike(c)
    if c.spot > k:
        return 1.0
    if c.spot < k:
        return 0.0
    return 0.5


def _exercise_probabilities(c: OptionContract) -> Tuple[float, float]:
    """``(N(d2), N(-d2))``, replaced by the moneyness step when degenerate."""
    if c.is_degenerate:
        step = _moneyness_step(c)
        return step, 1.0 - step
    _, d2_ = d1_d2(c)
    return cdf(d2_), cdf(-d2_)


# ---------------------------------------------------------------------------
# Expiry valuation
# ---------------------------------------------------------------------------
def value_at_expiry(spot: float, strike: float, kind=CALL) -> float:
    """Intrinsic payoff ``max(S - K, 0)`` for a call, ``max(K - S, 0)`` for a put."""
    if as_kind(kind) is OptionKind.CALL:
        return max(spot - strike, 0.0)
    return max(strike - spot, 0.0)


# ---------------------------------------------------------------------------
# Price
# ---------------------------------------------------------------------------
def price(c: OptionContract) -> float:
    if c.is_degenerate:
        logger.debug("degenerate contract %s priced at intrinsic value", c)
        return value_at_expiry(c.spot, _discounted_strike(c), c.kind)
    d1_, d2_ = d1_d2(c)
    k_disc = _discounted_strike(c)
    if c.kind is OptionKind.CALL:
        return c.spot * cdf(d1_) - k_disc * cdf(d2_)
    return k_disc * cdf(-d2_) - c.spot * cdf(-d1_)


# ---------------------------------------------------------------------------
# Greeks
# ---------------------------------------------------------------------------
def delta(c: OptionContract) -> float:
    if c.is_degenerate:
        step = _moneyness_step(c)
        return step if c.kind is OptionKind.CALL else step - 1.0
    d1_, _ = d1_d2(c)
    if c.kind is OptionKind.CALL:
        return cdf(d1_)
    # -N(-d1) == N(d1) - 1 without cancellation deep in the money
    return -cdf(-d1_)


def gamma(c: OptionContract) -> float:
    """Identical for calls and puts; 0.0 for degenerate contracts."""
    if c.is_degenerate:
        return 0.0
    d1_, _ = d1_d2(c)
    return pdf(d1_) / (c.spot * c.volatility * sqrt(c.time_to_expiry))


def vega(c: OptionContract) -> float:
    """Identical for calls and puts; 0.0 for degenerate contracts."""
    if c.is_degenerate:
        return 0.0
    d1_, _ = d1_d2(c)
    return c.spot * pdf(d1_) * sqrt(c.time_to_expiry)


def theta(c: OptionContract) -> float:
    """Per-year calendar-time decay.  0.0 at expiry, where dV/dt jumps."""
    if c.time_to_expiry == 0:
        return 0.0
    n_d2, n_minus_d2 = _exercise_probabilities(c)
    carry = c.risk_free_rate * _discounted_strike(c)
    if c.volatility == 0:
        decay = 0.0
    else:
        d1_, _ = d1_d2(c)
        decay = -c.spot * pdf(d1_) * c.volatility / (2.0 * sqrt(c.time_to_expiry))
    if c.kind is OptionKind.CALL:
        return decay - carry * n_d2
    return decay + carry * n_minus_d2


def rho(c: OptionContract) -> float:
    if c.time_to_expiry == 0:
        return 0.0
    n_d2, n_minus_d2 = _exercise_probabilities(c)
    k_t = c.time_to_expiry * _discounted_strike(c)
    if c.kind is OptionKind.CALL:
        return k_t * n_d2
    return -k_t * n_minus_d2


def lambda_(c: OptionContract) -> float:
    """Elasticity ``delta * S / price``.

    Raises :class:`UndefinedLambda` when the price is exactly zero (for
    example an out-of-the-money option at expiry).
    """
    px = price(c)
    if px == 0.0:
        raise UndefinedLambda(f"option price is zero, lambda undefined for {c}")
    return delta(c) * c.spot / px


elasticity = lambda_


@dataclass(frozen=True)
class Greeks:
    """All six sensitivities of one contract.

    ``lambda_`` is ``None`` where the price is zero; :func:`lambda_`
    raises in that case instead.
    """
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float
    lambda_: Optional[float]

    def as_dict(self) -> Dict[str, Optional[float]]:
        return {
            "delta": self.delta, "gamma": self.gamma, "vega": self.vega,
            "theta": self.theta, "rho": self.rho, "lambda": self.lambda_,
        }

    def per_market_units(self, days_per_year: float = 365.0) -> Greeks:
        """Theta per calendar day, vega per vol point, rho per rate point."""
        if days_per_year <= 0:
            raise ValueError(f"days_per_year must be positive, got {days_per_year}")
        return replace(
            self,
            theta=self.theta / days_per_year,
            vega=self.vega / 100.0,
            rho=self.rho / 100.0,
        )


def greeks(c: OptionContract) -> Greeks:
    if c.is_degenerate:
        logger.debug("degenerate contract %s: limiting-value greeks", c)
    try:
        lam = lambda_(c)
    except UndefinedLambda:
        lam = None
    return Greeks(
        delta=delta(c),
        gamma=gamma(c),
        vega=vega(c),
        theta=theta(c),
        rho=rho(c),
        lambda_=lam,
    )
