# black_scholes_vec.py
# Vectorised Black-Scholes pricing and Greeks.
# All public functions accept scalars *or* NumPy arrays and broadcast.
# Degenerate elements (sigma == 0 or T == 0) follow the same limiting-value
# rules as the scalar engine in black_scholes.py.

from __future__ import annotations
import numpy as np
from scipy.stats import norm

from .core import OptionKind, as_kind
from .errors import (
    InvalidExpiry, InvalidRate, InvalidSpot, InvalidStrike, InvalidVolatility,
)

_N = norm.cdf   # vectorised standard-normal CDF
_n = norm.pdf   # vectorised standard-normal PDF

_LOG_MAX = np.log(np.finfo(float).max)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _as_arrays(S, K, sigma, r, T):
    S, K, sigma, r, T = (np.asarray(x, dtype=float) for x in (S, K, sigma, r, T))
    if not np.all(np.isfinite(S) & (S > 0)):
        raise InvalidSpot("every spot must be positive and finite")
    if not np.all(np.isfinite(K) & (K > 0)):
        raise InvalidStrike("every strike must be positive and finite")
    if not np.all(np.isfinite(sigma) & (sigma >= 0)):
        raise InvalidVolatility("every volatility must be non-negative and finite")
    if not np.all(np.isfinite(r)):
        raise InvalidRate("every risk_free_rate must be finite")
    if not np.all(np.isfinite(T) & (T >= 0)):
        raise InvalidExpiry("every time_to_expiry must be non-negative and finite")
    with np.errstate(over="ignore", invalid="ignore"):
        log_k_disc = np.log(K) - r * T
    if np.any(log_k_disc > _LOG_MAX):
        raise InvalidRate("discounted strike K*exp(-r*T) overflows for some element")
    return S, K, sigma, r, T


def _d1_d2(S, K, sigma, r, T):
    """Compute d1, d2 arrays.  NaN/inf where sigma*sqrt(T) == 0; callers mask."""
    sqrt_T = np.sqrt(T)
    sig_sqrt_T = sigma * sqrt_T
    with np.errstate(divide="ignore", invalid="ignore"):
        base = np.log(S / K) / sig_sqrt_T + r / sigma * sqrt_T
        d1 = base + 0.5 * sig_sqrt_T
        d2 = base - 0.5 * sig_sqrt_T
    return d1, d2


def _is_call(kind) -> np.ndarray:
    """Return boolean mask: True where kind is a call."""
    kind = np.asarray(kind, dtype=object)
    if kind.ndim == 0:
        return np.bool_(as_kind(kind.item()) is OptionKind.CALL)
    return np.array(
        [as_kind(k) is OptionKind.CALL for k in kind.flat], dtype=bool
    ).reshape(kind.shape)


def _moneyness_step(S, k_disc) -> np.ndarray:
    return np.where(S > k_disc, 1.0, np.where(S < k_disc, 0.0, 0.5))


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, sigma, r, T, kind) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.
    Argument order follows :class:`~bsgreeks.core.OptionContract`:
    spot, strike, volatility, risk_free_rate, time_to_expiry, kind.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).
    """
    S, K, sigma, r, T = _as_arrays(S, K, sigma, r, T)
    d1, d2 = _d1_d2(S, K, sigma, r, T)
    k_disc = np.exp(np.log(K) - r * T)
    degenerate = (sigma == 0) | (T == 0)

    with np.errstate(invalid="ignore"):
        call_px = np.where(degenerate, np.maximum(S - k_disc, 0.0),
                           S * _N(d1) - k_disc * _N(d2))
        put_px  = np.where(degenerate, np.maximum(k_disc - S, 0.0),
                           k_disc * _N(-d2) - S * _N(-d1))

    is_call = _is_call(kind)
    return np.where(is_call, call_px, put_px)


# ---------------------------------------------------------------------------
# Vectorised Greeks
# ---------------------------------------------------------------------------
def bs_greeks_vec(S, K, sigma, r, T, kind) -> dict[str, np.ndarray]:
    """Vectorised Black-Scholes Greeks.

    Returns dict with keys: delta, gamma, vega, theta, rho, lambda.
    Vega is dPrice/dSigma (absolute), theta is calendar decay (per year).
    Lambda is NaN wherever the price is exactly zero.
    """
    S, K, sigma, r, T = _as_arrays(S, K, sigma, r, T)
    d1, d2 = _d1_d2(S, K, sigma, r, T)
    k_disc = np.exp(np.log(K) - r * T)
    sqrt_T = np.sqrt(T)
    degenerate = (sigma == 0) | (T == 0)
    expired = T == 0
    step = _moneyness_step(S, k_disc)
    is_call = _is_call(kind)

    with np.errstate(divide="ignore", invalid="ignore"):
        n_d1 = _n(d1)

        # Common
        gamma = np.where(degenerate, 0.0, n_d1 / (S * sigma * sqrt_T))
        vega  = np.where(degenerate, 0.0, S * n_d1 * sqrt_T)
        decay = np.where(degenerate, 0.0, -S * n_d1 * sigma / (2 * sqrt_T))

        # Call-specific
        p_c     = np.where(degenerate, step, _N(d2))
        delta_c = np.where(degenerate, step, _N(d1))
        theta_c = np.where(expired, 0.0, decay - r * k_disc * p_c)
        rho_c   = T * k_disc * p_c

        # Put-specific
        p_p     = np.where(degenerate, 1.0 - step, _N(-d2))
        delta_p = np.where(degenerate, step - 1.0, -_N(-d1))
        theta_p = np.where(expired, 0.0, decay + r * k_disc * p_p)
        rho_p   = -T * k_disc * p_p

    delta = np.where(is_call, delta_c, delta_p)
    theta = np.where(is_call, theta_c, theta_p)
    rho   = np.where(is_call, rho_c, rho_p)

    px = bs_price_vec(S, K, sigma, r, T, kind)
    with np.errstate(divide="ignore", invalid="ignore"):
        lam = np.where(px == 0.0, np.nan, delta * S / px)

    return {"delta": delta, "gamma": gamma, "vega": vega, "theta": theta,
            "rho": rho, "lambda": lam}
