"""Bump-and-reprice numerical Greeks.

Central finite differences that work with **any** pricer callable taking
an :class:`~bsgreeks.core.OptionContract`.  Used to cross-check the
closed-form sensitivities in :mod:`bsgreeks.black_scholes`.
"""

from __future__ import annotations

from typing import Callable
from dataclasses import replace

from .core import OptionContract

__all__ = ["numerical_greeks"]


def numerical_greeks(
    pricer_func: Callable[[OptionContract], float],
    contract: OptionContract,
    *,
    bump_pct: float = 0.01,
) -> dict[str, float]:
    """Compute Greeks via central finite differences on an arbitrary pricer.

    Parameters
    ----------
    pricer_func : callable
        ``pricer_func(contract) -> float``.
    contract : OptionContract
        Contract to bump around.
    bump_pct : float
        Relative bump size for spot and vol; absolute for rate (default 0.01).

    Returns
    -------
    dict[str, float]
        Keys: ``delta``, ``gamma``, ``vega``, ``theta``, ``rho``.
        Theta is the one-day calendar decay annualised, ``0.0`` when less
        than a day remains.
    """
    if bump_pct <= 0:
        raise ValueError(f"bump_pct must be positive, got {bump_pct}")
    c = contract
    P0 = pricer_func(c)

    # --- Delta & Gamma (spot bump) ---
    eps_S = bump_pct * c.spot
    P_up = pricer_func(replace(c, spot=c.spot + eps_S))
    P_dn = pricer_func(replace(c, spot=c.spot - eps_S))
    delta = (P_up - P_dn) / (2.0 * eps_S)
    gamma = (P_up - 2.0 * P0 + P_dn) / (eps_S ** 2)

    # --- Vega (vol bump, one-sided at the zero floor) ---
    eps_v = max(bump_pct * c.volatility, 1e-4)
    sig_up = c.volatility + eps_v
    sig_dn = max(c.volatility - eps_v, 0.0)
    P_vup = pricer_func(replace(c, volatility=sig_up))
    P_vdn = pricer_func(replace(c, volatility=sig_dn))
    vega = (P_vup - P_vdn) / (sig_up - sig_dn)

    # --- Theta (time decay, 1-day bump) ---
    dt = 1.0 / 365.0
    if c.time_to_expiry > dt:
        P_t = pricer_func(replace(c, time_to_expiry=c.time_to_expiry - dt))
        theta_val = (P_t - P0) / dt
    else:
        theta_val = 0.0

    # --- Rho (rate bump) ---
    eps_r = bump_pct
    P_rup = pricer_func(replace(c, risk_free_rate=c.risk_free_rate + eps_r))
    P_rdn = pricer_func(replace(c, risk_free_rate=c.risk_free_rate - eps_r))
    rho = (P_rup - P_rdn) / (2.0 * eps_r)

    return {
        "delta": float(delta),
        "gamma": float(gamma),
        "vega": float(vega),
        "theta": float(theta_val),
        "rho": float(rho),
    }
