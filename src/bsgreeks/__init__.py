# bsgreeks — Black-Scholes analytics for European vanilla options
# Public API

import logging

# Data model & errors
from .core import OptionContract, OptionKind, CALL, PUT
from .errors import (
    GreeksError, ContractError,
    InvalidSpot, InvalidStrike, InvalidVolatility, InvalidRate,
    InvalidExpiry, InvalidKind,
    UndefinedKernel, UndefinedLambda,
)

# Normal-distribution primitives
from .normal import erf, erfc, pdf, cdf

# Scalar closed-form engine
from .black_scholes import (
    Greeks, d1, d2, d1_d2, price, delta, gamma, vega, theta, rho,
    lambda_, elasticity, greeks, value_at_expiry,
)

# Vectorised pricers
from .black_scholes_vec import bs_price_vec, bs_greeks_vec

# Risk engine
from .risk import numerical_greeks

__all__ = [
    # Data model & errors
    "OptionContract", "OptionKind", "CALL", "PUT",
    "GreeksError", "ContractError",
    "InvalidSpot", "InvalidStrike", "InvalidVolatility", "InvalidRate",
    "InvalidExpiry", "InvalidKind",
    "UndefinedKernel", "UndefinedLambda",
    # Normal distribution
    "erf", "erfc", "pdf", "cdf",
    # Scalar
    "Greeks", "d1", "d2", "d1_d2", "price",
    "delta", "gamma", "vega", "theta", "rho", "lambda_", "elasticity",
    "greeks", "value_at_expiry",
    # Vectorised
    "bs_price_vec", "bs_greeks_vec",
    # Risk
    "numerical_greeks",
]

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
