"""Error taxonomy for contract validation and undefined quantities."""

from __future__ import annotations

__all__ = [
    "GreeksError",
    "ContractError",
    "InvalidSpot",
    "InvalidStrike",
    "InvalidVolatility",
    "InvalidRate",
    "InvalidExpiry",
    "InvalidKind",
    "UndefinedKernel",
    "UndefinedLambda",
]


class GreeksError(Exception):
    """Base class for every error raised by ``bsgreeks``."""


# ---------------------------------------------------------------------------
# Validation failures — raised once, when a contract is built
# ---------------------------------------------------------------------------
class ContractError(GreeksError, ValueError):
    """A contract field is outside its valid domain."""


class InvalidSpot(ContractError):
    pass


class InvalidStrike(ContractError):
    pass


class InvalidVolatility(ContractError):
    pass


class InvalidRate(ContractError):
    pass


class InvalidExpiry(ContractError):
    pass


class InvalidKind(ContractError):
    pass


# ---------------------------------------------------------------------------
# Quantities that are undefined for a valid contract
# ---------------------------------------------------------------------------
class UndefinedKernel(GreeksError, ZeroDivisionError):
    """d1/d2 requested for a contract with zero volatility or zero expiry."""


class UndefinedLambda(GreeksError, ZeroDivisionError):
    """Elasticity requested where the option price is exactly zero."""
