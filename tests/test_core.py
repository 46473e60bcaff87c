"""Tests for the contract data model and its validation."""

import dataclasses
import math
import pytest

from bsgreeks import (
    OptionContract, OptionKind, CALL, PUT, price,
    ContractError, InvalidSpot, InvalidStrike, InvalidVolatility,
    InvalidRate, InvalidExpiry, InvalidKind,
)


def _contract(**overrides):
    fields = dict(spot=100.0, strike=100.0, volatility=0.2,
                  risk_free_rate=0.05, time_to_expiry=1.0, kind=CALL)
    fields.update(overrides)
    return OptionContract(**fields)


class TestOptionContract:
    def test_fields(self):
        c = _contract()
        assert (c.spot, c.strike, c.volatility) == (100.0, 100.0, 0.2)
        assert c.kind is OptionKind.CALL

    def test_default_kind_is_call(self):
        c = OptionContract(100, 100, 0.2, 0.05, 1.0)
        assert c.kind is CALL

    @pytest.mark.parametrize("raw", ["put", "PUT", "Put", PUT])
    def test_kind_coerced(self, raw):
        assert _contract(kind=raw).kind is OptionKind.PUT

    def test_immutable(self):
        c = _contract()
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.spot = 101.0

    def test_equal_by_value(self):
        assert _contract(kind="call") == _contract(kind=CALL)
        assert hash(_contract()) == hash(_contract())

    def test_negative_rate_allowed(self):
        assert _contract(risk_free_rate=-0.02).risk_free_rate == -0.02

    def test_degenerate_is_valid(self):
        assert _contract(volatility=0.0).is_degenerate
        assert _contract(time_to_expiry=0.0).is_degenerate
        assert not _contract().is_degenerate


# ---------------------------------------------------------------------------
# Validation — each failure has its own error type
# ---------------------------------------------------------------------------
class TestValidation:
    def test_negative_spot_rejected_before_pricing(self):
        with pytest.raises(InvalidSpot):
            c = _contract(spot=-1.0)
            price(c)

    @pytest.mark.parametrize("field, value, error", [
        ("spot", 0.0, InvalidSpot),
        ("spot", math.nan, InvalidSpot),
        ("spot", math.inf, InvalidSpot),
        ("strike", 0.0, InvalidStrike),
        ("strike", -5.0, InvalidStrike),
        ("volatility", -0.01, InvalidVolatility),
        ("volatility", math.nan, InvalidVolatility),
        ("risk_free_rate", math.nan, InvalidRate),
        ("risk_free_rate", -math.inf, InvalidRate),
        ("time_to_expiry", -1.0, InvalidExpiry),
        ("time_to_expiry", math.inf, InvalidExpiry),
        ("kind", "straddle", InvalidKind),
    ])
    def test_rejects(self, field, value, error):
        with pytest.raises(error):
            _contract(**{field: value})

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            _contract(strike=-1.0)
        assert issubclass(InvalidVolatility, ContractError)

    def test_message_names_value(self):
        with pytest.raises(InvalidSpot, match="-1"):
            _contract(spot=-1.0)

    def test_replace_revalidates(self):
        with pytest.raises(InvalidExpiry):
            dataclasses.replace(_contract(), time_to_expiry=-0.5)


# ---------------------------------------------------------------------------
# Discount factor must stay representable
# ---------------------------------------------------------------------------
class TestDiscountRange:
    @pytest.mark.parametrize("rate, expiry", [(-800.0, 1.0), (-8.0, 100.0), (-1e200, 1e200)])
    def test_overflowing_discount_rejected(self, rate, expiry):
        with pytest.raises(InvalidRate, match="overflows"):
            _contract(risk_free_rate=rate, time_to_expiry=expiry)

    def test_large_negative_rate_within_range_is_valid(self):
        c = _contract(risk_free_rate=-700.0, kind=PUT)
        assert math.isfinite(price(c))

    def test_huge_positive_rate_discounts_to_zero(self):
        c = _contract(risk_free_rate=1e200, time_to_expiry=1e200, kind=PUT)
        assert price(c) == 0.0
