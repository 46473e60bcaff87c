"""Tests for the bump-and-reprice risk engine against the closed form."""

import pytest

from bsgreeks import OptionContract, CALL, PUT, price, greeks
from bsgreeks.black_scholes_vec import bs_price_vec
from bsgreeks.risk import numerical_greeks

OPT = OptionContract(spot=100, strike=100, volatility=0.2, risk_free_rate=0.05,
                     time_to_expiry=1.0)


def _vec_pricer(c):
    """Vectorised BS wrapped as a contract pricer."""
    return float(bs_price_vec(c.spot, c.strike, c.volatility, c.risk_free_rate,
                              c.time_to_expiry, c.kind))


class TestNumericalGreeks:
    @pytest.mark.parametrize("kind", [CALL, PUT])
    @pytest.mark.parametrize("spot", [85.0, 100.0, 115.0])
    def test_vs_analytical_bs(self, kind, spot):
        c = OptionContract(spot, 100, 0.2, 0.05, 1.0, kind)
        ng = numerical_greeks(price, c)
        ag = greeks(c)
        assert abs(ng["delta"] - ag.delta) < 0.005
        assert abs(ng["gamma"] - ag.gamma) < 0.002
        assert abs(ng["vega"] - ag.vega) < 0.5
        assert abs(ng["theta"] - ag.theta) < 0.05
        assert abs(ng["rho"] - ag.rho) < 0.5

    def test_any_pricer(self):
        ng = numerical_greeks(_vec_pricer, OPT)
        assert abs(ng["delta"] - greeks(OPT).delta) < 0.005

    def test_all_keys(self):
        ng = numerical_greeks(price, OPT)
        assert set(ng.keys()) == {"delta", "gamma", "vega", "theta", "rho"}

    def test_put_delta_negative(self):
        ng = numerical_greeks(price, OptionContract(100, 100, 0.2, 0.05, 1.0, PUT))
        assert ng["delta"] < 0

    def test_zero_vol_uses_one_sided_vega(self):
        c = OptionContract(100, 100, 0.0, 0.05, 1.0)
        ng = numerical_greeks(price, c)
        assert abs(ng["vega"]) < 1e-6

    def test_theta_zero_inside_last_day(self):
        c = OptionContract(100, 100, 0.2, 0.05, 0.5 / 365)
        assert numerical_greeks(price, c)["theta"] == 0.0

    def test_rejects_non_positive_bump(self):
        with pytest.raises(ValueError):
            numerical_greeks(price, OPT, bump_pct=0.0)
