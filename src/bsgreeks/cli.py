import argparse
import logging
import sys

from .core import OptionContract, CALL, PUT
from .errors import ContractError
from .black_scholes import price as bs_price, greeks as bs_greeks, value_at_expiry

logger = logging.getLogger(__name__)


def _kind(s: str):
    s = s.lower()
    if s in {"call", "c"}:
        return CALL
    if s in {"put", "p"}:
        return PUT
    raise argparse.ArgumentTypeError("kind must be 'call' or 'put'")


def _positive_float(s: str) -> float:
    try:
        value = float(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got {s!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {s}")
    return value


def add_moneyness(parser: argparse.ArgumentParser):
    parser.add_argument("--spot", type=float, required=True)
    parser.add_argument("--strike", type=float, required=True)
    parser.add_argument("--kind", type=_kind, default=CALL, help="call|put")


def add_common(parser: argparse.ArgumentParser):
    add_moneyness(parser)
    parser.add_argument("--vol", type=float, required=True, help="annualised volatility")
    parser.add_argument("--rate", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--T", type=float, required=True, help="years")


def _contract(args) -> OptionContract:
    return OptionContract(args.spot, args.strike, args.vol, args.rate, args.T, args.kind)


def cmd_price(args):
    print(f"{bs_price(_contract(args)):.10f}")


def cmd_greeks(args):
    g = bs_greeks(_contract(args))
    if args.market_units:
        g = g.per_market_units(args.days_per_year)
    for name, value in g.as_dict().items():
        shown = "undefined" if value is None else f"{value:.10f}"
        print(f"{name:<6} {shown}")


def cmd_expiry(args):
    print(f"{value_at_expiry(args.spot, args.strike, args.kind):.10f}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bsgreeks", description="Black-Scholes price and greeks")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_px = sub.add_parser("price", help="Black-Scholes price")
    add_common(p_px)
    p_px.set_defaults(func=cmd_price)

    p_gk = sub.add_parser("greeks", help="delta, gamma, vega, theta, rho, lambda")
    add_common(p_gk)
    p_gk.add_argument("--market-units", action="store_true",
                      help="theta per day, vega and rho per 1%% move")
    p_gk.add_argument("--days-per-year", type=_positive_float, default=365.0)
    p_gk.set_defaults(func=cmd_greeks)

    p_ex = sub.add_parser("expiry", help="intrinsic value at expiry")
    add_moneyness(p_ex)
    p_ex.set_defaults(func=cmd_expiry)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except ContractError as exc:
        logger.error("invalid contract: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
