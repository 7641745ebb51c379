import argparse
import logging
import sys

from .core import OptionSpec, DEFAULTS, PARAM_NAMES, InvalidParameter, ParseError
from .black_scholes import call_price, put_price, call_delta, put_delta

logger = logging.getLogger(__name__)


def parse_params(values, *, strict=False) -> OptionSpec:
    """Turn positional ``S K r sigma T`` strings into an ``OptionSpec``.

    Fewer than five values means "use the defaults"; values past the fifth
    are ignored.  A value that is not a number falls back to its default,
    or raises ``ParseError`` (1-based index) when ``strict``.
    """
    if len(values) < len(PARAM_NAMES):
        if values:
            logger.debug(f"Expected {len(PARAM_NAMES)} arguments, got {len(values)}; using defaults")
        return DEFAULTS

    parsed = {}
    for i, (name, raw) in enumerate(zip(PARAM_NAMES, values), start=1):
        try:
            parsed[name] = float(raw)
        except ValueError:
            if strict:
                raise ParseError(i, raw) from None
            parsed[name] = getattr(DEFAULTS, name)
            logger.debug(f"Could not parse {name}={raw!r}; using default {parsed[name]}")
    return OptionSpec(**parsed)


def report(opt: OptionSpec) -> str:
    args = (opt.S, opt.K, opt.r, opt.sigma, opt.T)
    return "\n".join([
        f"Call Price: {call_price(*args):.4f}",
        f"Put Price: {put_price(*args):.4f}",
        f"Call Delta: {call_delta(*args):.4f}",
        f"Put Delta: {put_delta(*args):.4f}",
    ])


_FLAGS = {"-h", "--help", "--strict", "-v", "--verbose"}


def split_argv(argv):
    """Separate the option flags from the ``S K r sigma T`` values.

    Values such as ``-1e-3`` or a malformed ``-x`` look like options to
    argparse, so anything that is not a known flag is kept as a value.
    """
    flags = [a for a in argv if a in _FLAGS]
    values = [a for a in argv if a not in _FLAGS]
    return flags, values


def main(argv=None):
    p = argparse.ArgumentParser(
        prog="bspricer",
        description="Black-Scholes price and delta of a European call and put",
    )
    p.add_argument("params", nargs="*", metavar="PARAM",
                   help="S K r sigma T: spot, strike, cont. risk-free, volatility, years "
                        f"(default: {DEFAULTS.S:g} {DEFAULTS.K:g} {DEFAULTS.r:g} "
                        f"{DEFAULTS.sigma:g} {DEFAULTS.T:g})")
    p.add_argument("--strict", action="store_true",
                   help="reject malformed or out-of-domain inputs instead of "
                        "falling back to defaults / printing nan")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    flags, values = split_argv(sys.argv[1:] if argv is None else argv)
    args = p.parse_args(flags)
    args.params = values

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.strict and 0 < len(args.params) < len(PARAM_NAMES):
        p.error(f"expected 0 or {len(PARAM_NAMES)} arguments, got {len(args.params)}")
    try:
        opt = parse_params(args.params, strict=args.strict)
        if args.strict:
            opt.validate()
    except (ParseError, InvalidParameter) as e:
        p.error(str(e))

    logger.debug(f"Pricing {opt}")
    print(report(opt))


if __name__ == "__main__":
    main()
