# black_scholes.py
# Closed-form Black-Scholes price and delta for European options.
# Out-of-domain inputs (non-positive S, K, sigma or T) are not rejected here:
# they propagate as NaN / Inf under IEEE arithmetic.  See core.validate_parameters.

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Literal

import numpy as np

from .core import OptionSpec, CALL, PUT

_SQRT2 = math.sqrt(2.0)


def norm_cdf(x: float) -> float:
    """Standard normal CDF, ``0.5 * (1 + erf(x / sqrt(2)))``.

    Evaluated through ``erfc`` so the lower tail keeps its relative precision.
    """
    return 0.5 * math.erfc(-x / _SQRT2)


def d1_d2(S: float, K: float, r: float, sigma: float, T: float) -> tuple[float, float]:
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        S, K, r, sigma, T = (np.float64(x) for x in (S, K, r, sigma, T))
        sig_sqrt_T = sigma * np.sqrt(T)
        d1 = (np.log(S / K) + (r + 0.5 * sigma * sigma) * T) / sig_sqrt_T
        d2 = d1 - sig_sqrt_T
    return float(d1), float(d2)


def _discount(r: float, T: float) -> np.float64:
    with np.errstate(over="ignore", invalid="ignore"):
        return np.exp(-np.float64(r) * np.float64(T))


def call_price(S: float, K: float, r: float, sigma: float, T: float) -> float:
    d1, d2 = d1_d2(S, K, r, sigma, T)
    with np.errstate(invalid="ignore", over="ignore"):
        return float(np.float64(S) * norm_cdf(d1) - K * _discount(r, T) * norm_cdf(d2))


def put_price(S: float, K: float, r: float, sigma: float, T: float) -> float:
    d1, d2 = d1_d2(S, K, r, sigma, T)
    with np.errstate(invalid="ignore", over="ignore"):
        return float(K * _discount(r, T) * norm_cdf(-d2) - np.float64(S) * norm_cdf(-d1))


def call_delta(S: float, K: float, r: float, sigma: float, T: float) -> float:
    d1, _ = d1_d2(S, K, r, sigma, T)
    return norm_cdf(d1)


def put_delta(S: float, K: float, r: float, sigma: float, T: float) -> float:
    d1, _ = d1_d2(S, K, r, sigma, T)
    return norm_cdf(d1) - 1.0


# ---------------------------------------------------------------------------
# OptionSpec interface
# ---------------------------------------------------------------------------
def price(opt: OptionSpec, kind: Literal["call", "put"] = CALL) -> float:
    if kind == CALL:
        return call_price(opt.S, opt.K, opt.r, opt.sigma, opt.T)
    elif kind == PUT:
        return put_price(opt.S, opt.K, opt.r, opt.sigma, opt.T)
    else:
        raise ValueError("kind must be 'call' or 'put'")


def delta(opt: OptionSpec, kind: Literal["call", "put"] = CALL) -> float:
    if kind == CALL:
        return call_delta(opt.S, opt.K, opt.r, opt.sigma, opt.T)
    elif kind == PUT:
        return put_delta(opt.S, opt.K, opt.r, opt.sigma, opt.T)
    else:
        raise ValueError("kind must be 'call' or 'put'")


@dataclass(frozen=True)
class EuropeanOption:
    """A call or put bound to its parameters.

    >>> EuropeanOption(OptionSpec(100, 100, 0.05, 0.2, 1.0), CALL).price()  # doctest: +ELLIPSIS
    10.450...
    """
    spec: OptionSpec
    kind: str = CALL

    def __post_init__(self):
        if self.kind not in (CALL, PUT):
            raise ValueError(f"kind must be 'call' or 'put', got {self.kind!r}")

    def price(self) -> float:
        return price(self.spec, self.kind)

    def delta(self) -> float:
        return delta(self.spec, self.kind)
