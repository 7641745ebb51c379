from __future__ import annotations
import math
from dataclasses import dataclass


CALL = "call"
PUT  = "put"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class InvalidParameter(ValueError):
    """A pricing input lies outside the domain of the Black-Scholes formula."""

    def __init__(self, name: str, value: float, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"{name}={value!r}: {reason}")


class ParseError(ValueError):
    """A command-line argument could not be read as a number."""

    def __init__(self, index: int, value: str):
        self.index = index
        self.value = value
        super().__init__(f"argument {index} ({value!r}) is not a number")


# ---------------------------------------------------------------------------
# Option parameters
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionSpec:
    """The five scalar inputs of a single Black-Scholes evaluation.

    No checks run on construction: out-of-domain values flow through the
    formulas as NaN / Inf.  Call ``validate()`` to reject them instead.
    """
    S: float          # spot
    K: float          # strike
    r: float          # continuous risk-free
    sigma: float      # annualised volatility
    T: float          # years

    def validate(self) -> OptionSpec:
        validate_parameters(self.S, self.K, self.r, self.sigma, self.T)
        return self


DEFAULTS = OptionSpec(S=100.0, K=100.0, r=0.05, sigma=0.2, T=1.0)

PARAM_NAMES = ("S", "K", "r", "sigma", "T")


def validate_parameters(S: float, K: float, r: float, sigma: float, T: float) -> None:
    """Raise ``InvalidParameter`` for the first input the formula cannot take."""
    for name, value in (("S", S), ("K", K), ("sigma", sigma), ("T", T)):
        if not math.isfinite(value):
            raise InvalidParameter(name, value, "must be finite")
        if value <= 0:
            raise InvalidParameter(name, value, "must be positive")
    if not math.isfinite(r):
        raise InvalidParameter("r", r, "must be finite")


def parse_kind(s: str) -> str:
    s = s.strip().lower()
    if s in {"call", "c"}:
        return CALL
    if s in {"put", "p"}:
        return PUT
    raise ValueError(f"kind must be 'call' or 'put', got {s!r}")
