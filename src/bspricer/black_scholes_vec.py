# black_scholes_vec.py
# Vectorised Black-Scholes price and delta for pricing a whole chain at once.
# All public functions accept scalars *or* NumPy arrays and broadcast.

from __future__ import annotations
import numpy as np
from scipy.stats import norm

from .core import CALL, PUT

_N = norm.cdf   # vectorised standard-normal CDF


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _d1_d2(S, K, r, sigma, T):
    """d1, d2 from log-moneyness and total volatility; inputs broadcast."""
    S, K, r, sigma, T = (np.asarray(x, dtype=float) for x in (S, K, r, sigma, T))
    total_vol = sigma * np.sqrt(T)
    log_moneyness = np.log(S) - np.log(K)
    d1 = (log_moneyness + r * T) / total_vol + 0.5 * total_vol
    return d1, d1 - total_vol


def _call_mask(kind) -> np.ndarray:
    """True for ``CALL`` tags, False for ``PUT``; any other tag is rejected."""
    tags = np.asarray(kind, dtype=object)
    unknown = sorted({str(t) for t in tags.flat if t not in (CALL, PUT)})
    if unknown:
        raise ValueError(f"kind must be 'call' or 'put', got {', '.join(map(repr, unknown))}")
    return tags == CALL


# ---------------------------------------------------------------------------
# Vectorised price
# ---------------------------------------------------------------------------
def bs_price_vec(S, K, r, sigma, T, kind) -> np.ndarray:
    """Vectorised Black-Scholes price.

    Parameters accept scalars or arrays; NumPy broadcasting rules apply.
    ``kind`` is ``"call"`` / ``"put"`` or an array of those tags.

    Returns
    -------
    np.ndarray
        Option prices (same shape as broadcasted inputs).  Entries with
        non-positive S, K, sigma or T come back NaN / Inf.
    """
    S, K, r, sigma, T = (np.asarray(x, dtype=float) for x in (S, K, r, sigma, T))
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        d1, d2 = _d1_d2(S, K, r, sigma, T)
        disc_r = np.exp(-r * T)

        call_px = S * _N(d1) - disc_r * K * _N(d2)
        put_px  = disc_r * K * _N(-d2) - S * _N(-d1)

    is_call = _call_mask(kind)
    return np.where(is_call, call_px, put_px)


# ---------------------------------------------------------------------------
# Vectorised delta
# ---------------------------------------------------------------------------
def bs_delta_vec(S, K, r, sigma, T, kind) -> np.ndarray:
    """Vectorised Black-Scholes delta: N(d1) for calls, N(d1) - 1 for puts."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        d1, _ = _d1_d2(S, K, r, sigma, T)
        N_d1 = _N(d1)
    return np.where(_call_mask(kind), N_d1, N_d1 - 1.0)
