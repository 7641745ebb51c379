# bspricer: Black-Scholes price and delta for European options
# Public API

from .core import (
    OptionSpec, CALL, PUT, DEFAULTS,
    InvalidParameter, ParseError, validate_parameters, parse_kind,
)
from .black_scholes import (
    norm_cdf, d1_d2,
    call_price, put_price, call_delta, put_delta,
    price as bs_price, delta as bs_delta, EuropeanOption,
)

# Vectorised pricers
from .black_scholes_vec import bs_price_vec, bs_delta_vec

# Book pricing
from .book import read_book, price_book, write_results

__all__ = [
    "OptionSpec", "CALL", "PUT", "DEFAULTS",
    "InvalidParameter", "ParseError", "validate_parameters", "parse_kind",
    # Scalar engine
    "norm_cdf", "d1_d2",
    "call_price", "put_price", "call_delta", "put_delta",
    "bs_price", "bs_delta", "EuropeanOption",
    # Vectorised
    "bs_price_vec", "bs_delta_vec",
    # Book
    "read_book", "price_book", "write_results",
]

__version__ = "0.1.0"
