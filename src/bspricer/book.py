"""Batch pricing of an options book.

A book is a CSV file with one option per row::

    id,S,K,r,sigma,T,kind
    1,100,110,0.05,0.20,0.5,call
    2,100,95,0.05,0.25,1.0,put

Blank or missing numeric columns take the value from ``DEFAULTS``; a missing
``kind`` means a call.  Well-formed rows are priced together in a single
vectorised pass; a row that cannot be read is reported in its own result
and never stops the rest of the book.
"""

from __future__ import annotations

import csv
import json
import logging
import math
from pathlib import Path

import numpy as np

from .core import OptionSpec, CALL, DEFAULTS, PARAM_NAMES, parse_kind
from .black_scholes_vec import bs_price_vec, bs_delta_vec

__all__ = [
    "read_book",
    "price_book",
    "write_results",
]

logger = logging.getLogger(__name__)


def read_book(path) -> list[dict]:
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def _parse_row(row: dict) -> tuple[OptionSpec, str]:
    values = {}
    for name in PARAM_NAMES:
        raw = (row.get(name) or "").strip()
        values[name] = float(raw) if raw else getattr(DEFAULTS, name)
    kind = parse_kind(row.get("kind") or CALL)
    return OptionSpec(**values), kind


def price_book(rows: list[dict], *, strict: bool = False) -> list[dict]:
    """Price every row of a book.

    Parameters
    ----------
    rows : list of dict
        Rows as produced by ``read_book`` (string values).
    strict : bool
        Also reject rows whose parameters fail ``OptionSpec.validate``;
        otherwise such rows are priced and come back NaN / Inf.

    Returns
    -------
    list of dict
        One result per input row, in input order: ``id``, ``kind``,
        ``price``, ``delta``; failed rows carry ``error`` and ``None`` values.
    """
    results: list[dict] = [None] * len(rows)
    good: list[int] = []
    specs: list[OptionSpec] = []
    kinds: list[str] = []

    for i, row in enumerate(rows):
        rid = row.get("id", "")
        try:
            spec, kind = _parse_row(row)
            if strict:
                spec.validate()
        except ValueError as e:
            logger.warning(f"Row {i} (id={rid or '?'}) rejected: {e}")
            results[i] = {"id": rid, "price": None, "delta": None, "error": str(e)}
            continue
        good.append(i)
        specs.append(spec)
        kinds.append(kind)

    if good:
        cols = {name: np.array([getattr(s, name) for s in specs]) for name in PARAM_NAMES}
        args = [cols[name] for name in PARAM_NAMES]
        kind_arr = np.array(kinds)
        prices = bs_price_vec(*args, kind_arr)
        deltas = bs_delta_vec(*args, kind_arr)
        for j, i in enumerate(good):
            results[i] = {
                "id": rows[i].get("id", ""),
                "kind": kinds[j],
                "price": float(prices[j]),
                "delta": float(deltas[j]),
            }

    logger.debug(f"Priced {len(good)} of {len(rows)} rows")
    return results


def _json_safe(result: dict) -> dict:
    return {k: None if isinstance(v, float) and not math.isfinite(v) else v
            for k, v in result.items()}


def write_results(results: list[dict], path) -> None:
    """Write results as JSON (``.json`` suffix) or CSV (anything else).

    JSON has no NaN / Inf, so non-finite prices are written as ``null``.
    """
    output_path = Path(path)
    if output_path.suffix == ".json":
        with open(output_path, "w") as f:
            json.dump([_json_safe(r) for r in results], f, indent=2, allow_nan=False)
        return

    fieldnames: list[str] = []
    for r in results:
        for k in r:
            if k not in fieldnames:
                fieldnames.append(k)
    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(results)
