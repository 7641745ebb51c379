#!/usr/bin/env python3
"""Batch-price an options book with Black-Scholes.

Usage
-----
    python scripts/price_book.py --input book.csv --output prices.csv
    python scripts/price_book.py --input book.csv --output prices.json --strict

Input CSV format
----------------
    id,S,K,r,sigma,T,kind
    1,100,110,0.05,0.20,0.5,call
    2,100,95,0.05,0.25,1.0,put

Output
------
    CSV or JSON with columns: id, kind, price, delta (and error for bad rows)
"""

from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from bspricer.book import read_book, price_book, write_results


def main():
    parser = argparse.ArgumentParser(
        description="Batch-price an options book."
    )
    parser.add_argument("--input", required=True, help="Path to book CSV")
    parser.add_argument("--output", required=True, help="Output path (.csv or .json)")
    parser.add_argument("--strict", action="store_true",
                        help="Reject rows with non-positive S, K, sigma or T")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rows = read_book(args.input)
    print(f"Pricing {len(rows)} positions...")

    results = price_book(rows, strict=args.strict)
    if not results:
        print("No results to write.")
        return
    write_results(results, args.output)
    print(f"Results written to {args.output}")

    # Summary
    priced = [r for r in results if r.get("price") is not None]
    failed = [r for r in results if r.get("price") is None]
    print(f"  Priced: {len(priced)}  |  Failed: {len(failed)}")


if __name__ == "__main__":
    main()
