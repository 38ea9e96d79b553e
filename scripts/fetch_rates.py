#!/usr/bin/env python3
"""
Query the Free Currency API from the command line.

Subcommands map one-to-one onto the client methods and print the result
as JSON.

Usage examples:
  python -m scripts.fetch_rates latest --base USD --currencies EUR,GBP
  python -m scripts.fetch_rates currencies --currencies EUR
  python -m scripts.fetch_rates historical --date 2022-01-01 --base USD
  python -m scripts.fetch_rates status --api-key YOUR_KEY
  python -m scripts.fetch_rates status --timeout 5

Run from the repository root with -m so `core` and `freecurrencyapi` are
importable; `python scripts/fetch_rates.py` only works after `pip install -e .`.

The API key defaults to FREECURRENCYAPI_API_KEY from the environment or .env.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from core.config import settings, validate_configuration
from core.exceptions import FreeCurrencyAPIError
from core.logging import setup_logging
from core.schemas import LatestRequest, CurrenciesRequest, HistoricalRequest
from core.utils.time import parse_api_date
from freecurrencyapi import FreeCurrencyAPIClient


def split_codes(value: str) -> List[str]:
    return [code.strip() for code in value.split(",") if code.strip()]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Query the Free Currency API.")
    p.add_argument("--api-key", default=None, help="API key (default: FREECURRENCYAPI_API_KEY)")
    p.add_argument("--base-url", default=None, help="API root URL (default: FREECURRENCYAPI_BASE_URL)")
    p.add_argument("--timeout", type=float, default=None, help="Overall deadline in seconds")
    p.add_argument("--verbose", action="store_true", help="Enable DEBUG logging")

    sub = p.add_subparsers(dest="command", required=True)

    latest = sub.add_parser("latest", help="Latest exchange rates")
    latest.add_argument("--base", default=None, help="Base currency (e.g., USD)")
    latest.add_argument("--currencies", type=split_codes, default=[], help="Comma-separated codes")

    currencies = sub.add_parser("currencies", help="Currency metadata")
    currencies.add_argument("--currencies", type=split_codes, default=[], help="Comma-separated codes")

    historical = sub.add_parser("historical", help="Exchange rates for a past date")
    historical.add_argument("--date", type=parse_api_date, required=True, help="Date as YYYY-MM-DD")
    historical.add_argument("--base", default=None, help="Base currency (e.g., USD)")
    historical.add_argument("--currencies", type=split_codes, default=[], help="Comma-separated codes")

    sub.add_parser("status", help="Account quota")

    return p.parse_args(argv)


async def run(args: argparse.Namespace) -> str:
    async with FreeCurrencyAPIClient(args.api_key, base_url=args.base_url) as client:
        if args.command == "latest":
            result = await client.get_latest(
                LatestRequest(base_currency=args.base, currencies=args.currencies)
            )
        elif args.command == "currencies":
            result = await client.get_currencies(CurrenciesRequest(currencies=args.currencies))
        elif args.command == "historical":
            result = await client.get_historical(
                HistoricalRequest(date=args.date, base_currency=args.base, currencies=args.currencies)
            )
        else:
            result = await client.get_status()

    return result.model_dump_json(indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    setup_logging(log_level="DEBUG" if args.verbose else settings.log_level)

    try:
        validate_configuration(base_url=args.base_url)
    except ValueError as e:
        print(f"[Error] {e}")
        return 2

    if args.api_key is None and not settings.has_api_key:
        print("[Warn] No API key given; the API will answer 401")

    try:
        output = asyncio.run(asyncio.wait_for(run(args), timeout=args.timeout))
    except FreeCurrencyAPIError as e:
        print(f"[Error] {e}")
        return 1
    except asyncio.TimeoutError:
        print(f"[Error] No response within {args.timeout}s")
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
