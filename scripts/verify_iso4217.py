#!/usr/bin/env python3
"""Verify the currency table against Babel CLDR data.

Walks every Currency member and compares its ISO 4217 minor units with
babel.numbers.get_currency_precision(), then checks that each member has a
CLDR symbol in its common locale. The hardcoded ISO data is authoritative;
CLDR precision follows cash usage, so some discrepancies are expected.

Checks:
    1. Structural: Currency members Babel does not know at all.
    2. Discrepancies: Currency.decimal_digits differs from Babel precision.
    3. Symbols: members whose common-locale symbol is just the ISO code.
    4. Orphans: ISO_4217_DECIMAL_DIGITS entries with no Currency member.
       Shown only with --verbose.

Exit codes:
    0: No structural errors (other findings are warnings).
    1: Structural errors or Babel missing.

Usage:
    verify_iso4217.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from currencytext.currency import Currency


def _check_unknown_to_babel(codes: list[str], babel_currencies: set[str]) -> list[str]:
    return [f"  {code}: Currency member not recognized by Babel"
            for code in codes if code not in babel_currencies]


def _check_precision(currencies: list[Currency]) -> list[str]:
    """Compare ISO minor units against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    result: list[str] = []
    for currency in currencies:
        babel_val = get_currency_precision(currency.value)
        if currency.decimal_digits != babel_val:
            result.append(
                f"  {currency.value}: ISO 4217={currency.decimal_digits}, Babel CLDR={babel_val}"
            )
    return result


def _check_symbols(currencies: list[Currency]) -> list[str]:
    """Find members that fall back to their code as the symbol."""
    from currencytext.currency import get_currency  # noqa: PLC0415

    result: list[str] = []
    for currency in currencies:
        info = get_currency(currency)
        if info is not None and info.symbol == currency.value:
            result.append(f"  {currency.value}: no CLDR symbol in {info.common_locale}")
    return result


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Verify the currency table against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List ISO minor-unit entries that have no Currency member.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run currency table verification checks."""
    args = _parse_args(argv)

    try:
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install babel")
        return 1

    from currencytext.constants import ISO_4217_DECIMAL_DIGITS  # noqa: PLC0415
    from currencytext.currency import Currency  # noqa: PLC0415

    members = list(Currency)
    babel_currencies = list_currencies()

    errors = _check_unknown_to_babel([c.value for c in members], babel_currencies)
    discrepancies = _check_precision(members)
    symbols = _check_symbols(members)
    orphans = [f"  {code}" for code in sorted(ISO_4217_DECIMAL_DIGITS)
               if code not in Currency.__members__]

    print("Currency Table Verification")
    print("=" * 50)
    print(f"Currency members: {len(members)}")
    print(f"Babel currencies: {len(babel_currencies)}")
    print()

    _print_section("[ERROR] Structural errors", "Member unknown to Babel", errors)
    _print_section(
        "[WARN] ISO 4217 vs Babel precision",
        "ISO 4217 is authoritative; CLDR reflects cash usage",
        discrepancies,
    )
    _print_section("[WARN] Missing symbols", "Symbol falls back to the ISO code", symbols)
    if args.verbose:
        _print_section("[INFO] Orphan minor-unit entries", "No Currency member", orphans)

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        return 1

    print(f"[PASS] {len(discrepancies)} discrepancy(ies), {len(symbols)} missing symbol(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
