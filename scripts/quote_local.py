#!/usr/bin/env python3
"""
Local quote harness (no HTTP).

Usage:
  python3 scripts/quote_local.py roof gutter --two-story yes --guards no --promo roof50

What it does:
- Runs the selection through the same QuoteUseCase the API uses
- Prints the line items, totals, hour bucket and the cal.com booking link
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.application.utils.duration_format import format_duration
from app.application.utils.money import format_money
from app.domain.entities.modifiers import Answer, Modifiers
from app.wiring.dependencies import get_quote_use_case


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute an instant quote locally.")
    parser.add_argument("services", nargs="*", help="service ids, e.g. roof gutter pressure-patio")
    parser.add_argument("--two-story", choices=[a.value for a in Answer], default=Answer.unanswered.value)
    parser.add_argument("--guards", choices=[a.value for a in Answer], default=Answer.unanswered.value)
    parser.add_argument("--promo", default=None)
    parser.add_argument("--house-half-price", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    modifiers = Modifiers(two_story=Answer(args.two_story), gutter_guards=Answer(args.guards))
    selection = {service_id.strip().lower(): True for service_id in args.services}

    quote = get_quote_use_case().execute(selection, modifiers, args.promo, args.house_half_price)
    totals = quote.totals

    print("\nInstant Quote")
    print("-" * 60)
    for item in quote.services:
        marker = "[x]" if quote.selection.get(item.id) else "[ ]"
        print(f"{marker} {item.name:<28} ${format_money(item.price)}")
    print("-" * 60)
    print(f"Estimated time     {format_duration(totals.duration_minutes)}")
    print(f"Subtotal           ${format_money(totals.subtotal)}")
    print(f"Bundle discount    -${format_money(totals.discount_amount)} ({quote.metadata['discountRate']})")
    if totals.promo_code:
        print(f"Promo {totals.promo_code:<12} -${format_money(totals.promo_amount)}")
    elif totals.promo_rejection:
        print(f"Promo rejected     {totals.promo_rejection}")
    print(f"Minimum price      +${format_money(totals.minimum_fee)}")
    print(f"Total              ${format_money(totals.total)}")
    print("-" * 60)
    print(quote.gate.message)
    if quote.gate.can_schedule:
        print(f"Booking ({quote.hours} hr slot): {quote.booking_url}")
    return 0 if quote.gate.can_schedule else 1


if __name__ == "__main__":
    sys.exit(main())
