"""
Print a deck's progress summary and its most recent reviews.

Usage:
    python -m scripts.maintenance.deck_report hiragana --events 20
"""

import argparse
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

import srs


QUALITY_NAMES = {int(q): q.name for q in srs.ReviewQuality}


def _format_ms(ts_ms: int) -> str:
    return datetime.fromtimestamp(ts_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


def main():
    parser = argparse.ArgumentParser(description="Show deck progress")
    parser.add_argument("deck", choices=srs.deck_ids(), help="Deck to report on")
    parser.add_argument("--events", type=int, default=10, help="Number of recent reviews to show")
    args = parser.parse_args()

    store = srs.ItemStore()
    try:
        srs.init_db(store.engine)
    except SQLAlchemyError as exc:
        print(f"⚠ Could not initialize database: {exc}")
    deck = store.load(args.deck)
    summary = deck.summary()

    print("=" * 60)
    print(f"Deck: {deck.deck_id}" + ("" if deck.persistent else "  (storage unavailable)"))
    print("=" * 60)
    print(f"Total:    {summary.total}")
    print(f"New:      {summary.new}")
    print(f"Learning: {summary.learning}")
    print(f"Mastered: {summary.mastered}")
    print(f"Due now:  {deck.due_count()}")

    if not deck.persistent:
        return

    events = store.get_review_events(args.deck, limit=args.events)
    print(f"\nLast {len(events)} reviews:")
    print("-" * 60)
    for event in events:
        item = deck.find(event["item_id"])
        label = f"{item.character} ({item.romaji})" if item else event["item_id"]
        print(
            f"{_format_ms(event['timestamp_ms'])}  {label:<12} "
            f"{QUALITY_NAMES.get(event['quality'], event['quality']):<6} "
            f"Lv {event['level_before']}→{event['level_after']}  "
            f"next {_format_ms(event['next_review_at'])}"
        )


if __name__ == "__main__":
    main()
