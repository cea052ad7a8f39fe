"""
Reset a deck's review progress.

DANGEROUS: Every card in the deck goes back to "new" and its review
history is deleted.

Usage:
    python -m scripts.maintenance.reset_deck hiragana
"""

import argparse
import sys

from sqlalchemy.exc import SQLAlchemyError

import srs


def main():
    parser = argparse.ArgumentParser(description="Reset all progress for one deck")
    parser.add_argument("deck", choices=srs.deck_ids(), help="Deck to reset")
    args = parser.parse_args()

    print("=" * 60)
    print(f"WARNING: Reset deck '{args.deck}'")
    print("=" * 60)
    print()
    print("This will DELETE for this deck:")
    print("  - All card states (levels, ease factors, due dates)")
    print("  - All review events")
    print()

    response = input("Are you sure you want to reset? (type 'yes' to confirm): ")

    if response.lower() != "yes":
        print("\nCancelled. No changes made.")
        return

    print("\nResetting deck...")
    store = srs.ItemStore()
    try:
        srs.init_db(store.engine)
        deck = store.reset_deck(args.deck)
    except (SQLAlchemyError, srs.PersistenceError) as exc:
        print(f"✗ Reset failed: {exc}")
        sys.exit(1)
    print(f"✓ Reset complete! {len(deck.items)} cards are new again.")


if __name__ == "__main__":
    main()
