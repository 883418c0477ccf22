"""Deck construction, card exclusion and shuffling."""

import random
from typing import Iterable, List, Optional

from casino_odds.models.card import Card, Rank, Suit


def build_deck() -> List[Card]:
    """Return the 52-card deck in canonical order (suit by suit, 2 up to Ace)."""
    return [Card(int(rank), suit) for suit in Suit for rank in Rank]


def exclude_known(cards: Iterable[Card], known: Iterable[Card]) -> List[Card]:
    """Drop every card that matches one in ``known``.

    Known cards that are not present are ignored.
    """
    blocked = set(known)
    return [card for card in cards if card not in blocked]


def shuffle(cards: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Return a uniformly shuffled copy of ``cards``.

    ``random.Random.shuffle`` is a Fisher-Yates pass from the last index down,
    so every permutation is equally likely.
    """
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled


def draw(cards: List[Card], count: int) -> List[Card]:
    """Pop ``count`` cards off the end of ``cards``."""
    if count > len(cards):
        raise ValueError(f"Not enough cards in deck. Need {count}, have {len(cards)}")
    return [cards.pop() for _ in range(count)]


class Deck:
    """The cards left for one simulated deal."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        """Create a deck from ``cards``, or a full 52-card deck."""
        self.cards: List[Card] = list(cards) if cards is not None else build_deck()

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the end of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        return draw(self.cards, count)

    def deal_one(self) -> Card:
        """Deal a single card."""
        return self.deal(1)[0]

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
