"""Hand evaluation for the supported card games."""

from collections import Counter
from enum import IntEnum
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from casino_odds.models.card import Card, Rank
from casino_odds.simulation.hand_value import HandKind, HandValue


class HandRank(IntEnum):
    """Five-card hand categories from worst to best."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


class ThreeCardRank(IntEnum):
    """Three-card categories. Trips sit above both straight and flush."""
    HIGH_CARD = 0
    PAIR = 1
    STRAIGHT = 4
    FLUSH = 5
    THREE_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8


BLACKJACK = 21


class HandEvaluator:
    """Evaluates poker hands and scores blackjack and baccarat hands."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> HandValue:
        """Evaluate the best five-card hand out of 5 to 7 cards.

        Args:
            cards: List of cards (5-7 cards).

        Returns:
            The strongest HandValue among all five-card subsets.
        """
        if len(cards) == 5:
            return HandEvaluator.evaluate_five(cards)
        if 5 < len(cards) <= 7:
            return HandEvaluator.evaluate_best(cards)
        raise ValueError(f"Poker evaluation needs 5 to 7 cards, got {len(cards)}")

    @staticmethod
    def evaluate_best(cards: Sequence[Card]) -> HandValue:
        """Return the maximum over every five-card subset (21 for seven cards)."""
        best: Optional[HandValue] = None
        for combo in combinations(cards, 5):
            value = HandEvaluator.evaluate_five(combo)
            if best is None or value > best:
                best = value
        if best is None:
            raise ValueError(f"Need at least 5 cards, got {len(cards)}")
        return best

    @staticmethod
    def evaluate_seven(cards: Sequence[Card]) -> HandValue:
        """Best hand from two hole cards plus a five-card board."""
        if len(cards) != 7:
            raise ValueError(f"Seven-card evaluation requires exactly 7 cards, got {len(cards)}")
        return HandEvaluator.evaluate_best(cards)

    @staticmethod
    def evaluate_five(cards: Sequence[Card]) -> HandValue:
        """Evaluate exactly 5 cards."""
        if len(cards) != 5:
            raise ValueError(f"Five-card evaluation requires exactly 5 cards, got {len(cards)}")

        ranks = sorted((c.rank for c in cards), reverse=True)
        is_flush = len({c.suit for c in cards}) == 1
        straight_high = HandEvaluator._straight_high(ranks)
        groups = HandEvaluator._rank_groups(ranks)
        counts = [count for _, count in groups]

        if is_flush and straight_high:
            return HandValue.of(HandRank.STRAIGHT_FLUSH, straight_high)

        if counts[0] == 4:
            return HandValue.of(HandRank.FOUR_OF_A_KIND, groups[0][0], groups[1][0])

        if counts[0] == 3 and counts[1] == 2:
            return HandValue.of(HandRank.FULL_HOUSE, groups[0][0], groups[1][0])

        if is_flush:
            return HandValue.of(HandRank.FLUSH, *ranks)

        if straight_high:
            return HandValue.of(HandRank.STRAIGHT, straight_high)

        if counts[0] == 3:
            kickers = [rank for rank, _ in groups[1:]]
            return HandValue.of(HandRank.THREE_OF_A_KIND, groups[0][0], *kickers)

        if counts[0] == 2 and counts[1] == 2:
            return HandValue.of(HandRank.TWO_PAIR, groups[0][0], groups[1][0], groups[2][0])

        if counts[0] == 2:
            kickers = [rank for rank, _ in groups[1:]]
            return HandValue.of(HandRank.ONE_PAIR, groups[0][0], *kickers)

        return HandValue.of(HandRank.HIGH_CARD, *ranks)

    @staticmethod
    def evaluate_three(cards: Sequence[Card]) -> HandValue:
        """Evaluate a Three Card Poker hand."""
        if len(cards) != 3:
            raise ValueError(f"Three-card evaluation requires exactly 3 cards, got {len(cards)}")

        ranks = sorted((c.rank for c in cards), reverse=True)
        is_flush = len({c.suit for c in cards}) == 1
        straight_high = HandEvaluator._three_card_straight_high(ranks)
        groups = HandEvaluator._rank_groups(ranks)
        kind = HandKind.THREE_CARD

        if is_flush and straight_high:
            return HandValue.of(ThreeCardRank.STRAIGHT_FLUSH, straight_high, kind=kind)
        if groups[0][1] == 3:
            return HandValue.of(ThreeCardRank.THREE_OF_A_KIND, groups[0][0], kind=kind)
        if straight_high:
            return HandValue.of(ThreeCardRank.STRAIGHT, straight_high, kind=kind)
        if is_flush:
            return HandValue.of(ThreeCardRank.FLUSH, *ranks, kind=kind)
        if groups[0][1] == 2:
            return HandValue.of(ThreeCardRank.PAIR, groups[0][0], groups[1][0], kind=kind)
        return HandValue.of(ThreeCardRank.HIGH_CARD, *ranks, kind=kind)

    @staticmethod
    def _rank_groups(ranks: List[int]) -> List[Tuple[int, int]]:
        """(rank, count) pairs sorted by count, then rank, both descending."""
        return sorted(Counter(ranks).items(), key=lambda rc: (rc[1], rc[0]), reverse=True)

    @staticmethod
    def _straight_high(ranks: List[int]) -> int:
        """Return the high card of a five-card straight, or 0.

        The Ace also plays low, so A-2-3-4-5 is a straight with high card 5.
        """
        unique = sorted(set(ranks), reverse=True)
        if Rank.ACE in unique:
            unique.append(1)
        for i in range(len(unique) - 4):
            if unique[i] - unique[i + 4] == 4:
                return unique[i]
        return 0

    @staticmethod
    def _three_card_straight_high(ranks: List[int]) -> int:
        unique = sorted(set(ranks), reverse=True)
        if len(unique) != 3:
            return 0
        # A-2-3 plays as the lowest straight
        if unique == [Rank.ACE, 3, 2]:
            return 3
        return unique[0] if unique[0] - unique[2] == 2 else 0

    @staticmethod
    def blackjack_total(cards: Sequence[Card]) -> int:
        """Best blackjack total; anything above 21 is a bust."""
        total = 0
        soft_aces = 0
        for card in cards:
            if card.rank == Rank.ACE:
                total += 11
                soft_aces += 1
            elif card.rank >= Rank.JACK:
                total += 10
            else:
                total += card.rank

        while total > BLACKJACK and soft_aces:
            total -= 10
            soft_aces -= 1
        return total

    @staticmethod
    def baccarat_point(card: Card) -> int:
        if card.rank == Rank.ACE:
            return 1
        if card.rank >= Rank.TEN:
            return 0
        return card.rank

    @staticmethod
    def baccarat_total(cards: Sequence[Card]) -> int:
        return sum(HandEvaluator.baccarat_point(c) for c in cards) % 10

    @staticmethod
    def get_rank_name(value: HandValue) -> str:
        """Get a human-readable name for a hand category."""
        if value.kind is HandKind.THREE_CARD:
            names = {
                ThreeCardRank.HIGH_CARD: "High Card",
                ThreeCardRank.PAIR: "Pair",
                ThreeCardRank.STRAIGHT: "Straight",
                ThreeCardRank.FLUSH: "Flush",
                ThreeCardRank.THREE_OF_A_KIND: "Three of a Kind",
                ThreeCardRank.STRAIGHT_FLUSH: "Straight Flush",
            }
        else:
            names = {
                HandRank.HIGH_CARD: "High Card",
                HandRank.ONE_PAIR: "One Pair",
                HandRank.TWO_PAIR: "Two Pair",
                HandRank.THREE_OF_A_KIND: "Three of a Kind",
                HandRank.STRAIGHT: "Straight",
                HandRank.FLUSH: "Flush",
                HandRank.FULL_HOUSE: "Full House",
                HandRank.FOUR_OF_A_KIND: "Four of a Kind",
                HandRank.STRAIGHT_FLUSH: "Straight Flush",
            }
        return names.get(value.category, "Unknown")

    @staticmethod
    def describe(value: HandValue) -> str:
        """Readable summary such as 'Full House, Ks full of 2s'."""
        label = HandEvaluator._rank_label
        name = HandEvaluator.get_rank_name(value)
        t = value.tiebreaks
        category = value.category

        if value.kind is HandKind.THREE_CARD:
            if category in (ThreeCardRank.STRAIGHT_FLUSH, ThreeCardRank.STRAIGHT):
                return f"{name}, {label(t[0])} high"
            if category == ThreeCardRank.THREE_OF_A_KIND:
                return f"Three {label(t[0])}s"
            if category == ThreeCardRank.PAIR:
                return f"Pair of {label(t[0])}s, {label(t[1])} kicker"
            return f"{name}: " + " ".join(label(r) for r in t[:3])

        if category in (HandRank.STRAIGHT_FLUSH, HandRank.STRAIGHT):
            return f"{name}, {label(t[0])} high"
        if category == HandRank.FOUR_OF_A_KIND:
            return f"Four {label(t[0])}s, {label(t[1])} kicker"
        if category == HandRank.FULL_HOUSE:
            return f"Full House, {label(t[0])}s full of {label(t[1])}s"
        if category == HandRank.THREE_OF_A_KIND:
            return f"Three {label(t[0])}s"
        if category == HandRank.TWO_PAIR:
            return f"Two Pair, {label(t[0])}s and {label(t[1])}s"
        if category == HandRank.ONE_PAIR:
            return f"Pair of {label(t[0])}s"
        return f"{name}: " + " ".join(label(r) for r in t)

    @staticmethod
    def _rank_label(rank: int) -> str:
        return Rank(rank).label
