"""Plain text formatting for terminal output."""

from typing import Optional, Sequence

from casino_odds.models.card import Card
from casino_odds.simulation.evaluator import HandEvaluator
from casino_odds.simulation.hand_value import HandValue


class TextFormatter:
    """Format cards, hand values and odds as plain text."""

    def format_cards(self, cards: Optional[Sequence[Card]]) -> str:
        if not cards:
            return "-"
        return " ".join(str(card) for card in cards)

    def format_hand_value(self, value: HandValue) -> str:
        return HandEvaluator.describe(value)
