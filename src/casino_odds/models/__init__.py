"""Data models for casino odds."""

from casino_odds.models.card import Card, Rank, Suit, parse_cards
from casino_odds.models.odds import Odds, Outcome, Tally
from casino_odds.models.game import GAMES, GameConfig, GameMode, get_game

__all__ = [
    "Card", "Rank", "Suit", "parse_cards",
    "Odds", "Outcome", "Tally",
    "GAMES", "GameConfig", "GameMode", "get_game",
]
