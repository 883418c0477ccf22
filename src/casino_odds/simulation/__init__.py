"""Deck handling, hand evaluation and the Monte Carlo odds engine."""

from casino_odds.simulation.deck import Deck, build_deck, draw, exclude_known, shuffle
from casino_odds.simulation.hand_value import HandKind, HandValue, compare
from casino_odds.simulation.evaluator import HandEvaluator, HandRank, ThreeCardRank
from casino_odds.simulation.engine import SimulationEngine, Variant
from casino_odds.simulation.games import (
    SIMULATORS,
    estimate_odds,
    red_dog_odds,
    simulate_baccarat_odds,
    simulate_blackjack_odds,
    simulate_caribbean_stud_odds,
    simulate_casino_holdem_odds,
    simulate_high_card_odds,
    simulate_holdem_odds,
    simulate_poker_odds,
    simulate_three_card_poker_odds,
    simulate_war_odds,
)

__all__ = [
    "Deck", "build_deck", "draw", "exclude_known", "shuffle",
    "HandKind", "HandValue", "compare",
    "HandEvaluator", "HandRank", "ThreeCardRank",
    "SimulationEngine", "Variant",
    "SIMULATORS", "estimate_odds", "red_dog_odds",
    "simulate_baccarat_odds", "simulate_blackjack_odds",
    "simulate_caribbean_stud_odds", "simulate_casino_holdem_odds",
    "simulate_high_card_odds", "simulate_holdem_odds", "simulate_poker_odds",
    "simulate_three_card_poker_odds", "simulate_war_odds",
]
