"""Round rules for each supported game and the public odds functions.

Each ``*Round`` holds the cards a caller already knows. Anything left as
``None`` (or missing from a partial board) is dealt fresh in every simulated
round; known cards are never redrawn.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from casino_odds.models.card import Card, Rank
from casino_odds.models.game import GameMode, get_game
from casino_odds.models.odds import Odds, Outcome
from casino_odds.simulation.deck import Deck, build_deck, exclude_known
from casino_odds.simulation.engine import SimulationEngine, Variant, check_unique
from casino_odds.simulation.evaluator import (
    BLACKJACK,
    HandEvaluator,
    HandRank,
    ThreeCardRank,
)
from casino_odds.simulation.hand_value import HandValue, compare

BOARD_SIZE = 5
DEALER_STANDS_AT = 17


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def _settle(result: int) -> Outcome:
    if result > 0:
        return Outcome.HERO
    if result < 0:
        return Outcome.VILLAIN
    return Outcome.TIE


def _complete_board(known_board: Sequence[Card], deck: Deck) -> List[Card]:
    return list(known_board) + deck.deal(BOARD_SIZE - len(known_board))


# Dealer qualification ------------------------------------------------

def three_card_dealer_qualifies(value: HandValue) -> bool:
    """Queen high or better."""
    return value.category > ThreeCardRank.HIGH_CARD or value.high >= Rank.QUEEN


def casino_holdem_dealer_qualifies(value: HandValue) -> bool:
    """Pair of fours or better."""
    if value.category > HandRank.ONE_PAIR:
        return True
    return value.category == HandRank.ONE_PAIR and value.high >= Rank.FOUR


def caribbean_dealer_qualifies(value: HandValue) -> bool:
    """Ace-King or better."""
    if value.category > HandRank.HIGH_CARD:
        return True
    return value.tiebreaks[0] == Rank.ACE and value.tiebreaks[1] >= Rank.KING


# Variants ------------------------------------------------------------

@dataclass
class HoldemRound(Variant):
    """Hero against the best of ``opponent_count`` Hold'em hands."""
    hero: Sequence[Card]
    known_board: Sequence[Card] = ()
    known_villains: Sequence[Sequence[Card]] = ()
    opponent_count: Optional[int] = None

    name = "holdem"

    def __post_init__(self):
        self.hero = list(self.hero)
        self.known_board = list(self.known_board)
        self.known_villains = [list(hand) for hand in self.known_villains]
        if self.opponent_count is None:
            self.opponent_count = max(len(self.known_villains), 1)

        _require(len(self.hero) == 2, f"Hold'em hero needs 2 cards, got {len(self.hero)}")
        _require(len(self.known_board) <= BOARD_SIZE,
                 f"Board holds at most {BOARD_SIZE} cards, got {len(self.known_board)}")
        for hand in self.known_villains:
            _require(len(hand) == 2, f"Hold'em opponent needs 2 cards, got {len(hand)}")
        _require(self.opponent_count >= max(len(self.known_villains), 1),
                 f"opponent_count {self.opponent_count} is less than the "
                 f"{len(self.known_villains)} known opponents")

    def known_cards(self) -> List[Card]:
        cards = self.hero + self.known_board
        for hand in self.known_villains:
            cards += hand
        return cards

    def play_round(self, deck: Deck) -> Outcome:
        villains = [list(hand) for hand in self.known_villains]
        while len(villains) < self.opponent_count:
            villains.append(deck.deal(2))
        board = _complete_board(self.known_board, deck)

        hero_value = HandEvaluator.evaluate_seven(self.hero + board)
        best_villain = max(HandEvaluator.evaluate_seven(hand + board) for hand in villains)
        return _settle(compare(hero_value, best_villain))


@dataclass
class BlackjackRound(Variant):
    """Player's fixed hand against a dealer who hits below 17."""
    player: Sequence[Card]
    dealer_up: Card
    dealer_hole: Optional[Card] = None

    name = "blackjack"

    def __post_init__(self):
        self.player = list(self.player)
        _require(len(self.player) >= 2, f"Blackjack player needs 2+ cards, got {len(self.player)}")
        self.player_total = HandEvaluator.blackjack_total(self.player)

    def known_cards(self) -> List[Card]:
        cards = self.player + [self.dealer_up]
        if self.dealer_hole is not None:
            cards.append(self.dealer_hole)
        return cards

    def play_round(self, deck: Deck) -> Outcome:
        # A bust player loses before the dealer acts.
        if self.player_total > BLACKJACK:
            return Outcome.VILLAIN

        hole = self.dealer_hole if self.dealer_hole is not None else deck.deal_one()
        dealer = [self.dealer_up, hole]
        while HandEvaluator.blackjack_total(dealer) < DEALER_STANDS_AT:
            dealer.append(deck.deal_one())

        dealer_total = HandEvaluator.blackjack_total(dealer)
        if dealer_total > BLACKJACK:
            return Outcome.HERO
        return _settle(self.player_total - dealer_total)


@dataclass
class WarRound(Variant):
    """Single card against single card; equal ranks tie."""
    player_card: Card
    dealer_card: Optional[Card] = None

    name = "war"

    def known_cards(self) -> List[Card]:
        if self.dealer_card is None:
            return [self.player_card]
        return [self.player_card, self.dealer_card]

    def play_round(self, deck: Deck) -> Outcome:
        opponent = self.dealer_card if self.dealer_card is not None else deck.deal_one()
        return _settle(self.player_card.rank - opponent.rank)


@dataclass
class HighCardRound(Variant):
    """Player's top card against the top card of every opponent."""
    player_cards: Sequence[Card]
    opponent_cards: Sequence[Sequence[Card]] = ()
    num_opponents: Optional[int] = None

    name = "highcard"

    def __post_init__(self):
        self.player_cards = list(self.player_cards)
        self.opponent_cards = [list(hand) for hand in self.opponent_cards]
        if self.num_opponents is None:
            self.num_opponents = max(len(self.opponent_cards), 1)

        _require(len(self.player_cards) >= 1, "High Card player needs at least 1 card")
        for hand in self.opponent_cards:
            _require(len(hand) >= 1, "High Card opponent needs at least 1 card")
        _require(self.num_opponents >= max(len(self.opponent_cards), 1),
                 f"num_opponents {self.num_opponents} is less than the "
                 f"{len(self.opponent_cards)} known opponents")

    def known_cards(self) -> List[Card]:
        cards = list(self.player_cards)
        for hand in self.opponent_cards:
            cards += hand
        return cards

    def play_round(self, deck: Deck) -> Outcome:
        opponents = [list(hand) for hand in self.opponent_cards]
        while len(opponents) < self.num_opponents:
            opponents.append(deck.deal(1))

        player_high = max(c.rank for c in self.player_cards)
        opponent_high = max(c.rank for hand in opponents for c in hand)
        return _settle(player_high - opponent_high)


@dataclass
class ThreeCardPokerRound(Variant):
    """Three Card Poker against a dealer who must hold Queen high."""
    player: Sequence[Card]
    dealer: Optional[Sequence[Card]] = None

    name = "threecardpoker"

    def __post_init__(self):
        self.player = list(self.player)
        _require(len(self.player) == 3, f"Three Card Poker needs 3 player cards, got {len(self.player)}")
        if self.dealer is not None:
            self.dealer = list(self.dealer)
            _require(len(self.dealer) == 3, f"Three Card Poker needs 3 dealer cards, got {len(self.dealer)}")
        self.player_value = HandEvaluator.evaluate_three(self.player)

    def known_cards(self) -> List[Card]:
        return self.player + (self.dealer or [])

    def play_round(self, deck: Deck) -> Outcome:
        dealer = self.dealer if self.dealer is not None else deck.deal(3)
        dealer_value = HandEvaluator.evaluate_three(dealer)
        if not three_card_dealer_qualifies(dealer_value):
            return Outcome.HERO
        return _settle(compare(self.player_value, dealer_value))


@dataclass
class CasinoHoldemRound(Variant):
    """Hold'em against a dealer who needs a pair of fours to qualify."""
    player: Sequence[Card]
    dealer: Optional[Sequence[Card]] = None
    known_board: Sequence[Card] = ()

    name = "casinoholdem"

    def __post_init__(self):
        self.player = list(self.player)
        self.known_board = list(self.known_board)
        _require(len(self.player) == 2, f"Casino Hold'em needs 2 player cards, got {len(self.player)}")
        if self.dealer is not None:
            self.dealer = list(self.dealer)
            _require(len(self.dealer) == 2, f"Casino Hold'em needs 2 dealer cards, got {len(self.dealer)}")
        _require(len(self.known_board) <= BOARD_SIZE,
                 f"Board holds at most {BOARD_SIZE} cards, got {len(self.known_board)}")

    def known_cards(self) -> List[Card]:
        return self.player + (self.dealer or []) + self.known_board

    def play_round(self, deck: Deck) -> Outcome:
        dealer = self.dealer if self.dealer is not None else deck.deal(2)
        board = _complete_board(self.known_board, deck)

        dealer_value = HandEvaluator.evaluate_seven(dealer + board)
        if not casino_holdem_dealer_qualifies(dealer_value):
            return Outcome.HERO
        player_value = HandEvaluator.evaluate_seven(self.player + board)
        return _settle(compare(player_value, dealer_value))


def banker_draws(banker_total: int, player_third: Optional[Card]) -> bool:
    """Punto banco tableau for the banker's third card."""
    if player_third is None:
        return banker_total <= 5
    third = HandEvaluator.baccarat_point(player_third)
    if banker_total <= 2:
        return True
    if banker_total == 3:
        return third != 8
    if banker_total == 4:
        return 2 <= third <= 7
    if banker_total == 5:
        return 4 <= third <= 7
    if banker_total == 6:
        return 6 <= third <= 7
    return False


@dataclass
class BaccaratRound(Variant):
    """Player hand against banker hand under the standard drawing rules."""
    player_cards: Sequence[Card]
    banker_cards: Sequence[Card]

    name = "baccarat"

    def __post_init__(self):
        self.player_cards = list(self.player_cards)
        self.banker_cards = list(self.banker_cards)
        _require(len(self.player_cards) == 2, f"Baccarat player needs 2 cards, got {len(self.player_cards)}")
        _require(len(self.banker_cards) == 2, f"Baccarat banker needs 2 cards, got {len(self.banker_cards)}")

    def known_cards(self) -> List[Card]:
        return self.player_cards + self.banker_cards

    def play_round(self, deck: Deck) -> Outcome:
        player = list(self.player_cards)
        banker = list(self.banker_cards)
        player_total = HandEvaluator.baccarat_total(player)
        banker_total = HandEvaluator.baccarat_total(banker)

        # A natural 8 or 9 on either side ends the coup.
        if player_total >= 8 or banker_total >= 8:
            return _settle(player_total - banker_total)

        player_third = None
        if player_total <= 5:
            player_third = deck.deal_one()
            player.append(player_third)
            player_total = HandEvaluator.baccarat_total(player)

        if banker_draws(banker_total, player_third):
            banker.append(deck.deal_one())
            banker_total = HandEvaluator.baccarat_total(banker)

        return _settle(player_total - banker_total)


@dataclass
class CaribbeanStudRound(Variant):
    """Five-card stud against a dealer who needs Ace-King to qualify."""
    player: Sequence[Card]
    dealer: Optional[Sequence[Card]] = None
    dealer_up: Optional[Card] = None

    name = "caribbeanstud"

    def __post_init__(self):
        self.player = list(self.player)
        _require(len(self.player) == 5, f"Caribbean Stud needs 5 player cards, got {len(self.player)}")
        if self.dealer is not None:
            self.dealer = list(self.dealer)
            _require(len(self.dealer) == 5, f"Caribbean Stud needs 5 dealer cards, got {len(self.dealer)}")
            # The up-card is one of the revealed five.
            _require(self.dealer_up is None or self.dealer_up in self.dealer,
                     f"Dealer up-card {self.dealer_up} is not in the dealer hand")
        self.player_value = HandEvaluator.evaluate_five(self.player)

    def known_cards(self) -> List[Card]:
        if self.dealer is not None:
            return self.player + self.dealer
        if self.dealer_up is not None:
            return self.player + [self.dealer_up]
        return list(self.player)

    def play_round(self, deck: Deck) -> Outcome:
        if self.dealer is not None:
            dealer = self.dealer
        elif self.dealer_up is not None:
            dealer = [self.dealer_up] + deck.deal(4)
        else:
            dealer = deck.deal(5)

        dealer_value = HandEvaluator.evaluate_five(dealer)
        if not caribbean_dealer_qualifies(dealer_value):
            return Outcome.HERO
        return _settle(compare(self.player_value, dealer_value))


# Public entry points -------------------------------------------------

def _simulate(variant: Variant, blocked_cards: Sequence[Card],
              iterations: Optional[int], rng: Optional[random.Random],
              workers: Optional[int]) -> Odds:
    engine = SimulationEngine(iterations=iterations, rng=rng, workers=workers)
    return engine.run(variant, blocked_cards)


def simulate_holdem_odds(hero: Sequence[Card], known_board: Sequence[Card] = (),
                         known_villains: Sequence[Sequence[Card]] = (),
                         opponent_count: Optional[int] = None,
                         blocked_cards: Sequence[Card] = (),
                         iterations: Optional[int] = None,
                         rng: Optional[random.Random] = None,
                         workers: Optional[int] = None) -> Odds:
    """Multiway Texas Hold'em odds.

    Args:
        hero: The hero's two hole cards.
        known_board: Revealed community cards, a prefix of the five.
        known_villains: Opponents whose hole cards are revealed.
        opponent_count: Total opponents; hidden ones are dealt at random.
        blocked_cards: Cards out of play but not shown, e.g. other hidden hands.

    Returns:
        Odds of the hero beating every opponent.
    """
    variant = HoldemRound(hero, known_board, known_villains, opponent_count)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_poker_odds(hero: Sequence[Card], known_board: Sequence[Card] = (),
                        known_villain: Optional[Sequence[Card]] = None,
                        blocked_cards: Sequence[Card] = (),
                        iterations: Optional[int] = None,
                        rng: Optional[random.Random] = None,
                        workers: Optional[int] = None) -> Odds:
    """Heads-up Hold'em against one opponent, revealed or not."""
    villains = [known_villain] if known_villain is not None else []
    variant = HoldemRound(hero, known_board, villains, opponent_count=1)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_blackjack_odds(player: Sequence[Card], dealer_up: Card,
                            dealer_hole: Optional[Card] = None,
                            blocked_cards: Sequence[Card] = (),
                            iterations: Optional[int] = None,
                            rng: Optional[random.Random] = None,
                            workers: Optional[int] = None) -> Odds:
    variant = BlackjackRound(player, dealer_up, dealer_hole)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_war_odds(player_card: Card, dealer_card: Optional[Card] = None,
                      blocked_cards: Sequence[Card] = (),
                      iterations: Optional[int] = None,
                      rng: Optional[random.Random] = None,
                      workers: Optional[int] = None) -> Odds:
    variant = WarRound(player_card, dealer_card)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_high_card_odds(player_cards: Sequence[Card],
                            opponent_cards: Sequence[Sequence[Card]] = (),
                            num_opponents: Optional[int] = None,
                            blocked_cards: Sequence[Card] = (),
                            iterations: Optional[int] = None,
                            rng: Optional[random.Random] = None,
                            workers: Optional[int] = None) -> Odds:
    variant = HighCardRound(player_cards, opponent_cards, num_opponents)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_three_card_poker_odds(player: Sequence[Card],
                                   dealer: Optional[Sequence[Card]] = None,
                                   blocked_cards: Sequence[Card] = (),
                                   iterations: Optional[int] = None,
                                   rng: Optional[random.Random] = None,
                                   workers: Optional[int] = None) -> Odds:
    variant = ThreeCardPokerRound(player, dealer)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_casino_holdem_odds(player: Sequence[Card],
                                dealer: Optional[Sequence[Card]] = None,
                                known_board: Sequence[Card] = (),
                                blocked_cards: Sequence[Card] = (),
                                iterations: Optional[int] = None,
                                rng: Optional[random.Random] = None,
                                workers: Optional[int] = None) -> Odds:
    variant = CasinoHoldemRound(player, dealer, known_board)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_baccarat_odds(player_cards: Sequence[Card],
                           banker_cards: Sequence[Card],
                           blocked_cards: Sequence[Card] = (),
                           iterations: Optional[int] = None,
                           rng: Optional[random.Random] = None,
                           workers: Optional[int] = None) -> Odds:
    """Odds of the Player hand beating the Banker hand."""
    variant = BaccaratRound(player_cards, banker_cards)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def simulate_caribbean_stud_odds(player: Sequence[Card],
                                 dealer: Optional[Sequence[Card]] = None,
                                 dealer_up: Optional[Card] = None,
                                 blocked_cards: Sequence[Card] = (),
                                 iterations: Optional[int] = None,
                                 rng: Optional[random.Random] = None,
                                 workers: Optional[int] = None) -> Odds:
    variant = CaribbeanStudRound(player, dealer, dealer_up)
    return _simulate(variant, blocked_cards, iterations, rng, workers)


def red_dog_odds(card1: Card, card2: Card, card3: Optional[Card] = None,
                 blocked_cards: Sequence[Card] = (),
                 iterations: Optional[int] = None,
                 rng: Optional[random.Random] = None,
                 workers: Optional[int] = None) -> Odds:
    """Exact Red Dog odds; no sampling involved.

    Paired or consecutive first cards lose outright. A revealed third card
    settles the hand, so the result is 100/0 either way. Otherwise the hero
    wins with the share of the remaining deck ranked strictly between the two.

    ``iterations``, ``rng`` and ``workers`` are accepted so every game takes
    the same options; the count is exact and ignores them.
    """
    spread = [card1, card2] + ([card3] if card3 is not None else [])
    known = check_unique(spread + list(blocked_cards))

    low, high = sorted((card1.rank, card2.rank))
    if high - low <= 1:
        return Odds.certain(Outcome.VILLAIN)

    if card3 is not None:
        return Odds.certain(Outcome.HERO if low < card3.rank < high else Outcome.VILLAIN)

    remaining = exclude_known(build_deck(), known)
    winners = sum(1 for card in remaining if low < card.rank < high)
    total = len(remaining)
    return Odds(
        hero=winners / total * 100,
        villain=(total - winners) / total * 100,
        tie=0.0,
    )


SIMULATORS: Dict[GameMode, Callable[..., Odds]] = {
    GameMode.HOLDEM: simulate_holdem_odds,
    GameMode.BLACKJACK: simulate_blackjack_odds,
    GameMode.WAR: simulate_war_odds,
    GameMode.HIGH_CARD: simulate_high_card_odds,
    GameMode.RED_DOG: red_dog_odds,
    GameMode.THREE_CARD_POKER: simulate_three_card_poker_odds,
    GameMode.CASINO_HOLDEM: simulate_casino_holdem_odds,
    GameMode.BACCARAT: simulate_baccarat_odds,
    GameMode.CARIBBEAN_STUD: simulate_caribbean_stud_odds,
}


def estimate_odds(mode: str, **options) -> Odds:
    """Dispatch to the odds function for ``mode`` (a GameMode or its id).

    Raises:
        ValueError: If ``mode`` is not a registered game.
    """
    game = get_game(mode)
    return SIMULATORS[game.mode](**options)
