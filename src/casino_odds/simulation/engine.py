"""Monte Carlo driver shared by every game variant."""

import logging
import random
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from casino_odds import config
from casino_odds.models.card import Card
from casino_odds.models.odds import Odds, Outcome, Tally
from casino_odds.simulation.deck import Deck, build_deck, exclude_known, shuffle

logger = logging.getLogger(__name__)


class Variant(ABC):
    """One game's rules: which cards are fixed and how a round resolves."""

    name = "variant"

    @abstractmethod
    def known_cards(self) -> List[Card]:
        """Cards already on the table that must never be dealt again."""

    @abstractmethod
    def play_round(self, deck: Deck) -> Outcome:
        """Deal every unknown card from ``deck`` and settle the round."""


def check_unique(cards: Iterable[Card]) -> List[Card]:
    """Return ``cards`` as a list, raising if any card appears twice."""
    cards = list(cards)
    seen = set()
    for card in cards:
        if card in seen:
            raise ValueError(f"Duplicate known card: {card}")
        seen.add(card)
    return cards


class SimulationEngine:
    """Runs a fixed number of simulated rounds and normalizes the tally.

    Every round gets a freshly shuffled copy of the same remaining deck, so
    rounds are independent and may be split across worker threads.
    """

    def __init__(self, iterations: Optional[int] = None,
                 rng: Optional[random.Random] = None,
                 workers: Optional[int] = None):
        self.iterations = config.DEFAULT_ITERATIONS if iterations is None else iterations
        self.workers = config.DEFAULT_WORKERS if workers is None else workers
        if self.iterations <= 0:
            raise ValueError(f"iterations must be positive, got {self.iterations}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        self.rng = rng or random.Random()

    def remaining_deck(self, variant: Variant,
                       blocked_cards: Iterable[Card] = ()) -> List[Card]:
        """Every card not known to ``variant`` or listed in ``blocked_cards``."""
        known = check_unique(list(variant.known_cards()) + list(blocked_cards))
        remaining = exclude_known(build_deck(), known)
        if len(remaining) != 52 - len(known):
            raise ValueError(
                f"Expected {52 - len(known)} cards left after removing {len(known)} known, "
                f"got {len(remaining)}"
            )
        return remaining

    def run(self, variant: Variant, blocked_cards: Iterable[Card] = ()) -> Odds:
        remaining = self.remaining_deck(variant, blocked_cards)

        if self.workers == 1 or self.iterations < self.workers:
            tally = self._run_batch(variant, remaining, self.iterations, self.rng)
        else:
            tally = self._run_parallel(variant, remaining)

        odds = tally.to_odds(self.iterations)
        logger.debug(
            "%s: %d rounds, %d cards left, hero=%.2f villain=%.2f tie=%.2f",
            variant.name, self.iterations, len(remaining),
            odds.hero, odds.villain, odds.tie,
        )
        return odds

    def _run_parallel(self, variant: Variant, remaining: List[Card]) -> Tally:
        share, extra = divmod(self.iterations, self.workers)
        batches = [share + (1 if i < extra else 0) for i in range(self.workers)]
        # Seeds come from the parent rng so a seeded engine stays reproducible.
        rngs = [random.Random(self.rng.getrandbits(64)) for _ in batches]

        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            futures = [
                pool.submit(self._run_batch, variant, remaining, count, rng)
                for count, rng in zip(batches, rngs)
            ]
            tallies = [future.result() for future in futures]

        total = Tally()
        for tally in tallies:
            total = total.merge(tally)
        return total

    @staticmethod
    def _run_batch(variant: Variant, remaining: List[Card], count: int,
                   rng: random.Random) -> Tally:
        tally = Tally()
        for _ in range(count):
            deck = Deck(shuffle(remaining, rng))
            tally.record(variant.play_round(deck))
        return tally
