"""Outcome tallies and the normalized odds triple."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Outcome(str, Enum):
    """Result of one simulated round, from the hero's point of view."""
    HERO = "hero"
    VILLAIN = "villain"
    TIE = "tie"


@dataclass
class Tally:
    """Win/lose/tie counters for a batch of simulated rounds."""
    hero: int = 0
    villain: int = 0
    tie: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.HERO:
            self.hero += 1
        elif outcome is Outcome.VILLAIN:
            self.villain += 1
        else:
            self.tie += 1

    def merge(self, other: "Tally") -> "Tally":
        """Return a new tally holding the sum of both."""
        return Tally(
            hero=self.hero + other.hero,
            villain=self.villain + other.villain,
            tie=self.tie + other.tie,
        )

    @property
    def total(self) -> int:
        return self.hero + self.villain + self.tie

    def to_odds(self, iterations: int) -> "Odds":
        """Convert counts into percentages of ``iterations``."""
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")
        if self.total != iterations:
            raise ValueError(
                f"Tally covers {self.total} rounds but {iterations} were requested"
            )
        return Odds(
            hero=self.hero / iterations * 100,
            villain=self.villain / iterations * 100,
            tie=self.tie / iterations * 100,
        )


@dataclass(frozen=True)
class Odds:
    """Hero/villain/tie percentages, each 0..100 and summing to 100."""
    hero: float
    villain: float
    tie: float

    @classmethod
    def certain(cls, outcome: Outcome) -> "Odds":
        """Odds for a round whose result is already decided."""
        return cls(
            hero=100.0 if outcome is Outcome.HERO else 0.0,
            villain=100.0 if outcome is Outcome.VILLAIN else 0.0,
            tie=100.0 if outcome is Outcome.TIE else 0.0,
        )

    @property
    def total(self) -> float:
        return self.hero + self.villain + self.tie

    @property
    def equity(self) -> float:
        """Hero share of the pot with ties split evenly."""
        return self.hero + self.tie / 2

    def as_dict(self) -> Dict[str, float]:
        return {"hero": self.hero, "villain": self.villain, "tie": self.tie}
