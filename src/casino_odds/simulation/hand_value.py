"""Fixed-width hand strength values and their comparison."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

TIEBREAK_SLOTS = 5


class HandKind(str, Enum):
    """Which evaluator produced a value. Values of different kinds never compare."""
    FIVE_CARD = "five_card"
    THREE_CARD = "three_card"


@dataclass(frozen=True, order=True)
class HandValue:
    """Hand category plus tie-break ranks, ordered lexicographically.

    ``tiebreaks`` always holds ``TIEBREAK_SLOTS`` entries; unused trailing
    slots are zero. ``kind`` is part of equality, so a three-card value never
    equals a five-card one; use ``compare`` to order values.
    """
    category: int
    tiebreaks: Tuple[int, ...]
    kind: HandKind = HandKind.FIVE_CARD

    @classmethod
    def of(cls, category: int, *tiebreaks: int,
           kind: HandKind = HandKind.FIVE_CARD) -> "HandValue":
        if len(tiebreaks) > TIEBREAK_SLOTS:
            raise ValueError(f"At most {TIEBREAK_SLOTS} tie-breaks, got {len(tiebreaks)}")
        padded = tuple(int(t) for t in tiebreaks) + (0,) * (TIEBREAK_SLOTS - len(tiebreaks))
        return cls(category, padded, kind)

    @property
    def high(self) -> int:
        """Leading tie-break rank (straight high, pair rank, top card...)."""
        return self.tiebreaks[0]

    def as_tuple(self) -> Tuple[int, ...]:
        return (self.category,) + self.tiebreaks


def compare(a: HandValue, b: HandValue) -> int:
    """Return 1 if ``a`` is stronger, -1 if weaker, 0 on a tie."""
    if a.kind is not b.kind:
        raise ValueError(f"Cannot compare {a.kind.value} and {b.kind.value} hand values")
    if a > b:
        return 1
    if a < b:
        return -1
    return 0
