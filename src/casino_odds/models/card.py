"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List


class Suit(str, Enum):
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "s": cls.SPADES, "spades": cls.SPADES, "♠": cls.SPADES,
            "h": cls.HEARTS, "hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "clubs": cls.CLUBS, "♣": cls.CLUBS,
        }
        key = s.lower()
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def letter(self) -> str:
        return {"♠": "s", "♥": "h", "♦": "d", "♣": "c"}[self.value]


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        return {11: "J", 12: "Q", 13: "K", 14: "A"}.get(self.value, str(self.value))

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        c = c.upper()
        if c in ("T", "10"):
            return cls.TEN
        for r in cls:
            if r.label == c:
                return r
        raise ValueError(f"Unknown rank: {c}")


@dataclass(frozen=True)
class Card:
    """A single playing card. Ranks run 2..14 with the Ace high."""

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, int) or not Rank.TWO <= self.rank <= Rank.ACE:
            raise ValueError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit}")

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10♦'."""
        s = s.strip()
        if len(s) < 2 or len(s) > 3:
            raise ValueError(f"Cannot parse card: {s}")
        return cls(int(Rank.from_char(s[:-1])), Suit.from_symbol(s[-1]))

    @property
    def label(self) -> str:
        return Rank(self.rank).label

    @property
    def short(self) -> str:
        """Return short string like 'As'."""
        return f"{'T' if self.rank == Rank.TEN else self.label}{self.suit.letter}"

    def __repr__(self) -> str:
        return f"Card({self.short})"

    def __str__(self) -> str:
        return f"{self.label}{self.suit.value}"


def parse_cards(text: str) -> List[Card]:
    """Parse several space or comma separated cards, e.g. 'As Kh 10d'."""
    return [Card.parse(token) for token in text.replace(",", " ").split()]
