"""Game variant registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class GameMode(str, Enum):
    HOLDEM = "holdem"
    BLACKJACK = "blackjack"
    WAR = "war"
    HIGH_CARD = "highcard"
    RED_DOG = "reddog"
    THREE_CARD_POKER = "threecardpoker"
    CASINO_HOLDEM = "casinoholdem"
    BACCARAT = "baccarat"
    CARIBBEAN_STUD = "caribbeanstud"


@dataclass(frozen=True)
class GameConfig:
    """Static table layout for one variant."""
    mode: GameMode
    name: str
    description: str
    supports_multiplayer: bool
    player_card_count: int
    dealer_card_count: int
    has_community_cards: bool
    community_card_count: Optional[int] = None

    @property
    def villain_label(self) -> str:
        """Who the hero plays against: the dealer, or other players."""
        return "Dealer" if self.dealer_card_count > 0 else "Opponent"


GAMES: Dict[GameMode, GameConfig] = {
    GameMode.HOLDEM: GameConfig(
        mode=GameMode.HOLDEM,
        name="Texas Hold'em",
        description="2 cards + 5 community cards",
        supports_multiplayer=True,
        player_card_count=2,
        dealer_card_count=0,
        has_community_cards=True,
        community_card_count=5,
    ),
    GameMode.BLACKJACK: GameConfig(
        mode=GameMode.BLACKJACK,
        name="Blackjack",
        description="Get as close to 21 as possible",
        supports_multiplayer=True,
        player_card_count=2,
        dealer_card_count=2,
        has_community_cards=False,
    ),
    GameMode.WAR: GameConfig(
        mode=GameMode.WAR,
        name="War",
        description="Highest card wins",
        supports_multiplayer=True,
        player_card_count=1,
        dealer_card_count=1,
        has_community_cards=False,
    ),
    GameMode.HIGH_CARD: GameConfig(
        mode=GameMode.HIGH_CARD,
        name="High Card",
        description="Draw one card, highest wins",
        supports_multiplayer=True,
        player_card_count=1,
        dealer_card_count=0,
        has_community_cards=False,
    ),
    GameMode.RED_DOG: GameConfig(
        mode=GameMode.RED_DOG,
        name="Red Dog (Acey Deucey)",
        description="Bet if 3rd card falls between first two",
        supports_multiplayer=False,
        player_card_count=3,
        dealer_card_count=0,
        has_community_cards=False,
    ),
    GameMode.THREE_CARD_POKER: GameConfig(
        mode=GameMode.THREE_CARD_POKER,
        name="Three Card Poker",
        description="Best 3-card poker hand wins",
        supports_multiplayer=True,
        player_card_count=3,
        dealer_card_count=3,
        has_community_cards=False,
    ),
    GameMode.CASINO_HOLDEM: GameConfig(
        mode=GameMode.CASINO_HOLDEM,
        name="Casino Hold'em",
        description="Player vs dealer with community cards",
        supports_multiplayer=False,
        player_card_count=2,
        dealer_card_count=2,
        has_community_cards=True,
        community_card_count=5,
    ),
    GameMode.BACCARAT: GameConfig(
        mode=GameMode.BACCARAT,
        name="Baccarat",
        description="Closest to 9 wins",
        supports_multiplayer=False,
        player_card_count=2,
        dealer_card_count=2,
        has_community_cards=False,
    ),
    GameMode.CARIBBEAN_STUD: GameConfig(
        mode=GameMode.CARIBBEAN_STUD,
        name="Caribbean Stud Poker",
        description="5-card poker vs dealer",
        supports_multiplayer=True,
        player_card_count=5,
        dealer_card_count=5,
        has_community_cards=False,
    ),
}


def get_game(mode: str) -> GameConfig:
    """Look up a variant by its mode id, e.g. 'blackjack'."""
    try:
        return GAMES[GameMode(mode)]
    except ValueError:
        valid = ", ".join(m.value for m in GameMode)
        raise ValueError(f"Unknown game: {mode}. Valid games: {valid}") from None
