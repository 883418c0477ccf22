"""Rich table formatting for terminal output."""

from typing import Dict, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from casino_odds.models.card import Card
from casino_odds.models.game import GameConfig, GameMode
from casino_odds.models.odds import Odds
from casino_odds.simulation.hand_value import HandValue
from casino_odds.formatters.text import TextFormatter


class TableFormatter:
    """Format odds and game data as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.text = TextFormatter()

    def print_odds(self, title: str, odds: Odds,
                   hands: Sequence[Tuple[str, Optional[Sequence[Card]]]] = (),
                   iterations: Optional[int] = None,
                   villain_label: str = "Dealer",
                   made_hand: Optional[HandValue] = None) -> None:
        """Print the hero/villain/tie split with the cards it was computed from.

        Args:
            title: Game name shown above the hands and the table.
            odds: The estimate to show.
            hands: (label, cards) pairs; ``None`` cards render as "-".
            iterations: Simulated rounds, or ``None`` for an exact result.
            villain_label: Name for the other side, e.g. "Dealer" or "Opponent".
            made_hand: The hero's current hand, when it is already complete.
        """
        lines = [f"{label}: {self.text.format_cards(cards)}" for label, cards in hands]
        if made_hand is not None:
            lines.append(f"Made hand: {self.text.format_hand_value(made_hand)}")
        if lines:
            self.console.print(Panel("\n".join(lines), title=title, border_style="cyan"))

        table = Table(title=f"{title} Odds")
        table.add_column("Outcome", style="cyan")
        table.add_column("Probability", justify="right")

        table.add_row("Player wins", f"[green]{odds.hero:.1f}%[/green]")
        table.add_row(f"{villain_label} wins", f"[red]{odds.villain:.1f}%[/red]")
        table.add_row("Tie / Push", f"[yellow]{odds.tie:.1f}%[/yellow]")
        table.add_row("", "")
        table.add_row("Equity", f"{odds.equity:.1f}%")

        self.console.print(table)
        if iterations is not None:
            self.console.print(f"[dim]Estimated from {iterations} simulated rounds.[/dim]")

    def print_games(self, games: Dict[GameMode, GameConfig]) -> None:
        """Print the supported games as a Rich table."""
        table = Table(title="Supported Games")
        table.add_column("Game ID", style="cyan")
        table.add_column("Name")
        table.add_column("Player Cards", justify="right")
        table.add_column("Dealer Cards", justify="right")
        table.add_column("Board", justify="right")
        table.add_column("Multiplayer", justify="center")
        table.add_column("Description", style="dim")

        for mode, game in games.items():
            board = str(game.community_card_count) if game.has_community_cards else "-"
            table.add_row(
                mode.value,
                game.name,
                str(game.player_card_count),
                str(game.dealer_card_count),
                board,
                "yes" if game.supports_multiplayer else "no",
                game.description,
            )

        self.console.print(table)
