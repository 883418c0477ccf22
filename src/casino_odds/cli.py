"""Casino Odds command line interface, built on Typer."""

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler

from casino_odds import config
from casino_odds.models.card import Card, parse_cards
from casino_odds.models.game import GameMode, get_game
from casino_odds.models.odds import Odds
from casino_odds.simulation.evaluator import HandEvaluator
from casino_odds.simulation.hand_value import HandValue

app = typer.Typer(
    name="casino-odds",
    help="Live win/lose/tie odds for casino card games",
    no_args_is_help=True,
)
console = Console()

ITERATIONS_HELP = "Simulated rounds (default from CASINO_ODDS_ITERATIONS)"
SEED_HELP = "Random seed for a reproducible estimate"
WORKERS_HELP = "Worker threads sharing the rounds"
BLOCKED_HELP = "Cards out of play but not shown, e.g. 'Qc 7d'"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Log engine activity"),
):
    """Estimate odds for the hand on the table."""
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _cards(text: Optional[str]) -> Optional[List[Card]]:
    if text is None:
        return None
    return parse_cards(text)


def _card(text: Optional[str]) -> Optional[Card]:
    if text is None:
        return None
    return Card.parse(text)


def _rng(seed: Optional[int]) -> random.Random:
    if seed is None:
        seed = config.SEED
    return random.Random(seed)


def _report(mode: GameMode, compute: Callable[[], Odds],
            hands: Sequence[Tuple[str, Optional[Sequence[Card]]]],
            iterations: Optional[int],
            made_hand: Optional[Callable[[], HandValue]] = None) -> None:
    from casino_odds.formatters.table import TableFormatter

    game = get_game(mode)
    try:
        odds = compute()
        value = made_hand() if made_hand else None
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    fmt = TableFormatter(console)
    fmt.print_odds(game.name, odds, hands=hands, iterations=iterations,
                   villain_label=game.villain_label, made_hand=value)


def _board_hand(hole: Sequence[Card],
                board: Sequence[Card]) -> Optional[Callable[[], HandValue]]:
    # Hole cards plus a flop or later make a five-to-seven card hand
    if len(board) < 3:
        return None
    return lambda: HandEvaluator.evaluate(list(hole) + list(board))


def _parse_or_exit(parse: Callable[[], object]):
    try:
        return parse()
    except ValueError as e:
        console.print(f"[red]Invalid card:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def games():
    """List the supported games."""
    from casino_odds.formatters.table import TableFormatter
    from casino_odds.models.game import GAMES

    TableFormatter(console).print_games(GAMES)


@app.command()
def holdem(
    hero: str = typer.Argument(..., help="Hero hole cards, e.g. 'As Kd'"),
    board: str = typer.Option("", "--board", "-b", help="Revealed community cards"),
    villain: Optional[List[str]] = typer.Option(None, "--villain", "-v",
                                                help="A revealed opponent hand (repeatable)"),
    opponents: Optional[int] = typer.Option(None, "--opponents", "-n",
                                            help="Total number of opponents"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """Texas Hold'em odds against one or more opponents."""
    from casino_odds.simulation.games import simulate_holdem_odds

    hero_cards, board_cards, villains, blocked_cards = _parse_or_exit(lambda: (
        parse_cards(hero), parse_cards(board),
        [parse_cards(v) for v in villain or []], parse_cards(blocked),
    ))
    hands = [("Hero", hero_cards), ("Board", board_cards)]
    hands += [(f"Villain {i}", v) for i, v in enumerate(villains, 1)]

    _report(GameMode.HOLDEM, lambda: simulate_holdem_odds(
        hero_cards, board_cards, villains, opponents,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), hands, iterations or config.DEFAULT_ITERATIONS, _board_hand(hero_cards, board_cards))


@app.command()
def blackjack(
    player: str = typer.Argument(..., help="Player cards, e.g. 'Kh 7c'"),
    dealer_up: str = typer.Option(..., "--dealer-up", "-u", help="Dealer up-card"),
    dealer_hole: Optional[str] = typer.Option(None, "--dealer-hole", help="Dealer hole card, if shown"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """Blackjack odds against the dealer, standing on the current hand."""
    from casino_odds.simulation.games import simulate_blackjack_odds

    player_cards, up, hole, blocked_cards = _parse_or_exit(lambda: (
        parse_cards(player), Card.parse(dealer_up), _card(dealer_hole), parse_cards(blocked),
    ))
    dealer = [up] + ([hole] if hole else [])

    _report(GameMode.BLACKJACK, lambda: simulate_blackjack_odds(
        player_cards, up, hole,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), [("Player", player_cards), ("Dealer", dealer)], iterations or config.DEFAULT_ITERATIONS)


@app.command()
def war(
    player: str = typer.Argument(..., help="Player card, e.g. 'Qs'"),
    dealer: Optional[str] = typer.Option(None, "--dealer", "-d", help="Dealer card, if shown"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """Casino War odds for a single card."""
    from casino_odds.simulation.games import simulate_war_odds

    player_card, dealer_card, blocked_cards = _parse_or_exit(lambda: (
        Card.parse(player), _card(dealer), parse_cards(blocked),
    ))

    _report(GameMode.WAR, lambda: simulate_war_odds(
        player_card, dealer_card,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), [("Player", [player_card]), ("Dealer", [dealer_card] if dealer_card else None)],
        iterations or config.DEFAULT_ITERATIONS)


@app.command()
def high_card(
    player: str = typer.Argument(..., help="Player card(s)"),
    opponent: Optional[List[str]] = typer.Option(None, "--opponent", "-o",
                                                 help="A revealed opponent card (repeatable)"),
    opponents: Optional[int] = typer.Option(None, "--opponents", "-n",
                                            help="Total number of opponents"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """High Card odds against every opponent's single card."""
    from casino_odds.simulation.games import simulate_high_card_odds

    player_cards, opponent_cards, blocked_cards = _parse_or_exit(lambda: (
        parse_cards(player), [parse_cards(o) for o in opponent or []], parse_cards(blocked),
    ))
    hands = [("Player", player_cards)]
    hands += [(f"Opponent {i}", o) for i, o in enumerate(opponent_cards, 1)]

    _report(GameMode.HIGH_CARD, lambda: simulate_high_card_odds(
        player_cards, opponent_cards, opponents,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), hands, iterations or config.DEFAULT_ITERATIONS)


@app.command()
def red_dog(
    cards: str = typer.Argument(..., help="The two spread cards, plus the third if shown"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
):
    """Exact Red Dog odds that the third card lands inside the spread."""
    from casino_odds.simulation.games import red_dog_odds

    spread, blocked_cards = _parse_or_exit(lambda: (parse_cards(cards), parse_cards(blocked)))
    if len(spread) not in (2, 3):
        console.print(f"[red]Red Dog needs 2 or 3 cards, got {len(spread)}.[/red]")
        raise typer.Exit(1)

    third = spread[2] if len(spread) == 3 else None
    _report(GameMode.RED_DOG, lambda: red_dog_odds(spread[0], spread[1], third, blocked_cards),
            [("Spread", spread[:2]), ("Third", [third] if third else None)], None)


@app.command()
def three_card(
    player: str = typer.Argument(..., help="Player's three cards"),
    dealer: Optional[str] = typer.Option(None, "--dealer", "-d", help="Dealer's three cards, if shown"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """Three Card Poker odds against the dealer."""
    from casino_odds.simulation.games import simulate_three_card_poker_odds

    player_cards, dealer_cards, blocked_cards = _parse_or_exit(lambda: (
        parse_cards(player), _cards(dealer), parse_cards(blocked),
    ))

    _report(GameMode.THREE_CARD_POKER, lambda: simulate_three_card_poker_odds(
        player_cards, dealer_cards,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), [("Player", player_cards), ("Dealer", dealer_cards)], iterations or config.DEFAULT_ITERATIONS,
        lambda: HandEvaluator.evaluate_three(player_cards))


@app.command()
def casino_holdem(
    player: str = typer.Argument(..., help="Player hole cards"),
    dealer: Optional[str] = typer.Option(None, "--dealer", "-d", help="Dealer hole cards, if shown"),
    board: str = typer.Option("", "--board", "-b", help="Revealed community cards"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """Casino Hold'em odds against the dealer."""
    from casino_odds.simulation.games import simulate_casino_holdem_odds

    player_cards, dealer_cards, board_cards, blocked_cards = _parse_or_exit(lambda: (
        parse_cards(player), _cards(dealer), parse_cards(board), parse_cards(blocked),
    ))

    _report(GameMode.CASINO_HOLDEM, lambda: simulate_casino_holdem_odds(
        player_cards, dealer_cards, board_cards,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), [("Player", player_cards), ("Dealer", dealer_cards), ("Board", board_cards)],
        iterations or config.DEFAULT_ITERATIONS, _board_hand(player_cards, board_cards))


@app.command()
def baccarat(
    player: str = typer.Argument(..., help="Player hand's two cards"),
    banker: str = typer.Option(..., "--banker", help="Banker hand's two cards"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """Baccarat odds of the Player hand beating the Banker."""
    from casino_odds.simulation.games import simulate_baccarat_odds

    player_cards, banker_cards, blocked_cards = _parse_or_exit(lambda: (
        parse_cards(player), parse_cards(banker), parse_cards(blocked),
    ))

    _report(GameMode.BACCARAT, lambda: simulate_baccarat_odds(
        player_cards, banker_cards,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), [("Player", player_cards), ("Banker", banker_cards)], iterations or config.DEFAULT_ITERATIONS)


@app.command()
def caribbean_stud(
    player: str = typer.Argument(..., help="Player's five cards"),
    dealer: Optional[str] = typer.Option(None, "--dealer", "-d", help="Dealer's five cards, if shown"),
    dealer_up: Optional[str] = typer.Option(None, "--dealer-up", "-u", help="Dealer up-card"),
    blocked: str = typer.Option("", "--blocked", help=BLOCKED_HELP),
    iterations: Optional[int] = typer.Option(None, "--iterations", "-i", help=ITERATIONS_HELP),
    seed: Optional[int] = typer.Option(None, "--seed", help=SEED_HELP),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help=WORKERS_HELP),
):
    """Caribbean Stud odds against the dealer."""
    from casino_odds.simulation.games import simulate_caribbean_stud_odds

    player_cards, dealer_cards, up, blocked_cards = _parse_or_exit(lambda: (
        parse_cards(player), _cards(dealer), _card(dealer_up), parse_cards(blocked),
    ))
    shown = dealer_cards if dealer_cards else ([up] if up else None)

    _report(GameMode.CARIBBEAN_STUD, lambda: simulate_caribbean_stud_odds(
        player_cards, dealer_cards, up,
        blocked_cards=blocked_cards, iterations=iterations,
        rng=_rng(seed), workers=workers,
    ), [("Player", player_cards), ("Dealer", shown)], iterations or config.DEFAULT_ITERATIONS,
        lambda: HandEvaluator.evaluate(player_cards))


if __name__ == "__main__":
    app()
