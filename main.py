"""Poker hand evaluation, comparison, best-hand search and dealing."""

import logging
from random import Random
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from config.settings import Config, load_config
from hand_engine.cards import Card, CardParseError, format_cards, parse_cards
from hand_engine.dealer import deal as deal_hands
from hand_engine.dealer import winners
from hand_engine.deck import create_deck, shuffle
from hand_engine.hand_evaluator import HAND_SIZE, compare_scores, evaluate
from hand_engine.selector import find_best
from ui.display import (
    print_divider,
    render_best_hand,
    render_cards,
    render_comparison,
    render_deal_table,
    render_evaluation,
    render_header,
)

app = typer.Typer(
    name="poker-hands",
    help="Five-card poker hand evaluation, comparison and dealing.",
)
console = Console()
logger = logging.getLogger("poker_hands")


def _load(config_path: Optional[str], verbose: bool = False) -> Config:
    """Load config (or defaults) and configure logging from it."""
    if config_path is None:
        config = Config()
    else:
        try:
            config = load_config(config_path)
        except FileNotFoundError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    level = logging.DEBUG if verbose else getattr(logging, config.engine.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logging.getLogger().setLevel(level)
    return config


def _parse(tokens: list[str]) -> list[Card]:
    """Parse card tokens from the command line, exiting on bad input."""
    try:
        return parse_cards(" ".join(tokens))
    except CardParseError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _require_five(cards: list[Card], label: str = "Hand") -> None:
    if len(cards) != HAND_SIZE:
        console.print(f"[red]{label} needs exactly {HAND_SIZE} cards, got {len(cards)}[/red]")
        raise typer.Exit(1)


@app.command(name="evaluate")
def evaluate_cmd(
    cards: list[str] = typer.Argument(..., help="Five cards, e.g. AS KS QS JS 10S"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Evaluate a five-card hand."""
    config = _load(config_path, verbose)
    hand = _parse(cards)
    _require_five(hand)

    score = evaluate(hand)
    logger.info("Evaluated %s -> %s", format_cards(hand), score)
    console.print(render_evaluation(hand, score, config.display.use_symbols))


@app.command()
def compare(
    first: str = typer.Option(..., "--first", "-a", help="First hand, e.g. 'AS AH AD 10C 10S'"),
    second: str = typer.Option(..., "--second", "-b", help="Second hand"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Compare two five-card hands."""
    config = _load(config_path, verbose)
    first_hand = _parse([first])
    second_hand = _parse([second])
    _require_five(first_hand, "First hand")
    _require_five(second_hand, "Second hand")

    first_score = evaluate(first_hand)
    second_score = evaluate(second_hand)
    result = compare_scores(first_score, second_score)
    console.print(
        render_comparison(
            first_hand,
            second_hand,
            result,
            first_score,
            second_score,
            config.display.use_symbols,
        )
    )


@app.command()
def best(
    cards: list[str] = typer.Argument(..., help="Card pool, e.g. AS KS QS JS 10S 9H 8H"),
    size: int = typer.Option(HAND_SIZE, "--size", "-n", help="Cards per hand"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Find the strongest hand within a pool of cards."""
    config = _load(config_path, verbose)
    if size < 1:
        console.print(f"[red]Hand size must be at least 1, got {size}[/red]")
        raise typer.Exit(1)
    pool = _parse(cards)

    result = find_best(pool, size)
    if result is None:
        console.print(f"[yellow]Need at least {size} cards, got {len(pool)}.[/yellow]")
        raise typer.Exit(1)

    console.print(render_best_hand(pool, result, config.display.use_symbols))


@app.command()
def deal(
    players: Optional[int] = typer.Option(None, "--players", "-p", help="Number of players"),
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Cards per player"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Deal a fresh shuffled deck to several players."""
    config = _load(config_path, verbose)

    # Command-line options override the config file
    num_players = players if players is not None else config.deal.num_players
    hand_size = size if size is not None else config.deal.hand_size
    seed = seed if seed is not None else config.deal.seed
    rng = Random(seed) if seed is not None else None

    console.print(render_header(f"{num_players} players, {hand_size} cards each"))

    results = deal_hands(create_deck(), num_players, hand_size, rng)
    if results is None:
        console.print(
            f"[yellow]A 52-card deck cannot deal {hand_size} cards to {num_players} players.[/yellow]"
        )
        raise typer.Exit(1)
    if not results:
        console.print("[yellow]No players to deal to.[/yellow]")
        raise typer.Exit(1)

    best_players = winners(results)
    console.print(
        render_deal_table(
            results,
            best_players,
            config.display.use_symbols,
            config.display.show_scores,
        )
    )
    print_divider(console)
    names = ", ".join(f"P{i + 1}" for i in best_players)
    label = "Winner" if len(best_players) == 1 else "Split"
    console.print(f"[bold green]{label}: {names} ({results[best_players[0]].name})[/bold green]")


@app.command()
def deck(
    shuffled: bool = typer.Option(False, "--shuffle", help="Shuffle before printing"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Print the canonical (or a shuffled) 52-card deck."""
    config = _load(config_path)
    cards = create_deck()
    if shuffled:
        cards = shuffle(cards, Random(seed) if seed is not None else None)

    for start in range(0, len(cards), 13):
        console.print(render_cards(cards[start : start + 13], config.display.use_symbols))


@app.command()
def info(
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show the active configuration."""
    config = _load(config_path)

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Deal", "Players", str(config.deal.num_players))
    table.add_row("Deal", "Hand size", str(config.deal.hand_size))
    table.add_row("Deal", "Seed", str(config.deal.seed))
    table.add_row("Display", "Suit symbols", str(config.display.use_symbols))
    table.add_row("Display", "Show scores", str(config.display.show_scores))
    table.add_row("Engine", "Log level", config.engine.log_level)

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
