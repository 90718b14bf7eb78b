"""Display utilities for terminal hand rendering."""

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hand_engine.cards import Card, Suit
from hand_engine.dealer import PlayerHand
from hand_engine.hand_evaluator import HandScore, category_name, describe_score
from hand_engine.selector import BestHand


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


def render_card(card: Card, use_symbols: bool = True) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    suit = card.suit.symbol if use_symbols else str(card.suit)
    return f"[{color}][{card.rank}{suit}][/{color}]"


def render_cards(cards: Sequence[Card], use_symbols: bool = True) -> str:
    """Render a row of cards."""
    return " ".join(render_card(c, use_symbols) for c in cards)


def render_score(score: HandScore) -> str:
    """Render a score tuple, e.g. (6, 14, 10)."""
    return "(" + ", ".join(str(v) for v in score) + ")"


def render_evaluation(cards: Sequence[Card], score: HandScore, use_symbols: bool = True) -> Panel:
    """Render a single evaluated hand."""
    lines = [
        render_cards(cards, use_symbols),
        "",
        f"[bold yellow]{describe_score(score)}[/bold yellow]",
        f"[dim]Score: {render_score(score)}[/dim]",
    ]
    return Panel("\n".join(lines), title=category_name(score[0]), border_style="blue")


def render_best_hand(pool: Sequence[Card], best: BestHand, use_symbols: bool = True) -> Panel:
    """Render the best subset picked from a pool."""
    lines = [
        f"[dim]Pool:[/dim] {render_cards(pool, use_symbols)}",
        f"[dim]Best:[/dim] {render_cards(best.hand, use_symbols)}",
        "",
        f"[bold yellow]{describe_score(best.score)}[/bold yellow]",
        f"[dim]Score: {render_score(best.score)}[/dim]",
    ]
    return Panel("\n".join(lines), title="Best Hand", border_style="green")


def render_comparison(
    first: Sequence[Card],
    second: Sequence[Card],
    result: int,
    first_score: HandScore,
    second_score: HandScore,
    use_symbols: bool = True,
) -> Panel:
    """Render the outcome of comparing two hands."""
    info = Table(show_header=False, box=None, padding=(0, 1))
    info.add_column("Label", style="dim")
    info.add_column("Cards")
    info.add_column("Hand", style="bold")

    first_label = "[green]First[/green]" if result > 0 else "First"
    second_label = "[green]Second[/green]" if result < 0 else "Second"
    info.add_row(first_label, render_cards(first, use_symbols), describe_score(first_score))
    info.add_row(second_label, render_cards(second, use_symbols), describe_score(second_score))

    if result > 0:
        title, border = "First hand wins", "green"
    elif result < 0:
        title, border = "Second hand wins", "green"
    else:
        title, border = "Tie", "yellow"
    return Panel(info, title=title, border_style=border)


def render_deal_table(
    results: Sequence[PlayerHand],
    winners: Sequence[int],
    use_symbols: bool = True,
    show_scores: bool = True,
) -> Table:
    """Render every dealt hand, highlighting the winners."""
    table = Table(title="Deal")
    table.add_column("Player", justify="right")
    table.add_column("Hand")
    table.add_column("Category", style="bold")
    if show_scores:
        table.add_column("Score", style="dim")

    for i, result in enumerate(results):
        player = f"[green]P{i + 1} ★[/green]" if i in winners else f"P{i + 1}"
        row = [player, render_cards(result.hand, use_symbols), result.name]
        if show_scores:
            row.append(render_score(result.score))
        table.add_row(*row)

    return table


def render_header(title: str) -> Panel:
    """Render a command header."""
    return Panel(
        Text(title, justify="center", style="bold yellow"),
        border_style="blue",
    )


def print_divider(console: Console, char: str = "─", width: int = 50) -> None:
    """Print a horizontal divider."""
    console.print(f"[dim]{char * width}[/dim]")
