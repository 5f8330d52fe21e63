"""Terminal rendering for summaries and the model catalog."""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from youtube_summary.summarizer import ModelEntry


def format_context(context_length: Optional[int]) -> str:
    if context_length is None:
        return "N/A"
    if context_length >= 1_000_000:
        return f"{context_length // 1_000_000}M"
    if context_length >= 1_000:
        return f"{context_length // 1_000}k"
    return str(context_length)


def parse_price(price: Optional[str]) -> Optional[float]:
    """Convert a per-token USD price string to a per-million-token float."""
    if price is None:
        return None
    try:
        value = float(price)
    except (TypeError, ValueError):
        return None
    # Negative prices mark variable or special pricing
    if value < 0:
        return None
    return value * 1_000_000


def format_pricing(model: ModelEntry) -> str:
    prompt = parse_price(model.prompt_price)
    completion = parse_price(model.completion_price)
    if prompt is None or completion is None:
        return "N/A"
    return f"${prompt:.2f} / ${completion:.2f}"


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."


def print_summary(summary: str, title: str = "Summary", display_format: str = 'markdown',
                  console: Optional[Console] = None):
    """Print a summary as plain text or as markdown inside a panel."""
    console = console or Console()

    if display_format == 'plain':
        console.print(summary, markup=False, highlight=False, soft_wrap=True)
        return

    panel = Panel(
        Markdown(summary),
        title=f"[bold bright_cyan]{title}[/bold bright_cyan]",
        border_style="bright_cyan",
        box=box.ROUNDED,
        padding=(1, 2),
        expand=True,
    )
    console.print(panel)


def build_models_table(models: List[ModelEntry]) -> Table:
    table = Table(box=box.SIMPLE_HEAD, header_style="bold bright_cyan")
    table.add_column("MODEL ID", no_wrap=True)
    table.add_column("NAME")
    table.add_column("CONTEXT", justify="right")
    table.add_column("PRICING (per 1M tokens)")

    for model in models:
        table.add_row(
            truncate(model.id, 44),
            truncate(model.name, 39),
            format_context(model.context_length),
            format_pricing(model),
        )
    return table


def print_models(models: List[ModelEntry], search: Optional[str] = None, console: Optional[Console] = None):
    console = console or Console()

    if not models:
        if search:
            console.print(f"[yellow]No models found matching '{escape(search)}'[/yellow]")
        else:
            console.print("[yellow]No models found[/yellow]")
        return

    console.print(build_models_table(models))
    console.print(f"[dim]Total: {len(models)} model(s)[/dim]")
